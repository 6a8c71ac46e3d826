import argparse
import logging
import sys
from pathlib import Path

from mealplanner.console.menu import MealPlannerConsole
from mealplanner.domain.Catalog import MealCatalog
from mealplanner.infra.Meal_Repository import JsonMealStore
from mealplanner.logic.planning.week_planner import WeeklyPlanner
from mealplanner.utilities.config import DATA_DIR, EXPORT_DIR, LOG_LEVEL
from mealplanner.utilities.errors import StorageError

logger = logging.getLogger("mealplanner")


def build_app(data_dir: Path, export_dir: Path = EXPORT_DIR) -> MealPlannerConsole:
    """Open the store, load the catalog, restore any stored plan and wire the console."""
    store = JsonMealStore(data_dir).open()
    catalog = MealCatalog(store).load()
    planner = WeeklyPlanner(catalog, store).restore()
    return MealPlannerConsole(catalog, planner, export_dir=export_dir)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Plan a week of meals and export the shopping list')
    parser.add_argument('--data-dir', default=str(DATA_DIR), help='Directory of the JSON store')
    parser.add_argument('--export-dir', default=str(EXPORT_DIR), help='Directory for shopping list files')
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        console = build_app(Path(args.data_dir), Path(args.export_dir))
    except StorageError as e:
        logger.error(f"Startup failed: {e}")
        print(f"Cannot open meal store: {e}")
        return 1
    console.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
