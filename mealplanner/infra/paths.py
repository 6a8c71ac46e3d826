from pathlib import Path

from mealplanner.utilities.config import DATA_DIR

# Centralized file names for the JSON store (single source of truth)
MEALS_FILENAME = 'meals.json'
INGREDIENTS_FILENAME = 'ingredients.json'
PLAN_FILENAME = 'plan.json'


def store_files(data_dir: Path = DATA_DIR):
    """Return (meals, ingredients, plan) file paths under data_dir."""
    data_dir = Path(data_dir)
    return data_dir / MEALS_FILENAME, data_dir / INGREDIENTS_FILENAME, data_dir / PLAN_FILENAME

__all__ = ['store_files', 'MEALS_FILENAME', 'INGREDIENTS_FILENAME', 'PLAN_FILENAME']
