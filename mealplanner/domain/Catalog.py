"""Meal catalog aggregate: the only owner of Meal entities and of id issuance."""
import logging
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from mealplanner.domain.Meal import Meal
from mealplanner.events.Event_Bus import GLOBAL_EVENT_BUS, MEAL_ADDED
from mealplanner.utilities.constants import CATEGORIES
from mealplanner.utilities.errors import StorageError
from mealplanner.utilities.validators import MealInput

logger = logging.getLogger(__name__)


class MealCatalog:
    def __init__(self, store=None):
        self._meals: Dict[int, Meal] = {}
        self._by_category: Dict[str, List[Meal]] = {c: [] for c in CATEGORIES}
        self._next_meal_id = 1
        self._next_ingredient_id = 1
        self._store = store
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _index(self, meal: Meal):
        self._meals[meal.meal_id] = meal
        self._by_category[meal.category].append(meal)
        self._next_meal_id = max(self._next_meal_id, meal.meal_id + 1)
        if meal.ingredient_ids:
            self._next_ingredient_id = max(self._next_ingredient_id, max(meal.ingredient_ids) + 1)
        else:
            self._next_ingredient_id += len(meal.ingredients)

    def load(self, store=None):
        '''
        Populates the in-memory index from the backing store (cache-on-start).
        Stored rows that are not valid meals make the store unusable.
        '''
        store = store if store is not None else self._store
        if store is None:
            raise StorageError("No store attached to the catalog")
        self._store = store
        for row in store.load_all_meals():
            try:
                MealInput(category=row["category"], name=row["meal"],
                          ingredients=row.get("ingredients", []))
                meal = Meal.from_dict(row)
            except (KeyError, TypeError, ValueError) as e:
                raise StorageError(f"Invalid stored meal {row!r}: {e}") from e
            if meal.meal_id in self._meals:
                raise StorageError(f"Duplicate stored meal id {meal.meal_id}")
            self._index(meal)
        logger.info(f"Loaded {len(self._meals)} meals from store")
        return self

    def add_meal(self, category: str, name: str, ingredients: Iterable[str]) -> Meal:
        '''
        Stores a new meal under the next id. The input must already be valid;
        anything else raises ValueError. The store write happens first so a
        failed write leaves the catalog untouched.
        '''
        ingredients = list(ingredients)
        try:
            MealInput(category=category, name=name, ingredients=ingredients)
        except ValidationError as e:
            raise ValueError(f"Invalid meal: {e}") from e

        first = self._next_ingredient_id
        meal = Meal(self._next_meal_id, category, name, ingredients,
                    ingredient_ids=range(first, first + len(ingredients)))
        if self._store is not None:
            self._store.persist_meal(meal)
        self._index(meal)
        logger.info(f"Added meal {meal.meal_id}: {meal.name} ({meal.category})")
        self._event_bus.publish(MEAL_ADDED, {"meal": meal})
        return meal

    def list_by_category(self, category: str) -> List[Meal]:
        '''Meals of one category sorted by name, ties by id.'''
        if category not in self._by_category:
            raise ValueError(f"Unknown category: {category}")
        return sorted(self._by_category[category], key=lambda m: (m.name, m.meal_id))

    def find_by_category_and_name(self, category: str, name: str) -> Optional[Meal]:
        '''Exact match; with duplicate names the lowest id wins.'''
        for meal in self._by_category.get(category, []):
            if meal.name == name:
                return meal
        return None

    def find_by_id(self, meal_id: int) -> Optional[Meal]:
        return self._meals.get(meal_id)

    def meals(self, category: Optional[str] = None) -> List[Meal]:
        '''All meals (or one category) in id order.'''
        ordered = [self._meals[k] for k in sorted(self._meals)]
        if category is None:
            return ordered
        return [meal for meal in ordered if meal.category == category]

    def __len__(self):
        return len(self._meals)

    def __repr__(self) -> str:
        return f"MealCatalog({len(self._meals)} meals)"
