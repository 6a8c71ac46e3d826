"""Meal store: meals, ingredients-per-meal and plan slots kept as three tables.

MealStore holds the table logic; subclasses decide where the rows live
(JSON files on disk, or plain lists in memory).
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from mealplanner.infra.paths import store_files
from mealplanner.utilities.config import DATA_DIR
from mealplanner.utilities.errors import StorageError

logger = logging.getLogger(__name__)

MEALS = "meals"
INGREDIENTS = "ingredients"
PLAN = "plan"
TABLES = (MEALS, INGREDIENTS, PLAN)


class MealStore:
    def _read(self, table: str) -> List[dict]:
        raise NotImplementedError

    def _write(self, table: str, rows: List[dict]) -> None:
        raise NotImplementedError

    def open(self):
        return self

    def load_all_meals(self) -> List[dict]:
        """Return meal rows ordered by id, each with its ingredients in entry order."""
        try:
            return self._join_meals()
        except (KeyError, TypeError) as e:
            raise StorageError(f"Malformed meal rows: {e}") from e

    def _join_meals(self) -> List[dict]:
        by_meal: Dict[int, List[dict]] = {}
        for row in self._read(INGREDIENTS):
            by_meal.setdefault(row["meal_id"], []).append(row)
        meals = []
        for row in sorted(self._read(MEALS), key=lambda r: r["meal_id"]):
            ings = sorted(by_meal.get(row["meal_id"], []), key=lambda r: r["ingredient_id"])
            meals.append({
                "meal_id": row["meal_id"],
                "category": row["category"],
                "meal": row["meal"],
                "ingredients": [i["ingredient"] for i in ings],
                "ingredient_ids": [i["ingredient_id"] for i in ings],
            })
        return meals

    def persist_meal(self, meal) -> None:
        previous = self._read(INGREDIENTS)
        ingredient_rows = [
            {"ingredient_id": ing_id, "ingredient": ingredient, "meal_id": meal.meal_id}
            for ing_id, ingredient in zip(meal.ingredient_ids, meal.ingredients)
        ]
        self._write(INGREDIENTS, previous + ingredient_rows)
        try:
            meal_rows = self._read(MEALS)
            meal_rows.append({"meal_id": meal.meal_id, "category": meal.category, "meal": meal.name})
            self._write(MEALS, meal_rows)
        except StorageError:
            # Orphan ingredient rows would attach to the next meal using this id
            self._write(INGREDIENTS, previous)
            raise
        logger.info(f"Stored meal {meal.meal_id} with {len(ingredient_rows)} ingredients")

    def persist_plan_slot(self, day: str, category: str, meal_id: int) -> None:
        rows = self._read(PLAN)
        plan_id = max((r["plan_id"] for r in rows), default=-1) + 1
        rows.append({"plan_id": plan_id, "day": day, "category": category, "meal_id": meal_id})
        self._write(PLAN, rows)

    def clear_plan(self) -> None:
        self._write(PLAN, [])
        logger.info("Cleared stored plan")

    def load_plan_slots(self) -> List[Tuple[str, str, int]]:
        try:
            rows = sorted(self._read(PLAN), key=lambda r: r["plan_id"])
            return [(r["day"], r["category"], r["meal_id"]) for r in rows]
        except (KeyError, TypeError) as e:
            raise StorageError(f"Malformed plan rows: {e}") from e

    def query_ingredient_totals_for_plan(self) -> List[Tuple[str, int]]:
        """Join plan -> meals -> ingredients and count each ingredient string.

        Groups come out in first-seen order (plan row order, then ingredient order).
        """
        known_meals = {r["meal_id"] for r in self._read(MEALS)}
        by_meal: Dict[int, List[dict]] = {}
        for row in self._read(INGREDIENTS):
            by_meal.setdefault(row["meal_id"], []).append(row)
        totals: Dict[str, int] = {}
        for _, _, meal_id in self.load_plan_slots():
            if meal_id not in known_meals:
                continue
            for row in sorted(by_meal.get(meal_id, []), key=lambda r: r["ingredient_id"]):
                totals[row["ingredient"]] = totals.get(row["ingredient"], 0) + 1
        return list(totals.items())


class JsonMealStore(MealStore):
    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = Path(data_dir)
        meals_file, ingredients_file, plan_file = store_files(self.data_dir)
        self._files = {MEALS: meals_file, INGREDIENTS: ingredients_file, PLAN: plan_file}

    def open(self):
        """Create missing tables and check that every existing one is readable."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create data directory {self.data_dir}: {e}") from e
        for table, path in self._files.items():
            if not path.exists():
                logger.warning(f"Store file not found: {path}. Creating empty {table} table.")
                self._write(table, [])
            self._read(table)
        return self

    def _read(self, table: str) -> List[dict]:
        path = self._files[table]
        try:
            with open(path, 'r', encoding='utf-8') as f:
                rows = json.load(f)
        except FileNotFoundError:
            return []
        except json.JSONDecodeError as e:
            raise StorageError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e
        if not isinstance(rows, list):
            raise StorageError(f"Expected a list of rows in {path}")
        return rows

    def _write(self, table: str, rows: List[dict]) -> None:
        path = self._files[table]
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(rows, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed writing {path}: {e}")
            raise StorageError(f"Cannot write {path}: {e}") from e


class InMemoryMealStore(MealStore):
    def __init__(self):
        self.tables: Dict[str, List[dict]] = {t: [] for t in TABLES}

    def _read(self, table: str) -> List[dict]:
        return [dict(r) for r in self.tables[table]]

    def _write(self, table: str, rows: List[dict]) -> None:
        self.tables[table] = [dict(r) for r in rows]


__all__ = ['MealStore', 'JsonMealStore', 'InMemoryMealStore']
