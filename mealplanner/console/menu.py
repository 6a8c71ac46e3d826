"""
Interactive console: menu dispatch, prompts and re-prompt loops around the core.

All text comes from utilities.constants; input and output are injectable so the
whole dialogue can be driven from tests.
"""
import logging
import traceback
from pathlib import Path
from typing import Callable, Optional

from mealplanner.events.Event_Bus import PLAN_DAY_PLANNED
from mealplanner.infra.export import export_shopping_list
from mealplanner.logic.shopping.list_builder import build_shopping_list
from mealplanner.utilities import constants as msg
from mealplanner.utilities.config import DEBUG, EXPORT_DIR
from mealplanner.utilities.constants import CATEGORIES
from mealplanner.utilities.errors import (
    EmptyCategoryError, ExportError, NoPlanError, StorageError
)
from mealplanner.utilities.validators import parse_category, parse_ingredients, parse_meal_name

logger = logging.getLogger(__name__)


class MealPlannerConsole:
    def __init__(self, catalog, planner, input_fn: Optional[Callable[[], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None,
                 export_dir: Path = EXPORT_DIR):
        self.catalog = catalog
        self.planner = planner
        self._input = input_fn if input_fn is not None else input
        self._out = output_fn if output_fn is not None else print
        self.export_dir = Path(export_dir)
        self.commands = {
            "add": self.add,
            "show": self.show,
            "plan": self.plan,
            "print": self.print_week,
            "save": self.save,
        }

    def _on_day_planned(self, event_name, payload):
        self._out(msg.DAY_PLANNED.format(day=payload["day"]))

    def _ask_until(self, parse: Callable[[str], Optional[object]], error: str):
        while True:
            value = parse(self._input())
            if value is not None:
                return value
            self._out(error)

    # --- Commands ---------------------------------------------------------
    def add(self):
        self._out(msg.ADD_CATEGORY_PROMPT)
        category = self._ask_until(parse_category, msg.WRONG_CATEGORY)
        self._out(msg.ADD_NAME_PROMPT)
        name = self._ask_until(parse_meal_name, msg.WRONG_FORMAT)
        self._out(msg.ADD_INGREDIENTS_PROMPT)
        ingredients = self._ask_until(parse_ingredients, msg.WRONG_FORMAT)
        try:
            self.catalog.add_meal(category, name, ingredients)
        except StorageError as e:
            self._out(msg.STORAGE_FAILED.format(error=e))
            return
        self._out(msg.MEAL_ADDED)

    def show(self):
        self._out("\n" + msg.SHOW_CATEGORY_PROMPT)
        category = self._ask_until(parse_category, msg.WRONG_CATEGORY)
        meals = self.catalog.meals(category)
        if not meals:
            self._out(msg.NO_MEALS_FOUND)
            return
        self._out(f"Category: {category}")
        for meal in meals:
            self._out("")
            for line in meal.describe():
                self._out(line)
        self._out("")

    def plan(self):
        try:
            self.planner.start()
        except StorageError as e:
            self._out(msg.STORAGE_FAILED.format(error=e))
            return
        while self.planner.current_slot() is not None:
            day, category = self.planner.current_slot()
            if category == CATEGORIES[0]:
                self._out(day)
            try:
                names = self.planner.choices()
            except EmptyCategoryError:
                self._out(msg.MEAL_NOT_FOUND)
                return
            for name in names:
                self._out(name)
            self._out(msg.CHOOSE_MEAL.format(category=category, day=day))
            while True:
                try:
                    chosen = self.planner.select(self._input())
                except StorageError as e:
                    self._out(msg.STORAGE_FAILED.format(error=e))
                    return
                if chosen:
                    break
                self._out(msg.MEAL_NOT_FOUND)
        self.print_week()

    def print_week(self):
        for day, filled in self.planner.weekly_rows():
            self._out("\n" + day)
            for category, name in filled:
                self._out(f"{category}: {name}")

    def save(self):
        try:
            shopping_list = build_shopping_list(self.planner, self.catalog)
        except NoPlanError:
            self._out(msg.UNABLE_TO_SAVE)
            return
        self._out("\n" + msg.FILENAME_PROMPT)
        filename = self._input()
        try:
            export_shopping_list(shopping_list.lines(), filename, self.export_dir)
        except ExportError:
            self._out(msg.SAVE_FAILED.format(filename=filename))
            return
        self._out(msg.SAVED)

    # --- Main loop --------------------------------------------------------
    def run(self):
        """Read-dispatch loop; returns on 'exit' or end of input."""
        # Day-planned lines only print while this console is the one running
        bus = self.planner.event_bus
        bus.subscribe(PLAN_DAY_PLANNED, self._on_day_planned)
        try:
            self._loop()
        finally:
            bus.unsubscribe(PLAN_DAY_PLANNED, self._on_day_planned)

    def _loop(self):
        while True:
            try:
                self._out(msg.MENU_PROMPT)
                option = self._input()
                if option == "exit":
                    self._out(msg.BYE)
                    return
                command = self.commands.get(option)
                if command is None:
                    continue
                command()
            except (KeyboardInterrupt, EOFError):
                self._out(msg.BYE)
                return
            except Exception as e:
                logger.error(f"Unexpected error in console: {e}")
                self._out(f"Unexpected error: {e}")
                if DEBUG:
                    traceback.print_exc()
