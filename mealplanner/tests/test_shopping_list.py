import unittest
from mealplanner.domain.Catalog import MealCatalog
from mealplanner.domain.ShoppingList import ShoppingListEntry
from mealplanner.events.Event_Bus import EventBus
from mealplanner.infra.Meal_Repository import InMemoryMealStore
from mealplanner.logic.planning.week_planner import WeeklyPlanner
from mealplanner.logic.shopping.list_builder import build_shopping_list
from mealplanner.utilities.constants import DAYS
from mealplanner.utilities.errors import NoPlanError


class TestShoppingListEntry(unittest.TestCase):

    def test_render(self):
        self.assertEqual(ShoppingListEntry("salt", 14).render(), "salt x14")
        self.assertEqual(ShoppingListEntry("salt", 2).render(), "salt x2")
        self.assertEqual(ShoppingListEntry("brown sugar", 1).render(), "brown sugar")


class TestBuildShoppingList(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.store = InMemoryMealStore()
        self.catalog = MealCatalog(self.store).set_event_bus(self.bus)
        self.planner = WeeklyPlanner(self.catalog, self.store).set_event_bus(self.bus)

    def _plan(self, choose):
        """choose(day, category) -> meal name"""
        self.planner.start()
        while self.planner.current_slot():
            day, category = self.planner.current_slot()
            self.assertTrue(self.planner.select(choose(day, category)))

    def test_end_to_end_week(self):
        self.catalog.add_meal("breakfast", "Oatmeal", ["oats", "milk"])
        self.catalog.add_meal("lunch", "Soup", ["broth", "salt"])
        self.catalog.add_meal("dinner", "Pasta", ["pasta", "salt"])
        picks = {"breakfast": "Oatmeal", "lunch": "Soup", "dinner": "Pasta"}
        self._plan(lambda day, category: picks[category])

        shopping_list = build_shopping_list(self.planner, self.catalog)
        self.assertEqual(shopping_list.as_dict(),
                         {"oats": 7, "milk": 7, "broth": 7, "salt": 14, "pasta": 7})
        self.assertEqual(shopping_list.lines(),
                         ["oats x7", "milk x7", "broth x7", "salt x14", "pasta x7"])

    def test_matches_store_side_aggregation(self):
        self.catalog.add_meal("breakfast", "Oatmeal", ["oats", "milk"])
        self.catalog.add_meal("lunch", "Soup", ["broth", "salt"])
        self.catalog.add_meal("dinner", "Pasta", ["pasta", "salt"])
        picks = {"breakfast": "Oatmeal", "lunch": "Soup", "dinner": "Pasta"}
        self._plan(lambda day, category: picks[category])
        built = [(e.ingredient, e.count) for e in build_shopping_list(self.planner, self.catalog).get_items()]
        self.assertEqual(built, self.store.query_ingredient_totals_for_plan())

    def test_non_overlapping_ingredients_count_once(self):
        for day in DAYS:
            for category in ("breakfast", "lunch", "dinner"):
                name = f"{category} {day}"
                self.catalog.add_meal(category, name, [f"{name} item"])
        self._plan(lambda day, category: f"{category} {day}")
        shopping_list = build_shopping_list(self.planner, self.catalog)
        self.assertEqual(len(shopping_list), 21)
        self.assertTrue(all(e.count == 1 for e in shopping_list.get_items()))
        self.assertTrue(all(" x" not in line for line in shopping_list.lines()))

    def test_ingredient_shared_by_three_meals(self):
        self.catalog.add_meal("breakfast", "Toast", ["bread", "butter"])
        self.catalog.add_meal("lunch", "Sandwich", ["bread", "ham"])
        self.catalog.add_meal("dinner", "Soup", ["bread", "broth"])
        self.catalog.add_meal("breakfast", "Fruit", ["apple"])
        self.catalog.add_meal("lunch", "Salad", ["lettuce"])
        self.catalog.add_meal("dinner", "Rice", ["rice"])
        monday = {"breakfast": "Toast", "lunch": "Sandwich", "dinner": "Soup"}
        other = {"breakfast": "Fruit", "lunch": "Salad", "dinner": "Rice"}
        self._plan(lambda day, category: (monday if day == "Monday" else other)[category])
        shopping_list = build_shopping_list(self.planner, self.catalog)
        bread = [e for e in shopping_list.get_items() if e.ingredient == "bread"]
        self.assertEqual(bread, [ShoppingListEntry("bread", 3)])
        self.assertIn("bread x3", shopping_list.lines())
        self.assertEqual(shopping_list.as_dict()["apple"], 6)

    def test_repeated_line_within_meal_and_exact_keys(self):
        self.catalog.add_meal("breakfast", "Eggs", ["egg", "egg", "Salt"])
        self.catalog.add_meal("lunch", "Soup", ["salt"])
        self.catalog.add_meal("dinner", "Stew", ["salts"])
        picks = {"breakfast": "Eggs", "lunch": "Soup", "dinner": "Stew"}
        self._plan(lambda day, category: picks[category])
        totals = build_shopping_list(self.planner, self.catalog).as_dict()
        self.assertEqual(totals, {"egg": 14, "Salt": 7, "salt": 7, "salts": 7})

    def test_no_plan_raises(self):
        with self.assertRaises(NoPlanError):
            build_shopping_list(self.planner, self.catalog)

    def test_in_progress_plan_raises(self):
        self.catalog.add_meal("breakfast", "Oatmeal", ["oats"])
        self.planner.start()
        self.planner.select("Oatmeal")
        with self.assertRaises(NoPlanError):
            build_shopping_list(self.planner, self.catalog)


if __name__ == '__main__':
    unittest.main()
