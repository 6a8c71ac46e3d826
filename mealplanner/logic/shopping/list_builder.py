"""Shopping list builder.

Provides build_shopping_list(planner, catalog): counts every ingredient line of every
meal referenced by a completed weekly plan.
"""
from typing import Dict

from mealplanner.domain.Plan import PlanState, iter_slots
from mealplanner.domain.ShoppingList import ShoppingList, ShoppingListEntry
from mealplanner.utilities.errors import NoPlanError


def build_shopping_list(planner, catalog) -> ShoppingList:
    """Aggregate ingredient totals for the planner's current plan.

    Args:
        planner: WeeklyPlanner (or anything exposing state and plan).
        catalog: MealCatalog used to resolve meal ids.

    Returns:
        ShoppingList whose entries keep first-seen order: days, then categories,
        then ingredient order within each meal. Keys are exact strings (no case
        folding); a repeated line inside one meal counts twice.

    Raises:
        NoPlanError: the plan is not complete.
    """
    plan = planner.plan
    if planner.state is not PlanState.COMPLETE or plan is None:
        raise NoPlanError()

    totals: Dict[str, int] = {}
    for day, category in iter_slots():
        meal = catalog.find_by_id(plan.get(day, category))
        if meal is None:
            raise NoPlanError(f"Plan references an unknown meal for {day} {category}")
        for ingredient in meal.ingredients:
            totals[ingredient] = totals.get(ingredient, 0) + 1

    return ShoppingList(ShoppingListEntry(name, count) for name, count in totals.items())


__all__ = ['build_shopping_list']
