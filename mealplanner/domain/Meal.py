"""Meal domain entity: id, category, name, ordered ingredients."""
from typing import Iterable, Optional, Tuple


class Meal:
    def __init__(self, meal_id: int, category: str, name: str, ingredients: Iterable[str],
                 ingredient_ids: Optional[Iterable[int]] = None):
        self.meal_id = meal_id
        self.category = category
        self.name = name
        # Tuples keep a stored meal unchanged after creation
        self.ingredients: Tuple[str, ...] = tuple(ingredients)
        self.ingredient_ids: Tuple[int, ...] = tuple(ingredient_ids) if ingredient_ids is not None else ()

    def __eq__(self, other):
        if not isinstance(other, Meal):
            return NotImplemented
        return (self.meal_id, self.category, self.name, self.ingredients) == \
            (other.meal_id, other.category, other.name, other.ingredients)

    def __hash__(self):
        return hash(self.meal_id)

    def __str__(self) -> str:
        return f"{self.name} ({self.category}) - Ingredients: {', '.join(self.ingredients)}"

    def __repr__(self) -> str:
        return f"Meal(id={self.meal_id}, category={self.category!r}, name={self.name!r})"

    def describe(self):
        '''Returns the lines printed by the show command for this meal.'''
        return [f"Name: {self.name}", "Ingredients:", *self.ingredients]

    @staticmethod
    def from_dict(data):
        '''Creates a Meal from a stored row: {meal_id, category, meal, ingredients}.'''
        return Meal(
            meal_id=int(data["meal_id"]),
            category=data["category"],
            name=data["meal"],
            ingredients=data.get("ingredients", []),
            ingredient_ids=data.get("ingredient_ids"),
        )

