"""
Input validation schemas using Pydantic for raw console text.

The parse_* helpers are pure: they return the accepted value or None, leaving any
re-prompt loop to the caller.
"""
import re
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from mealplanner.utilities.constants import CATEGORIES, INGREDIENTS_PATTERN, NAME_PATTERN


def _is_name(value: str) -> bool:
    return bool(re.fullmatch(NAME_PATTERN, value, re.ASCII)) and bool(value.strip())


def _check_category(v: str) -> str:
    if v not in CATEGORIES:
        raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}")
    return v


def _check_name(v: str) -> str:
    if not _is_name(v):
        raise ValueError('Meal name must contain letters and spaces only')
    return v


def _check_ingredients(v: List[str]) -> List[str]:
    for item in v:
        if not _is_name(item) or item != item.strip():
            raise ValueError(f"Invalid ingredient: {item!r}")
    return v


class CategoryInput(BaseModel):
    """Schema for a meal category."""
    category: str

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        return _check_category(v)


class MealNameInput(BaseModel):
    """Schema for a meal name: letters and spaces, not blank."""
    name: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _check_name(v)


class IngredientsInput(BaseModel):
    """Schema for a comma separated ingredient line."""
    ingredients: List[str] = Field(..., min_length=1)

    @field_validator('ingredients', mode='before')
    @classmethod
    def split_csv(cls, v):
        """Split a raw line on commas and strip each element."""
        if isinstance(v, str):
            if not re.fullmatch(INGREDIENTS_PATTERN, v, re.ASCII):
                raise ValueError('Ingredients must contain letters, spaces and commas only')
            return [part.strip() for part in v.split(',')]
        return v

    @field_validator('ingredients')
    @classmethod
    def validate_items(cls, v):
        """Every ingredient must be non-empty after trimming."""
        return _check_ingredients(v)


class MealInput(BaseModel):
    """Schema for a complete meal (used when loading stored rows)."""
    category: str
    name: str
    ingredients: List[str] = Field(..., min_length=1)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        return _check_category(v)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _check_name(v)

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        return _check_ingredients(v)


def parse_category(raw: str) -> Optional[str]:
    try:
        return CategoryInput(category=raw).category
    except ValidationError:
        return None


def parse_meal_name(raw: str) -> Optional[str]:
    try:
        return MealNameInput(name=raw).name
    except ValidationError:
        return None


def parse_ingredients(raw: str) -> Optional[List[str]]:
    try:
        return IngredientsInput(ingredients=raw).ingredients
    except ValidationError:
        return None


__all__ = [
    'CategoryInput', 'MealNameInput', 'IngredientsInput', 'MealInput',
    'parse_category', 'parse_meal_name', 'parse_ingredients',
]
