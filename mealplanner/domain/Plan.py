"""Plan domain entity: the 21 (day, category) -> meal id slots of one week."""
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from mealplanner.utilities.constants import CATEGORIES, DAYS, SLOTS_PER_PLAN


class PlanState(Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


def iter_slots() -> Iterator[Tuple[str, str]]:
    """Yield every (day, category) pair, day outer loop, both in canonical order."""
    for day in DAYS:
        for category in CATEGORIES:
            yield day, category


class Plan:
    def __init__(self, slots: Optional[Dict[Tuple[str, str], int]] = None):
        self.slots: Dict[Tuple[str, str], int] = dict(slots) if slots else {}

    def assign(self, day: str, category: str, meal_id: int):
        if day not in DAYS or category not in CATEGORIES:
            raise ValueError(f"Unknown slot: ({day}, {category})")
        self.slots[(day, category)] = meal_id

    def get(self, day: str, category: str) -> Optional[int]:
        return self.slots.get((day, category))

    def is_full(self) -> bool:
        return len(self.slots) == SLOTS_PER_PLAN

    def __len__(self):
        return len(self.slots)

    def __repr__(self) -> str:
        return f"Plan({len(self.slots)}/{SLOTS_PER_PLAN} slots)"
