"""Weekly planner: fills the 21 (day, category) slots from the meal catalog.

Lifecycle: EMPTY -> IN_PROGRESS -> COMPLETE. The planner never blocks on input;
callers walk it slot by slot:

    planner.start()
    while planner.current_slot():
        names = planner.choices()       # EmptyCategoryError aborts the session
        planner.select(pick(names))     # False on a miss, slot does not advance

Slots are written to the store only once all 21 are filled.
"""
import logging
from typing import List, Optional, Tuple

from mealplanner.domain.Plan import Plan, PlanState, iter_slots
from mealplanner.events.Event_Bus import (
    GLOBAL_EVENT_BUS, PLAN_ABORTED, PLAN_COMPLETED, PLAN_DAY_PLANNED
)
from mealplanner.utilities.constants import CATEGORIES, DAYS, SLOTS_PER_PLAN
from mealplanner.utilities.errors import EmptyCategoryError, PlanStateError, StorageError

logger = logging.getLogger(__name__)


class WeeklyPlanner:
    def __init__(self, catalog, store=None):
        self._catalog = catalog
        self._store = store
        self._event_bus = GLOBAL_EVENT_BUS
        self._state = PlanState.EMPTY
        self._plan: Optional[Plan] = None
        self._order: List[Tuple[str, str]] = list(iter_slots())
        self._cursor = 0

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    @property
    def state(self) -> PlanState:
        return self._state

    @property
    def plan(self) -> Optional[Plan]:
        return self._plan

    @property
    def event_bus(self):
        return self._event_bus

    def start(self):
        '''Begins a new session, discarding any previous plan in memory and in the store.'''
        # A failed clear leaves the previous plan in place, in memory and stored
        if self._store is not None:
            self._store.clear_plan()
        self._plan = Plan()
        self._cursor = 0
        self._state = PlanState.IN_PROGRESS
        logger.info("Started a new weekly plan")
        return self

    def current_slot(self) -> Optional[Tuple[str, str]]:
        if self._state is not PlanState.IN_PROGRESS:
            return None
        return self._order[self._cursor]

    def _require_in_progress(self, action: str):
        if self._state is not PlanState.IN_PROGRESS:
            raise PlanStateError(f"Cannot {action}: planner is {self._state.value}")

    def _abort(self, category: str):
        logger.warning(f"Planning aborted: no meals in category '{category}'")
        self._plan = None
        self._cursor = 0
        self._state = PlanState.EMPTY
        self._event_bus.publish(PLAN_ABORTED, {"category": category})

    def choices(self) -> List[str]:
        '''Sorted meal names offered for the current slot.'''
        self._require_in_progress("list choices")
        _, category = self._order[self._cursor]
        meals = self._catalog.list_by_category(category)
        if not meals:
            self._abort(category)
            raise EmptyCategoryError(category)
        return [meal.name for meal in meals]

    def select(self, name: str) -> bool:
        '''
        Records the named meal in the current slot. Returns False (and stays on the
        same slot) when the category holds no meal with that exact name.
        '''
        self._require_in_progress("select a meal")
        day, category = self._order[self._cursor]
        meal = self._catalog.find_by_category_and_name(category, name)
        if meal is None:
            if not self._catalog.list_by_category(category):
                self._abort(category)
                raise EmptyCategoryError(category)
            return False
        self._plan.assign(day, category, meal.meal_id)
        self._cursor += 1
        if category == CATEGORIES[-1]:
            self._event_bus.publish(PLAN_DAY_PLANNED, {"day": day})
        if self._cursor == SLOTS_PER_PLAN:
            self._complete()
        return True

    def _complete(self):
        if self._store is not None:
            try:
                self._store.clear_plan()
                for day, category in self._order:
                    self._store.persist_plan_slot(day, category, self._plan.get(day, category))
            except StorageError:
                logger.error("Could not store the completed plan; discarding it")
                self._plan = None
                self._cursor = 0
                self._state = PlanState.EMPTY
                raise
        self._state = PlanState.COMPLETE
        logger.info("Weekly plan complete")
        self._event_bus.publish(PLAN_COMPLETED, {"plan": self._plan})

    def get_slot(self, day: str, category: str) -> Optional[int]:
        if self._plan is None:
            return None
        return self._plan.get(day, category)

    def restore(self, store=None):
        '''
        Rebuilds a complete plan from stored slots. Anything short of 21 valid
        slots leaves the planner EMPTY.
        '''
        store = store if store is not None else self._store
        if store is None:
            return self
        rows = store.load_plan_slots()
        plan = Plan()
        for day, category, meal_id in rows:
            meal = self._catalog.find_by_id(meal_id)
            if day not in DAYS or meal is None or meal.category != category:
                logger.warning(f"Ignoring stored plan: invalid slot ({day}, {category}, {meal_id})")
                return self
            plan.assign(day, category, meal_id)
        if len(rows) != SLOTS_PER_PLAN or not plan.is_full():
            if rows:
                logger.warning(f"Ignoring stored plan with {len(rows)} slots")
            return self
        self._plan = plan
        self._cursor = SLOTS_PER_PLAN
        self._state = PlanState.COMPLETE
        logger.info("Restored weekly plan from store")
        return self

    def weekly_rows(self) -> List[Tuple[str, List[Tuple[str, str]]]]:
        '''For each day, the (category, meal name) pairs filled so far.'''
        rows = []
        if self._plan is None:
            return rows
        for day in DAYS:
            filled = []
            for category in CATEGORIES:
                meal_id = self._plan.get(day, category)
                meal = self._catalog.find_by_id(meal_id) if meal_id is not None else None
                if meal is not None:
                    filled.append((category, meal.name))
            rows.append((day, filled))
        return rows
