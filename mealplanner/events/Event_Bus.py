"""Simple Event Bus / Observer implementation for catalog and planner notifications.

Event names used so far:
  meal.added -> payload {"meal": Meal}
  plan.day_planned -> payload {"day": str}
  plan.completed -> payload {"plan": Plan}
  plan.aborted -> payload {"category": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MEAL_ADDED = "meal.added"
PLAN_DAY_PLANNED = "plan.day_planned"
PLAN_COMPLETED = "plan.completed"
PLAN_ABORTED = "plan.aborted"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'MEAL_ADDED', 'PLAN_DAY_PLANNED', 'PLAN_COMPLETED', 'PLAN_ABORTED'
]
