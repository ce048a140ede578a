"""Simple Event Bus / Observer implementation for household change notifications.

Event names published by the Household aggregate:
  chore.added / chore.updated / chore.deleted -> payload {"household": Household, "chore": Chore}
  chore.toggled -> payload {"household": Household, "chore": Chore}
  chores.cleared -> payload {"household": Household, "scope": str, "removed": int}
  member.added / member.updated -> payload {"household": Household, "member": HouseholdMember}
  member.removed -> payload {"household": Household, "member": HouseholdMember, "removed_chores": int}
  template.added / template.updated / template.removed -> payload {"household": Household, "template": WeeklyChoreTemplate}
  distribution.completed -> payload {"household": Household, "week_number": int, "created": int, "removed": int}
  household.reset -> payload {"household": Household}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
CHORE_ADDED = "chore.added"
CHORE_UPDATED = "chore.updated"
CHORE_DELETED = "chore.deleted"
CHORE_TOGGLED = "chore.toggled"
CHORES_CLEARED = "chores.cleared"
MEMBER_ADDED = "member.added"
MEMBER_UPDATED = "member.updated"
MEMBER_REMOVED = "member.removed"
TEMPLATE_ADDED = "template.added"
TEMPLATE_UPDATED = "template.updated"
TEMPLATE_REMOVED = "template.removed"
DISTRIBUTION_COMPLETED = "distribution.completed"
HOUSEHOLD_RESET = "household.reset"

HOUSEHOLD_EVENTS = (
	CHORE_ADDED, CHORE_UPDATED, CHORE_DELETED, CHORE_TOGGLED, CHORES_CLEARED,
	MEMBER_ADDED, MEMBER_UPDATED, MEMBER_REMOVED,
	TEMPLATE_ADDED, TEMPLATE_UPDATED, TEMPLATE_REMOVED,
	DISTRIBUTION_COMPLETED, HOUSEHOLD_RESET,
)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def subscribe_many(self, event_names, callback: Callable[[str, Any], None]):
		for name in event_names:
			self.subscribe(name, callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("[EventBus] Error delivering %s to %s", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'HOUSEHOLD_EVENTS',
	'CHORE_ADDED', 'CHORE_UPDATED', 'CHORE_DELETED', 'CHORE_TOGGLED', 'CHORES_CLEARED',
	'MEMBER_ADDED', 'MEMBER_UPDATED', 'MEMBER_REMOVED',
	'TEMPLATE_ADDED', 'TEMPLATE_UPDATED', 'TEMPLATE_REMOVED',
	'DISTRIBUTION_COMPLETED', 'HOUSEHOLD_RESET',
]
