"""Household aggregate: owns chores, household members, weekly templates and the last distribution time.

Mutators never raise for a missing record or an unmet precondition. They return a
ChangeStatus instead, so callers that ignore the result see the lenient behaviour:
an update of an unknown id is dropped, a delete of an unknown id changes nothing.

Every applied change is published on the household's event bus; no-ops publish nothing.
All mutators and snapshots run under one re-entrant lock, so multi-step operations
(member removal cascade, the weekly batch replacement) observe a consistent state.
"""
import copy
import logging
from datetime import datetime
from enum import Enum
from threading import RLock
from typing import Callable, List, Optional

from chores.domain.Chore import Chore
from chores.domain.HouseholdMember import HouseholdMember
from chores.domain.WeeklyChoreTemplate import WeeklyChoreTemplate
from chores.domain.Chore import parse_timestamp, format_timestamp
from chores.events.Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    CHORE_ADDED, CHORE_UPDATED, CHORE_DELETED, CHORE_TOGGLED, CHORES_CLEARED,
    MEMBER_ADDED, MEMBER_UPDATED, MEMBER_REMOVED,
    TEMPLATE_ADDED, TEMPLATE_UPDATED, TEMPLATE_REMOVED,
    HOUSEHOLD_RESET,
)

logger = logging.getLogger(__name__)


class ChangeStatus(str, Enum):
    APPLIED = "applied"
    NOOP_NOT_FOUND = "noop_not_found"
    NOOP_PRECONDITION_UNMET = "noop_precondition_unmet"
    NOOP_NOT_DUE = "noop_not_due"

    @property
    def applied(self) -> bool:
        return self is ChangeStatus.APPLIED


def _index_of(records: list, record_id: str) -> int:
    for i, rec in enumerate(records):
        if rec.id == record_id:
            return i
    return -1


class Household:
    def __init__(self, chores: Optional[List[Chore]] = None,
                 household_members: Optional[List[HouseholdMember]] = None,
                 weekly_chore_templates: Optional[List[WeeklyChoreTemplate]] = None,
                 last_distribution_date: Optional[datetime] = None):
        self._chores: List[Chore] = list(chores) if chores else []
        self._members: List[HouseholdMember] = list(household_members) if household_members else []
        self._templates: List[WeeklyChoreTemplate] = list(weekly_chore_templates) if weekly_chore_templates else []
        self._last_distribution_date = last_distribution_date
        self._lock = RLock()
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def lock(self) -> RLock:
        '''Held by every mutator; take it to group several operations into one consistent step.'''
        return self._lock

    def _notify(self, event_name: str, **payload):
        payload["household"] = self
        self._event_bus.publish(event_name, payload)

    # --- Read snapshots ---------------------------------------------------
    @property
    def chores(self) -> List[Chore]:
        with self._lock:
            return [copy.copy(c) for c in self._chores]

    @property
    def household_members(self) -> List[HouseholdMember]:
        with self._lock:
            return [copy.copy(m) for m in self._members]

    @property
    def weekly_chore_templates(self) -> List[WeeklyChoreTemplate]:
        with self._lock:
            return [copy.copy(t) for t in self._templates]

    @property
    def last_distribution_date(self) -> Optional[datetime]:
        return self._last_distribution_date

    def get_chore(self, chore_id: str) -> Optional[Chore]:
        with self._lock:
            idx = _index_of(self._chores, chore_id)
            return copy.copy(self._chores[idx]) if idx >= 0 else None

    def get_household_member(self, member_id: str) -> Optional[HouseholdMember]:
        with self._lock:
            idx = _index_of(self._members, member_id)
            return copy.copy(self._members[idx]) if idx >= 0 else None

    def get_weekly_chore_template(self, template_id: str) -> Optional[WeeklyChoreTemplate]:
        with self._lock:
            idx = _index_of(self._templates, template_id)
            return copy.copy(self._templates[idx]) if idx >= 0 else None

    # --- Chores -----------------------------------------------------------
    def add_chore(self, chore: Chore) -> ChangeStatus:
        '''Appends the chore. Ids are generated unique, so no duplicate check is made.'''
        with self._lock:
            self._chores.append(copy.copy(chore))
        self._notify(CHORE_ADDED, chore=copy.copy(chore))
        return ChangeStatus.APPLIED

    def update_chore(self, chore: Chore) -> ChangeStatus:
        '''Replaces the whole record with the same id; an unknown id is silently dropped.'''
        with self._lock:
            idx = _index_of(self._chores, chore.id)
            if idx < 0:
                logger.debug("update_chore: no chore with id %s", chore.id)
                return ChangeStatus.NOOP_NOT_FOUND
            self._chores[idx] = copy.copy(chore)
        self._notify(CHORE_UPDATED, chore=copy.copy(chore))
        return ChangeStatus.APPLIED

    def delete_chore(self, chore: Chore) -> ChangeStatus:
        return self.delete_chore_by_id(chore.id)

    def delete_chore_by_id(self, chore_id: str) -> ChangeStatus:
        with self._lock:
            idx = _index_of(self._chores, chore_id)
            if idx < 0:
                return ChangeStatus.NOOP_NOT_FOUND
            removed = self._chores.pop(idx)
        self._notify(CHORE_DELETED, chore=removed)
        return ChangeStatus.APPLIED

    def toggle_completion(self, chore_id: str) -> ChangeStatus:
        with self._lock:
            idx = _index_of(self._chores, chore_id)
            if idx < 0:
                return ChangeStatus.NOOP_NOT_FOUND
            chore = self._chores[idx]
            chore.is_completed = not chore.is_completed
            snapshot = copy.copy(chore)
        self._notify(CHORE_TOGGLED, chore=snapshot)
        return ChangeStatus.APPLIED

    def _remove_chores_where(self, predicate: Callable[[Chore], bool], scope: str) -> int:
        with self._lock:
            kept = [c for c in self._chores if not predicate(c)]
            removed = len(self._chores) - len(kept)
            self._chores = kept
        if removed:
            self._notify(CHORES_CLEARED, scope=scope, removed=removed)
        return removed

    def clear_completed_chores(self) -> ChangeStatus:
        self._remove_chores_where(lambda c: c.is_completed, "completed")
        return ChangeStatus.APPLIED

    def clear_completed_weekly_chores(self) -> ChangeStatus:
        self._remove_chores_where(lambda c: c.is_completed and c.is_weekly_chore, "completed_weekly")
        return ChangeStatus.APPLIED

    def clear_completed_manual_chores(self) -> ChangeStatus:
        self._remove_chores_where(lambda c: c.is_completed and not c.is_weekly_chore, "completed_manual")
        return ChangeStatus.APPLIED

    def clear_all_chores(self) -> ChangeStatus:
        self._remove_chores_where(lambda c: True, "all")
        return ChangeStatus.APPLIED

    # --- Household members ------------------------------------------------
    def add_household_member(self, member: HouseholdMember) -> ChangeStatus:
        with self._lock:
            self._members.append(copy.copy(member))
        self._notify(MEMBER_ADDED, member=copy.copy(member))
        return ChangeStatus.APPLIED

    def update_household_member(self, member: HouseholdMember) -> ChangeStatus:
        '''Replaces the member record. Chores keep the old assignee name (assignment is by name).'''
        with self._lock:
            idx = _index_of(self._members, member.id)
            if idx < 0:
                return ChangeStatus.NOOP_NOT_FOUND
            previous = self._members[idx]
            self._members[idx] = copy.copy(member)
        if previous.name != member.name:
            logger.info("Member renamed %r -> %r; chores assigned to %r keep the old name",
                        previous.name, member.name, previous.name)
        self._notify(MEMBER_UPDATED, member=copy.copy(member))
        return ChangeStatus.APPLIED

    def remove_household_member(self, member: HouseholdMember) -> ChangeStatus:
        '''Removes the member and every chore whose assignee equals the member's name exactly.'''
        with self._lock:
            idx = _index_of(self._members, member.id)
            if idx < 0:
                return ChangeStatus.NOOP_NOT_FOUND
            removed = self._members.pop(idx)
            before = len(self._chores)
            self._chores = [c for c in self._chores if c.assigned_to != removed.name]
            removed_chores = before - len(self._chores)
        logger.info("Removed member %r and %d assigned chore(s)", removed.name, removed_chores)
        self._notify(MEMBER_REMOVED, member=removed, removed_chores=removed_chores)
        return ChangeStatus.APPLIED

    # --- Weekly chore templates ------------------------------------------
    def add_weekly_chore_template(self, template: WeeklyChoreTemplate) -> ChangeStatus:
        with self._lock:
            self._templates.append(copy.copy(template))
        self._notify(TEMPLATE_ADDED, template=copy.copy(template))
        return ChangeStatus.APPLIED

    def update_weekly_chore_template(self, template: WeeklyChoreTemplate) -> ChangeStatus:
        with self._lock:
            idx = _index_of(self._templates, template.id)
            if idx < 0:
                return ChangeStatus.NOOP_NOT_FOUND
            self._templates[idx] = copy.copy(template)
        self._notify(TEMPLATE_UPDATED, template=copy.copy(template))
        return ChangeStatus.APPLIED

    def remove_weekly_chore_template(self, template: WeeklyChoreTemplate) -> ChangeStatus:
        with self._lock:
            idx = _index_of(self._templates, template.id)
            if idx < 0:
                return ChangeStatus.NOOP_NOT_FOUND
            removed = self._templates.pop(idx)
        self._notify(TEMPLATE_REMOVED, template=removed)
        return ChangeStatus.APPLIED

    # --- Distribution support (used by chores.logic.distribution) --------
    def replace_weekly_batch(self, new_chores: List[Chore], distributed_at: datetime) -> int:
        '''Drops every weekly-origin chore, appends the new batch and stamps the distribution time.

        Returns the number of weekly chores removed. Callers publish the completion event.
        '''
        with self._lock:
            kept = [c for c in self._chores if not c.is_weekly_chore]
            removed = len(self._chores) - len(kept)
            self._chores = kept + [copy.copy(c) for c in new_chores]
            self._last_distribution_date = distributed_at
        return removed

    # --- Whole-state replacement -----------------------------------------
    def load_snapshot(self, other: "Household", notify: bool = True) -> "Household":
        '''Replaces all collections and the distribution timestamp with copies of other's state.'''
        chores, members, templates = other.chores, other.household_members, other.weekly_chore_templates
        with self._lock:
            self._chores = chores
            self._members = members
            self._templates = templates
            self._last_distribution_date = other.last_distribution_date
        if notify:
            self._notify(HOUSEHOLD_RESET)
        return self

    def __str__(self) -> str:
        return (f"Household: {len(self._chores)} chores, {len(self._members)} members, "
                f"{len(self._templates)} templates, last distribution: {self._last_distribution_date}")

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        '''Populates the Household from the persisted layout (does not publish events).'''
        d = data if isinstance(data, dict) else {}
        snapshot = Household(
            chores=[Chore.from_dict(c) for c in d.get("chores", []) or []],
            household_members=[HouseholdMember.from_dict(m) for m in d.get("household_members", []) or []],
            weekly_chore_templates=[WeeklyChoreTemplate.from_dict(t) for t in d.get("weekly_chore_templates", []) or []],
            last_distribution_date=parse_timestamp(d.get("last_distribution_date")),
        )
        return self.load_snapshot(snapshot, notify=False)

    def to_dict(self):
        with self._lock:
            return {
                "last_distribution_date": format_timestamp(self._last_distribution_date),
                "chores": [c.to_dict() for c in self._chores],
                "household_members": [m.to_dict() for m in self._members],
                "weekly_chore_templates": [t.to_dict() for t in self._templates],
            }
