"""Weekly chore distribution.

Provides distribute_weekly_chores(household, now=None), the cadence gate
should_distribute_weekly_chores(household, now=None) and the date helpers they use.

Rules:
  - Needs at least one template, at least one member and at least one active member;
    otherwise nothing changes and NOOP_PRECONDITION_UNMET is returned (never an exception).
  - The whole previous weekly batch is discarded, completed weekly chores included.
  - Template i (stored order) goes to active_members[i % len(active_members)] (stored order).
  - Every new chore is due next Sunday and carries the week number computed once per run.
  - Calling distribute_weekly_chores directly always runs; the gate only answers
    "should we prompt", it never blocks a direct call.
"""
from __future__ import annotations
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from chores.domain.Chore import Chore, format_timestamp
from chores.domain.Household import Household, ChangeStatus
from chores.events.Event_Bus import DISTRIBUTION_COMPLETED
from chores.utilities.config import DISTRIBUTION_INTERVAL_DAYS

__all__ = [
    "distribute_weekly_chores", "distribute_if_due", "should_distribute_weekly_chores",
    "distribution_status", "next_sunday", "current_week_number", "sunday_first_weekday",
]

logger = logging.getLogger(__name__)


def sunday_first_weekday(day: datetime) -> int:
    """Weekday number in a Sunday-first week: Sunday=1, Monday=2 ... Saturday=7."""
    return day.isoweekday() % 7 + 1


def next_sunday(now: Optional[datetime] = None) -> datetime:
    """Upcoming Sunday, always strictly in the future: on a Sunday this is 7 days later.

    The time of day of `now` is kept.
    """
    now = now or datetime.now()
    days_until_sunday = 7 - sunday_first_weekday(now) + 1
    return now + timedelta(days=days_until_sunday)


def current_week_number(now: Optional[datetime] = None) -> int:
    """ISO-8601 week of year (1..53)."""
    return (now or datetime.now()).isocalendar()[1]


def _days_between(earlier: datetime, later: datetime) -> int:
    # Whole elapsed days between naive local timestamps; partial days are dropped.
    return (later - earlier).days


def should_distribute_weekly_chores(household: Household, now: Optional[datetime] = None,
                                    interval_days: int = DISTRIBUTION_INTERVAL_DAYS) -> bool:
    last = household.last_distribution_date
    if last is None:
        return True
    return _days_between(last, now or datetime.now()) >= interval_days


def distribute_weekly_chores(household: Household, now: Optional[datetime] = None) -> ChangeStatus:
    """Replace the weekly batch with one chore per template, assigned round-robin to active members."""
    now = now or datetime.now()
    with household.lock:
        members = household.household_members
        templates = household.weekly_chore_templates
        active_members = [m for m in members if m.is_active]
        if not members or not templates or not active_members:
            logger.debug("Weekly distribution skipped: %d member(s), %d active, %d template(s)",
                         len(members), len(active_members), len(templates))
            return ChangeStatus.NOOP_PRECONDITION_UNMET

        week_number = current_week_number(now)
        due_date = next_sunday(now)
        batch: List[Chore] = []
        for i, template in enumerate(templates):
            assignee = active_members[i % len(active_members)]
            batch.append(Chore(
                title=template.title,
                description=template.description,
                assigned_to=assignee.name,
                due_date=due_date,
                priority=template.priority,
                is_completed=False,
                category=template.category,
                created_at=now,
                is_weekly_chore=True,
                week_number=week_number,
            ))
        removed = household.replace_weekly_batch(batch, now)

    logger.info("Distributed %d weekly chore(s) for week %d across %d active member(s); replaced %d",
                len(batch), week_number, len(active_members), removed)
    household.event_bus.publish(DISTRIBUTION_COMPLETED, {
        "household": household,
        "week_number": week_number,
        "created": len(batch),
        "removed": removed,
    })
    return ChangeStatus.APPLIED


def distribute_if_due(household: Household, now: Optional[datetime] = None) -> ChangeStatus:
    """Run the distribution only when the cadence gate is open; otherwise NOOP_NOT_DUE."""
    now = now or datetime.now()
    with household.lock:
        if not should_distribute_weekly_chores(household, now):
            return ChangeStatus.NOOP_NOT_DUE
        return distribute_weekly_chores(household, now)


def distribution_status(household: Household, now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or datetime.now()
    last = household.last_distribution_date
    days_since = _days_between(last, now) if last is not None else None
    next_due = last + timedelta(days=DISTRIBUTION_INTERVAL_DAYS) if last is not None else None
    return {
        "last_distribution_date": format_timestamp(last),
        "should_distribute": should_distribute_weekly_chores(household, now),
        "days_since_last": days_since,
        "next_due_date": format_timestamp(next_due),
        "week_number": current_week_number(now),
    }
