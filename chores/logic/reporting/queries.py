"""Read-side projections over a Household.

Nothing here is cached: every call works on a fresh snapshot, so results always
reflect the latest mutation.
"""
from __future__ import annotations
from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional

from chores.domain.Chore import Chore
from chores.domain.Household import Household
from chores.domain.HouseholdMember import HouseholdMember
from chores.utilities.constants import CATEGORIES, CHORE_FILTERS

__all__ = [
    "pending_chores", "completed_chores", "overdue_chores", "weekly_chores",
    "completed_weekly_chores", "manual_chores", "active_members", "category_counts",
    "search_chores", "filter_chores", "overview_stats", "chores_by_member",
]


def pending_chores(household: Household) -> List[Chore]:
    return [c for c in household.chores if not c.is_completed]


def completed_chores(household: Household) -> List[Chore]:
    return [c for c in household.chores if c.is_completed]


def overdue_chores(household: Household, now: Optional[datetime] = None) -> List[Chore]:
    """Pending chores whose due date is strictly before now."""
    now = now or datetime.now()
    return [c for c in pending_chores(household) if c.due_date < now]


def weekly_chores(household: Household) -> List[Chore]:
    return [c for c in household.chores if c.is_weekly_chore]


def completed_weekly_chores(household: Household) -> List[Chore]:
    return [c for c in household.chores if c.is_weekly_chore and c.is_completed]


def manual_chores(household: Household) -> List[Chore]:
    return [c for c in household.chores if not c.is_weekly_chore]


def active_members(household: Household) -> List[HouseholdMember]:
    return [m for m in household.household_members if m.is_active]


def category_counts(household: Household) -> Dict[str, int]:
    """Count per category: every known category (zero included), then any other category in use."""
    counter = Counter(c.category for c in household.chores)
    counts = {cat: counter.get(cat, 0) for cat in CATEGORIES}
    for cat, n in counter.items():
        if cat not in counts:
            counts[cat] = n
    return counts


def search_chores(chores: List[Chore], text: str) -> List[Chore]:
    """Case-insensitive substring match on title, description and assignee. Empty text matches all."""
    needle = (text or "").strip().casefold()
    if not needle:
        return list(chores)
    return [c for c in chores
            if needle in (c.title or "").casefold()
            or needle in (c.description or "").casefold()
            or needle in (c.assigned_to or "").casefold()]


def filter_chores(household: Household, filter_name: str = "all", search: str = "",
                  now: Optional[datetime] = None) -> List[Chore]:
    if filter_name not in CHORE_FILTERS:
        raise ValueError(f"Unknown chore filter: {filter_name!r}")
    selectors = {
        "all": lambda: household.chores,
        "pending": lambda: pending_chores(household),
        "completed": lambda: completed_chores(household),
        "overdue": lambda: overdue_chores(household, now),
        "weekly": lambda: weekly_chores(household),
        "completed_weekly": lambda: completed_weekly_chores(household),
        "manual": lambda: manual_chores(household),
    }
    return search_chores(selectors[filter_name](), search)


def chores_by_member(household: Household) -> Dict[str, int]:
    """Pending chore count per assignee name, members first (store order), then unknown names."""
    counter = Counter(c.assigned_to for c in pending_chores(household))
    result = {m.name: counter.get(m.name, 0) for m in household.household_members}
    for name, n in counter.items():
        result.setdefault(name, n)
    return result


def overview_stats(household: Household, now: Optional[datetime] = None) -> Dict[str, object]:
    with household.lock:
        return {
            "total": len(household.chores),
            "completed": len(completed_chores(household)),
            "pending": len(pending_chores(household)),
            "overdue": len(overdue_chores(household, now)),
            "weekly": len(weekly_chores(household)),
            "manual": len(manual_chores(household)),
            "categories": {k: v for k, v in category_counts(household).items() if v > 0},
            "by_member": chores_by_member(household),
        }
