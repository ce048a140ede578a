from fastapi import APIRouter, Depends

from chores.api.dependencies import get_household
from chores.domain.Household import Household
from chores.logic.distribution.weekly import (
    distribute_weekly_chores, distribute_if_due, distribution_status
)
from chores.logic.reporting.queries import weekly_chores

router = APIRouter(prefix="/api/distribution", tags=["distribution"])


@router.get("")
def get_distribution_status(household: Household = Depends(get_household)):
    """Last run, whether a new batch should be prompted, and the current week number."""
    return distribution_status(household)


@router.post("")
def trigger_distribution(force: bool = False, household: Household = Depends(get_household)):
    """Run the weekly distribution.

    Without force the cadence gate applies: when it is closed nothing changes and the
    response says noop_not_due. With force the batch is always replaced.
    """
    with household.lock:
        status = distribute_weekly_chores(household) if force else distribute_if_due(household)
        batch = weekly_chores(household)
    return {
        "status": status.value,
        "distribution": distribution_status(household),
        "weekly_count": len(batch),
        "assignments": [{"title": c.title, "assigned_to": c.assigned_to} for c in batch],
    }
