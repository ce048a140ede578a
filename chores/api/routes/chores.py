from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from chores.api.dependencies import get_household
from chores.domain.Household import Household
from chores.logic.reporting.queries import filter_chores
from chores.utilities.constants import CHORE_FILTERS
from chores.utilities.validators import ChoreInput

router = APIRouter(prefix="/api/chores", tags=["chores"])

CLEAR_SCOPES = {
    "all": Household.clear_completed_chores,
    "weekly": Household.clear_completed_weekly_chores,
    "manual": Household.clear_completed_manual_chores,
}


def serialize_chore(chore, now: Optional[datetime] = None) -> dict:
    data = chore.to_dict()
    data.update({
        "priority_color": chore.priority_color,
        "category_label": chore.category_label,
        "category_icon": chore.category_icon,
        "is_overdue": chore.is_overdue(now),
    })
    return data


@router.get("")
def list_chores(filter: str = Query(default="all", description="|".join(CHORE_FILTERS)),
                q: str = Query(default="", description="Search title, description and assignee"),
                household: Household = Depends(get_household)):
    if filter not in CHORE_FILTERS:
        raise HTTPException(status_code=400, detail=f"Unknown filter '{filter}'")
    now = datetime.now()
    items = [serialize_chore(c, now) for c in filter_chores(household, filter, q, now=now)]
    return {"filter": filter, "count": len(items), "items": items}


@router.post("")
def create_chore(payload: ChoreInput, household: Household = Depends(get_household)):
    chore = payload.to_chore()
    status = household.add_chore(chore)
    return {"status": status.value, "chore": serialize_chore(chore)}


@router.get("/{chore_id}")
def get_chore(chore_id: str, household: Household = Depends(get_household)):
    chore = household.get_chore(chore_id)
    if chore is None:
        raise HTTPException(status_code=404, detail="Chore not found")
    return serialize_chore(chore)


@router.put("/{chore_id}")
def update_chore(chore_id: str, payload: ChoreInput, household: Household = Depends(get_household)):
    """Full replacement by id. An unknown id is a no-op (status noop_not_found), not an error."""
    existing = household.get_chore(chore_id)
    chore = payload.to_chore(chore_id=chore_id, created_at=existing.created_at if existing else None)
    status = household.update_chore(chore)
    body = {"status": status.value}
    if status.applied:
        body["chore"] = serialize_chore(chore)
    return body


@router.delete("/{chore_id}")
def delete_chore(chore_id: str, household: Household = Depends(get_household)):
    return {"status": household.delete_chore_by_id(chore_id).value}


@router.post("/{chore_id}/toggle")
def toggle_chore(chore_id: str, household: Household = Depends(get_household)):
    with household.lock:
        status = household.toggle_completion(chore_id)
        chore = household.get_chore(chore_id)
    body = {"status": status.value}
    if chore is not None:
        body["is_completed"] = chore.is_completed
    return body


@router.post("/clear-completed")
def clear_completed(scope: str = Query(default="all", description="all|weekly|manual"),
                    household: Household = Depends(get_household)):
    action = CLEAR_SCOPES.get(scope)
    if action is None:
        raise HTTPException(status_code=400, detail=f"Unknown scope '{scope}'")
    with household.lock:
        before = len(household.chores)
        status = action(household)
        after = len(household.chores)
    return {"status": status.value, "removed": before - after}


@router.post("/clear-all")
def clear_all(household: Household = Depends(get_household)):
    with household.lock:
        before = len(household.chores)
        status = household.clear_all_chores()
    return {"status": status.value, "removed": before}
