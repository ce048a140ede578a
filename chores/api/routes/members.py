from fastapi import APIRouter, Depends, HTTPException

from chores.api.dependencies import get_household
from chores.domain.Household import Household, ChangeStatus
from chores.utilities.validators import MemberInput

router = APIRouter(prefix="/api/members", tags=["members"])


@router.get("")
def list_members(active_only: bool = False, household: Household = Depends(get_household)):
    members = household.household_members
    if active_only:
        members = [m for m in members if m.is_active]
    return {"count": len(members), "items": [m.to_dict() for m in members]}


@router.post("")
def create_member(payload: MemberInput, household: Household = Depends(get_household)):
    member = payload.to_member()
    status = household.add_household_member(member)
    return {"status": status.value, "member": member.to_dict()}


@router.get("/{member_id}")
def get_member(member_id: str, household: Household = Depends(get_household)):
    member = household.get_household_member(member_id)
    if member is None:
        raise HTTPException(status_code=404, detail="Member not found")
    return member.to_dict()


@router.put("/{member_id}")
def update_member(member_id: str, payload: MemberInput, household: Household = Depends(get_household)):
    """Replace a member. Renaming does not touch chores already assigned to the old name."""
    member = payload.to_member(member_id=member_id)
    status = household.update_household_member(member)
    body = {"status": status.value}
    if status.applied:
        body["member"] = member.to_dict()
    return body


@router.delete("/{member_id}")
def delete_member(member_id: str, household: Household = Depends(get_household)):
    """Remove a member and every chore assigned to their name."""
    with household.lock:
        member = household.get_household_member(member_id)
        if member is None:
            return {"status": ChangeStatus.NOOP_NOT_FOUND.value, "removed_chores": 0}
        before = len(household.chores)
        status = household.remove_household_member(member)
        removed = before - len(household.chores)
    return {"status": status.value, "removed_chores": removed}
