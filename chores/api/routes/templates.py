from fastapi import APIRouter, Depends, HTTPException

from chores.api.dependencies import get_household
from chores.domain.Household import Household, ChangeStatus
from chores.utilities.validators import TemplateInput

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("")
def list_templates(household: Household = Depends(get_household)):
    templates = household.weekly_chore_templates
    return {"count": len(templates), "items": [t.to_dict() for t in templates]}


@router.post("")
def create_template(payload: TemplateInput, household: Household = Depends(get_household)):
    template = payload.to_template()
    status = household.add_weekly_chore_template(template)
    return {"status": status.value, "template": template.to_dict()}


@router.get("/{template_id}")
def get_template(template_id: str, household: Household = Depends(get_household)):
    template = household.get_weekly_chore_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return template.to_dict()


@router.put("/{template_id}")
def update_template(template_id: str, payload: TemplateInput, household: Household = Depends(get_household)):
    template = payload.to_template(template_id=template_id)
    status = household.update_weekly_chore_template(template)
    body = {"status": status.value}
    if status.applied:
        body["template"] = template.to_dict()
    return body


@router.delete("/{template_id}")
def delete_template(template_id: str, household: Household = Depends(get_household)):
    template = household.get_weekly_chore_template(template_id)
    if template is None:
        return {"status": ChangeStatus.NOOP_NOT_FOUND.value}
    return {"status": household.remove_weekly_chore_template(template).value}
