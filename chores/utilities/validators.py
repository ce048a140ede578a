"""
Request body schemas for the HTTP layer (Pydantic).

These check shapes and types only. Content rules such as "title must not be empty"
belong to the client; the household accepts whatever values it is given.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from chores.domain.Chore import Chore
from chores.domain.HouseholdMember import HouseholdMember
from chores.domain.WeeklyChoreTemplate import WeeklyChoreTemplate
from chores.utilities.constants import DEFAULT_MEMBER_COLOR, PRIORITIES

PRIORITY_PATTERN = r'^(' + '|'.join(PRIORITIES) + r')$'


class ChoreInput(BaseModel):
    """Schema for creating or replacing a chore."""
    title: str = ""
    description: str = ""
    assigned_to: str = ""
    due_date: Optional[datetime] = None
    priority: str = Field("medium", pattern=PRIORITY_PATTERN)
    is_completed: bool = False
    category: str = "other"
    is_weekly_chore: bool = False
    week_number: Optional[int] = Field(None, ge=1, le=53)

    @field_validator('title', 'assigned_to', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('due_date')
    @classmethod
    def drop_timezone(cls, v):
        """Stored timestamps are naive local time."""
        if v is not None and v.tzinfo is not None:
            return v.astimezone().replace(tzinfo=None)
        return v

    def to_chore(self, chore_id: Optional[str] = None, created_at: Optional[datetime] = None) -> Chore:
        return Chore(id=chore_id, created_at=created_at, **self.model_dump())


class MemberInput(BaseModel):
    """Schema for creating or replacing a household member."""
    name: str
    color: str = DEFAULT_MEMBER_COLOR
    is_active: bool = True

    @field_validator('name', 'color')
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    def to_member(self, member_id: Optional[str] = None) -> HouseholdMember:
        return HouseholdMember(id=member_id, **self.model_dump())


class TemplateInput(BaseModel):
    """Schema for creating or replacing a weekly chore template."""
    title: str
    description: str = ""
    category: str = "other"
    estimated_duration: int = Field(30, ge=0, le=24 * 60)
    priority: str = Field("medium", pattern=PRIORITY_PATTERN)

    @field_validator('title', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    def to_template(self, template_id: Optional[str] = None) -> WeeklyChoreTemplate:
        return WeeklyChoreTemplate(id=template_id, **self.model_dump())
