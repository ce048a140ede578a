"""Chore domain entity: title, assignee, due date, priority, category, completion and weekly origin."""
from datetime import datetime
from typing import Optional
from uuid import uuid4

from chores.utilities.constants import (
    PRIORITY_MEDIUM, PRIORITY_COLORS, CATEGORY_LABELS, CATEGORY_ICONS
)


def new_id() -> str:
    return str(uuid4())


def parse_timestamp(value) -> Optional[datetime]:
    '''Parse an ISO-8601 string (or pass through a datetime) as naive local time.

    Offsets, including a trailing "Z", are converted to local time and dropped.
    Returns None when unparseable.
    '''
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text) if text else None
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if isinstance(value, datetime) else None


class Chore:
    def __init__(self, title: str = "", description: str = "", assigned_to: str = "",
                 due_date: Optional[datetime] = None, priority: str = PRIORITY_MEDIUM,
                 is_completed: bool = False, category: str = "other",
                 created_at: Optional[datetime] = None, is_weekly_chore: bool = False,
                 week_number: Optional[int] = None, id: Optional[str] = None):
        now = datetime.now()
        self.id = id or new_id()
        self.title = title
        self.description = description
        self.assigned_to = assigned_to
        self.due_date = due_date or now
        self.priority = priority
        self.is_completed = is_completed
        self.category = category
        self.created_at = created_at or now
        self.is_weekly_chore = is_weekly_chore
        self.week_number = week_number

    @property
    def priority_color(self) -> str:
        return PRIORITY_COLORS.get(self.priority, "gray")

    @property
    def category_label(self) -> str:
        label = CATEGORY_LABELS.get(self.category)
        if label is None:
            label = str(self.category or "other").replace("_", " ").title()
        return label

    @property
    def category_icon(self) -> str:
        return CATEGORY_ICONS.get(self.category, CATEGORY_ICONS["other"])

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        return not self.is_completed and self.due_date < (now or datetime.now())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chore):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __str__(self) -> str:
        status = "done" if self.is_completed else "pending"
        origin = f" - Week {self.week_number}" if self.is_weekly_chore else ""
        return (f"{self.title} - {self.assigned_to} - Due: {self.due_date.strftime('%d.%m.%Y %H:%M')}"
                f" - {self.priority} - {self.category_label} - {status}{origin}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Chore from a dictionary. Ignores unknown keys; nulls and bad timestamps fall back to the defaults.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "title", "description", "assigned_to", "due_date", "priority", "is_completed",
                   "category", "created_at", "is_weekly_chore", "week_number"}
        filtered = {k: v for k, v in d.items() if k in allowed and v is not None}
        filtered["due_date"] = parse_timestamp(filtered.get("due_date"))
        filtered["created_at"] = parse_timestamp(filtered.get("created_at"))
        filtered["is_completed"] = bool(filtered.get("is_completed", False))
        filtered["is_weekly_chore"] = bool(filtered.get("is_weekly_chore", False))
        week = filtered.get("week_number")
        try:
            filtered["week_number"] = int(week) if week is not None else None
        except (TypeError, ValueError):
            filtered["week_number"] = None
        return Chore(**filtered)

    def to_dict(self):
        '''Converts the Chore to a JSON-serializable dictionary.'''
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "assigned_to": self.assigned_to,
            "due_date": format_timestamp(self.due_date),
            "priority": self.priority,
            "is_completed": self.is_completed,
            "category": self.category,
            "created_at": format_timestamp(self.created_at),
            "is_weekly_chore": self.is_weekly_chore,
            "week_number": self.week_number,
        }
