"""WeeklyChoreTemplate domain entity: what recurs every week (not when, not to whom)."""
from typing import Optional

from chores.domain.Chore import new_id
from chores.utilities.constants import PRIORITY_MEDIUM


class WeeklyChoreTemplate:
    def __init__(self, title: str = "", description: str = "", category: str = "other",
                 estimated_duration: int = 30, priority: str = PRIORITY_MEDIUM,
                 id: Optional[str] = None):
        self.id = id or new_id()
        self.title = title
        self.description = description
        self.category = category
        self.estimated_duration = estimated_duration  # minutes
        self.priority = priority

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeeklyChoreTemplate):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.title} - {self.category} - {self.estimated_duration} min - {self.priority}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "title", "description", "category", "estimated_duration", "priority"}
        # null values fall back to the constructor defaults
        filtered = {k: v for k, v in d.items() if k in allowed and v is not None}
        try:
            filtered["estimated_duration"] = int(filtered.get("estimated_duration", 30))
        except (TypeError, ValueError):
            filtered["estimated_duration"] = 0
        return WeeklyChoreTemplate(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "estimated_duration": self.estimated_duration,
            "priority": self.priority,
        }
