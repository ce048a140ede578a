"""HouseholdMember domain entity: a person chores can be assigned to (by display name)."""
from typing import Optional

from chores.domain.Chore import new_id
from chores.utilities.constants import DEFAULT_MEMBER_COLOR


class HouseholdMember:
    def __init__(self, name: str = "", color: str = DEFAULT_MEMBER_COLOR, is_active: bool = True,
                 id: Optional[str] = None):
        self.id = id or new_id()
        self.name = name
        self.color = color
        self.is_active = is_active

    def __eq__(self, other) -> bool:
        if not isinstance(other, HouseholdMember):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.name} ({self.color}){'' if self.is_active else ' - inactive'}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "color", "is_active"}
        filtered = {k: v for k, v in d.items() if k in allowed and v is not None}
        filtered["is_active"] = bool(filtered.get("is_active", True))
        return HouseholdMember(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "is_active": self.is_active,
        }
