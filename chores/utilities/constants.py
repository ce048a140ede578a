from typing import Final

PRIORITY_LOW: Final[str] = "low"
PRIORITY_MEDIUM: Final[str] = "medium"
PRIORITY_HIGH: Final[str] = "high"
PRIORITIES: Final[list[str]] = [PRIORITY_LOW, PRIORITY_MEDIUM, PRIORITY_HIGH]
PRIORITY_COLORS: Final[dict[str, str]] = {
    PRIORITY_LOW: "green",
    PRIORITY_MEDIUM: "orange",
    PRIORITY_HIGH: "red",
}

# Category is an open set: these are the values offered and counted by default.
CATEGORIES: Final[list[str]] = [
    "kitchen", "bathroom", "living_room", "bedroom", "laundry", "outdoor", "other"
]
CATEGORY_LABELS: Final[dict[str, str]] = {
    "kitchen": "Kitchen",
    "bathroom": "Bathroom",
    "living_room": "Living Room",
    "bedroom": "Bedroom",
    "laundry": "Laundry",
    "outdoor": "Outdoor",
    "other": "Other",
}
CATEGORY_ICONS: Final[dict[str, str]] = {
    "kitchen": "house.fill",
    "bathroom": "drop.fill",
    "living_room": "sofa.fill",
    "bedroom": "bed.double.fill",
    "laundry": "washer.fill",
    "outdoor": "leaf.fill",
    "other": "ellipsis.circle.fill",
}

DEFAULT_MEMBER_COLOR: Final[str] = "blue"

CHORE_FILTERS: Final[list[str]] = [
    "all", "pending", "completed", "overdue", "weekly", "completed_weekly", "manual"
]
