"""Sample household used to seed a fresh install and by the "reset to sample data" action."""
from datetime import datetime, timedelta
from typing import Optional

from chores.domain.Chore import Chore
from chores.domain.Household import Household
from chores.domain.HouseholdMember import HouseholdMember
from chores.domain.WeeklyChoreTemplate import WeeklyChoreTemplate


def build_sample_household(now: Optional[datetime] = None) -> Household:
    now = now or datetime.now()
    members = [
        HouseholdMember("Mom", color="purple"),
        HouseholdMember("Dad", color="blue"),
        HouseholdMember("Teen", color="green"),
        HouseholdMember("Child", color="orange"),
    ]
    chores = [
        Chore("Wash Dishes", "Clean all dishes and put them away", "Mom",
              due_date=now + timedelta(hours=1), priority="medium", category="kitchen", created_at=now),
        Chore("Vacuum Living Room", "Vacuum the entire living room area", "Dad",
              due_date=now + timedelta(hours=2), priority="low", category="living_room", created_at=now),
        Chore("Take Out Trash", "Empty all trash bins and take to curb", "Teen",
              due_date=now - timedelta(hours=1), priority="high", category="other", created_at=now),
        Chore("Do Laundry", "Wash, dry, and fold all dirty clothes", "Mom",
              due_date=now + timedelta(hours=3), priority="medium", is_completed=True,
              category="laundry", created_at=now),
    ]
    templates = [
        WeeklyChoreTemplate("Clean Bathroom", "Scrub sink, toilet and shower", "bathroom", 45, "high"),
        WeeklyChoreTemplate("Mow Lawn", "Mow front and back yard", "outdoor", 60, "medium"),
        WeeklyChoreTemplate("Change Bed Sheets", "Strip and remake all beds", "bedroom", 30, "medium"),
        WeeklyChoreTemplate("Mop Kitchen Floor", "Sweep and mop the kitchen", "kitchen", 20, "low"),
        WeeklyChoreTemplate("Dust Living Room", "Dust shelves, TV stand and tables", "living_room", 20, "low"),
        WeeklyChoreTemplate("Fold Laundry", "Fold and put away clean clothes", "laundry", 30, "medium"),
    ]
    return Household(chores=chores, household_members=members, weekly_chore_templates=templates)


def reset_to_sample_data(household: Household, now: Optional[datetime] = None) -> Household:
    """Replace the household's whole state with the sample data (publishes household.reset)."""
    return household.load_snapshot(build_sample_household(now))
