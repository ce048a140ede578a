import unittest
from datetime import datetime, timedelta
from chores.domain.Chore import Chore
from chores.domain.Household import Household
from chores.domain.HouseholdMember import HouseholdMember
from chores.events.Event_Bus import EventBus
from chores.logic.reporting.queries import (
    pending_chores, completed_chores, overdue_chores, weekly_chores, completed_weekly_chores,
    manual_chores, active_members, category_counts, search_chores, filter_chores,
    overview_stats, chores_by_member,
)
from chores.utilities.constants import CATEGORIES

NOW = datetime(2026, 10, 14, 12, 0)


class TestQueries(unittest.TestCase):

    def setUp(self):
        self.household = Household().set_event_bus(EventBus())
        self.household.add_household_member(HouseholdMember("Mom"))
        self.household.add_household_member(HouseholdMember("Dad", is_active=False))
        self.household.add_household_member(HouseholdMember("Teen"))
        chores = [
            Chore("Wash Dishes", "Clean all dishes", "Mom", NOW + timedelta(hours=1), category="kitchen"),
            Chore("Take Out Trash", "Empty bins", "Teen", NOW - timedelta(hours=1), priority="high"),
            Chore("Do Laundry", "Wash and fold", "Mom", NOW - timedelta(days=1), is_completed=True,
                  category="laundry"),
            Chore("Clean Bathroom", "Scrub the tub", "Teen", NOW + timedelta(days=4), category="bathroom",
                  is_weekly_chore=True, week_number=42),
            Chore("Mow Lawn", "Front yard", "Mom", NOW - timedelta(days=2), category="outdoor",
                  is_weekly_chore=True, week_number=42, is_completed=True),
            Chore("Fix Bike", "Garage job", "Teen", NOW + timedelta(days=1), category="garage"),
        ]
        for c in chores:
            self.household.add_chore(c)

    def _titles(self, chores):
        return sorted(c.title for c in chores)

    def test_pending_and_completed_partition_all_chores(self):
        pending = {c.id for c in pending_chores(self.household)}
        completed = {c.id for c in completed_chores(self.household)}
        everything = {c.id for c in self.household.chores}
        self.assertFalse(pending & completed)
        self.assertEqual(pending | completed, everything)

    def test_overdue_is_subset_of_pending(self):
        overdue = overdue_chores(self.household, NOW)
        self.assertEqual(self._titles(overdue), ["Take Out Trash"])
        pending_ids = {c.id for c in pending_chores(self.household)}
        self.assertTrue({c.id for c in overdue} <= pending_ids)

    def test_weekly_and_manual_views(self):
        self.assertEqual(self._titles(weekly_chores(self.household)), ["Clean Bathroom", "Mow Lawn"])
        self.assertEqual(self._titles(completed_weekly_chores(self.household)), ["Mow Lawn"])
        self.assertEqual(len(manual_chores(self.household)), 4)

    def test_active_members(self):
        self.assertEqual([m.name for m in active_members(self.household)], ["Mom", "Teen"])

    def test_category_counts_include_zero_and_open_set(self):
        counts = category_counts(self.household)
        for cat in CATEGORIES:
            self.assertIn(cat, counts)
        self.assertEqual(counts["kitchen"], 1)
        self.assertEqual(counts["bedroom"], 0)
        self.assertEqual(counts["other"], 1)
        self.assertEqual(counts["garage"], 1)
        self.assertEqual(sum(counts.values()), len(self.household.chores))

    def test_views_follow_latest_mutation(self):
        trash = next(c for c in self.household.chores if c.title == "Take Out Trash")
        self.household.toggle_completion(trash.id)
        self.assertEqual(overdue_chores(self.household, NOW), [])
        self.assertIn("Take Out Trash", self._titles(completed_chores(self.household)))

    def test_search_is_case_insensitive_over_title_description_assignee(self):
        chores = self.household.chores
        self.assertEqual(self._titles(search_chores(chores, "DISH")), ["Wash Dishes"])
        self.assertEqual(self._titles(search_chores(chores, "fold")), ["Do Laundry"])
        self.assertEqual(len(search_chores(chores, "teen")), 3)
        self.assertEqual(len(search_chores(chores, "  ")), len(chores))

    def test_filter_chores(self):
        self.assertEqual(self._titles(filter_chores(self.household, "overdue", now=NOW)), ["Take Out Trash"])
        self.assertEqual(self._titles(filter_chores(self.household, "weekly", "lawn")), ["Mow Lawn"])
        self.assertEqual(len(filter_chores(self.household)), 6)
        with self.assertRaises(ValueError):
            filter_chores(self.household, "someday")

    def test_overview_stats(self):
        stats = overview_stats(self.household, NOW)
        self.assertEqual(stats["total"], 6)
        self.assertEqual(stats["completed"], 2)
        self.assertEqual(stats["pending"], 4)
        self.assertEqual(stats["overdue"], 1)
        self.assertEqual(stats["weekly"], 2)
        self.assertEqual(stats["manual"], 4)
        self.assertNotIn("bedroom", stats["categories"])
        self.assertEqual(stats["by_member"], {"Mom": 1, "Dad": 0, "Teen": 3})

    def test_chores_by_member_lists_unknown_assignees(self):
        self.household.add_chore(Chore("Walk Dog", assigned_to="Grandma"))
        self.assertEqual(chores_by_member(self.household)["Grandma"], 1)


if __name__ == '__main__':
    unittest.main()
