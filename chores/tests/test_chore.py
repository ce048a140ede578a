import unittest
from datetime import datetime, timezone
from chores.domain.Chore import Chore, parse_timestamp
from chores.domain.HouseholdMember import HouseholdMember
from chores.domain.WeeklyChoreTemplate import WeeklyChoreTemplate


class TestChore(unittest.TestCase):

    def test_ids_are_generated_and_unique(self):
        a = Chore("Wash Dishes")
        b = Chore("Wash Dishes")
        self.assertTrue(a.id)
        self.assertNotEqual(a.id, b.id)

    def test_display_metadata(self):
        chore = Chore("Vacuum", priority="high", category="living_room")
        self.assertEqual(chore.priority_color, "red")
        self.assertEqual(chore.category_label, "Living Room")
        self.assertEqual(chore.category_icon, "sofa.fill")
        # open-set category still gets a readable label and the fallback icon
        garage = Chore("Sweep", category="garage_storage")
        self.assertEqual(garage.category_label, "Garage Storage")
        self.assertEqual(garage.category_icon, "ellipsis.circle.fill")

    def test_is_overdue_only_when_pending_and_past_due(self):
        now = datetime(2026, 10, 14, 12, 0)
        late = Chore("Trash", due_date=datetime(2026, 10, 14, 11, 0))
        done = Chore("Trash", due_date=datetime(2026, 10, 14, 11, 0), is_completed=True)
        exact = Chore("Trash", due_date=now)
        self.assertTrue(late.is_overdue(now))
        self.assertFalse(done.is_overdue(now))
        self.assertFalse(exact.is_overdue(now))

    def test_from_dict_ignores_unknown_keys_and_bad_values(self):
        chore = Chore.from_dict({
            "id": "abc",
            "title": "Mow Lawn",
            "due_date": "not a date",
            "week_number": "42",
            "is_weekly_chore": 1,
            "colour": "green",
        })
        self.assertEqual(chore.id, "abc")
        self.assertEqual(chore.week_number, 42)
        self.assertTrue(chore.is_weekly_chore)
        self.assertIsInstance(chore.due_date, datetime)

    def test_to_dict_uses_iso_timestamps(self):
        chore = Chore("Laundry", due_date=datetime(2026, 10, 18, 9, 30), created_at=datetime(2026, 10, 14, 8, 0))
        data = chore.to_dict()
        self.assertEqual(data["due_date"], "2026-10-18T09:30:00")
        self.assertEqual(data["created_at"], "2026-10-14T08:00:00")
        self.assertEqual(Chore.from_dict(data), chore)

    def test_from_dict_null_fields_take_defaults(self):
        chore = Chore.from_dict({"id": "a", "title": None, "category": None, "priority": None,
                                 "assigned_to": None, "is_completed": None})
        self.assertEqual(chore.id, "a")
        self.assertEqual(chore.title, "")
        self.assertEqual(chore.category, "other")
        self.assertEqual(chore.category_label, "Other")
        self.assertEqual(chore.priority_color, "orange")
        self.assertFalse(chore.is_completed)

    def test_unknown_category_label(self):
        self.assertEqual(Chore("Fix Bike", category="garage_work").category_label, "Garage Work")

    def test_offset_timestamps_become_naive_local_time(self):
        utc_nine = datetime(2026, 10, 11, 9, 0, tzinfo=timezone.utc)
        expected = utc_nine.astimezone().replace(tzinfo=None)
        self.assertEqual(parse_timestamp("2026-10-11T09:00:00Z"), expected)
        self.assertEqual(parse_timestamp("2026-10-11T09:00:00+00:00"), expected)
        self.assertEqual(parse_timestamp(utc_nine), expected)
        self.assertEqual(parse_timestamp("2026-10-11T09:00:00"), datetime(2026, 10, 11, 9, 0))
        self.assertIsNone(parse_timestamp("next tuesday"))

        chore = Chore.from_dict({"title": "Trash", "due_date": "2026-10-11T09:00:00Z"})
        self.assertIsNone(chore.due_date.tzinfo)
        self.assertTrue(chore.is_overdue(datetime(2026, 10, 20)))


class TestMemberAndTemplate(unittest.TestCase):

    def test_member_defaults_to_active(self):
        member = HouseholdMember.from_dict({"name": "Mom"})
        self.assertTrue(member.is_active)
        self.assertEqual(member.name, "Mom")

    def test_template_duration_is_coerced(self):
        template = WeeklyChoreTemplate.from_dict({"title": "Clean Bathroom", "estimated_duration": "45"})
        self.assertEqual(template.estimated_duration, 45)
        self.assertEqual(template.priority, "medium")

    def test_null_fields_take_defaults(self):
        template = WeeklyChoreTemplate.from_dict({"title": None, "category": None, "priority": None,
                                                  "estimated_duration": None})
        self.assertEqual(template.title, "")
        self.assertEqual(template.category, "other")
        self.assertEqual(template.priority, "medium")
        self.assertEqual(template.estimated_duration, 30)
        member = HouseholdMember.from_dict({"name": None, "color": None, "is_active": None})
        self.assertEqual(member.name, "")
        self.assertEqual(member.color, "blue")
        self.assertTrue(member.is_active)


if __name__ == '__main__':
    unittest.main()
