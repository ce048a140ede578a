import unittest
from chores.domain.Chore import Chore
from chores.domain.Household import Household
from chores.domain.HouseholdMember import HouseholdMember
from chores.events.Event_Bus import EventBus, CHORE_ADDED, MEMBER_REMOVED
from chores.events.web_observers import EventLog, MAX_EVENTS
from chores.infra.sample_data import build_sample_household, reset_to_sample_data


class TestEventBus(unittest.TestCase):

    def test_failing_subscriber_does_not_stop_delivery(self):
        bus = EventBus()
        received = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe(CHORE_ADDED, broken)
        bus.subscribe(CHORE_ADDED, lambda n, p: received.append(p))
        bus.publish(CHORE_ADDED, {"x": 1})
        self.assertEqual(received, [{"x": 1}])

    def test_subscribe_is_idempotent_and_unsubscribe_is_lenient(self):
        bus = EventBus()
        received = []
        cb = lambda n, p: received.append(n)
        bus.subscribe(CHORE_ADDED, cb)
        bus.subscribe(CHORE_ADDED, cb)
        bus.publish(CHORE_ADDED, None)
        self.assertEqual(received, [CHORE_ADDED])
        bus.unsubscribe(CHORE_ADDED, cb)
        bus.unsubscribe(CHORE_ADDED, cb)
        bus.publish(CHORE_ADDED, None)
        self.assertEqual(received, [CHORE_ADDED])


class TestEventLog(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.log = EventLog().attach(self.bus)
        self.household = Household().set_event_bus(self.bus)

    def tearDown(self):
        self.log.detach()

    def test_records_changes_with_cursor(self):
        self.household.add_chore(Chore("Wash Dishes"))
        first = self.log.get_events()
        self.assertEqual(len(first["events"]), 1)
        self.assertEqual(first["events"][0]["type"], CHORE_ADDED)
        self.assertEqual(first["events"][0]["name"], "Wash Dishes")

        mike = HouseholdMember("Mike")
        self.household.add_household_member(mike)
        self.household.add_chore(Chore("Mow Lawn", assigned_to="Mike"))
        self.household.remove_household_member(mike)
        newer = self.log.get_events(since=first["next_cursor"])
        self.assertEqual([e["type"] for e in newer["events"]][-1], MEMBER_REMOVED)
        self.assertEqual(newer["events"][-1]["removed_chores"], 1)
        self.assertEqual(self.log.get_events(since=newer["next_cursor"])["events"], [])

    def test_buffer_is_capped(self):
        for i in range(MAX_EVENTS + 5):
            self.household.add_chore(Chore(f"Chore {i}"))
        self.assertEqual(len(self.log.get_events()["events"]), MAX_EVENTS)

    def test_logs_on_separate_buses_stay_separate(self):
        other_bus = EventBus()
        other_log = EventLog().attach(other_bus)
        other = Household().set_event_bus(other_bus)
        self.household.add_chore(Chore("Only here"))
        other.add_chore(Chore("Only there"))
        self.assertEqual([e["name"] for e in self.log.get_events()["events"]], ["Only here"])
        self.assertEqual([e["name"] for e in other_log.get_events()["events"]], ["Only there"])

    def test_detach_stops_recording(self):
        self.log.detach()
        self.household.add_chore(Chore("Unseen"))
        self.assertEqual(self.log.get_events()["events"], [])


class TestSampleData(unittest.TestCase):

    def test_sample_household_contents(self):
        household = build_sample_household()
        self.assertEqual([m.name for m in household.household_members], ["Mom", "Dad", "Teen", "Child"])
        self.assertEqual(len(household.chores), 4)
        self.assertEqual(len(household.weekly_chore_templates), 6)

    def test_reset_replaces_state(self):
        household = Household().set_event_bus(EventBus())
        household.add_chore(Chore("Leftover"))
        reset_to_sample_data(household)
        self.assertNotIn("Leftover", [c.title for c in household.chores])
        self.assertEqual(len(household.chores), 4)
        self.assertIsNone(household.last_distribution_date)


if __name__ == '__main__':
    unittest.main()
