"""Tests for src.core.events and src.core.journal."""

import json

from src.core.events import Events
from src.core.journal import Journal
from src.data.models import EventForm

from conftest import TODAY


class TestEvents:
    def test_add_defaults_date_to_today(self, kv, clock):
        event = Events(kv, clock).add(EventForm(title=" Dentist ", time="16:00"))
        assert event.title == "Dentist"
        assert event.date == TODAY
        assert event.time == "16:00"
        assert event.note == ""

    def test_add_explicit_date(self, kv, clock):
        event = Events(kv, clock).add(EventForm(title="Trip", date="2024-04-01"))
        assert event.date == "2024-04-01"

    def test_title_required(self, kv, clock):
        events = Events(kv, clock)
        assert events.add(EventForm(title="   ", note="orphan")) is None
        assert events.items == []

    def test_on_day_sorted_by_time(self, kv, clock):
        events = Events(kv, clock)
        events.add(EventForm(title="Lunch", time="12:30"))
        events.add(EventForm(title="Standup", time="09:00"))
        events.add(EventForm(title="Elsewhere", date="2024-03-16", time="08:00"))
        assert [e.title for e in events.on_day()] == ["Standup", "Lunch"]

    def test_remove(self, kv, clock):
        events = Events(kv, clock)
        event = events.add(EventForm(title="x"))
        events.remove(event.id)
        assert json.loads(kv.get("life:events")) == []


class TestJournal:
    def test_empty_day(self, kv, clock):
        assert Journal(kv, clock).text_for() == ""

    def test_set_today_overwrites_wholesale(self, kv, clock):
        journal = Journal(kv, clock)
        journal.set_text("Dear diary")
        journal.set_text("Dear")
        assert journal.text_for() == "Dear"
        assert json.loads(kv.get("life:journal")) == {TODAY: "Dear"}

    def test_other_days_kept(self, kv, clock):
        journal = Journal(kv, clock)
        journal.set_text("old", day="2024-03-01")
        journal.set_text("new")
        assert journal.text_for("2024-03-01") == "old"
        assert journal.items == {"2024-03-01": "old", TODAY: "new"}

    def test_corrupt_storage_falls_back(self, kv, clock):
        kv.set("life:journal", json.dumps(["not", "a", "map"]))
        assert Journal(kv, clock).items == {}

    def test_items_is_a_copy(self, kv, clock):
        journal = Journal(kv, clock)
        journal.set_text("hello")
        journal.items[TODAY] = "tampered"
        assert journal.text_for() == "hello"
