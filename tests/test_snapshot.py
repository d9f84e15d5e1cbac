"""Tests for src.core.snapshot — export/import across all modules."""

import json

import pytest

from src.core.snapshot import Dashboard
from src.data.models import EventForm, TransactionForm

FIELDS = ["tasks", "notes", "habits", "goals", "health", "tx", "events", "journal"]


@pytest.fixture
def populated(dashboard):
    dashboard.tasks.add("Pay rent")
    dashboard.notes.add("Idea")
    dashboard.habits.toggle_today(dashboard.habits.items[0].id)
    goal = dashboard.goals.add("Save")
    dashboard.goals.set_progress(goal.id, "40")
    dashboard.health.update("weight", "70")
    dashboard.finance.add(TransactionForm(type="income", amount="2000"))
    dashboard.events.add(EventForm(title="Dentist", time="16:00"))
    dashboard.journal.set_text("Good day")
    return dashboard


def _stored(kv):
    return {key: kv.get(key) for key in kv.keys()}


class TestExport:
    def test_has_exactly_eight_fields(self, populated):
        assert list(populated.export_snapshot()) == FIELDS

    def test_is_json_serializable(self, populated):
        doc = json.loads(json.dumps(populated.export_snapshot()))
        assert doc["tasks"][0]["text"] == "Pay rent"
        assert doc["tx"][0]["amount"] == 2000
        assert doc["journal"] == {"2024-03-15": "Good day"}

    def test_no_side_effects(self, populated, kv):
        before = _stored(kv)
        populated.export_snapshot()
        assert _stored(kv) == before

    def test_is_a_clone(self, populated):
        doc = populated.export_snapshot()
        doc["tasks"][0]["text"] = "changed"
        doc["journal"]["2024-03-15"] = "changed"
        assert populated.tasks.items[0].text == "Pay rent"
        assert populated.journal.text_for() == "Good day"


class TestImport:
    def test_round_trip_is_identity(self, populated, kv):
        before_state = populated.export_snapshot()
        before_disk = _stored(kv)
        assert populated.import_snapshot(populated.export_snapshot()) is True
        assert populated.export_snapshot() == before_state
        assert {k: json.loads(v) for k, v in _stored(kv).items()} == {
            k: json.loads(v) for k, v in before_disk.items()
        }

    def test_round_trip_into_fresh_dashboard(self, populated, clock):
        from src.adapters.memory_store import MemoryKeyValueStore
        other = Dashboard(MemoryKeyValueStore(), clock=clock)
        other.import_json(json.dumps(populated.export_snapshot()))
        assert other.export_snapshot() == populated.export_snapshot()

    def test_partial_import_replaces_only_tasks(self, populated):
        before = populated.export_snapshot()
        incoming = [{"id": "new1", "text": "Imported", "done": True, "createdAt": 1}]
        assert populated.import_snapshot({"tasks": incoming}) is True
        after = populated.export_snapshot()
        assert after["tasks"] == incoming
        for field in FIELDS[1:]:
            assert after[field] == before[field]

    def test_import_persists(self, populated, kv, clock):
        populated.import_snapshot({"journal": {"2020-01-01": "old"}})
        assert Dashboard(kv, clock=clock).journal.items == {"2020-01-01": "old"}

    def test_empty_collection_replaces(self, populated):
        populated.import_snapshot({"habits": []})
        assert populated.habits.items == []

    def test_null_field_treated_as_absent(self, populated):
        before = populated.export_snapshot()
        assert populated.import_snapshot({"tasks": None}) is True
        assert populated.export_snapshot() == before

    def test_unknown_fields_ignored(self, populated):
        before = populated.export_snapshot()
        assert populated.import_snapshot({"version": 2}) is True
        assert populated.export_snapshot() == before

    def test_imported_value_is_copied(self, populated):
        incoming = {"2024-01-01": "x"}
        populated.import_snapshot({"journal": incoming})
        incoming["2024-01-01"] = "mutated"
        assert populated.journal.text_for("2024-01-01") == "x"

    @pytest.mark.parametrize("text", [
        "not json", "", "[1, 2, 3]", '"tasks"', "42", "null", '{"tasks": [',
    ])
    def test_malformed_text_changes_nothing(self, populated, kv, text):
        before_state = populated.export_snapshot()
        before_disk = _stored(kv)
        assert populated.import_json(text) is False
        assert populated.export_snapshot() == before_state
        assert _stored(kv) == before_disk

    def test_bad_field_skipped_others_applied(self, populated, kv):
        before = populated.export_snapshot()
        before_goals_on_disk = kv.get("life:goals")
        doc = {"tasks": [], "notes": [], "goals": "not a list"}
        assert populated.import_snapshot(doc) is True
        assert populated.tasks.items == []
        assert populated.notes.items == []
        assert populated.export_snapshot()["goals"] == before["goals"]
        assert kv.get("life:goals") == before_goals_on_disk

    @pytest.mark.parametrize("blank", ["", 0, False])
    def test_blank_scalar_field_treated_as_absent(self, populated, blank):
        before = populated.export_snapshot()
        incoming = [{"id": "t1", "text": "Imported", "done": False, "createdAt": 1}]
        assert populated.import_snapshot({"tasks": incoming, "journal": blank}) is True
        assert [t.text for t in populated.tasks.items] == ["Imported"]
        assert populated.export_snapshot()["journal"] == before["journal"]

    def test_empty_map_still_replaces(self, populated):
        populated.import_snapshot({"journal": {}})
        assert populated.journal.items == {}
