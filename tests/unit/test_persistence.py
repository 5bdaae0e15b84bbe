"""
Unit tests for snapshot serialization and the persistence gateways.
"""

import json

import pytest
from pydantic import ValidationError

from tracker.core.confidence import Confidence
from tracker.persistence.gateway import InMemoryGateway
from tracker.persistence.json_store import JsonFileGateway
from tracker.persistence.snapshot import dump_store, load_store
from tracker.study.mastery_store import MasteryStore


class TestSnapshot:
    def test_wire_shape_uses_fixed_keys(self, sample_store):
        data = dump_store(sample_store)

        assert set(data) == {"subjects", "highlightMode"}
        assert set(data["subjects"][0]) == {"id", "name", "dotPoints"}
        assert data["subjects"][0]["dotPoints"][0] == {
            "id": "bio-1",
            "text": "Describe DNA structure",
            "confidence": "Unseen",
        }
        assert data["subjects"][1]["dotPoints"][0]["confidence"] == "Exam-ready"

    def test_round_trip_preserves_ids_text_confidence_and_order(self, sample_store):
        sample_store.highlight_mode = True
        restored = load_store(json.loads(json.dumps(dump_store(sample_store))))

        assert restored == sample_store
        assert restored.subjects[0].dot_points[2].confidence is Confidence.LEARNING

    def test_unknown_confidence_is_rejected(self):
        with pytest.raises(ValidationError):
            load_store({"subjects": [{"id": "s", "name": "S", "dotPoints": [
                {"id": "d", "text": "t", "confidence": "memorised-ish"}
            ]}]})

    def test_missing_highlight_mode_defaults_off(self):
        store = load_store({"subjects": []})
        assert store.highlight_mode is False


class TestJsonFileGateway:
    def test_missing_file_loads_none(self, tmp_path):
        assert JsonFileGateway(tmp_path / "absent.json").load() is None

    def test_save_then_load(self, tmp_path, sample_store):
        gateway = JsonFileGateway(tmp_path / "nested" / "tracker.json")

        result = gateway.save(sample_store)

        assert result.ok
        assert gateway.load() == sample_store
        assert not (tmp_path / "nested" / "tracker.json.tmp").exists()

    @pytest.mark.parametrize(
        "content",
        [b"{not json", b"[]", b'{"subjects": "nope"}', b"", b"\xff\xfe", b'{"subjects": [{"id": "\xff"}]}'],
    )
    def test_corrupt_file_loads_none(self, tmp_path, content):
        path = tmp_path / "tracker.json"
        path.write_bytes(content)
        assert JsonFileGateway(path).load() is None

    def test_corrupt_file_is_replaced_by_default_state(self, tmp_path):
        path = tmp_path / "tracker.json"
        path.write_text("{not json", encoding="utf-8")

        store = MasteryStore.open(JsonFileGateway(path), default_subject_count=6)

        assert len(store.subjects) == 6
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert [s["name"] for s in saved["subjects"]][:2] == ["Subject 1", "Subject 2"]

    def test_write_failure_is_reported_not_raised(self, tmp_path, sample_store):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        gateway = JsonFileGateway(blocker / "tracker.json")

        result = gateway.save(sample_store)

        assert result.ok is False
        assert result.error

    def test_non_utf8_snapshot_falls_back_to_default_state(self, tmp_path):
        path = tmp_path / "tracker.json"
        path.write_bytes(b'{"subjects": [{"id": "\xff\xfe", "name": "S", "dotPoints": []}]}')

        store = MasteryStore.open(JsonFileGateway(path), default_subject_count=6)

        assert [s.name for s in store.subjects] == [f"Subject {i}" for i in range(1, 7)]
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["subjects"][0]["name"] == "Subject 1"


class TestInMemoryGateway:
    def test_snapshot_is_isolated_from_later_mutations(self, sample_store):
        gateway = InMemoryGateway()
        gateway.save(sample_store)
        sample_store.subjects[0].name = "Changed"

        assert gateway.load().subjects[0].name == "Biology"

    def test_reopening_restores_saved_session(self):
        gateway = InMemoryGateway()
        first = MasteryStore.open(gateway, default_subject_count=2)
        subject_id = first.subjects[0].id
        dp = first.add_dot_point(subject_id, "Describe DNA").dot_point
        first.set_confidence(subject_id, dp.id, Confidence.MEMORISED)

        second = MasteryStore.open(gateway, default_subject_count=2)

        assert second.state == first.state
