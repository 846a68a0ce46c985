"""
Tests for the drawing history log.
"""

import json
from dataclasses import replace

import pytest

from sealring.exceptions import HistoryError
from sealring.history import DrawingHistory


def _numbered(record, n):
    return replace(record, metadata=replace(record.metadata, drawing_no=f"DWG-{n}"))


class TestDrawingHistory:
    """Tests for DrawingHistory."""

    def test_missing_file_is_empty(self, tmp_path):
        history = DrawingHistory(tmp_path / "history.json")
        assert history.entries() == []
        assert len(history) == 0

    def test_append_assigns_id(self, tmp_path, oring_record):
        history = DrawingHistory(tmp_path / "nested" / "history.json")
        stored = history.append(oring_record)
        assert stored.record_id.isdigit()
        assert oring_record.record_id == ""
        assert history.entries() == [stored]

    def test_newest_first(self, tmp_path, oring_record):
        history = DrawingHistory(tmp_path / "history.json")
        for n in range(3):
            history.append(_numbered(oring_record, n))
        assert [r.metadata.drawing_no for r in history.entries()] == ["DWG-2", "DWG-1", "DWG-0"]

    def test_unique_ids(self, tmp_path, oring_record):
        history = DrawingHistory(tmp_path / "history.json")
        ids = [history.append(oring_record).record_id for _ in range(5)]
        assert len(set(ids)) == 5

    def test_limit(self, tmp_path, oring_record):
        history = DrawingHistory(tmp_path / "history.json", limit=3)
        for n in range(5):
            history.append(_numbered(oring_record, n))
        assert len(history) == 3
        assert [r.metadata.drawing_no for r in history.entries()] == ["DWG-4", "DWG-3", "DWG-2"]

    def test_get(self, tmp_path, composite_record, oring_record):
        history = DrawingHistory(tmp_path / "history.json")
        stored = history.append(composite_record)
        history.append(oring_record)
        loaded = history.get(stored.record_id)
        assert loaded == stored
        assert loaded.backup_ring == composite_record.backup_ring

    def test_get_missing(self, tmp_path):
        with pytest.raises(HistoryError, match="No history entry"):
            DrawingHistory(tmp_path / "history.json").get("123")

    def test_get_corrupt_entry(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text(json.dumps([{"id": "1", "partType": "Gasket"}]), encoding="utf-8")
        with pytest.raises(HistoryError, match="corrupt"):
            DrawingHistory(path).get("1")

    def test_malformed_entry_skipped(self, tmp_path, oring_record):
        path = tmp_path / "history.json"
        valid = _numbered(oring_record, 2).with_id("2").to_dict()
        path.write_text(
            json.dumps([{"id": "1", "partType": "O-Ring", "oRingDims": [9.8, 1.9]}, valid]),
            encoding="utf-8",
        )
        entries = DrawingHistory(path).entries()
        assert [record.record_id for record in entries] == ["2"]
        assert entries[0].metadata.drawing_no == "DWG-2"

    def test_corrupt_file_treated_as_empty(self, tmp_path, oring_record):
        path = tmp_path / "history.json"
        path.write_text("{not json", encoding="utf-8")
        history = DrawingHistory(path)
        assert history.entries() == []
        history.append(oring_record)
        assert len(history) == 1

    def test_camel_case_layout(self, tmp_path, bias_cut_record):
        path = tmp_path / "history.json"
        DrawingHistory(path).append(bias_cut_record)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["partNo"] == "BR-T1-001"
        assert data[0]["backupRingDims"]["shape"] == "Bias Cut"
