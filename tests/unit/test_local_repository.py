"""Unit tests for the JSON file repository (init, fail-open load, atomic save)."""
import json
import sys

import pytest

from api.repositories.local import LocalFileRepository
from turno.document import Document


def _sample_document() -> Document:
    return Document(
        missions=[
            {"id": "m-2", "timestamp": "2025-01-02T00:00:00.000Z", "status": "done", "crew": ["x"]},
            {"id": "m-1", "timestamp": "2025-01-01T00:00:00.000Z", "status": "pending", "name": "Éclaireur"},
        ],
        used_combinations={"red|north": True, "blue|south": {"count": 2}},
    )


class TestEnsureInitialized:

    def test_creates_empty_document(self, repository, data_file):
        repository.ensure_initialized()
        assert json.loads(data_file.read_text(encoding="utf-8")) == {"missions": [], "usedCombinations": {}}

    def test_creates_parent_directories(self, tmp_path):
        repo = LocalFileRepository(tmp_path / "nested" / "dir" / "data.json")
        repo.ensure_initialized()
        assert (tmp_path / "nested" / "dir" / "data.json").exists()

    def test_is_idempotent_and_keeps_existing_content(self, repository, data_file):
        data_file.write_text("not even json", encoding="utf-8")
        repository.ensure_initialized()
        repository.ensure_initialized()
        assert data_file.read_text(encoding="utf-8") == "not even json"


class TestLoad:

    def test_missing_file_yields_empty_document(self, repository):
        assert repository.load() == Document()

    def test_corrupt_json_yields_empty_document(self, repository, data_file):
        data_file.write_text('{"missions": [{"id": "trunc', encoding="utf-8")
        assert repository.load() == Document()

    @pytest.mark.parametrize("content", ["[]", '"text"', '{"missions": {"id": 1}}', '{"missions": [1, 2]}'])
    def test_wrong_shape_yields_empty_document(self, repository, data_file, content):
        data_file.write_text(content, encoding="utf-8")
        assert repository.load() == Document()

    def test_missing_top_level_field_is_filled(self, repository, data_file):
        data_file.write_text('{"missions": [{"id": "a"}]}', encoding="utf-8")
        document = repository.load()
        assert document.missions == [{"id": "a"}]
        assert document.used_combinations == {}

    def test_deeply_nested_json_yields_empty_document(self, repository, data_file):
        data_file.write_text("[" * 100000, encoding="utf-8")
        assert repository.load() == Document()

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
    def test_oversized_integer_yields_empty_document(self, repository, data_file):
        data_file.write_text('{"missions": [{"id": "a", "n": ' + "9" * 5000 + "}]}", encoding="utf-8")
        assert repository.load() == Document()


class TestSave:

    def test_round_trip_preserves_everything(self, repository):
        document = _sample_document()
        repository.save(document)
        loaded = repository.load()
        assert loaded == document
        assert [m["id"] for m in loaded.missions] == ["m-2", "m-1"]
        assert list(loaded.missions[0].keys()) == ["id", "timestamp", "status", "crew"]

    def test_file_is_pretty_printed_with_on_disk_names(self, repository, data_file):
        repository.save(_sample_document())
        text = data_file.read_text(encoding="utf-8")
        assert '\n  "missions": [' in text
        assert '"usedCombinations"' in text
        assert "Éclaireur" in text

    def test_no_temp_file_left_behind(self, repository, data_file):
        repository.save(_sample_document())
        assert [p.name for p in data_file.parent.iterdir()] == [data_file.name]

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers_are_rejected(self, repository, data_file, value):
        repository.save(_sample_document())
        before = data_file.read_bytes()

        with pytest.raises(ValueError):
            repository.save(Document(missions=[{"id": "x", "v": value}]))

        assert data_file.read_bytes() == before
        assert [p.name for p in data_file.parent.iterdir()] == [data_file.name]

    def test_write_failure_propagates(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        repo = LocalFileRepository(blocker / "data.json")
        with pytest.raises(OSError):
            repo.save(_sample_document())


def test_describe_reports_path(repository, data_file):
    assert repository.describe() == {"data_file": str(data_file), "data_file_exists": False}
    repository.ensure_initialized()
    assert repository.describe()["data_file_exists"] is True
