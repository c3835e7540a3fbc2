import json
from pathlib import Path

import pytest

from sbom_compliance.checks import CheckKind
from sbom_compliance.database import (
    CheckRecord,
    CheckResultsError,
    InMemoryCheckDatabase,
    SQLiteCheckDatabase,
    load_check_results,
)


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "results.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_sqlite_database_preserves_insertion_order(sample_records) -> None:
    with SQLiteCheckDatabase() as database:
        database.add_records(sample_records)

        assert database.all_element_ids() == ["doc", "pkg:npm/lodash@4.17.21"]
        assert database.records_for("doc") == sample_records[:2]
        assert database.all_records() == sample_records
        assert len(database.all_records()) == 4


def test_sqlite_and_memory_databases_agree(sample_records) -> None:
    memory = InMemoryCheckDatabase(sample_records)
    with SQLiteCheckDatabase() as sqlite_db:
        sqlite_db.add_records(sample_records)

        assert sqlite_db.all_element_ids() == memory.all_element_ids()
        for element_id in memory.all_element_ids():
            assert sqlite_db.records_for(element_id) == memory.records_for(element_id)
            assert sqlite_db.records_for_kind(CheckKind.COMP_HASH, element_id) == \
                memory.records_for_kind(CheckKind.COMP_HASH, element_id)


def test_sqlite_database_keeps_elements_without_records() -> None:
    with SQLiteCheckDatabase() as database:
        database.add_element("doc")
        database.add_record(CheckRecord("comp-1", CheckKind.COMP_NAME, "zlib", 1.0))

        assert database.all_element_ids() == ["doc", "comp-1"]
        assert database.records_for("doc") == []
        assert database.records_for("missing") == []


def test_sqlite_database_persists_to_file(tmp_path: Path) -> None:
    db_path = tmp_path / "state" / "checks.sqlite"
    with SQLiteCheckDatabase(db_path) as database:
        database.add_record(CheckRecord("doc", CheckKind.SBOM_SPEC, "cyclonedx", 1.0))

    with SQLiteCheckDatabase(db_path) as reopened:
        assert reopened.records_for("doc") == [CheckRecord("doc", CheckKind.SBOM_SPEC, "cyclonedx", 1.0)]


def test_load_check_results_reads_document(tmp_path: Path) -> None:
    path = _write(tmp_path, {
        "file_name": "app.cdx.json",
        "records": [
            {"element_id": "doc", "check_kind": "sbom_spec", "result": "cyclonedx", "score": 1},
            {"element_id": "comp-1", "check_kind": "COMP_HASH", "result": None, "score": 0.0},
        ],
    })
    database = InMemoryCheckDatabase()

    file_name = load_check_results(path, database)

    assert file_name == "app.cdx.json"
    assert database.all_records() == [
        CheckRecord("doc", CheckKind.SBOM_SPEC, "cyclonedx", 1.0),
        CheckRecord("comp-1", CheckKind.COMP_HASH, "", 0.0),
    ]


def test_load_check_results_accepts_bare_list(tmp_path: Path) -> None:
    path = _write(tmp_path, [{"element_id": "doc", "check_kind": "sbom_uri", "result": "urn:x"}])
    database = InMemoryCheckDatabase()

    assert load_check_results(path, database) is None
    assert database.records_for("doc")[0].score == 0.0


@pytest.mark.parametrize(
    "record, message",
    [
        ({"check_kind": "sbom_spec"}, "missing field"),
        ({"element_id": "doc", "check_kind": "sbom_colour"}, "Unknown check kind"),
        ({"element_id": "doc", "check_kind": "sbom_spec", "score": "high"}, "non-numeric"),
        ({"element_id": "doc", "check_kind": "sbom_spec", "score": True}, "non-numeric"),
        ({"element_id": None, "check_kind": "sbom_spec"}, "invalid element_id"),
        ({"element_id": 7, "check_kind": "sbom_spec"}, "invalid element_id"),
        ("doc", "not an object"),
    ],
)
def test_load_check_results_rejects_bad_records(tmp_path: Path, record, message) -> None:
    path = _write(tmp_path, {"records": [record]})

    with pytest.raises(CheckResultsError, match=message):
        load_check_results(path, InMemoryCheckDatabase())


def test_load_check_results_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "results.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CheckResultsError, match="Invalid JSON"):
        load_check_results(path, InMemoryCheckDatabase())


def test_load_check_results_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CheckResultsError, match="Cannot read"):
        load_check_results(tmp_path / "absent.json", InMemoryCheckDatabase())


@pytest.mark.parametrize("records", [None, {"element_id": "doc"}, "sbom_spec"])
def test_load_check_results_rejects_non_list_records(tmp_path: Path, records) -> None:
    path = _write(tmp_path, {"file_name": "app.spdx.json", "records": records})

    with pytest.raises(CheckResultsError, match="must be a list"):
        load_check_results(path, InMemoryCheckDatabase())


def test_sqlite_database_clear_empties_a_reused_file(tmp_path: Path) -> None:
    db_path = tmp_path / "checks.sqlite"
    with SQLiteCheckDatabase(db_path) as database:
        database.add_record(CheckRecord("doc", CheckKind.SBOM_SPEC, "spdx", 1.0))

    with SQLiteCheckDatabase(db_path) as reopened:
        reopened.clear()
        reopened.add_record(CheckRecord("comp-1", CheckKind.COMP_NAME, "zlib", 1.0))

        assert reopened.all_element_ids() == ["comp-1"]
        assert reopened.all_records() == [CheckRecord("comp-1", CheckKind.COMP_NAME, "zlib", 1.0)]
