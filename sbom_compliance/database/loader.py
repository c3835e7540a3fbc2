"""
Check results loader — Reads an evaluated check-results JSON document into a
check database.

Expected layout:

    {
      "file_name": "app.spdx.json",
      "records": [
        {"element_id": "doc", "check_kind": "sbom_spec", "result": "spdx", "score": 1.0},
        ...
      ]
    }

A bare list of records is accepted as well.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..checks import CheckKind
from .base import CheckDatabase, CheckRecord

logger = logging.getLogger("sbom_compliance.database")


class CheckResultsError(Exception):
    """Raised when a check-results document cannot be read."""
    pass


def load_check_results(path: str | Path, database: CheckDatabase) -> Optional[str]:
    """
    Load every record from a check-results file into the database.

    Returns:
        The SBOM file name declared in the document, or None.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as e:
        raise CheckResultsError(f"Cannot read check results {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CheckResultsError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, list):
        raw_records, file_name = data, None
    elif isinstance(data, dict):
        raw_records, file_name = data.get("records", []), data.get("file_name")
        if not isinstance(raw_records, list):
            raise CheckResultsError(f"\"records\" in {path} must be a list, got {type(raw_records).__name__}")
    else:
        raise CheckResultsError(f"Unexpected top-level JSON type in {path}: {type(data).__name__}")

    records = [parse_record(raw, index) for index, raw in enumerate(raw_records)]
    database.add_records(records)
    logger.info(f"Loaded {len(records)} check records from {path}")
    return file_name


def parse_record(raw: Any, index: int = 0) -> CheckRecord:
    """Convert one raw JSON record into a CheckRecord."""
    if not isinstance(raw, dict):
        raise CheckResultsError(f"Record #{index} is not an object")
    try:
        element_id = raw["element_id"]
        kind = CheckKind.parse(raw["check_kind"])
    except KeyError as e:
        raise CheckResultsError(f"Record #{index} is missing field {e}") from e
    except (ValueError, AttributeError) as e:
        raise CheckResultsError(f"Record #{index}: {e}") from e

    if not isinstance(element_id, str) or not element_id:
        raise CheckResultsError(f"Record #{index} has an invalid element_id: {element_id!r}")

    score = raw.get("score", 0.0)
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise CheckResultsError(f"Record #{index} has a non-numeric score: {score!r}")

    result = raw.get("result", "")
    return CheckRecord(
        element_id=element_id,
        check_kind=kind,
        result_value="" if result is None else str(result),
        score=float(score),
    )
