"""
Scoring Engine — Rolls per-check scores into per-check and document scores.

Scoring model:
  - Every check record carries an evaluator score between 0.0 and 1.0.
  - The catalog decides whether a record counts as required or optional.
  - Required and optional scores are the mean of their records.
  - The total is the average of the two when both exist, else whichever does.
  - Document-level scores are reported on a 0-10 scale, ceiling MAX_SCORE.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from ..checks import CheckKind
from ..database.base import CheckDatabase, CheckRecord
from .catalog import RequirementCatalog
from .models import ScoreResult, Summary

logger = logging.getLogger("sbom_compliance.scoring")


class ScoringError(Exception):
    """Raised when the check database holds a score that cannot be aggregated."""
    def __init__(self, record: CheckRecord, reason: str):
        self.record = record
        super().__init__(
            f"Cannot score {record.check_kind.value} for element "
            f"'{record.element_id}': {reason}"
        )


class ScoreAggregator(ABC):
    """Score source consumed by the report builder."""

    @abstractmethod
    def aggregate(self) -> Summary:
        raise NotImplementedError

    @abstractmethod
    def score_for(self, kind: CheckKind, element_id: str) -> float:
        raise NotImplementedError


class CraScoreAggregator(ScoreAggregator):
    """Aggregates scores straight from a check database."""

    def __init__(self, database: CheckDatabase, catalog: RequirementCatalog):
        self.database = database
        self.catalog = catalog

    def aggregate(self) -> Summary:
        """
        Compute the document summary over every record of every element.

        Raises:
            ScoringError: a record score is non-numeric or outside [0, 1].
        """
        result = ScoreResult()
        for element_id in self.database.all_element_ids():
            for record in self.database.records_for(element_id):
                score = _validated_score(record)
                result.add(score, self.catalog.lookup(record.check_kind).required)

        summary = Summary.from_result(result)
        logger.info(
            f"Aggregated {result.required_count} required and "
            f"{result.optional_count} optional checks: total {summary.total_score:.1f}"
        )
        return summary

    def score_for(self, kind: CheckKind, element_id: str) -> float:
        """Mean score (0-1) of the element's records of one check kind."""
        result = ScoreResult()
        required = self.catalog.lookup(kind).required
        for record in self.database.records_for_kind(kind, element_id):
            result.add(_validated_score(record), required)
        return result.total_mean()


def _validated_score(record: CheckRecord) -> float:
    score = record.score
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ScoringError(record, f"non-numeric score {score!r}")
    if math.isnan(score) or score < 0.0 or score > 1.0:
        raise ScoringError(record, f"score {score} outside [0.0, 1.0]")
    return float(score)
