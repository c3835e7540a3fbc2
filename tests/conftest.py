import pytest

from sbom_compliance.checks import CheckKind
from sbom_compliance.database import CheckRecord, InMemoryCheckDatabase
from sbom_compliance.scoring import ScoreAggregator, Summary


class StubAggregator(ScoreAggregator):
    """Returns canned scores and records every score_for call."""

    def __init__(self, summary: Summary, scores=None, default: float = 0.0) -> None:
        self.summary = summary
        self.scores = scores or {}
        self.default = default
        self.calls: list = []

    def aggregate(self) -> Summary:
        return self.summary

    def score_for(self, kind, element_id):
        self.calls.append((kind, element_id))
        return self.scores.get((kind, element_id), self.default)


@pytest.fixture
def sample_records() -> list[CheckRecord]:
    return [
        CheckRecord("doc", CheckKind.SBOM_SPEC, "spdx", 1.0),
        CheckRecord("doc", CheckKind.SBOM_URI, "", 0.0),
        CheckRecord("pkg:npm/lodash@4.17.21", CheckKind.COMP_HASH, "sha256", 0.5),
        CheckRecord("pkg:npm/lodash@4.17.21", CheckKind.COMP_SOURCE_HASH, "present", 1.0),
    ]


@pytest.fixture
def sample_db(sample_records) -> InMemoryCheckDatabase:
    return InMemoryCheckDatabase(sample_records)


@pytest.fixture
def example_summary() -> Summary:
    return Summary(total_score=8.5, max_score=10.0, required_score=7.0, optional_score=1.5)


@pytest.fixture
def stub_aggregator_cls():
    return StubAggregator
