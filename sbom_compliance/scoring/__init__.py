"""Scoring package — requirement catalog and score aggregation."""

from .catalog import CRA_CATALOG, CRA_SECTIONS, CatalogError, RequirementCatalog, RequirementEntry
from .engine import CraScoreAggregator, ScoreAggregator, ScoringError
from .models import ScoreResult, Summary

__all__ = [
    "CRA_CATALOG",
    "CRA_SECTIONS",
    "CatalogError",
    "RequirementCatalog",
    "RequirementEntry",
    "CraScoreAggregator",
    "ScoreAggregator",
    "ScoringError",
    "ScoreResult",
    "Summary",
]
