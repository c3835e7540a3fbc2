"""
Scoring data models — Structured types for the score aggregator output.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import MAX_SCORE, SCORE_SCALE


@dataclass
class ScoreResult:
    """Running required/optional score totals (0-1 per record) for a set of records."""
    required_score: float = 0.0
    optional_score: float = 0.0
    required_count: int = 0
    optional_count: int = 0

    def add(self, score: float, required: bool):
        if required:
            self.required_score += score
            self.required_count += 1
        else:
            self.optional_score += score
            self.optional_count += 1

    def required_mean(self) -> float:
        if self.required_count == 0:
            return 0.0
        return self.required_score / self.required_count

    def optional_mean(self) -> float:
        if self.optional_count == 0:
            return 0.0
        return self.optional_score / self.optional_count

    def total_mean(self) -> float:
        """Average of required and optional means; whichever exists if only one does."""
        if self.required_count and self.optional_count:
            return (self.required_mean() + self.optional_mean()) / 2
        if self.optional_count:
            return self.optional_mean()
        return self.required_mean()


@dataclass
class Summary:
    """Document-level scores on the 0-10 display scale."""
    total_score: float = 0.0
    max_score: float = MAX_SCORE
    required_score: float = 0.0
    optional_score: float = 0.0

    @classmethod
    def from_result(cls, result: ScoreResult) -> "Summary":
        return cls(
            total_score=result.total_mean() * SCORE_SCALE,
            max_score=MAX_SCORE,
            required_score=result.required_mean() * SCORE_SCALE,
            optional_score=result.optional_mean() * SCORE_SCALE,
        )

    def to_dict(self) -> dict:
        return {
            "total_score": self.total_score,
            "max_score": self.max_score,
            "required_elements_score": self.required_score,
            "optional_elements_score": self.optional_score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Summary":
        return cls(
            total_score=data["total_score"],
            max_score=data["max_score"],
            required_score=data["required_elements_score"],
            optional_score=data["optional_elements_score"],
        )
