"""Shared value formatting for the text presentations."""

from __future__ import annotations


def format_score(value: float) -> str:
    """Scores are shown with one decimal place in every text report."""
    return f"{value:.1f}"


def format_summary_scores(summary) -> str:
    return (
        f"Score:{format_score(summary.total_score)} "
        f"RequiredScore:{format_score(summary.required_score)} "
        f"OptionalScore:{format_score(summary.optional_score)}"
    )
