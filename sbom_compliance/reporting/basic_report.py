"""
Basic report — One-line score summary, no per-section detail.
"""

from __future__ import annotations

from typing import TextIO

from .formatting import format_summary_scores
from .models import Report


def render_basic(report: Report) -> str:
    return f"{report.revision} {format_summary_scores(report.summary)} for {report.run.file_name}"


def export_basic(report: Report, stream: TextIO):
    stream.write(render_basic(report) + "\n")
