"""
JSON exporter — Produces the structured, machine-readable report.
"""

from __future__ import annotations

from typing import TextIO

from .models import Report


def render_json(report: Report) -> str:
    """Encode the report. Raises ReportSerializationError without partial output."""
    return report.to_json()


def export_json(report: Report, stream: TextIO):
    """Write the JSON report to a text stream."""
    content = render_json(report)
    stream.write(content + "\n")
