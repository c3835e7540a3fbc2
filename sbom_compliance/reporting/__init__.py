"""Reporting package — report assembly and the three output presentations."""

from __future__ import annotations

from typing import TextIO

from .assembler import build_report, construct_sections, display_element_id
from .basic_report import export_basic, render_basic
from .detailed_report import export_detailed, render_detailed
from .json_export import export_json, render_json
from .models import Report, ReportSerializationError, RunInfo, SectionRecord, ToolInfo

EXPORTERS = {
    "json": export_json,
    "detailed": export_detailed,
    "basic": export_basic,
}


def write_report(report: Report, fmt: str, stream: TextIO):
    """Write one presentation of the report to a text stream."""
    try:
        exporter = EXPORTERS[fmt]
    except KeyError:
        raise ValueError(
            f"Unknown report format '{fmt}' (expected one of: {', '.join(EXPORTERS)})"
        ) from None
    exporter(report, stream)


__all__ = [
    "build_report",
    "construct_sections",
    "display_element_id",
    "render_json",
    "render_detailed",
    "render_basic",
    "export_json",
    "export_detailed",
    "export_basic",
    "write_report",
    "EXPORTERS",
    "Report",
    "ReportSerializationError",
    "RunInfo",
    "SectionRecord",
    "ToolInfo",
]
