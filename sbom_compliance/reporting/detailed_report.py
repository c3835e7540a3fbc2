"""
Detailed report — Score line, legend and one table row per section.
The page is rendered via Jinja2, the table itself via rich.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .formatting import format_score
from .models import Report

TEMPLATE_DIR = Path(__file__).parent / "templates"

TABLE_HEADERS = ["ElementId", "Section", "Datafield", "Element Result", "Score"]

# Wide enough that rows are never wrapped
CONSOLE_WIDTH = 4096


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["score"] = format_score
    return env


def render_detailed(report: Report) -> str:
    template = _environment().get_template("detailed_report.txt.j2")
    return template.render(
        report=report,
        summary=report.summary,
        table_lines=render_table(report).splitlines(),
    )


def export_detailed(report: Report, stream: TextIO):
    stream.write(render_detailed(report))


def section_rows(report: Report) -> list[tuple[list[str], bool]]:
    """
    Table cells per section, paired with whether a rule follows the row.

    An ElementId equal to the one in the row above is blanked, and the rule
    is only drawn where the element changes.
    """
    rows = []
    sections = report.sections
    for index, s in enumerate(sections):
        same_as_previous = index > 0 and sections[index - 1].element_id == s.element_id
        ends_element = index + 1 < len(sections) and sections[index + 1].element_id != s.element_id
        cells = [
            "" if same_as_previous else s.element_id,
            s.display_section_id,
            s.data_field,
            s.result_value,
            format_score(s.score),
        ]
        rows.append(([_clean(c) for c in cells], ends_element))
    return rows


def build_table(report: Report) -> Table:
    table = Table(box=box.ASCII, show_header=True, show_lines=False, header_style="")
    for header in TABLE_HEADERS:
        table.add_column(header, no_wrap=True)
    for cells, ends_element in section_rows(report):
        # Text cells keep result values away from rich markup parsing
        table.add_row(*(Text(c) for c in cells), end_section=ends_element)
    return table


def render_table(report: Report) -> str:
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=CONSOLE_WIDTH,
        force_terminal=False,
        color_system=None,
        highlight=False,
    )
    console.print(build_table(report))
    return buffer.getvalue()


def _clean(value) -> str:
    return " ".join(str(value).split())
