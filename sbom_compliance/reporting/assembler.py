"""
Report assembler — Joins check records with the requirement catalog and the
score aggregator, and wraps the result in a Report envelope.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from ..config import (
    DOCUMENT_ELEMENT_ID,
    DOCUMENT_ELEMENT_LABEL,
    REPORT_NAME,
    REPORT_REVISION,
    REPORT_SUBTITLE,
    TIMESTAMP_FORMAT,
    ReportConfig,
)
from ..database.base import CheckDatabase
from ..scoring.catalog import RequirementCatalog
from ..scoring.engine import ScoreAggregator
from .models import Report, RunInfo, SectionRecord, ToolInfo

logger = logging.getLogger("sbom_compliance.reporting")


def display_element_id(element_id: str) -> str:
    """The document sentinel becomes the fixed label; component ids pass through."""
    return DOCUMENT_ELEMENT_LABEL if element_id == DOCUMENT_ELEMENT_ID else element_id


def construct_sections(
    database: CheckDatabase,
    catalog: RequirementCatalog,
    aggregator: ScoreAggregator,
) -> list[SectionRecord]:
    """
    Build one SectionRecord per check record.

    Order is the database's element order, then each element's record order.
    Nothing is sorted, merged or deduplicated. Aggregator errors propagate.
    """
    sections = []
    for element_id in database.all_element_ids():
        for record in database.records_for(element_id):
            entry = catalog.lookup(record.check_kind)
            sections.append(SectionRecord(
                title=entry.title,
                section_id=entry.section_id,
                data_field=entry.data_field,
                required=entry.required,
                element_id=display_element_id(record.element_id),
                result_value=record.result_value,
                score=aggregator.score_for(record.check_kind, record.element_id),
            ))
    logger.debug(f"Constructed {len(sections)} sections")
    return sections


def build_report(
    database: CheckDatabase,
    catalog: RequirementCatalog,
    aggregator: ScoreAggregator,
    file_name: str,
    config: Optional[ReportConfig] = None,
) -> Report:
    """
    Generate a complete report for one SBOM.

    Returns:
        Report with a fresh run id and UTC timestamp.
    """
    config = config or ReportConfig()

    if config.strict_catalog:
        catalog.ensure_total(r.check_kind for r in database.all_records())

    report = Report(
        name=REPORT_NAME,
        subtitle=REPORT_SUBTITLE,
        revision=REPORT_REVISION,
        run=RunInfo(
            id=str(uuid.uuid4()),
            generated_at=datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT),
            file_name=file_name,
            engine_version=config.engine_version,
        ),
        tool=ToolInfo(
            name=config.tool.name,
            version=config.tool.version,
            vendor=config.tool.vendor,
        ),
    )
    report.summary = aggregator.aggregate()
    report.sections = construct_sections(database, catalog, aggregator)

    logger.info(
        f"Report {report.run.id} for {file_name}: {len(report.sections)} sections, "
        f"score {report.summary.total_score:.1f}/{report.summary.max_score:.1f}"
    )
    return report
