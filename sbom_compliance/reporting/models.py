"""
Report data models — The envelope every presentation is rendered from.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from ..scoring.models import Summary


class ReportSerializationError(Exception):
    """Raised when a report cannot be encoded or decoded."""
    pass


@dataclass
class RunInfo:
    id: str
    generated_at: str
    file_name: str
    engine_version: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "generated_at": self.generated_at,
            "file_name": self.file_name,
            "compliance_engine_version": self.engine_version,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RunInfo":
        return cls(
            id=data["id"],
            generated_at=data["generated_at"],
            file_name=data["file_name"],
            engine_version=data["compliance_engine_version"],
        )


@dataclass
class ToolInfo:
    name: str
    version: str
    vendor: str

    def to_dict(self) -> dict:
        return {"name": self.name, "version": self.version, "vendor": self.vendor}

    @classmethod
    def from_dict(cls, data: dict) -> "ToolInfo":
        return cls(name=data["name"], version=data["version"], vendor=data["vendor"])


@dataclass
class SectionRecord:
    """One (element, check) row: catalog metadata joined with result and score."""
    title: str
    section_id: str
    data_field: str
    required: bool
    element_id: str
    result_value: str
    score: float                  # 0.0-1.0

    @property
    def display_section_id(self) -> str:
        """Section id with the optional-field marker."""
        return self.section_id if self.required else f"{self.section_id}*"

    def to_dict(self) -> dict:
        return {
            "section_title": self.title,
            "section_id": self.section_id,
            "section_data_field": self.data_field,
            "required": self.required,
            "element_id": self.element_id,
            "element_result": self.result_value,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SectionRecord":
        return cls(
            title=data["section_title"],
            section_id=data["section_id"],
            data_field=data["section_data_field"],
            required=data["required"],
            element_id=data["element_id"],
            result_value=data["element_result"],
            score=data["score"],
        )


@dataclass
class Report:
    """A single compliance report, built fresh for every generation call."""
    name: str
    subtitle: str
    revision: str
    run: RunInfo
    tool: ToolInfo
    summary: Summary = field(default_factory=Summary)
    sections: list[SectionRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "report_name": self.name,
            "subtitle": self.subtitle,
            "revision": self.revision,
            "run": self.run.to_dict(),
            "tool": self.tool.to_dict(),
            "summary": self.summary.to_dict(),
            "sections": [s.to_dict() for s in self.sections],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Report":
        try:
            return cls(
                name=data["report_name"],
                subtitle=data["subtitle"],
                revision=data["revision"],
                run=RunInfo.from_dict(data["run"]),
                tool=ToolInfo.from_dict(data["tool"]),
                summary=Summary.from_dict(data["summary"]),
                sections=[SectionRecord.from_dict(s) for s in data.get("sections") or []],
            )
        except (KeyError, TypeError) as e:
            raise ReportSerializationError(f"Malformed report document: {e}") from e

    def to_json(self) -> str:
        """Two-space indented JSON; key order follows the record layout."""
        try:
            return json.dumps(self.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise ReportSerializationError(f"Cannot encode report {self.run.id}: {e}") from e

    @classmethod
    def from_json(cls, text: str) -> "Report":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ReportSerializationError(f"Invalid report JSON: {e}") from e
        return cls.from_dict(data)
