"""
Configuration module for the SBOM Compliance Engine.
Defines report constants, tool metadata and output settings.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from . import __version__


# ─── Report Identity ─────────────────────────────────────────────────────────

REPORT_NAME = "Cyber Resilience Requirements for Manufacturers and Products Report"
REPORT_SUBTITLE = "Part 2: Software Bill of Materials (SBOM)"
REPORT_REVISION = "TR-03183-2 (1.1)"
ENGINE_VERSION = "1"

# Wire format for generated_at (UTC, ISO-8601 with Z suffix)
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


# ─── Scoring ─────────────────────────────────────────────────────────────────

MAX_SCORE = 10.0        # Report-level ceiling, independent of check count
SCORE_SCALE = 10.0      # Per-check scores (0-1) are multiplied by this


# ─── Elements ────────────────────────────────────────────────────────────────

DOCUMENT_ELEMENT_ID = "doc"       # Sentinel id the database uses for the SBOM itself
DOCUMENT_ELEMENT_LABEL = "sbom"   # Display label for the document in every report


# ─── Output Formats ──────────────────────────────────────────────────────────

REPORT_FORMATS = ("json", "detailed", "basic")
DEFAULT_FORMAT = "detailed"


@dataclass
class ToolConfig:
    """Tool identity written to the structured report."""
    name: str = "sbom-compliance-engine"
    version: str = __version__
    vendor: str = "SBOM Compliance Engine Maintainers"


@dataclass
class OutputConfig:
    """Output format and destination."""
    format: str = DEFAULT_FORMAT
    path: Optional[str] = None    # None = stdout

    def __post_init__(self):
        if self.format not in REPORT_FORMATS:
            raise ValueError(
                f"Unknown report format '{self.format}' "
                f"(expected one of: {', '.join(REPORT_FORMATS)})"
            )

    @property
    def output_path(self) -> Optional[Path]:
        return Path(self.path) if self.path else None


# ─── Master Configuration ───────────────────────────────────────────────────

@dataclass
class ReportConfig:
    """Top-level configuration for report generation."""
    tool: ToolConfig = field(default_factory=ToolConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    engine_version: str = ENGINE_VERSION
    strict_catalog: bool = False  # Fail when a check kind has no catalog entry
    database_path: str = ":memory:"
    verbose: bool = False

    @classmethod
    def from_file(cls, path: str | Path) -> "ReportConfig":
        """Load configuration from a JSON file. Unknown keys are ignored."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must hold a JSON object")
        for section in ("tool", "output"):
            if section in data and not isinstance(data[section], dict):
                raise ValueError(f"Config section \"{section}\" in {path} must be an object")
        config = cls()
        if "tool" in data:
            for k, v in data["tool"].items():
                if hasattr(config.tool, k):
                    setattr(config.tool, k, v)
        if "output" in data:
            output = data["output"]
            config.output = OutputConfig(
                format=output.get("format", DEFAULT_FORMAT),
                path=output.get("path"),
            )
        config.engine_version = str(data.get("engine_version", ENGINE_VERSION))
        config.strict_catalog = data.get("strict_catalog", False)
        config.database_path = data.get("database_path", ":memory:")
        config.verbose = data.get("verbose", False)
        return config
