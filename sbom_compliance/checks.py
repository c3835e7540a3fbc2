"""
Check kinds — The fixed set of compliance checks an SBOM is evaluated against.
"""

from __future__ import annotations

from enum import Enum


class CheckKind(str, Enum):
    """A single evaluated requirement. Values are the wire names used in check results."""

    # Document-level checks
    SBOM_SPEC = "sbom_spec"
    SBOM_SPEC_VERSION = "sbom_spec_version"
    SBOM_BUILD = "sbom_build"
    SBOM_DEPTH = "sbom_depth"
    SBOM_CREATOR = "sbom_creator"
    SBOM_TIMESTAMP = "sbom_timestamp"
    SBOM_COMPONENTS = "sbom_components"
    SBOM_URI = "sbom_uri"

    # Component-level checks
    COMP_CREATOR = "comp_creator"
    COMP_NAME = "comp_name"
    COMP_VERSION = "comp_version"
    COMP_DEPTH = "comp_depth"
    COMP_LICENSE = "comp_license"
    COMP_HASH = "comp_hash"
    COMP_SOURCE_CODE_URL = "comp_source_code_url"
    COMP_DOWNLOAD_URL = "comp_download_url"
    COMP_SOURCE_HASH = "comp_source_hash"
    COMP_OTHER_UNIQ_IDS = "comp_other_uniq_ids"

    @classmethod
    def parse(cls, value: str) -> "CheckKind":
        """Accept either the wire value ("comp_hash") or the member name ("COMP_HASH")."""
        text = (value or "").strip()
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"Unknown check kind: {value!r}") from None
