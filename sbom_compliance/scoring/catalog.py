"""
Requirement catalog — Maps check kinds to TR-03183-2 (1.1) regulatory sections.

The catalog is the single place binding check kinds to the standard's section
numbering. It is built once at import time and is read-only afterwards, so one
instance can be shared by any number of concurrent report generations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from ..checks import CheckKind

logger = logging.getLogger("sbom_compliance.catalog")


class CatalogError(Exception):
    """Raised when check kinds are missing from the catalog under strict validation."""
    def __init__(self, missing: list):
        self.missing = missing
        names = ", ".join(str(getattr(k, "value", k)) for k in missing)
        super().__init__(f"No catalog entry for check kind(s): {names}")


@dataclass(frozen=True)
class RequirementEntry:
    """Regulatory metadata for one check kind."""
    title: str = ""
    section_id: str = ""
    data_field: str = ""
    required: bool = False


# Returned for unregistered kinds
EMPTY_ENTRY = RequirementEntry()


# ---------------------------------------------------------------------------
# TR-03183-2 (1.1) section table
# ---------------------------------------------------------------------------
CRA_SECTIONS = {
    CheckKind.SBOM_SPEC:            RequirementEntry("SBOM formats", "4", "specification", True),
    CheckKind.SBOM_SPEC_VERSION:    RequirementEntry("SBOM formats", "4", "specification version", True),
    CheckKind.SBOM_BUILD:           RequirementEntry("Level of Detail", "5.1", "build process", True),
    CheckKind.SBOM_DEPTH:           RequirementEntry("Level of Detail", "5.1", "depth", True),
    CheckKind.SBOM_CREATOR:         RequirementEntry("Required fields sboms", "5.2.1", "creator of sbom", True),
    CheckKind.SBOM_TIMESTAMP:       RequirementEntry("Required fields sboms", "5.2.1", "timestamp", True),
    CheckKind.SBOM_COMPONENTS:      RequirementEntry("Required fields component", "5.2.2", "components", True),
    CheckKind.SBOM_URI:             RequirementEntry("Additional fields sboms", "5.3.1", "SBOM-URI", False),
    CheckKind.COMP_CREATOR:         RequirementEntry("Required fields component", "5.2.2", "component creator", True),
    CheckKind.COMP_NAME:            RequirementEntry("Required fields components", "5.2.2", "component name", True),
    CheckKind.COMP_VERSION:         RequirementEntry("Required fields components", "5.2.2", "component version", True),
    CheckKind.COMP_DEPTH:           RequirementEntry("Required fields components", "5.2.2", "Dependencies on other components", True),
    CheckKind.COMP_LICENSE:         RequirementEntry("Required fields components", "5.2.2", "License", True),
    CheckKind.COMP_HASH:            RequirementEntry("Required fields components", "5.2.2", "Hash value of the executable component", True),
    CheckKind.COMP_SOURCE_CODE_URL: RequirementEntry("Additional fields components", "5.3.2", "Source code URI", False),
    CheckKind.COMP_DOWNLOAD_URL:    RequirementEntry("Additional fields components", "5.3.2", "URI of the executable form of the component", False),
    CheckKind.COMP_SOURCE_HASH:     RequirementEntry("Additional fields components", "5.3.2", "Hash value of the source code of the component", False),
    CheckKind.COMP_OTHER_UNIQ_IDS:  RequirementEntry("Additional fields components", "5.3.2", "Other unique identifiers", False),
}


class RequirementCatalog:
    """
    Read-only lookup table: check kind → RequirementEntry.

    A lookup miss returns EMPTY_ENTRY rather than failing; use
    missing_kinds() / ensure_total() to catch catalog drift.
    """

    def __init__(self, entries: Mapping[CheckKind, RequirementEntry]):
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, kind) -> RequirementEntry:
        entry = self._entries.get(kind)
        if entry is None:
            logger.warning(f"No catalog entry for check kind {kind!r}; using empty metadata")
            return EMPTY_ENTRY
        return entry

    def missing_kinds(self, kinds: Iterable) -> list:
        """Return the kinds (in first-seen order, deduplicated) with no catalog entry."""
        missing = []
        for kind in kinds:
            if kind not in self._entries and kind not in missing:
                missing.append(kind)
        return missing

    def ensure_total(self, kinds: Iterable) -> None:
        """Raise CatalogError if any of the given kinds is unregistered."""
        missing = self.missing_kinds(kinds)
        if missing:
            raise CatalogError(missing)

    def __contains__(self, kind) -> bool:
        return kind in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CheckKind]:
        return iter(self._entries)


CRA_CATALOG = RequirementCatalog(CRA_SECTIONS)
