"""
Base check database — The read contract the report builder relies on.
Defines the CheckRecord data model and the database interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..checks import CheckKind


@dataclass(frozen=True)
class CheckRecord:
    """
    One evaluated check for one element (the SBOM document or a component).
    The score is computed by the check evaluator and is opaque to reporting.
    """
    element_id: str                  # "doc" for the document, else a component id
    check_kind: CheckKind
    result_value: str = ""           # Displayed result (field value, yes/no, ...)
    score: float = 0.0               # 0.0-1.0


class CheckDatabase(ABC):
    """
    Abstract check store.

    Element ids are enumerated in first-insertion order and records are
    returned in insertion order; report section ordering depends on it.
    """

    @abstractmethod
    def add_record(self, record: CheckRecord):
        raise NotImplementedError

    def add_records(self, records):
        for record in records:
            self.add_record(record)

    @abstractmethod
    def all_element_ids(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def records_for(self, element_id: str) -> list[CheckRecord]:
        raise NotImplementedError

    def records_for_kind(self, kind: CheckKind, element_id: str) -> list[CheckRecord]:
        return [r for r in self.records_for(element_id) if r.check_kind == kind]

    def all_records(self) -> list[CheckRecord]:
        records = []
        for element_id in self.all_element_ids():
            records.extend(self.records_for(element_id))
        return records
