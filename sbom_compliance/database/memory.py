"""
In-memory check database — list-backed store with the same ordering rules
as the SQLite store. Used for tests and small programmatic runs.
"""

from __future__ import annotations

from .base import CheckDatabase, CheckRecord


class InMemoryCheckDatabase(CheckDatabase):

    def __init__(self, records=None, element_ids=None):
        self._element_ids: list[str] = []
        self._records: dict[str, list[CheckRecord]] = {}
        # Elements may be registered without any checks
        for element_id in element_ids or []:
            self.add_element(element_id)
        self.add_records(records or [])

    def add_element(self, element_id: str):
        if element_id not in self._records:
            self._element_ids.append(element_id)
            self._records[element_id] = []

    def add_record(self, record: CheckRecord):
        self.add_element(record.element_id)
        self._records[record.element_id].append(record)

    def all_element_ids(self) -> list[str]:
        return list(self._element_ids)

    def records_for(self, element_id: str) -> list[CheckRecord]:
        return list(self._records.get(element_id, []))
