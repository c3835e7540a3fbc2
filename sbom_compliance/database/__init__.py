"""Database package — evaluated check storage and loading."""

from .base import CheckDatabase, CheckRecord
from .memory import InMemoryCheckDatabase
from .sqlite import SQLiteCheckDatabase
from .loader import CheckResultsError, load_check_results

__all__ = [
    "CheckDatabase",
    "CheckRecord",
    "InMemoryCheckDatabase",
    "SQLiteCheckDatabase",
    "CheckResultsError",
    "load_check_results",
]
