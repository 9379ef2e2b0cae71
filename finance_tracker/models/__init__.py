"""
Database models package.

Tables must be imported here so that Alembic can discover
them through metadata when generating migrations.
"""

from finance_tracker.models.base import metadata
from finance_tracker.models.enums import EntryType, EntryStatus
from finance_tracker.models.records import Entry, User
from finance_tracker.models.tables import entries, users

__all__ = [
    "metadata",
    "EntryType",
    "EntryStatus",
    "Entry",
    "User",
    "entries",
    "users",
]
