"""Data access for entries and users."""

from finance_tracker.repositories.entry_repository import EntryRepository
from finance_tracker.repositories.user_repository import UserRepository

__all__ = ["EntryRepository", "UserRepository"]
