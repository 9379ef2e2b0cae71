"""Business logic services."""

from finance_tracker.services.entry_service import EntryService
from finance_tracker.services.user_service import UserService
from finance_tracker.services.validation import validate_entry

__all__ = ["EntryService", "UserService", "validate_entry"]
