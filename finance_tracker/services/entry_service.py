"""
Entry service: the ledger of a user's incomes and expenses.

Every write goes through validate_entry() first. The service
assigns the fields the caller does not own (registration date
and initial status) and leaves the commit to the caller, so a
failed operation can be rolled back as a whole.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from finance_tracker.exceptions import PreconditionError, ValidationError
from finance_tracker.models.enums import EntryType, EntryStatus
from finance_tracker.models.records import Entry
from finance_tracker.repositories.entry_repository import EntryRepository
from finance_tracker.services.validation import validate_entry

logger = logging.getLogger(__name__)


class EntryService:
    """
    All entry operations pass through this service.

    The service takes a database session as a constructor
    argument. The caller controls the transaction boundary:
    it decides when to commit or rollback.
    """

    def __init__(self, db: Session, repository: EntryRepository | None = None):
        self.db = db
        self.repository = repository or EntryRepository(db)

    def validate(self, entry: Entry) -> None:
        try:
            validate_entry(entry)
        except ValidationError as e:
            logger.warning("Rejected entry %s: %s", entry.id, e)
            raise

    def save(self, entry: Entry) -> Entry:
        """
        Validate and persist a new entry.

        Any status or registration date set by the caller is
        overwritten: new entries are always PENDING and
        registered today.
        """
        self.validate(entry)
        entry.status = EntryStatus.PENDING
        entry.registered_on = date.today()

        saved = self.repository.create(entry)
        logger.info(
            "Saved entry %s (%s %s) for user %s",
            saved.id, saved.kind.value, saved.amount, saved.owner_id,
        )
        return saved

    def update(self, entry: Entry) -> Entry:
        """Re-validate and persist an existing entry."""
        if entry.id is None:
            raise PreconditionError("Entry must have an id to be updated")

        self.validate(entry)
        updated = self.repository.update(entry)
        logger.info("Updated entry %s", updated.id)
        return updated

    def delete(self, entry: Entry) -> None:
        if entry.id is None:
            raise PreconditionError("Entry must have an id to be deleted")

        self.repository.delete(entry)
        logger.info("Deleted entry %s", entry.id)

    def change_status(self, entry: Entry, new_status: EntryStatus) -> None:
        """Set the status and persist through update()."""
        old_status = entry.status
        entry.status = new_status
        self.update(entry)
        logger.info(
            "Entry %s status %s -> %s",
            entry.id,
            old_status.value if old_status else None,
            new_status.value,
        )

    def search(self, filter_entry: Entry) -> list[Entry]:
        """
        Find entries matching every field set on filter_entry.

        Description matches case-insensitively on a prefix; the
        other fields must be equal.
        """
        found = self.repository.find_by_example(filter_entry)
        logger.debug("Search %r matched %d entries", filter_entry, len(found))
        return found

    def find_by_id(self, entry_id: int) -> Entry | None:
        return self.repository.find_by_id(entry_id)

    def balance_for_user(self, user_id: int) -> Decimal:
        """
        Confirmed income minus confirmed expense for a user.

        Pending and cancelled entries do not count. A user with
        no confirmed entries has a balance of zero.
        """
        income = self.repository.sum_amount_by_user_kind_status(
            user_id, EntryType.INCOME, EntryStatus.CONFIRMED
        )
        expense = self.repository.sum_amount_by_user_kind_status(
            user_id, EntryType.EXPENSE, EntryStatus.CONFIRMED
        )

        if income is None:
            income = Decimal("0")
        if expense is None:
            expense = Decimal("0")

        balance = income - expense
        logger.debug("Balance for user %s: %s", user_id, balance)
        return balance
