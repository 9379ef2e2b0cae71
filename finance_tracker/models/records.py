"""
In-memory records for users and entries.

These are what the services validate and what the repositories
read and write. Every field is optional so that a partially
filled Entry can also serve as a search filter.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_tracker.models.enums import EntryType, EntryStatus


@dataclass
class User:
    id: int | None = None
    name: str | None = None
    email: str | None = None


@dataclass
class Entry:
    """
    One financial entry.

    id and registered_on are assigned by the system on creation;
    status starts as PENDING and only changes through the service.
    """

    id: int | None = None
    description: str | None = None
    month: int | None = None
    year: int | None = None
    owner: User | None = None
    amount: Decimal | None = None
    registered_on: date | None = None
    kind: EntryType | None = None
    status: EntryStatus | None = None

    @property
    def owner_id(self) -> int | None:
        return self.owner.id if self.owner is not None else None
