"""
Entry store.

The only module that reads or writes the entries table. Records
cross the boundary through entry_to_row() and row_to_entry(), and
search-by-example goes through build_entry_criteria(), which turns
a partially filled Entry into SQL criteria field by field.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import (
    ColumnElement, Row, Select,
    select, insert, update, delete, func,
)
from sqlalchemy.orm import Session

from finance_tracker.exceptions import RecordNotFoundError
from finance_tracker.models.enums import (
    EntryType,
    EntryStatus,
    entry_type_from_name,
    entry_type_to_name,
    entry_status_from_name,
    entry_status_to_name,
)
from finance_tracker.models.records import Entry, User
from finance_tracker.models.tables import entries, users


LIKE_ESCAPE = "\\"

# Fields matched by case-insensitive prefix
TEXT_FIELDS = ("description",)

# Fields matched by equality, stored under the same column name
EXACT_FIELDS = ("id", "month", "year", "amount", "registered_on")


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user text is matched literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_entry_criteria(filter_entry: Entry) -> list[ColumnElement[bool]]:
    """
    Translate every non-None field of filter_entry into a criterion.

    Text fields match case-insensitively on a prefix. Everything
    else must be equal. The owner is matched by its id. An empty
    filter yields no criteria, which matches every entry.
    """
    criteria: list[ColumnElement[bool]] = []

    for field in TEXT_FIELDS:
        value = getattr(filter_entry, field)
        if value is not None:
            pattern = _escape_like(value.lower()) + "%"
            criteria.append(
                func.lower(entries.c[field]).like(pattern, escape=LIKE_ESCAPE)
            )

    for field in EXACT_FIELDS:
        value = getattr(filter_entry, field)
        if value is not None:
            criteria.append(entries.c[field] == value)

    if filter_entry.owner_id is not None:
        criteria.append(entries.c.user_id == filter_entry.owner_id)

    if filter_entry.kind is not None:
        criteria.append(entries.c.kind == entry_type_to_name(filter_entry.kind))

    if filter_entry.status is not None:
        criteria.append(
            entries.c.status == entry_status_to_name(filter_entry.status)
        )

    return criteria


def entry_to_row(entry: Entry) -> dict[str, Any]:
    """
    Column values for an insert or update.

    The id is never written. Fields left as None are omitted, so
    an update keeps whatever the row already holds for them.
    """
    row = {
        "description": entry.description,
        "month": entry.month,
        "year": entry.year,
        "user_id": entry.owner_id,
        "amount": entry.amount,
        "registered_on": entry.registered_on,
    }
    if entry.kind is not None:
        row["kind"] = entry_type_to_name(entry.kind)
    if entry.status is not None:
        row["status"] = entry_status_to_name(entry.status)
    return {column: value for column, value in row.items() if value is not None}


def row_to_entry(row: Row) -> Entry:
    """Build an Entry from a row produced by _select_entries()."""
    return Entry(
        id=row.id,
        description=row.description,
        month=row.month,
        year=row.year,
        owner=User(id=row.user_id, name=row.owner_name, email=row.owner_email),
        amount=Decimal(str(row.amount)),
        registered_on=row.registered_on,
        kind=entry_type_from_name(row.kind),
        status=entry_status_from_name(row.status),
    )


def _select_entries() -> Select:
    return select(
        entries,
        users.c.name.label("owner_name"),
        users.c.email.label("owner_email"),
    ).select_from(
        entries.outerjoin(users, entries.c.user_id == users.c.id)
    )


class EntryRepository:
    """
    Persistence for entries.

    Takes the caller's session and never commits, so the caller
    owns the transaction boundary.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, entry: Entry) -> Entry:
        """Insert the entry and assign its generated id."""
        result = self.db.execute(insert(entries).values(**entry_to_row(entry)))
        entry.id = result.inserted_primary_key[0]
        return entry

    def update(self, entry: Entry) -> Entry:
        result = self.db.execute(
            update(entries)
            .where(entries.c.id == entry.id)
            .values(**entry_to_row(entry))
        )
        if result.rowcount == 0:
            raise RecordNotFoundError(f"Entry {entry.id} not found")
        return entry

    def delete(self, entry: Entry) -> None:
        result = self.db.execute(
            delete(entries).where(entries.c.id == entry.id)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError(f"Entry {entry.id} not found")

    def find_by_id(self, entry_id: int) -> Entry | None:
        row = self.db.execute(
            _select_entries().where(entries.c.id == entry_id)
        ).one_or_none()
        return row_to_entry(row) if row is not None else None

    def find_by_example(self, filter_entry: Entry) -> list[Entry]:
        """Return entries matching the filter, in id order."""
        rows = self.db.execute(
            _select_entries()
            .where(*build_entry_criteria(filter_entry))
            .order_by(entries.c.id)
        ).all()
        return [row_to_entry(row) for row in rows]

    def sum_amount_by_user_kind_status(
        self, user_id: int, kind: EntryType, status: EntryStatus
    ) -> Decimal | None:
        """
        Sum of amounts for one user, kind and status.

        Returns None when no row matches; the caller decides what
        an empty sum means.
        """
        total = self.db.execute(
            select(func.sum(entries.c.amount)).where(
                entries.c.user_id == user_id,
                entries.c.kind == entry_type_to_name(kind),
                entries.c.status == entry_status_to_name(status),
            )
        ).scalar()
        return Decimal(str(total)) if total is not None else None
