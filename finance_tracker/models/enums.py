"""
Entry enumerations and their storage names.

Kinds and statuses are stored as plain text. The lookup tables
below are the only place that text is produced or parsed, so an
unknown value in the database or in a query string is rejected
instead of silently passed through.
"""

import enum


class EntryType(str, enum.Enum):
    """Whether an entry adds to or subtracts from the balance."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class EntryStatus(str, enum.Enum):
    """Workflow state of an entry."""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


ENTRY_TYPE_BY_NAME: dict[str, EntryType] = {
    "INCOME": EntryType.INCOME,
    "EXPENSE": EntryType.EXPENSE,
}

ENTRY_STATUS_BY_NAME: dict[str, EntryStatus] = {
    "PENDING": EntryStatus.PENDING,
    "CONFIRMED": EntryStatus.CONFIRMED,
    "CANCELLED": EntryStatus.CANCELLED,
}

NAME_BY_ENTRY_TYPE: dict[EntryType, str] = {
    member: name for name, member in ENTRY_TYPE_BY_NAME.items()
}

NAME_BY_ENTRY_STATUS: dict[EntryStatus, str] = {
    member: name for name, member in ENTRY_STATUS_BY_NAME.items()
}


def entry_type_from_name(name: str) -> EntryType:
    """Look up a stored name. Only the exact names in the table match."""
    try:
        return ENTRY_TYPE_BY_NAME[name]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown entry type: {name!r}") from None


def entry_status_from_name(name: str) -> EntryStatus:
    """Look up a stored name. Only the exact names in the table match."""
    try:
        return ENTRY_STATUS_BY_NAME[name]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown entry status: {name!r}") from None


def parse_entry_type(text: str) -> EntryType:
    """Parse user input: case and surrounding spaces are ignored."""
    if not isinstance(text, str):
        raise ValueError(f"Unknown entry type: {text!r}")
    return entry_type_from_name(text.strip().upper())


def parse_entry_status(text: str) -> EntryStatus:
    """Parse user input: case and surrounding spaces are ignored."""
    if not isinstance(text, str):
        raise ValueError(f"Unknown entry status: {text!r}")
    return entry_status_from_name(text.strip().upper())


def entry_type_to_name(kind: EntryType) -> str:
    return NAME_BY_ENTRY_TYPE[kind]


def entry_status_to_name(status: EntryStatus) -> str:
    return NAME_BY_ENTRY_STATUS[status]
