"""
Pydantic schemas for entry operations.

Request fields are all optional on purpose: the business rules
live in validate_entry(), and its messages are what the client
should see, not a generic schema error.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from finance_tracker.models.enums import (
    EntryType,
    EntryStatus,
    parse_entry_type,
    parse_entry_status,
)
from finance_tracker.models.records import Entry, User


# --- Request Schemas ---

class EntryWrite(BaseModel):
    """Body for creating or replacing an entry."""
    description: str | None = Field(default=None, max_length=255)
    month: int | None = None
    year: int | None = None
    user_id: int | None = None
    amount: Decimal | None = None
    kind: EntryType | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, v):
        if isinstance(v, str):
            return parse_entry_type(v)
        return v

    def to_entry(self, entry_id: int | None = None) -> Entry:
        owner = User(id=self.user_id) if self.user_id is not None else None
        return Entry(
            id=entry_id,
            description=self.description,
            month=self.month,
            year=self.year,
            owner=owner,
            amount=self.amount,
            kind=self.kind,
        )


class EntryStatusUpdate(BaseModel):
    """Request to change an entry's status."""
    status: EntryStatus

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        if isinstance(v, str):
            return parse_entry_status(v)
        return v


# --- Response Schemas ---

class EntryResponse(BaseModel):
    id: int
    description: str
    month: int
    year: int
    user_id: int = Field(validation_alias="owner_id")
    amount: Decimal
    registered_on: date
    kind: EntryType
    status: EntryStatus

    model_config = {"from_attributes": True}


class BalanceResponse(BaseModel):
    """Confirmed income minus confirmed expense."""
    user_id: int
    balance: Decimal
