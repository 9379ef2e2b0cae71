"""
Entry API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting, commit/rollback) and delegates all business
logic to EntryService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from finance_tracker.exceptions import RecordNotFoundError
from finance_tracker.models.base import get_db
from finance_tracker.models.enums import (
    parse_entry_type,
    parse_entry_status,
)
from finance_tracker.models.records import Entry, User
from finance_tracker.services.entry_service import EntryService
from finance_tracker.services.user_service import UserService
from finance_tracker.schemas.entry import (
    EntryWrite,
    EntryStatusUpdate,
    EntryResponse,
)

router = APIRouter(prefix="/entries", tags=["Entries"])


def _get_entry_or_404(service: EntryService, entry_id: int) -> Entry:
    entry = service.find_by_id(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=404, detail=f"Entry {entry_id} not found"
        )
    return entry


def _resolve_owner(db: Session, entry: Entry) -> None:
    """Replace the bare owner id with the stored user, if one was given."""
    if entry.owner is not None:
        entry.owner = UserService(db).get_user(entry.owner.id)


@router.post("", response_model=EntryResponse, status_code=201)
def create_entry(
    request: EntryWrite,
    db: Session = Depends(get_db),
):
    """
    Record a new entry.

    The entry starts PENDING and is registered with today's date
    regardless of what the client sends.
    """
    service = EntryService(db)
    entry = request.to_entry()
    try:
        # Rule messages come first; an unknown user is only reported
        # for an entry that is otherwise valid.
        service.validate(entry)
        _resolve_owner(db, entry)
        saved = service.save(entry)
        db.commit()
        return EntryResponse.model_validate(saved)
    except RecordNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[EntryResponse])
def search_entries(
    description: str | None = None,
    month: int | None = None,
    year: int | None = None,
    user_id: int | None = None,
    kind: str | None = None,
    status: str | None = None,
    db: Session = Depends(get_db),
):
    """
    Search entries.

    Every given parameter must match. description matches as a
    case-insensitive prefix.
    """
    try:
        filter_entry = Entry(
            description=description,
            month=month,
            year=year,
            owner=User(id=user_id) if user_id is not None else None,
            kind=parse_entry_type(kind) if kind is not None else None,
            status=(
                parse_entry_status(status) if status is not None else None
            ),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    service = EntryService(db)
    return [EntryResponse.model_validate(e) for e in service.search(filter_entry)]


@router.get("/{entry_id}", response_model=EntryResponse)
def get_entry(
    entry_id: int,
    db: Session = Depends(get_db),
):
    """Get entry details."""
    service = EntryService(db)
    return EntryResponse.model_validate(_get_entry_or_404(service, entry_id))


@router.put("/{entry_id}", response_model=EntryResponse)
def update_entry(
    entry_id: int,
    request: EntryWrite,
    db: Session = Depends(get_db),
):
    """
    Replace an entry's fields.

    Status and registration date are kept; use the status
    endpoint to move an entry through its workflow.
    """
    service = EntryService(db)
    existing = _get_entry_or_404(service, entry_id)

    entry = request.to_entry(entry_id)
    entry.status = existing.status
    entry.registered_on = existing.registered_on
    try:
        # Rule messages come first; an unknown user is only reported
        # for an entry that is otherwise valid.
        service.validate(entry)
        _resolve_owner(db, entry)
        updated = service.update(entry)
        db.commit()
        return EntryResponse.model_validate(updated)
    except RecordNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{entry_id}/status", response_model=EntryResponse)
def change_entry_status(
    entry_id: int,
    request: EntryStatusUpdate,
    db: Session = Depends(get_db),
):
    """Move an entry to a new status (for example PENDING to CONFIRMED)."""
    service = EntryService(db)
    entry = _get_entry_or_404(service, entry_id)
    try:
        service.change_status(entry, request.status)
        db.commit()
        return EntryResponse.model_validate(entry)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{entry_id}", status_code=204)
def delete_entry(
    entry_id: int,
    db: Session = Depends(get_db),
):
    service = EntryService(db)
    entry = _get_entry_or_404(service, entry_id)
    service.delete(entry)
    db.commit()
