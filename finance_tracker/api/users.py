"""
User API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from finance_tracker.exceptions import RecordNotFoundError
from finance_tracker.models.base import get_db
from finance_tracker.services.entry_service import EntryService
from finance_tracker.services.user_service import UserService
from finance_tracker.schemas.entry import BalanceResponse
from finance_tracker.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    request: UserCreate,
    db: Session = Depends(get_db),
):
    """Create a new user."""
    service = UserService(db)
    try:
        user = service.create_user(request.name, request.email)
        db.commit()
        return UserResponse.model_validate(user)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
):
    service = UserService(db)
    try:
        return UserResponse.model_validate(service.get_user(user_id))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{user_id}/balance", response_model=BalanceResponse)
def get_user_balance(
    user_id: int,
    db: Session = Depends(get_db),
):
    """
    Get a user's balance.

    Only CONFIRMED entries count: income adds, expense subtracts.
    """
    try:
        UserService(db).get_user(user_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    balance = EntryService(db).balance_for_user(user_id)
    return BalanceResponse(user_id=user_id, balance=balance)
