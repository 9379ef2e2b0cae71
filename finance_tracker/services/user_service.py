"""
User service.

Users own entries. Authentication is not handled here; a user
is just a name and a unique email.
"""

import logging

from sqlalchemy.orm import Session

from finance_tracker.exceptions import RecordNotFoundError, ValidationError
from finance_tracker.models.records import User
from finance_tracker.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def create_user(self, name: str, email: str) -> User:
        """Create a user. Raises ValidationError on a taken email."""
        if not name or not name.strip():
            raise ValidationError("invalid name")
        if not email or not email.strip():
            raise ValidationError("invalid email")

        email = email.strip().lower()
        if self.repository.exists_by_email(email):
            raise ValidationError(f"User with email '{email}' already exists")

        user = self.repository.create(User(name=name.strip(), email=email))
        logger.info("Created user %s", user.id)
        return user

    def get_user(self, user_id: int) -> User:
        """Get a user by ID."""
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise RecordNotFoundError(f"User {user_id} not found")
        return user
