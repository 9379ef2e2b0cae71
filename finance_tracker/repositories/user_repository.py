"""User store."""

from sqlalchemy import select, insert, exists
from sqlalchemy.orm import Session

from finance_tracker.models.records import User
from finance_tracker.models.tables import users


class UserRepository:

    def __init__(self, db: Session):
        self.db = db

    def create(self, user: User) -> User:
        result = self.db.execute(
            insert(users).values(name=user.name, email=user.email)
        )
        user.id = result.inserted_primary_key[0]
        return user

    def find_by_id(self, user_id: int) -> User | None:
        row = self.db.execute(
            select(users.c.id, users.c.name, users.c.email)
            .where(users.c.id == user_id)
        ).one_or_none()
        if row is None:
            return None
        return User(id=row.id, name=row.name, email=row.email)

    def exists_by_email(self, email: str) -> bool:
        return bool(self.db.execute(
            select(exists().where(users.c.email == email))
        ).scalar())
