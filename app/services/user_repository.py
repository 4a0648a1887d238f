# File: app/services/user_repository.py

"""
Persistence gateway for the users table.

Every statement is built from SQLAlchemy expressions, so values always
travel as bound parameters. Not-found is reported as None / False;
database failures are rolled back and raised as PersistenceError.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.models.user import User

logger = logging.getLogger(__name__)

# widest integer any supported store can bind; larger ids cannot exist
MAX_STORABLE_ID = 2**63 - 1


def _storable(user_id: int) -> bool:
    return -MAX_STORABLE_ID - 1 <= user_id <= MAX_STORABLE_ID


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error during {operation}: {e}")
            raise PersistenceError(operation) from e

    def list_users(self) -> list[User]:
        """All rows, in whatever order the store returns them."""
        with self._translate_errors("list users"):
            return list(self.db.scalars(select(User)))

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        if not _storable(user_id):
            return None
        with self._translate_errors(f"get user {user_id}"):
            return self.db.scalars(
                select(User).where(User.id == user_id)
            ).one_or_none()

    def insert_user(self, *, name: str, email: str) -> User:
        """Insert a row and return it with the id the store assigned."""
        with self._translate_errors("insert user"):
            user = User(name=name, email=email)
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        logger.info(f"Inserted user id={user.id}")
        return user

    def update_user_by_id(self, user_id: int, *, name: str, email: str) -> None:
        """
        Overwrite name and email of the matching row.

        Returns nothing, even when no row matched: callers re-read with
        get_user_by_id() to see what was persisted.
        """
        if not _storable(user_id):
            return

        with self._translate_errors(f"update user {user_id}"):
            self.db.execute(
                update(User)
                .where(User.id == user_id)
                .values(name=name, email=email)
            )
            self.db.commit()

    def delete_user_by_id(self, user_id: int) -> bool:
        """Delete the matching row. Returns False if there was none."""
        user = self.get_user_by_id(user_id)
        if user is None:
            return False

        with self._translate_errors(f"delete user {user_id}"):
            self.db.delete(user)
            self.db.commit()
        logger.info(f"Deleted user id={user_id}")
        return True
