"""
Persistence operations for the ``users`` table.

Each public method issues one SQL statement (create and update add a
re-fetch of the affected row) and returns plain ``UserRead`` records,
never live ORM objects.  A missing row is reported as ``None`` or
``False``; ``StoreError`` is reserved for failures of the store itself.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models import User
from app.schemas.user import NewUser, UserRead

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when a statement against the users table fails."""


def _to_record(row: User) -> UserRead:
    return UserRead(id=row.id, name=row.name, email=row.email, createdAt=row.created_at)


class UserService:
    """CRUD over ``users`` bound to a single session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _fail(self, action: str, exc: SQLAlchemyError) -> StoreError:
        self.session.rollback()
        logger.error("Failed to %s", action, exc_info=exc)
        return StoreError(f"failed to {action}")

    def list_users(self) -> List[UserRead]:
        try:
            rows = self.session.exec(select(User)).all()
        except SQLAlchemyError as exc:
            raise self._fail("list users", exc) from exc
        return [_to_record(row) for row in rows]

    def get_user(self, user_id: int) -> Optional[UserRead]:
        try:
            row = self.session.exec(select(User).where(User.id == user_id)).first()
        except SQLAlchemyError as exc:
            raise self._fail(f"read user {user_id}", exc) from exc
        if row is None:
            logger.debug("User %s not found", user_id)
            return None
        return _to_record(row)

    def create_user(self, data: NewUser) -> UserRead:
        user = User(name=data.name, email=data.email, created_at=data.created_at)
        try:
            self.session.add(user)
            self.session.commit()
            user_id = user.id
        except SQLAlchemyError as exc:
            raise self._fail("insert user", exc) from exc

        created = self.get_user(user_id)
        if created is None:
            logger.error("Inserted user %s could not be read back", user_id)
            raise StoreError(f"inserted user {user_id} could not be read back")
        logger.info("Created user %s", user_id)
        return created

    def update_user(self, user_id: int, data: NewUser) -> Optional[UserRead]:
        statement = (
            update(User)
            .where(User.id == user_id)
            .values({User.name: data.name, User.email: data.email, User.created_at: data.created_at})
        )
        try:
            result = self.session.exec(statement)
            matched = result.rowcount
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._fail(f"update user {user_id}", exc) from exc

        if not matched:
            logger.debug("Update skipped, user %s not found", user_id)
            return None
        logger.info("Updated user %s", user_id)
        return self.get_user(user_id)

    def delete_user(self, user_id: int) -> bool:
        try:
            result = self.session.exec(delete(User).where(User.id == user_id))
            removed = result.rowcount
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._fail(f"delete user {user_id}", exc) from exc

        if removed:
            logger.info("Deleted user %s", user_id)
        return removed > 0
