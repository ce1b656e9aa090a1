"""SQLAlchemy-backed credential store."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from roster.core.errors import DuplicateEmail, StorageFault
from roster.database import is_unique_violation
from roster.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, name: str, email: str, password_hash: str) -> User:
        user = User(name=name, email=normalize_email(email), password=password_hash)
        try:
            self._session.add(user)
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            if is_unique_violation(exc):
                raise DuplicateEmail() from exc
            logger.exception("Failed to insert user")
            raise StorageFault() from exc
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.exception("Failed to insert user")
            raise StorageFault() from exc

        self._session.refresh(user)
        return user

    def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == normalize_email(email))
        return self._scalar(stmt)

    def get_by_id(self, user_id: int) -> User | None:
        return self._scalar(select(User).where(User.id == user_id))

    def _scalar(self, stmt) -> User | None:
        try:
            return self._session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.exception("User lookup failed")
            raise StorageFault() from exc
