"""Registration and login on top of the credential store."""

import logging
from dataclasses import dataclass

from roster.auth import jwt_handler, passwords
from roster.core import config
from roster.core.errors import InvalidCredentials, ValidationError
from roster.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserSummary:
    id: int
    name: str
    email: str


class AuthService:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def register(self, name: str | None, email: str | None, password: str | None) -> int:
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email or not password:
            raise ValidationError("Name, email, and password are required")
        if len(password) < config.MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {config.MIN_PASSWORD_LENGTH} characters")
        if len(password.encode("utf-8")) > config.MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {config.MAX_PASSWORD_BYTES} bytes")

        user = self._users.create(name, email, passwords.hash_password(password))
        logger.info("Registered user id=%s", user.id)
        return user.id

    def login(self, email: str | None, password: str | None) -> tuple[str, UserSummary]:
        """Return a bearer token and the public user summary.

        Unknown email and wrong password raise the same ``InvalidCredentials``
        so the response cannot be used to probe which emails are registered.
        """
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self._users.get_by_email(email)
        if user is None or not passwords.verify_password(password, user.password):
            logger.info("Failed login attempt")
            raise InvalidCredentials()

        token = jwt_handler.create_access_token(user_id=user.id, email=user.email, name=user.name)
        return token, UserSummary(id=user.id, name=user.name, email=user.email)
