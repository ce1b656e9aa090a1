from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from roster.core import config
from roster.core.errors import InvalidToken


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    email: str
    name: str


def create_access_token(user_id: int, email: str, name: str, expires_minutes: int | None = None) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "name": name,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    # Every failure gets the same error so callers cannot tell expiry from tampering.
    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET_KEY,
            algorithms=[config.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
        return TokenClaims(
            user_id=int(payload["sub"]),
            email=payload.get("email", ""),
            name=payload.get("name", ""),
        )
    except (jwt.PyJWTError, KeyError, TypeError, ValueError) as exc:
        raise InvalidToken() from exc
