from datetime import datetime, timedelta, timezone

import jwt
import pytest

from roster.auth.jwt_handler import TokenClaims, create_access_token, decode_access_token
from roster.core import config
from roster.core.errors import InvalidToken


def test_decode_access_token_returns_embedded_claims() -> None:
    token = create_access_token(user_id=7, email='ann@x.com', name='Ann')

    assert decode_access_token(token) == TokenClaims(user_id=7, email='ann@x.com', name='Ann')


def test_create_access_token_expires_after_seven_days() -> None:
    before = datetime.now(timezone.utc)
    token = create_access_token(user_id=1, email='ann@x.com', name='Ann')

    payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    expires_at = datetime.fromtimestamp(payload['exp'], tz=timezone.utc)

    assert payload['sub'] == '1'
    assert timedelta(days=7) - timedelta(seconds=5) <= expires_at - before <= timedelta(days=7, seconds=5)


def _encode(payload: dict, secret: str | None = None) -> str:
    return jwt.encode(payload, secret or config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


@pytest.mark.parametrize(
    'token_factory',
    [
        lambda: create_access_token(user_id=1, email='ann@x.com', name='Ann', expires_minutes=-1),
        lambda: _encode(
            {'sub': '1', 'exp': datetime.now(timezone.utc) + timedelta(hours=1)},
            secret='some-other-secret-that-is-long-enough',
        ),
        lambda: _encode({'sub': '1'}),
        lambda: _encode({'exp': datetime.now(timezone.utc) + timedelta(hours=1)}),
        lambda: _encode({'sub': 'abc', 'exp': datetime.now(timezone.utc) + timedelta(hours=1)}),
        lambda: 'not.a.token',
    ],
    ids=['expired', 'bad-signature', 'no-exp', 'no-sub', 'non-numeric-sub', 'garbage'],
)
def test_decode_access_token_fails_uniformly(token_factory) -> None:
    with pytest.raises(InvalidToken) as exception_info:
        decode_access_token(token_factory())

    assert exception_info.value.message == 'Invalid or expired token'
