import pytest
from fastapi.security import HTTPAuthorizationCredentials

from roster.auth.dependencies import get_current_user
from roster.auth.jwt_handler import create_access_token
from roster.core.errors import InvalidToken, NoToken


def test_get_current_user_rejects_missing_credentials() -> None:
    with pytest.raises(NoToken) as exception_info:
        get_current_user(credentials=None)

    assert exception_info.value.status_code == 401
    assert exception_info.value.message == 'Access denied. No token provided.'


def test_get_current_user_rejects_invalid_token() -> None:
    credentials = HTTPAuthorizationCredentials(scheme='Bearer', credentials='garbage')

    with pytest.raises(InvalidToken) as exception_info:
        get_current_user(credentials=credentials)

    assert exception_info.value.status_code == 401


def test_get_current_user_returns_token_identity() -> None:
    token = create_access_token(user_id=3, email='bo@y.com', name='Bo')

    claims = get_current_user(credentials=HTTPAuthorizationCredentials(scheme='Bearer', credentials=token))

    assert claims.user_id == 3
    assert claims.email == 'bo@y.com'
    assert claims.name == 'Bo'
