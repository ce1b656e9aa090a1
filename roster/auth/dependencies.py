from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from roster.auth import jwt_handler
from roster.auth.jwt_handler import TokenClaims
from roster.core.errors import NoToken

# auto_error is off so a missing header maps to NoToken instead of FastAPI's 403.
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise NoToken()
    return jwt_handler.decode_access_token(credentials.credentials)
