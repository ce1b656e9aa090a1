from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from roster.auth.dependencies import get_current_user
from roster.auth.jwt_handler import TokenClaims
from roster.database import get_db
from roster.repositories.user_repository import UserRepository
from roster.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from roster.services.auth_service import AuthService

router = APIRouter(tags=['auth'])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


@router.post('/register', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    user_id = auth.register(data.name, data.email, data.password)
    return {'id': user_id, 'message': 'User registered successfully'}


@router.post('/login', response_model=LoginResponse)
def login(data: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    token, user = auth.login(data.email, data.password)
    return {
        'token': token,
        'user': {'id': user.id, 'name': user.name, 'email': user.email},
        'message': 'Login successful',
    }


@router.get('/me', response_model=UserResponse)
def me(current_user: TokenClaims = Depends(get_current_user)):
    return {'id': current_user.user_id, 'name': current_user.name, 'email': current_user.email}
