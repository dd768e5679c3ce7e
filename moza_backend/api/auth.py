"""
Authentication API endpoints.
Handles registration and login.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from moza_backend.core.security import create_access_token
from moza_backend.database import get_db
from moza_backend.schemas.user import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserResponse
)
from moza_backend.services import users

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user and return a bearer token.

    - **username**: 3-30 letters, numbers or underscores
    - **email**: must be unique
    - **password**: 8+ characters with upper, lower, number and special character
    """
    user = users.register_user(
        db,
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        full_name=user_data.full_name
    )
    return RegisterResponse(
        token=create_access_token(user.id, user.username),
        user=UserResponse.model_validate(user)
    )


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Log in with a username or email.
    """
    user = users.authenticate(db, credentials.identity, credentials.password)
    return TokenResponse(access_token=create_access_token(user.id, user.username))
