"""
Pydantic schemas package.
"""

from moza_backend.schemas.user import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    RegisterResponse,
    TokenResponse
)
from moza_backend.schemas.account import AccountCreate, AccountResponse
from moza_backend.schemas.card import CardCreate, CardResponse
from moza_backend.schemas.transaction import TransferRequest, TransactionResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "RegisterResponse",
    "TokenResponse",
    "AccountCreate",
    "AccountResponse",
    "CardCreate",
    "CardResponse",
    "TransferRequest",
    "TransactionResponse"
]
