"""
Domain exceptions raised by the service layer.

Each exception carries the HTTP status it maps to; the API layer renders
them through a single exception handler.
"""

from typing import Any, Dict, Optional

from fastapi import status


class BankingError(Exception):
    """Base exception for all application errors"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidRequest(BankingError):
    """Raised for malformed input or a self-transfer"""
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(BankingError):
    """Raised when the caller has no valid credentials"""
    status_code = status.HTTP_401_UNAUTHORIZED


class Unauthorized(BankingError):
    """Raised when an account is missing or not owned by the caller"""
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(BankingError):
    """Raised when a requested resource does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


class NotFoundOrUnauthorized(NotFound):
    """Raised when an account is missing or foreign; the two are not told apart"""


class DestinationNotFound(NotFound):
    """Raised when a transfer's destination account does not exist"""


class InsufficientBalance(BankingError):
    """Raised when the source account cannot cover a transfer"""
    status_code = status.HTTP_400_BAD_REQUEST


class Conflict(BankingError):
    """Raised when a unique user attribute is already taken"""
    status_code = status.HTTP_409_CONFLICT


class PersistenceError(BankingError):
    """Raised when the store fails to read or write"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
