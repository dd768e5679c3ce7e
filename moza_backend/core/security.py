"""
Password hashing and JWT helpers.
"""

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from moza_backend.core.config import settings
from moza_backend.core.exceptions import Unauthenticated

HASH_SCHEME = "scrypt"
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
DUMMY_SALT = "0" * 32


def _scrypt(password: str, salt: str) -> str:
    return hashlib.scrypt(
        password.encode(),
        salt=salt.encode(),
        n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P
    ).hex()


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    salt = secrets.token_hex(16)
    return f"{HASH_SCHEME}${salt}${_scrypt(password, salt)}"


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a password against a stored hash.

    An empty or malformed hash still costs one scrypt round, so callers can
    use it for unknown users without revealing that the user is missing.
    """
    try:
        scheme, salt, expected = password_hash.split("$", 2)
    except ValueError:
        _scrypt(password, DUMMY_SALT)
        return False
    if scheme != HASH_SCHEME:
        return False
    return hmac.compare_digest(_scrypt(password, salt), expected)


def create_access_token(user_id: int, username: str) -> str:
    """Issue a signed bearer token for a user."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "user_id": user_id,
        "username": username,
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Validate a bearer token and return its claims."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Token expired")
    except jwt.InvalidTokenError:
        raise Unauthenticated("Invalid or expired JWT")

    if not isinstance(payload.get("user_id"), int):
        raise Unauthenticated("Invalid or expired JWT")
    return payload
