"""
User store: registration, login and profile lookup.
"""

import re
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from moza_backend.core.exceptions import (
    Conflict,
    InvalidRequest,
    NotFound,
    PersistenceError,
    Unauthenticated,
)
from moza_backend.core.logging_config import get_logger
from moza_backend.core.security import hash_password, verify_password
from moza_backend.models.user import User
from moza_backend.services.store import store_errors

logger = get_logger(__name__)

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
PASSWORD_SPECIALS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_username(username: str) -> None:
    if len(username) < 3 or len(username) > 30:
        raise InvalidRequest("username must be between 3 and 30 characters")
    if not USERNAME_PATTERN.match(username):
        raise InvalidRequest("username can only contain letters, numbers, and underscores")


def validate_password(password: str) -> None:
    if len(password) < 8:
        raise InvalidRequest("password must be at least 8 characters long")
    if not any(c.isdigit() for c in password):
        raise InvalidRequest("password must contain at least one number")
    if not any("A" <= c <= "Z" for c in password):
        raise InvalidRequest("password must contain at least one uppercase letter")
    if not any("a" <= c <= "z" for c in password):
        raise InvalidRequest("password must contain at least one lowercase letter")
    if not any(c in PASSWORD_SPECIALS for c in password):
        raise InvalidRequest("password must contain at least one special character")


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    with store_errors(db, "look up user"):
        return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    with store_errors(db, "look up user"):
        return db.query(User).filter(User.username == username).first()


def register_user(
    db: Session,
    username: str,
    email: str,
    password: str,
    full_name: Optional[str] = None
) -> User:
    """
    Create a user after validating email, username and password strength.

    Raises InvalidRequest on validation failures and Conflict when the email
    or username is already registered.
    """
    if not is_email(email):
        raise InvalidRequest("Invalid email format")
    validate_username(username)
    validate_password(password)

    if get_user_by_email(db, email) is not None:
        raise Conflict("Email already registered")
    if get_user_by_username(db, username) is not None:
        raise Conflict("Username already taken")

    user = User(
        username=username,
        email=email,
        password=hash_password(password),
        full_name=full_name
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        logger.warning("Registration conflict for username %s", username)
        raise Conflict("Username or email already registered")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Store failure creating user %s", username, exc_info=True)
        raise PersistenceError("Couldn't create user") from e
    db.refresh(user)

    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


def authenticate(db: Session, identity: str, password: str) -> User:
    """
    Resolve a username or email and check the password.

    Unknown identities and wrong passwords raise the same error.
    """
    if is_email(identity):
        user = get_user_by_email(db, identity)
    else:
        user = get_user_by_username(db, identity)

    if user is None:
        verify_password(password, "")
        logger.warning("Login failed for unknown identity")
        raise Unauthenticated("Invalid identity or password")

    if not verify_password(password, user.password):
        logger.warning("Login failed for user %s", user.id)
        raise Unauthenticated("Invalid identity or password")

    logger.info("User %s logged in", user.id)
    return user


def get_user(db: Session, user_id: int) -> User:
    with store_errors(db, "retrieve user"):
        user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user
