"""
Shared helpers for talking to the relational store.
"""

from contextlib import contextmanager
from typing import Callable, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from moza_backend.core.config import settings
from moza_backend.core.exceptions import PersistenceError
from moza_backend.core.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@contextmanager
def store_errors(db: Session, action: str):
    """Roll back and raise PersistenceError on any SQLAlchemy failure."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Store failure while trying to %s", action, exc_info=True)
        raise PersistenceError(f"Could not {action}") from e


def insert_with_retry(db: Session, build: Callable[[], T], label: str) -> T:
    """
    Insert a row whose unique identifier is randomly generated.

    `build` is called once per attempt and must generate fresh identifiers.
    A uniqueness violation rolls back and retries, up to
    IDENTIFIER_MAX_ATTEMPTS times.
    """
    attempts = settings.IDENTIFIER_MAX_ATTEMPTS
    for attempt in range(1, attempts + 1):
        row = build()
        db.add(row)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning("Identifier collision creating %s (attempt %d/%d)", label, attempt, attempts)
            continue
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Store failure creating %s", label, exc_info=True)
            raise PersistenceError(f"Could not create {label}") from e
        db.refresh(row)
        return row

    logger.error("Gave up creating %s after %d identifier collisions", label, attempts)
    raise PersistenceError(f"Could not create {label}")
