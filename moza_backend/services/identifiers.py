"""
Generators for account numbers, card numbers, CVVs and transaction references.

Numbers are drawn uniformly from fixed ranges with the `random` module; they
are not cryptographically secure. Uniqueness is enforced by the database and
collisions are handled by the callers.
"""

import random
import time
from datetime import datetime
from typing import Optional

from moza_backend.core.config import settings

ACCOUNT_NUMBER_RANGE = (100_000_000, 999_999_999)
CARD_NUMBER_RANGE = (1_000_000_000_000_000, 9_999_999_999_999_999)
CVV_RANGE = (100, 999)


def generate_account_number() -> str:
    return str(random.randint(*ACCOUNT_NUMBER_RANGE))


def generate_card_number() -> str:
    return str(random.randint(*CARD_NUMBER_RANGE))


def generate_cvv() -> str:
    return str(random.randint(*CVV_RANGE))


def generate_transaction_reference() -> str:
    """
    Prefix plus a nanosecond timestamp.

    Two transfers in the same nanosecond collide; the unique constraint on
    Transaction.reference turns that into a failed transfer.
    """
    return f"{settings.TRANSACTION_REFERENCE_PREFIX}{time.time_ns()}"


def card_expiry(issued_at: datetime, years: Optional[int] = None) -> datetime:
    """Expiry date `years` after issuance; Feb 29 falls back to Feb 28."""
    years = settings.CARD_VALIDITY_YEARS if years is None else years
    try:
        return issued_at.replace(year=issued_at.year + years)
    except ValueError:
        return issued_at.replace(year=issued_at.year + years, day=28)
