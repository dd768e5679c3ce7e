"""
Card store: issuing and listing cards bound to a user's account.
"""

from datetime import datetime
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from moza_backend.core.logging_config import get_logger
from moza_backend.models.card import Card
from moza_backend.services import identifiers
from moza_backend.services.accounts import get_owned_account
from moza_backend.services.store import insert_with_retry, store_errors

logger = get_logger(__name__)


def create_card(
    db: Session,
    user_id: int,
    account_id: int,
    card_type: str,
    daily_limit: Decimal
) -> Card:
    """
    Issue a card against one of the user's accounts.

    Raises NotFoundOrUnauthorized if the account is missing or not the
    user's. Card number and CVV are random; expiry is CARD_VALIDITY_YEARS
    after issuance.
    """
    account = get_owned_account(db, user_id, account_id)
    bank_account_id = account.id

    def build():
        issued_at = datetime.utcnow()
        return Card(
            user_id=user_id,
            bank_account_id=bank_account_id,
            card_number=identifiers.generate_card_number(),
            cvv=identifiers.generate_cvv(),
            expiry_date=identifiers.card_expiry(issued_at),
            is_active=True,
            daily_limit=daily_limit,
            card_type=card_type,
            created_at=issued_at
        )

    card = insert_with_retry(db, build, "card")
    logger.info("Issued %s card %s on account %s", card.card_type, card.id, bank_account_id)
    return card


def list_cards_for_account(db: Session, user_id: int, account_id: int) -> List[Card]:
    account = get_owned_account(db, user_id, account_id)
    with store_errors(db, "retrieve cards"):
        return db.query(Card).filter(
            Card.bank_account_id == account.id
        ).order_by(Card.id).all()
