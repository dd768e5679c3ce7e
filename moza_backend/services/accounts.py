"""
Account store: opening and listing bank accounts.
"""

from datetime import datetime
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from moza_backend.core.exceptions import NotFoundOrUnauthorized
from moza_backend.core.logging_config import get_logger
from moza_backend.models.account import AccountType, BankAccount, Currency
from moza_backend.services import identifiers
from moza_backend.services.store import insert_with_retry, store_errors

logger = get_logger(__name__)


def create_account(
    db: Session,
    user_id: int,
    account_type: AccountType,
    currency: Currency
) -> BankAccount:
    """
    Open a zero-balance account for a user.

    The account number is random; a collision regenerates it.
    """
    def build():
        return BankAccount(
            user_id=user_id,
            account_type=account_type,
            currency=currency,
            account_number=identifiers.generate_account_number(),
            balance=Decimal("0.00"),
            is_active=True,
            last_activity=datetime.utcnow()
        )

    account = insert_with_retry(db, build, "bank account")
    logger.info(
        "Opened %s %s account %s for user %s",
        account.account_type.value, account.currency.value, account.id, user_id
    )
    return account


def list_accounts_for_user(db: Session, user_id: int) -> List[BankAccount]:
    with store_errors(db, "retrieve accounts"):
        return db.query(BankAccount).filter(
            BankAccount.user_id == user_id
        ).order_by(BankAccount.id).all()


def get_owned_account(db: Session, user_id: int, account_id: int) -> BankAccount:
    """
    Load an account only if `user_id` owns it.

    Missing and foreign accounts raise the same error so callers cannot
    probe which account ids exist.
    """
    with store_errors(db, "verify bank account"):
        account = db.query(BankAccount).filter(
            BankAccount.id == account_id,
            BankAccount.user_id == user_id
        ).first()

    if account is None:
        logger.warning("User %s denied access to account %s", user_id, account_id)
        raise NotFoundOrUnauthorized("Bank account not found or unauthorized")
    return account
