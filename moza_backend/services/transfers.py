"""
Transfer engine.

Moves money between two bank accounts inside one database transaction:
ownership check, balance check, debit, credit and the Transaction record
either all commit or none of them do.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from moza_backend.core.exceptions import (
    DestinationNotFound,
    InsufficientBalance,
    InvalidRequest,
    Unauthorized,
)
from moza_backend.core.logging_config import get_logger
from moza_backend.models.account import BankAccount
from moza_backend.models.transaction import Transaction, TransactionStatus, TransactionType
from moza_backend.services import identifiers
from moza_backend.services.accounts import get_owned_account
from moza_backend.services.store import store_errors

logger = get_logger(__name__)

CENT = Decimal("0.01")


def _lock_accounts(db: Session, *account_ids: int) -> dict:
    """
    Load and row-lock accounts (SELECT ... FOR UPDATE).

    Rows are locked in ascending id order so two transfers running in
    opposite directions cannot deadlock. Missing ids are simply absent from
    the result.
    """
    with store_errors(db, "load accounts"):
        accounts = db.query(BankAccount).filter(
            BankAccount.id.in_(sorted(set(account_ids)))
        ).order_by(BankAccount.id).with_for_update().populate_existing().all()
    return {account.id: account for account in accounts}


def transfer(
    db: Session,
    user_id: int,
    from_account_id: int,
    to_account_id: int,
    amount: Decimal,
    description: Optional[str] = None
) -> Transaction:
    """
    Transfer `amount` from one of the user's accounts to any account.

    Raises:
        InvalidRequest: same source and destination, non-positive amount,
            or an amount finer than one cent
        Unauthorized: source missing or not owned by the user
        InsufficientBalance: source balance below amount
        DestinationNotFound: destination missing
        PersistenceError: the store failed; nothing was applied
    """
    if from_account_id == to_account_id:
        raise InvalidRequest("Cannot transfer to the same account")

    amount = Decimal(str(amount))
    if amount <= 0:
        raise InvalidRequest("Transfer amount must be positive")
    # Balances hold two decimal places; a finer amount would round debit and credit apart
    if amount != amount.quantize(CENT):
        raise InvalidRequest("Transfer amount cannot have more than two decimal places")

    locked = _lock_accounts(db, from_account_id, to_account_id)

    source = locked.get(from_account_id)
    if source is None or source.user_id != user_id:
        db.rollback()
        logger.warning("User %s denied transfer from account %s", user_id, from_account_id)
        raise Unauthorized("Unauthorized or account not found")

    if source.balance < amount:
        db.rollback()
        logger.warning(
            "Insufficient balance on account %s: balance %s, requested %s",
            from_account_id, source.balance, amount
        )
        raise InsufficientBalance("Insufficient balance")

    destination = locked.get(to_account_id)
    if destination is None:
        db.rollback()
        logger.warning("Transfer destination %s not found", to_account_id)
        raise DestinationNotFound("Destination account not found")

    if source.currency != destination.currency:
        # No conversion: the raw amount moves and the record carries the source currency
        logger.warning(
            "Cross-currency transfer %s %s -> %s %s moved without conversion",
            from_account_id, source.currency.value, to_account_id, destination.currency.value
        )

    with store_errors(db, "complete transfer"):
        now = datetime.utcnow()
        source.balance = source.balance - amount
        source.last_activity = now
        destination.balance = destination.balance + amount
        destination.last_activity = now
        db.flush()

        record = Transaction(
            from_account_id=source.id,
            to_account_id=destination.id,
            amount=amount,
            currency=source.currency,
            description=description,
            type=TransactionType.TRANSFER,
            status=TransactionStatus.COMPLETED,
            reference=identifiers.generate_transaction_reference(),
            created_at=now
        )
        db.add(record)
        db.commit()
        db.refresh(record)

    logger.info(
        "Transfer %s: %s %s from account %s to account %s",
        record.reference, amount, record.currency.value, from_account_id, to_account_id
    )
    return record


def list_transactions_for_account(db: Session, user_id: int, account_id: int) -> List[Transaction]:
    """Transactions sent or received by one of the user's accounts, newest first."""
    account = get_owned_account(db, user_id, account_id)
    with store_errors(db, "retrieve transactions"):
        return db.query(Transaction).filter(
            or_(
                Transaction.from_account_id == account.id,
                Transaction.to_account_id == account.id
            )
        ).order_by(Transaction.created_at.desc(), Transaction.id.desc()).all()
