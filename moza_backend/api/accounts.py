"""
Bank account API endpoints.
Handles account creation, listing, and per-account cards and transactions.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from moza_backend.api.deps import get_current_user_id
from moza_backend.database import get_db
from moza_backend.schemas.account import AccountCreate, AccountResponse
from moza_backend.schemas.card import CardResponse
from moza_backend.schemas.transaction import TransactionResponse
from moza_backend.services import accounts, cards, transfers

router = APIRouter(prefix="/banking/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    account_data: AccountCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Open a new bank account for the caller.

    - **account_type**: CHECKING, SAVINGS or BUSINESS
    - **currency**: USD, EUR or GBP
    """
    return accounts.create_account(db, user_id, account_data.account_type, account_data.currency)


@router.get("", response_model=List[AccountResponse])
def list_accounts(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    List the caller's bank accounts.
    """
    return accounts.list_accounts_for_user(db, user_id)


@router.get("/{account_id}/cards", response_model=List[CardResponse])
def list_account_cards(
    account_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    List cards bound to one of the caller's accounts.
    """
    return cards.list_cards_for_account(db, user_id, account_id)


@router.get("/{account_id}/transactions", response_model=List[TransactionResponse])
def list_account_transactions(
    account_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get all transfers for one of the caller's accounts (sent and received), newest first.
    """
    return transfers.list_transactions_for_account(db, user_id, account_id)
