"""
Card API endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from moza_backend.api.deps import get_current_user_id
from moza_backend.database import get_db
from moza_backend.schemas.card import CardCreate, CardResponse
from moza_backend.services import cards

router = APIRouter(prefix="/banking/cards", tags=["Cards"])


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
def create_card(
    card_data: CardCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Issue a card on one of the caller's accounts.

    - **bank_account_id**: account the card is bound to
    - **card_type**: VISA, MASTERCARD, etc.
    - **daily_limit**: daily spending limit
    """
    return cards.create_card(
        db,
        user_id,
        card_data.bank_account_id,
        card_data.card_type,
        card_data.daily_limit
    )
