"""
Pydantic schemas for card API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import datetime


class CardCreate(BaseModel):
    """Schema for issuing a card against a bank account."""
    bank_account_id: int = Field(..., description="Account the card draws from")
    card_type: str = Field(..., min_length=1, max_length=30, description="VISA, MASTERCARD, etc.")
    daily_limit: Decimal = Field(..., ge=0, decimal_places=2, description="Daily spending limit")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "bank_account_id": 1,
                "card_type": "VISA",
                "daily_limit": 500.00
            }
        }
    )


class CardResponse(BaseModel):
    """Schema for card response. The CVV is deliberately absent."""
    id: int
    user_id: int
    bank_account_id: int
    card_number: str
    expiry_date: datetime
    is_active: bool
    daily_limit: Decimal
    card_type: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
