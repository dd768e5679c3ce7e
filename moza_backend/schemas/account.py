"""
Pydantic schemas for bank account API requests and responses.
"""

from pydantic import BaseModel, ConfigDict
from decimal import Decimal
from datetime import datetime
from moza_backend.models.account import AccountType, Currency


class AccountCreate(BaseModel):
    """Schema for opening a new bank account."""
    account_type: AccountType
    currency: Currency

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "account_type": "CHECKING",
                "currency": "USD"
            }
        }
    )


class AccountResponse(BaseModel):
    """Schema for bank account response."""
    id: int
    user_id: int
    account_type: AccountType
    currency: Currency
    balance: Decimal
    account_number: str
    is_active: bool
    last_activity: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
