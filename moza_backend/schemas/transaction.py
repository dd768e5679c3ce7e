"""
Pydantic schemas for transfer API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import datetime
from typing import Optional
from moza_backend.models.account import Currency
from moza_backend.models.transaction import TransactionStatus, TransactionType


class TransferRequest(BaseModel):
    """Schema for initiating a transfer."""
    from_account_id: int = Field(..., description="Source account ID (must be yours)")
    to_account_id: int = Field(..., description="Destination account ID")
    amount: Decimal = Field(..., gt=0, decimal_places=2, description="Transfer amount (must be positive)")
    description: Optional[str] = Field(None, max_length=500, description="Optional transfer description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "from_account_id": 1,
                "to_account_id": 2,
                "amount": 250.00,
                "description": "Rent"
            }
        }
    )


class TransactionResponse(BaseModel):
    """Schema for transaction response."""
    id: int
    from_account_id: int
    to_account_id: int
    amount: Decimal
    currency: Currency
    description: Optional[str]
    type: TransactionType
    status: TransactionStatus
    reference: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
