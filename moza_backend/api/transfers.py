"""
Transfer API endpoints.
Handles money transfers between accounts.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from moza_backend.api.deps import get_current_user_id
from moza_backend.database import get_db
from moza_backend.schemas.transaction import TransferRequest, TransactionResponse
from moza_backend.services import transfers

router = APIRouter(prefix="/banking", tags=["Transfers"])


@router.post("/transfer", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transfer(
    transfer_data: TransferRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Transfer money from one of the caller's accounts to any account.

    The debit, the credit and the transaction record commit together or not
    at all. Transfers are not idempotent: repeating a request moves the money
    again.

    - **from_account_id**: source account (must belong to the caller)
    - **to_account_id**: destination account
    - **amount**: transfer amount (must be positive)
    - **description**: optional transfer description
    """
    return transfers.transfer(
        db,
        user_id,
        transfer_data.from_account_id,
        transfer_data.to_account_id,
        transfer_data.amount,
        transfer_data.description
    )
