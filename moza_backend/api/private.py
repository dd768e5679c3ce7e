"""
Protected test endpoint for checking a bearer token.
"""

from fastapi import APIRouter, Depends

from moza_backend.api.deps import get_current_user_id

router = APIRouter(prefix="/private", tags=["Private"])


@router.get("")
def protected_test(user_id: int = Depends(get_current_user_id)):
    """
    Returns success when the request carries a valid token.
    """
    return {"status": "success", "message": "Protection Working", "data": None}
