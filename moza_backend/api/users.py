"""
User API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from moza_backend.api.deps import get_current_user_id
from moza_backend.database import get_db
from moza_backend.schemas.user import UserResponse
from moza_backend.services import users

router = APIRouter(prefix="/user", tags=["User"])


@router.get("/profile", response_model=UserResponse)
def get_profile(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get the caller's profile.
    """
    return users.get_user(db, user_id)
