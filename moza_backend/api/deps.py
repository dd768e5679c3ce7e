"""
Request dependencies shared by the protected routers.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from moza_backend.core.exceptions import Unauthenticated
from moza_backend.core.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> int:
    """
    Dependency that validates the bearer token and returns the caller's user id.
    """
    if credentials is None:
        raise Unauthenticated("Missing or malformed JWT")
    payload = decode_access_token(credentials.credentials)
    return payload["user_id"]
