"""
Pydantic schemas for registration, login and profile.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime
from typing import Optional


class RegisterRequest(BaseModel):
    """Schema for registering a new user."""
    username: str = Field(..., description="3-30 letters, digits or underscores")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="At least 8 characters with upper, lower, digit and special")
    full_name: Optional[str] = Field(None, max_length=100, description="Display name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jane_doe",
                "email": "jane@example.com",
                "password": "S3cure!pass",
                "full_name": "Jane Doe"
            }
        }
    )


class LoginRequest(BaseModel):
    """Schema for logging in with a username or email."""
    identity: str = Field(..., min_length=1, description="Username or email")
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Schema for user response. The password hash is never included."""
    id: int
    username: str
    email: str
    full_name: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RegisterResponse(BaseModel):
    """Schema for a successful registration."""
    token: str
    user: UserResponse


class TokenResponse(BaseModel):
    """Schema for a successful login."""
    access_token: str
    token_type: str = "bearer"
