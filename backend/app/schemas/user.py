"""
User and authentication schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.enums import UserRole
from app.schemas.base import CamelModel


class UserResponse(CamelModel):
    """Portal user as returned to the signed-in caller."""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LoginRequest(CamelModel):
    """ID token issued by the identity provider."""
    id_token: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    """Session token plus the upserted user."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class LogoutResponse(CamelModel):
    message: str
