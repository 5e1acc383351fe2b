"""
Client Pydantic schemas for request/response validation.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from app.models.enums import ClientStatus
from app.schemas.base import CamelModel


class ClientBase(CamelModel):
    """Base client schema with common fields."""
    business_name: str = Field(..., min_length=1, max_length=255)
    contact_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    notes: Optional[str] = None
    status: ClientStatus = ClientStatus.ACTIVE


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    user_id: Optional[str] = Field(None, max_length=255)


class ClientResponse(CamelModel):
    """Schema for client response."""
    id: int
    user_id: Optional[str] = None
    business_name: str
    contact_name: str
    # Lazily created records may carry an empty email
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    status: ClientStatus
    created_at: datetime
    updated_at: datetime


class AdminIdentityResponse(CamelModel):
    """Stand-in returned from clients/current when the caller is an admin."""
    id: Literal[0] = 0
    business_name: str
    contact_name: str
    email: Optional[str] = None
    is_admin: Literal[True] = True
