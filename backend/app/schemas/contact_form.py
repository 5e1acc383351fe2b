"""
Contact form schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.models.enums import ContactFormStatus
from app.schemas.base import CamelModel


class ContactFormCreate(CamelModel):
    """Public inquiry submission. Any status sent by the caller is ignored."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    company: Optional[str] = Field(None, max_length=255)
    message: str = Field(..., min_length=1)


class ContactFormStatusUpdate(CamelModel):
    status: ContactFormStatus


class ContactFormResponse(CamelModel):
    id: int
    name: str
    email: str
    company: Optional[str] = None
    message: str
    status: ContactFormStatus
    created_at: datetime
