"""
Message schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class MessageCreate(CamelModel):
    """
    Message body sent by the caller.
    senderId is not accepted from input; it is always the authenticated caller.
    """
    receiver_id: Optional[str] = Field(None, max_length=255)
    client_id: Optional[int] = None
    subject: Optional[str] = Field(None, max_length=255)
    content: str = Field(..., min_length=1)


class MessageResponse(CamelModel):
    id: int
    sender_id: Optional[str] = None
    receiver_id: Optional[str] = None
    client_id: Optional[int] = None
    subject: Optional[str] = None
    content: str
    is_read: bool
    created_at: datetime
