"""
Document metadata schemas.
"""

from datetime import datetime
from typing import Optional

from app.models.enums import DocumentStatus
from app.schemas.base import CamelModel


class DocumentResponse(CamelModel):
    id: int
    client_id: Optional[int] = None
    name: str
    type: str
    size: Optional[int] = None
    file_path: str
    status: DocumentStatus
    requires_signature: bool
    created_at: datetime
    updated_at: datetime
