"""
Document controller.
"""

from typing import List

from app.controllers.base_controller import BaseController
from app.core.authorization import Allow
from app.db.storage import Storage
from app.schemas.document import DocumentResponse
from app.services.document_service import DocumentService


class DocumentController(BaseController):
    """Controller for document operations."""

    def __init__(self, storage: Storage):
        self.document_service = DocumentService(storage)

    async def list_documents(self, access: Allow) -> List[DocumentResponse]:
        return await self.document_service.list_documents(access)
