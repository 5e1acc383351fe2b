"""
Document service.
"""

from typing import List

from app.core.authorization import Allow
from app.schemas.document import DocumentResponse
from app.services.base_service import BaseService


class DocumentService(BaseService):
    """Service for document metadata."""

    async def list_documents(self, access: Allow) -> List[DocumentResponse]:
        if access.is_admin:
            documents = await self.storage.get_all_documents()
        else:
            documents = await self.storage.get_documents_by_client_id(access.client.id)
        return [DocumentResponse.model_validate(document) for document in documents]
