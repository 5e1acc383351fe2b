"""
Document API endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.controllers.document_controller import DocumentController
from app.core.authorization import Allow
from app.db.storage import Storage
from app.deps.auth import get_storage, require_client_scope
from app.schemas.document import DocumentResponse

router = APIRouter()


@router.get("", response_model=List[DocumentResponse])
async def list_documents(
    access: Allow = Depends(require_client_scope),
    storage: Storage = Depends(get_storage),
) -> List[DocumentResponse]:
    """Admins get every document; clients get their own."""
    controller = DocumentController(storage)
    return await controller.list_documents(access)
