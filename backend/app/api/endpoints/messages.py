"""
Message API endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from app.controllers.message_controller import MessageController
from app.core.authorization import Allow
from app.db.storage import Storage
from app.deps.auth import get_storage, require_client_scope
from app.schemas.message import MessageCreate, MessageResponse

router = APIRouter()


@router.get("", response_model=List[MessageResponse])
async def list_messages(
    access: Allow = Depends(require_client_scope),
    storage: Storage = Depends(get_storage),
) -> List[MessageResponse]:
    """Admins get every message; clients get their own."""
    controller = MessageController(storage)
    return await controller.list_messages(access)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    message_data: MessageCreate,
    access: Allow = Depends(require_client_scope),
    storage: Storage = Depends(get_storage),
) -> MessageResponse:
    """Send a message as the signed-in user."""
    controller = MessageController(storage)
    return await controller.send_message(access, message_data)
