"""
Message controller.
"""

from typing import List

from app.controllers.base_controller import BaseController
from app.core.authorization import Allow
from app.db.storage import Storage
from app.schemas.message import MessageCreate, MessageResponse
from app.services.message_service import MessageService


class MessageController(BaseController):
    """Controller for message operations."""

    def __init__(self, storage: Storage):
        self.message_service = MessageService(storage)

    async def list_messages(self, access: Allow) -> List[MessageResponse]:
        return await self.message_service.list_messages(access)

    async def send_message(self, access: Allow, message_data: MessageCreate) -> MessageResponse:
        return await self.message_service.send_message(access, message_data)
