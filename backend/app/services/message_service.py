"""
Message service.
"""

from typing import List

from app.core.authorization import Allow
from app.core.exceptions import NotFound
from app.schemas.message import MessageCreate, MessageResponse
from app.services.base_service import BaseService


class MessageService(BaseService):
    """Service for message operations."""

    async def list_messages(self, access: Allow) -> List[MessageResponse]:
        """Admins see every message; clients see messages about their own record."""
        if access.is_admin:
            messages = await self.storage.get_all_messages()
        else:
            messages = await self.storage.get_messages_by_client_id(access.client.id)
        return [MessageResponse.model_validate(message) for message in messages]

    async def send_message(self, access: Allow, message_data: MessageCreate) -> MessageResponse:
        """
        Store a message from the caller.
        The sender is always the caller; a client can only write about its own record.

        Raises:
            NotFound: the receiver or the referenced client does not exist
        """
        values = message_data.model_dump()
        values["sender_id"] = access.user.id
        if not access.is_admin:
            values["client_id"] = access.client.id
        elif values["client_id"] is not None:
            if await self.storage.get_client(values["client_id"]) is None:
                raise NotFound("Client not found", details=[{"clientId": values["client_id"]}])

        if values["receiver_id"] is not None:
            if await self.storage.get_user(values["receiver_id"]) is None:
                raise NotFound("Receiver not found", details=[{"receiverId": values["receiver_id"]}])

        message = await self.storage.create_message(values)
        return MessageResponse.model_validate(message)
