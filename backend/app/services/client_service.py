"""
Client service with business logic.
"""

from typing import List, Union

from app.core.authorization import Allow
from app.core.config import settings
from app.core.exceptions import NotFound, ValidationError
from app.core.logging import get_logger
from app.schemas.client import AdminIdentityResponse, ClientCreate, ClientResponse
from app.services.base_service import BaseService

logger = get_logger(__name__)


class ClientService(BaseService):
    """Service for client operations."""

    async def list_clients(self) -> List[ClientResponse]:
        """All clients, newest first."""
        clients = await self.storage.get_clients()
        return [ClientResponse.model_validate(client) for client in clients]

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """
        Create a new client, optionally linked to a portal user.

        Raises:
            NotFound: the linked user does not exist
            ValidationError: the linked user already has a client record
        """
        if client_data.user_id is not None:
            if await self.storage.get_user(client_data.user_id) is None:
                raise NotFound("User not found", details=[{"userId": client_data.user_id}])
            if await self.storage.get_client_by_user_id(client_data.user_id) is not None:
                raise ValidationError(
                    "User already has a client record",
                    details=[{"userId": client_data.user_id}],
                )

        client = await self.storage.create_client(client_data.model_dump())
        logger.info(f"Client {client.id} created", extra={"client_id": client.id})
        return ClientResponse.model_validate(client)

    async def get_current_client(
        self,
        access: Allow,
    ) -> Union[ClientResponse, AdminIdentityResponse]:
        """
        The caller's own client record.
        Admins have none and get a synthetic admin identity instead.
        """
        if access.is_admin:
            return AdminIdentityResponse(
                business_name=settings.ADMIN_BUSINESS_NAME,
                contact_name=access.user.full_name,
                email=access.user.email,
            )
        return ClientResponse.model_validate(access.client)
