"""
Client controller.
"""

from typing import List, Union

from app.controllers.base_controller import BaseController
from app.core.authorization import Allow
from app.db.storage import Storage
from app.services.client_service import ClientService
from app.schemas.client import AdminIdentityResponse, ClientCreate, ClientResponse


class ClientController(BaseController):
    """Controller for client operations."""

    def __init__(self, storage: Storage):
        self.client_service = ClientService(storage)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        return await self.client_service.create_client(client_data)

    async def list_clients(self) -> List[ClientResponse]:
        """List clients, newest first."""
        return await self.client_service.list_clients()

    async def get_current_client(self, access: Allow) -> Union[ClientResponse, AdminIdentityResponse]:
        """Get the caller's own client record."""
        return await self.client_service.get_current_client(access)
