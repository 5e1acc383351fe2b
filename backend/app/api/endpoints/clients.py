"""
Client API endpoints.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, status

from app.controllers.client_controller import ClientController
from app.core.authorization import Allow
from app.db.storage import Storage
from app.deps.auth import get_storage, require_admin, require_client_scope
from app.schemas.client import AdminIdentityResponse, ClientCreate, ClientResponse

router = APIRouter()


@router.get("", response_model=List[ClientResponse], dependencies=[Depends(require_admin)])
async def list_clients(
    storage: Storage = Depends(get_storage),
) -> List[ClientResponse]:
    """List clients, newest first."""
    controller = ClientController(storage)
    return await controller.list_clients()


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_client(
    client_data: ClientCreate,
    storage: Storage = Depends(get_storage),
) -> ClientResponse:
    """Create a new client."""
    controller = ClientController(storage)
    return await controller.create_client(client_data)


@router.get("/current", response_model=Union[ClientResponse, AdminIdentityResponse])
async def get_current_client(
    access: Allow = Depends(require_client_scope),
    storage: Storage = Depends(get_storage),
) -> Union[ClientResponse, AdminIdentityResponse]:
    """
    Get the caller's own client record, created on first access.
    Admins receive a synthetic admin identity instead.
    """
    controller = ClientController(storage)
    return await controller.get_current_client(access)
