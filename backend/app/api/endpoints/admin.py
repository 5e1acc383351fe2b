"""
Admin dashboard API endpoints.
"""

from fastapi import APIRouter, Depends

from app.controllers.admin_controller import AdminController
from app.db.storage import Storage
from app.deps.auth import get_storage, require_admin
from app.schemas.stats import AdminStatsResponse

router = APIRouter()


@router.get("/stats", response_model=AdminStatsResponse, dependencies=[Depends(require_admin)])
async def get_admin_stats(
    storage: Storage = Depends(get_storage),
) -> AdminStatsResponse:
    """Dashboard counts: clients, active clients, pending documents, unread inquiries."""
    controller = AdminController(storage)
    return await controller.get_stats()
