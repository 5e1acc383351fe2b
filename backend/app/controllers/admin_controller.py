"""
Admin dashboard controller.
"""

from app.controllers.base_controller import BaseController
from app.db.storage import Storage
from app.schemas.stats import AdminStatsResponse
from app.services.admin_service import AdminService


class AdminController(BaseController):
    """Controller for admin dashboard aggregates."""

    def __init__(self, storage: Storage):
        self.admin_service = AdminService(storage)

    async def get_stats(self) -> AdminStatsResponse:
        return await self.admin_service.get_stats()
