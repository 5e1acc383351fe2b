"""
Admin dashboard service.
"""

from app.schemas.stats import AdminStatsResponse
from app.services.base_service import BaseService


class AdminService(BaseService):
    """Service for admin dashboard aggregates."""

    async def get_stats(self) -> AdminStatsResponse:
        stats = await self.storage.get_admin_stats()
        return AdminStatsResponse(**stats)
