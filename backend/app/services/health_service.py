"""
Health service.
Provides health check functionality.
"""

import time
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.health_repository import HealthRepository
from app.schemas.health import HealthResponse


class HealthService:
    """Service for health check operations; lives for the whole process."""

    def __init__(self, version: Optional[str] = None):
        self.version = version or "unknown"
        self.start_time = time.time()

    async def get_health(self, session: AsyncSession) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)

        repo = HealthRepository(session=session)
        checks = {"database": "ok" if await repo.check_database() else "error"}

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            version=self.version,
            uptime=f"PT{uptime_seconds}S",  # ISO 8601 duration
            checks=checks,
        )
