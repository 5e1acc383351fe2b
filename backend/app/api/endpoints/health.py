"""
Health check endpoint.
Returns system status and uptime information.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.deps.di_container import Container, get_container
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def get_health(
    db: AsyncSession = Depends(get_db),
    container: Container = Depends(get_container),
) -> HealthResponse:
    """Report uptime and database reachability."""
    controller = container.health_controller()
    return await controller.get_health(db)
