"""
Client repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.client import Client


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def get_by_user_id(self, user_id: str) -> Optional[Client]:
        """Get the client record owned by a user."""
        result = await self.session.execute(
            select(Client).where(Client.user_id == user_id)
        )
        return result.scalar_one_or_none()
