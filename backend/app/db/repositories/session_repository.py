"""
Login session repository.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.session import UserSession


class SessionRepository(BaseRepository[UserSession]):
    """Repository for server-side login sessions."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserSession, session)

    async def create(self, sid: str, sess: Dict[str, Any], expire: datetime) -> UserSession:
        return await super().create(sid=sid, sess=sess, expire=expire)

    async def get_active(self, sid: str, now: Optional[datetime] = None) -> Optional[UserSession]:
        """Get a session that has not expired yet."""
        record = await self.get(sid)
        if record is None or record.expire <= (now or datetime.utcnow()):
            return None
        return record

    async def delete(self, sid: str) -> bool:
        result = await self.session.execute(
            delete(UserSession).where(UserSession.sid == sid)
        )
        await self.session.flush()
        return result.rowcount > 0
