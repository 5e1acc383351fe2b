"""
User repository for database operations.
"""

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for user operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    def _insert(self):
        dialect = self.session.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite.insert(User)
        return postgresql.insert(User)

    async def upsert(self, user_data: Dict[str, Any]) -> User:
        """
        Insert a user or, when the id already exists, overwrite the supplied fields.
        Single INSERT ... ON CONFLICT statement: concurrent upserts are last-writer-wins.
        Fields not supplied (role in particular) keep their stored value.
        """
        values = {key: value for key, value in user_data.items() if hasattr(User, key)}
        changes = {key: value for key, value in values.items() if key != "id"}
        changes["updated_at"] = datetime.utcnow()

        stmt = (
            self._insert()
            .values(**values)
            .on_conflict_do_update(index_elements=[User.id], set_=changes)
            .returning(User)
        )
        result = await self.session.execute(
            select(User).from_statement(stmt).execution_options(populate_existing=True)
        )
        return result.scalar_one()
