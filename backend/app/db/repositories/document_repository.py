"""
Document repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.document import Document


class DocumentRepository(BaseRepository[Document]):
    """Repository for document metadata operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Document, session)
