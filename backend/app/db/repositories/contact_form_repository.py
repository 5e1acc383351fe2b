"""
Contact form repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.contact_form import ContactForm


class ContactFormRepository(BaseRepository[ContactForm]):
    """Repository for contact form operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(ContactForm, session)
