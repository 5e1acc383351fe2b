"""
Contact form service: public inquiries and their triage status.
"""

from typing import List

from app.core.logging import get_logger
from app.models import ContactFormStatus
from app.schemas.contact_form import ContactFormCreate, ContactFormResponse
from app.services.base_service import BaseService

logger = get_logger(__name__)


class ContactFormService(BaseService):
    """Service for contact form operations."""

    async def submit(self, form_data: ContactFormCreate) -> ContactFormResponse:
        """Store an inquiry from the landing page; it always starts unread."""
        contact_form = await self.storage.create_contact_form(form_data.model_dump())
        logger.info(
            f"Contact form {contact_form.id} submitted",
            extra={"contact_form_id": contact_form.id},
        )
        return ContactFormResponse.model_validate(contact_form)

    async def list_contact_forms(self) -> List[ContactFormResponse]:
        contact_forms = await self.storage.get_contact_forms()
        return [ContactFormResponse.model_validate(form) for form in contact_forms]

    async def update_status(self, form_id: int, status: ContactFormStatus) -> ContactFormResponse:
        """
        Move an inquiry to a new status.

        Raises:
            NotFound: no contact form has this id
        """
        contact_form = await self.storage.update_contact_form_status(form_id, status)
        logger.info(
            f"Contact form {form_id} marked {status.value}",
            extra={"contact_form_id": form_id, "status": status.value},
        )
        return ContactFormResponse.model_validate(contact_form)
