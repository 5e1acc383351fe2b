"""
Contact form controller.
"""

from typing import List

from app.controllers.base_controller import BaseController
from app.db.storage import Storage
from app.schemas.contact_form import ContactFormCreate, ContactFormResponse, ContactFormStatusUpdate
from app.services.contact_form_service import ContactFormService


class ContactFormController(BaseController):
    """Controller for contact form operations."""

    def __init__(self, storage: Storage):
        self.contact_form_service = ContactFormService(storage)

    async def submit(self, form_data: ContactFormCreate) -> ContactFormResponse:
        return await self.contact_form_service.submit(form_data)

    async def list_contact_forms(self) -> List[ContactFormResponse]:
        return await self.contact_form_service.list_contact_forms()

    async def update_status(self, form_id: int, status_data: ContactFormStatusUpdate) -> ContactFormResponse:
        return await self.contact_form_service.update_status(form_id, status_data.status)
