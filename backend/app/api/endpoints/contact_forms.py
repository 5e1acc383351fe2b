"""
Contact form API endpoints.
Submission is public; triage is admin-only.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from app.controllers.contact_form_controller import ContactFormController
from app.core.config import settings
from app.core.rate_limit import limiter
from app.db.storage import Storage
from app.deps.auth import get_storage, require_admin
from app.schemas.contact_form import ContactFormCreate, ContactFormResponse, ContactFormStatusUpdate

router = APIRouter()


@router.post("/contact", response_model=ContactFormResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
async def submit_contact_form(
    request: Request,
    form_data: ContactFormCreate,
    storage: Storage = Depends(get_storage),
) -> ContactFormResponse:
    """Submit an inquiry from the landing page."""
    controller = ContactFormController(storage)
    return await controller.submit(form_data)


@router.get(
    "/contact-forms",
    response_model=List[ContactFormResponse],
    dependencies=[Depends(require_admin)],
)
async def list_contact_forms(
    storage: Storage = Depends(get_storage),
) -> List[ContactFormResponse]:
    """List inquiries, newest first."""
    controller = ContactFormController(storage)
    return await controller.list_contact_forms()


@router.patch(
    "/contact-forms/{form_id}/status",
    response_model=ContactFormResponse,
    dependencies=[Depends(require_admin)],
)
async def update_contact_form_status(
    form_id: int,
    status_data: ContactFormStatusUpdate,
    storage: Storage = Depends(get_storage),
) -> ContactFormResponse:
    """Change the status of one inquiry."""
    controller = ContactFormController(storage)
    return await controller.update_status(form_id, status_data)
