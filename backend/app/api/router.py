"""
API router that aggregates all endpoint routers.
Public: health, login, contact submission. Everything else resolves a session
and goes through the access guard via endpoint dependencies.
"""

from fastapi import APIRouter

from app.api.endpoints import (
    health,
    auth,
    contact_forms,
    clients,
    messages,
    documents,
    admin,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(contact_forms.router, tags=["contact-forms"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
