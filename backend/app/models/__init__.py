"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from app.models.enums import UserRole, ClientStatus, ContactFormStatus, DocumentStatus
from app.models.user import User
from app.models.session import UserSession
from app.models.client import Client
from app.models.contact_form import ContactForm
from app.models.message import Message
from app.models.document import Document

__all__ = [
    "UserRole",
    "ClientStatus",
    "ContactFormStatus",
    "DocumentStatus",
    "User",
    "UserSession",
    "Client",
    "ContactForm",
    "Message",
    "Document",
]
