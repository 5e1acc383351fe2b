"""
Contact form model for inbound inquiries from the landing page.
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime

from app.db.base import Base
from app.models.enums import ContactFormStatus, string_enum


class ContactForm(Base):
    """Standalone inquiry; only its status changes after creation."""

    __tablename__ = "contact_forms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    message = Column(Text, nullable=False)
    status = Column(string_enum(ContactFormStatus), nullable=False, default=ContactFormStatus.UNREAD)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
