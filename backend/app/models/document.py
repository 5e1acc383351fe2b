"""
Document metadata model. Files themselves live outside the database.
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.models.enums import DocumentStatus, string_enum


class Document(Base):
    """Document shared with a client, referenced by an external file path."""

    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)  # pdf, doc, image, ...
    size = Column(Integer, nullable=True)  # bytes
    file_path = Column(String(1024), nullable=False)
    status = Column(string_enum(DocumentStatus), nullable=False, default=DocumentStatus.PENDING)
    requires_signature = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="documents")
