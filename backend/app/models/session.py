"""
Server-side login session record.
"""

from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB

from app.db.base import Base


class UserSession(Base):
    """Login session; the payload holds the user id and identity claims."""

    __tablename__ = "sessions"

    sid = Column(String(255), primary_key=True)
    sess = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    expire = Column(DateTime, nullable=False, index=True)

    @property
    def user_id(self):
        return (self.sess or {}).get("user_id")
