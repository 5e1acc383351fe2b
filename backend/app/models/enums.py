"""
Status and role enumerations shared by models and schemas.
"""

import enum

from sqlalchemy import Enum as SQLEnum


class UserRole(str, enum.Enum):
    """Visibility scope of a user."""
    ADMIN = "admin"
    CLIENT = "client"


class ClientStatus(str, enum.Enum):
    """Client status enumeration."""
    ACTIVE = "active"
    PENDING = "pending"
    INACTIVE = "inactive"


class ContactFormStatus(str, enum.Enum):
    """Inbound inquiry status enumeration."""
    UNREAD = "unread"
    READ = "read"
    RESPONDED = "responded"


class DocumentStatus(str, enum.Enum):
    """Document review status enumeration."""
    PENDING = "pending"
    SIGNED = "signed"
    REVIEWED = "reviewed"


def string_enum(enum_cls: type[enum.Enum]) -> SQLEnum:
    """Store an enum as its lower-case value in a plain VARCHAR column."""
    return SQLEnum(
        enum_cls,
        native_enum=False,
        length=20,
        values_callable=lambda members: [member.value for member in members],
    )
