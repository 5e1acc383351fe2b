"""
Role-based authorization guard.

Every protected operation asks the guard for a decision before any
data-access call for the operation is made. Decisions are tagged values:
``Allow`` carries the caller (and, for client-scoped access, the caller's own
client record); ``Deny`` carries the reason. Nothing is cached between
requests.
"""

from dataclasses import dataclass
from typing import Optional, Union

from app.core.exceptions import Forbidden
from app.core.logging import get_logger
from app.db.storage import Storage
from app.models import Client, User, UserRole

logger = get_logger(__name__)


@dataclass(frozen=True)
class Allow:
    user: User
    # None means unrestricted visibility across all clients
    client: Optional[Client] = None

    @property
    def is_admin(self) -> bool:
        return self.client is None


@dataclass(frozen=True)
class Deny:
    reason: str = "Access denied"


Decision = Union[Allow, Deny]


class AccessGuard:
    """Turns an authenticated user into an access decision."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def authorize_admin(self, user: User) -> Decision:
        """Admin-only operations."""
        if user.role == UserRole.ADMIN:
            return Allow(user=user)
        return Deny()

    async def authorize_client_scope(self, user: User) -> Decision:
        """
        Client-scoped operations (messages, documents, current client).
        Admins see everything; clients are pinned to their own record, which is
        created on first access.
        """
        if user.role == UserRole.ADMIN:
            return Allow(user=user)
        if user.role == UserRole.CLIENT:
            client = await self.storage.find_or_create_client_for_user(user)
            return Allow(user=user, client=client)
        return Deny()

    @staticmethod
    def enforce(decision: Decision) -> Allow:
        """Return the Allow decision or raise Forbidden for a Deny."""
        if isinstance(decision, Deny):
            logger.warning(f"Authorization denied: {decision.reason}")
            raise Forbidden(decision.reason)
        return decision
