"""
Request-level authentication and authorization dependencies.

Identity resolution order: bearer token -> live session row -> user row.
Role checks go through AccessGuard so endpoints never compare role strings.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.authorization import AccessGuard, Allow
from app.core.exceptions import NotFound, Unauthorized
from app.core.security import decode_access_token
from app.db.session import get_db
from app.db.storage import Storage
from app.deps.di_container import Container, get_container
from app.models import User, UserSession

bearer_scheme = HTTPBearer(auto_error=False)


async def get_storage(
    db: AsyncSession = Depends(get_db),
    container: Container = Depends(get_container),
) -> Storage:
    """Storage bound to this request's database session."""
    return container.storage(session=db)


async def get_access_guard(
    storage: Storage = Depends(get_storage),
    container: Container = Depends(get_container),
) -> AccessGuard:
    return container.access_guard(storage=storage)


async def require_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    storage: Storage = Depends(get_storage),
) -> UserSession:
    """
    Resolve the caller's live session.

    Raises:
        Unauthorized: missing, invalid or expired token, or no live session row
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Unauthorized")

    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.get("sid") or not payload.get("sub"):
        raise Unauthorized("Invalid authentication token")

    record = await storage.get_session(payload["sid"])
    if record is None or record.user_id != payload["sub"]:
        raise Unauthorized("Session expired")

    return record


async def require_authentication(
    record: UserSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
) -> User:
    """
    Resolve the authenticated caller's user row.

    Raises:
        NotFound: the session names a user that does not exist
    """
    user = await storage.get_user(record.user_id)
    if user is None:
        raise NotFound("User not found")
    return user


async def require_admin(
    user: User = Depends(require_authentication),
    guard: AccessGuard = Depends(get_access_guard),
) -> User:
    """Caller must hold the admin role."""
    return guard.enforce(guard.authorize_admin(user)).user


async def require_client_scope(
    user: User = Depends(require_authentication),
    guard: AccessGuard = Depends(get_access_guard),
) -> Allow:
    """Caller is an admin (all clients) or a client pinned to its own record."""
    return guard.enforce(await guard.authorize_client_scope(user))
