"""
Authentication service.
Exchanges identity-provider ID tokens for portal sessions and upserts the user.
"""

import secrets
from datetime import datetime, timedelta
from typing import Any, Dict

from app.core.config import settings
from app.core.exceptions import Unauthorized
from app.core.logging import get_logger
from app.core.security import create_access_token, verify_identity_token
from app.models import UserRole, UserSession
from app.schemas.user import LoginResponse, UserResponse
from app.services.base_service import BaseService

logger = get_logger(__name__)

# identity claim -> user column, first present claim wins
CLAIM_FIELDS = {
    "email": ("email",),
    "first_name": ("first_name", "given_name"),
    "last_name": ("last_name", "family_name"),
    "profile_image_url": ("profile_image_url", "picture"),
}


def user_data_from_claims(claims: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map verified identity claims onto user columns.
    Absent claims are left out so the upsert keeps the stored value.
    """
    user_data: Dict[str, Any] = {"id": str(claims["sub"])}
    for field, claim_names in CLAIM_FIELDS.items():
        for claim in claim_names:
            if claims.get(claim):
                user_data[field] = claims[claim]
                break

    admin_emails = {email.strip().lower() for email in settings.ADMIN_EMAILS}
    email = (user_data.get("email") or "").strip().lower()
    if email and email in admin_emails:
        user_data["role"] = UserRole.ADMIN

    return user_data


class AuthService(BaseService):
    """Service for login and logout."""

    async def login(self, id_token: str) -> LoginResponse:
        """
        Verify an ID token, upsert the user and open a session.

        Raises:
            Unauthorized: the token fails verification or has no subject
        """
        claims = verify_identity_token(id_token)
        if not claims or not claims.get("sub"):
            raise Unauthorized("Invalid identity token")

        user = await self.storage.upsert_user(user_data_from_claims(claims))

        ttl = timedelta(minutes=settings.SESSION_TTL_MINUTES)
        sid = secrets.token_urlsafe(32)
        await self.storage.create_session(
            sid=sid,
            sess={"user_id": user.id, "claims": claims},
            expire=datetime.utcnow() + ttl,
        )

        access_token = create_access_token({"sub": user.id, "sid": sid}, expires_delta=ttl)

        logger.info(f"User {user.id} logged in", extra={"user_id": user.id})

        return LoginResponse(
            access_token=access_token,
            expires_in=int(ttl.total_seconds()),
            user=UserResponse.model_validate(user),
        )

    async def logout(self, record: UserSession) -> None:
        """Close a session; the token stops working immediately."""
        await self.storage.delete_session(record.sid)
        logger.info(f"User {record.user_id} logged out", extra={"user_id": record.user_id})
