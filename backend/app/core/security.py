"""
Token helpers.
Session tokens are signed JWTs issued by this API; identity tokens are
issued by the external identity provider and only ever verified here.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed session token.

    Args:
        data: Claims to embed (``sub`` is the user id, ``sid`` the session key)
        expires_delta: Token lifetime, defaults to the configured session TTL

    Returns:
        Encoded JWT
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.SESSION_TTL_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode a session token, returning None when it is invalid or expired."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def verify_identity_token(id_token: str) -> Optional[Dict[str, Any]]:
    """
    Verify an ID token from the identity provider and return its claims.
    Returns None when the signature, audience, issuer or expiry check fails.
    """
    if not settings.OIDC_SIGNING_KEY:
        logger.error("Identity token received but OIDC_SIGNING_KEY is not configured")
        return None

    options = {"verify_aud": bool(settings.OIDC_CLIENT_ID)}
    try:
        return jwt.decode(
            id_token,
            settings.OIDC_SIGNING_KEY,
            algorithms=[settings.OIDC_ALGORITHM],
            audience=settings.OIDC_CLIENT_ID or None,
            issuer=settings.OIDC_ISSUER or None,
            options=options,
        )
    except JWTError as e:
        logger.warning(f"Identity token rejected: {e}")
        return None
