"""
Authentication API endpoints.
"""

from fastapi import APIRouter, Depends

from app.controllers.auth_controller import AuthController
from app.db.storage import Storage
from app.deps.auth import get_storage, require_authentication, require_session
from app.models import User, UserSession
from app.schemas.user import LoginRequest, LoginResponse, LogoutResponse, UserResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    storage: Storage = Depends(get_storage),
) -> LoginResponse:
    """
    Exchange an identity-provider ID token for a portal session token.
    The user row is created or refreshed from the token's claims.
    """
    controller = AuthController(storage)
    return await controller.login(login_data)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    record: UserSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
) -> LogoutResponse:
    """End the caller's session."""
    controller = AuthController(storage)
    return await controller.logout(record)


@router.get("/user", response_model=UserResponse)
async def get_current_user(
    user: User = Depends(require_authentication),
    storage: Storage = Depends(get_storage),
) -> UserResponse:
    """Return the signed-in user."""
    controller = AuthController(storage)
    return await controller.get_current_user(user)
