"""
Auth controller.
"""

from app.controllers.base_controller import BaseController
from app.db.storage import Storage
from app.models import User, UserSession
from app.schemas.user import LoginRequest, LoginResponse, LogoutResponse, UserResponse
from app.services.auth_service import AuthService


class AuthController(BaseController):
    """Controller for login, logout and the signed-in user."""

    def __init__(self, storage: Storage):
        self.auth_service = AuthService(storage)

    async def login(self, login_data: LoginRequest) -> LoginResponse:
        return await self.auth_service.login(login_data.id_token)

    async def logout(self, record: UserSession) -> LogoutResponse:
        await self.auth_service.logout(record)
        return LogoutResponse(message="Logged out")

    async def get_current_user(self, user: User) -> UserResponse:
        return UserResponse.model_validate(user)
