"""
Auth API Endpoints.

Registration, login and password change.
"""

from fastapi import APIRouter

from notepad.core.dependencies import CurrentUserId, DbSession
from notepad.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserSummary,
)
from notepad.schemas.base import MessageResponse
from notepad.services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=201,
    summary="Register a user",
)
async def register(data: RegisterRequest, db: DbSession) -> MessageResponse:
    """Create an account. The client logs in separately."""
    service = AuthService(db)
    await service.register(data.username, data.password)
    return MessageResponse(message="User registered successfully. Please login.")


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in",
    description="Exchange username and password for a bearer token valid for 30 days.",
)
async def login(data: LoginRequest, db: DbSession) -> LoginResponse:
    """Authenticate a user."""
    service = AuthService(db)
    user, token = await service.login(data.username, data.password)
    return LoginResponse(token=token, user=UserSummary.model_validate(user))


@router.post(
    "/change-password",
    response_model=MessageResponse,
    summary="Change password",
)
async def change_password(
    user_id: CurrentUserId,
    data: ChangePasswordRequest,
    db: DbSession,
) -> MessageResponse:
    """Replace the caller's password after checking the current one."""
    service = AuthService(db)
    await service.change_password(user_id, data.current_password, data.new_password)
    return MessageResponse(message="Password updated successfully")
