"""User routes: signup, login, logout and profile."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel

from qna.application.usecase.user import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from qna.config import AuthSettings
from qna.domain.error import ValidationError
from qna.interface.api.session import (
    clear_session_cookie,
    current_session,
    set_session_cookie,
)
from qna.util.jwt import TokenPayload

router = APIRouter(prefix="/user", tags=["users"], route_class=DishkaRoute)


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


@router.post(
    "/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupRequest,
    response: Response,
    use_case: FromDishka[SignupUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """Register a user and start their session.

    Args:
        request: Username, email and password
        response: FastAPI response object, receives the session cookie
        use_case: Signup use case from DI
        auth_settings: Authentication settings from DI

    Returns:
        Confirmation message

    Raises:
        HTTPException: 500 if a field is missing or empty
    """
    try:
        result = await use_case.execute(request)
    except ValidationError as e:
        logfire.warn(
            "Signup validation error",
            errors=[f"{err.path}: {err.message}" for err in e.errors],
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    set_session_cookie(response, result.token, auth_settings)
    return MessageResponse(message=result.message)


@router.post("/login", response_model=MessageResponse)
async def login(
    request: LoginRequest,
    response: Response,
    use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """Log in with email and password.

    Args:
        request: Email and password
        response: FastAPI response object, receives the session cookie
        use_case: Login use case from DI
        auth_settings: Authentication settings from DI

    Returns:
        Confirmation message
    """
    result = await use_case.execute(request)
    set_session_cookie(response, result.token, auth_settings)
    return MessageResponse(message=result.message)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """End the session by clearing the session cookie."""
    clear_session_cookie(response)
    return MessageResponse(message="Logout successful")


@router.get("/profile", response_model=GetProfileResponse)
async def get_profile(
    use_case: FromDishka[GetProfileUseCase],
    session: TokenPayload = Depends(current_session),
) -> GetProfileResponse:
    """Get the logged-in user's profile with their content.

    Args:
        use_case: Get profile use case from DI
        session: Logged-in user from the session cookie

    Returns:
        Profile without the password hash
    """
    return await use_case.execute(GetProfileRequest(user_id=session.user_id))
