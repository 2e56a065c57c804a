"""Login use case."""

import logfire
from pydantic import BaseModel

from qna.domain.error import AuthenticationError
from qna.domain.service import JWTService, UserService
from qna.util.password import verify_password


class LoginRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Login response."""

    message: str
    user_id: str
    token: str


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        An unknown email and a wrong password fail the same way.

        Args:
            request: Login request

        Returns:
            Login response with the session token

        Raises:
            AuthenticationError: If the credentials do not match
            PasswordHashError: If no password was given
        """
        with logfire.span("login.execute"):
            user = (
                await self.user_service.find_by_email(request.email)
                if request.email is not None
                else None
            )
            if user is None:
                logfire.warn("Login failed, unknown email")
                raise AuthenticationError("Invalid email or password")

            if not verify_password(request.password, user.password_hash):
                logfire.warn("Login failed, wrong password", user_id=str(user.id))
                raise AuthenticationError("Invalid email or password")

            token = self.jwt_service.create_token(str(user.id), user.username)
            logfire.info("User logged in", user_id=str(user.id))
            return LoginResponse(
                message="Login successful", user_id=str(user.id), token=token
            )
