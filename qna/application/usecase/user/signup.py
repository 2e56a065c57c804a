"""Signup use case."""

import logfire
from pydantic import BaseModel

from qna.config import AuthSettings
from qna.domain.error import ConflictError
from qna.domain.service import JWTService, UserService
from qna.util.password import hash_password


class SignupRequest(BaseModel):
    """Signup request.

    Fields are optional here so that a missing one is reported by the
    User entity rather than by request parsing.
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None


class SignupResponse(BaseModel):
    """Signup response."""

    message: str
    user_id: str
    token: str


class SignupUseCase:
    """Use case for registering a new user and starting their session."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
            auth_settings: Authentication settings
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Steps:
        1. Reject a username or email that is already registered
        2. Hash the password
        3. Create the user
        4. Issue a session token

        Args:
            request: Signup request

        Returns:
            Signup response with the session token

        Raises:
            ConflictError: If the username or email is taken
            ValidationError: If a field is missing or empty
        """
        with logfire.span("signup.execute", username=request.username):
            if await self.user_service.username_or_email_taken(
                request.username, request.email
            ):
                logfire.warn("Duplicate signup", username=request.username)
                raise ConflictError("Username or email already exists")

            password_hash = (
                hash_password(request.password, rounds=self.auth_settings.bcrypt_rounds)
                if request.password is not None
                else None
            )
            user = await self.user_service.create_user(
                username=request.username,
                email=request.email,
                password_hash=password_hash,
            )

            token = self.jwt_service.create_token(str(user.id), user.username)
            return SignupResponse(
                message="User created successfully", user_id=str(user.id), token=token
            )
