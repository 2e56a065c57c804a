"""JWT token domain service."""

import logfire

from qna.config import AuthSettings
from qna.domain.error import AuthorizationError
from qna.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            username: Username

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, username, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, username=username)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def authenticate(self, token: str | None) -> TokenPayload:
        """Resolve the session token of a request that requires login.

        Args:
            token: JWT token from the session cookie, if any

        Returns:
            The decoded {user_id, username} payload

        Raises:
            AuthorizationError: If the token is missing, invalid or expired
        """
        if not token:
            raise AuthorizationError("Missing token")
        try:
            return self.verify_token(token)
        except JWTError as e:
            raise AuthorizationError(str(e)) from e
