"""Session cookie handling.

The session is a JWT carried in an HTTP-only cookie named ``token``.
"""

from fastapi import Cookie, Request, Response

from qna.config import AuthSettings
from qna.domain.error import AuthorizationError
from qna.domain.service import JWTService
from qna.util.jwt import TokenPayload

SESSION_COOKIE = "token"


def set_session_cookie(
    response: Response, token: str, auth_settings: AuthSettings
) -> None:
    """Attach the session token to a response.

    Args:
        response: Outgoing response
        token: Signed JWT
        auth_settings: Authentication settings
    """
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=auth_settings.cookie_secure,
        samesite=auth_settings.cookie_samesite,
        max_age=auth_settings.jwt_expiry_minutes * 60,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    """Expire the session cookie."""
    response.delete_cookie(key=SESSION_COOKIE, path="/")


def require_session(token: str | None, jwt_service: JWTService) -> TokenPayload:
    """Resolve the logged-in user of a protected route.

    Args:
        token: Session cookie value, if any
        jwt_service: JWT domain service

    Returns:
        The decoded {user_id, username}

    Raises:
        AuthorizationError: If the token is missing, invalid or expired
    """
    payload = jwt_service.authenticate(token)
    if not payload.user_id:
        raise AuthorizationError("Unauthorized: No user ID provided")
    return payload


async def current_session(
    request: Request, token: str | None = Cookie(default=None)
) -> TokenPayload:
    """Route dependency for protected routes.

    Runs before the request body is validated, so a request without a
    usable session gets 401 whatever its body.

    Args:
        request: Incoming request, carrying the dishka request container
        token: Session token from cookie

    Returns:
        The decoded {user_id, username}
    """
    jwt_service = await request.state.dishka_container.get(JWTService)
    return require_session(token, jwt_service)
