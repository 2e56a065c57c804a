"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from qna.config import AuthSettings
from qna.domain.error import AuthorizationError
from qna.domain.service import JWTService
from qna.util.jwt import JWTError


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def jwt_service(auth_settings):
    return JWTService(auth_settings)


class TestJWTService:
    """Tests for token creation and verification."""

    def test_token_round_trips_identity(self, jwt_service):
        token = jwt_service.create_token("user-1", "alice")

        payload = jwt_service.verify_token(token)

        assert payload.user_id == "user-1"
        assert payload.username == "alice"

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token("user-1", "alice")

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)

    def test_expired_token_is_rejected(self, jwt_service, auth_settings):
        token = jwt.encode(
            {
                "user_id": "user-1",
                "username": "alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)


class TestAuthenticate:
    """Tests for authenticate."""

    def test_missing_token_is_unauthorized(self, jwt_service):
        with pytest.raises(AuthorizationError, match="Missing token"):
            jwt_service.authenticate(None)

    def test_garbage_token_is_unauthorized(self, jwt_service):
        with pytest.raises(AuthorizationError):
            jwt_service.authenticate("not-a-jwt")

    def test_valid_token_returns_payload(self, jwt_service):
        token = jwt_service.create_token("user-1", "alice")

        assert jwt_service.authenticate(token).user_id == "user-1"
