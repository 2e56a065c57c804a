"""End-to-end tests for signup, login, logout and profile."""

import jwt

from qna.config import Settings


def _signup(client, username="alice", email="alice@example.com", password="pw"):
    return client.post(
        "/user/signup",
        json={"username": username, "email": email, "password": password},
    )


class TestSignup:
    """Tests for POST /user/signup."""

    def test_signup_sets_session_cookie(self, client):
        # Act
        response = _signup(client)

        # Assert
        assert response.status_code == 201
        assert response.json() == {"message": "User created successfully"}
        token = response.cookies.get("token")
        assert token
        claims = jwt.decode(token, Settings().auth.jwt_secret, algorithms=["HS256"])
        assert claims["username"] == "alice"
        set_cookie = response.headers["set-cookie"].lower()
        assert "httponly" in set_cookie
        assert "max-age=3600" in set_cookie

    def test_duplicate_username_is_rejected(self, client):
        _signup(client)

        response = _signup(client, email="other@example.com")

        assert response.status_code == 400
        assert response.json() == {"message": "Username or email already exists"}

    def test_duplicate_email_is_rejected(self, client):
        _signup(client)

        response = _signup(client, username="bob")

        assert response.status_code == 400

    def test_missing_field_is_a_server_error(self, client):
        response = client.post(
            "/user/signup", json={"username": "alice", "email": "a@example.com"}
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


class TestLogin:
    """Tests for POST /user/login."""

    def test_login_sets_session_cookie(self, client):
        _signup(client)
        client.cookies.clear()

        response = client.post(
            "/user/login", json={"email": "alice@example.com", "password": "pw"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Login successful"}
        assert response.cookies.get("token")

    def test_wrong_password(self, client):
        _signup(client)

        response = client.post(
            "/user/login", json={"email": "alice@example.com", "password": "nope"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid email or password"}

    def test_unknown_email(self, client):
        response = client.post(
            "/user/login", json={"email": "ghost@example.com", "password": "pw"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid email or password"}


class TestLogoutAndProfile:
    """Tests for POST /user/logout and GET /user/profile."""

    def test_profile_of_logged_in_user(self, logged_in):
        response = logged_in.get("/user/profile")

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert body["email"] == "alice@example.com"
        assert body["questions"] == []
        assert body["answers"] == []
        assert body["comments"] == []
        assert "password" not in body
        assert "password_hash" not in body

    def test_profile_without_session_is_unauthorized(self, client):
        response = client.get("/user/profile")

        assert response.status_code == 401
        assert response.json() == {"message": "Missing token"}

    def test_profile_with_forged_token_is_unauthorized(self, client):
        client.cookies.set("token", "forged")

        response = client.get("/user/profile")

        assert response.status_code == 401

    def test_logout_clears_session(self, logged_in):
        response = logged_in.post("/user/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logout successful"}
        assert logged_in.get("/user/profile").status_code == 401
