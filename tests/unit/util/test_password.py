"""Unit tests for password hashing."""

import pytest

from qna.util.error import PasswordHashError
from qna.util.password import hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_hash_is_not_plaintext(self):
        password_hash = hash_password("secret", rounds=4)

        assert password_hash != "secret"
        assert password_hash.startswith("$2")

    def test_hashes_are_salted(self):
        assert hash_password("secret", rounds=4) != hash_password("secret", rounds=4)

    def test_verify_accepts_matching_password(self):
        password_hash = hash_password("secret", rounds=4)

        assert verify_password("secret", password_hash) is True
        assert verify_password("wrong", password_hash) is False

    def test_missing_password_raises(self):
        with pytest.raises(PasswordHashError):
            hash_password(None, rounds=4)
