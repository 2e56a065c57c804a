"""Password hashing utilities."""

import bcrypt

from qna.util.error import PasswordHashError

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _encode(password: str | None) -> bytes:
    if password is None:
        raise PasswordHashError("Password is required")
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str | None, rounds: int = 12) -> str:
    """Hash a plaintext password using bcrypt with a generated salt.

    Args:
        password: The plaintext password
        rounds: bcrypt cost factor

    Returns:
        The bcrypt hash (UTF-8 decoded)

    Raises:
        PasswordHashError: If no password was given
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str | None, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Raises:
        PasswordHashError: If no password was given
    """
    return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
