"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class PasswordHashError(UtilError):
    """Password could not be hashed or checked."""

    pass
