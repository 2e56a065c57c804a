"""User use cases."""

from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
]
