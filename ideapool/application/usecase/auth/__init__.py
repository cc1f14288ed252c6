"""Authentication use cases."""

from .authenticate import AuthenticateUseCase
from .refresh_access_token import RefreshAccessTokenUseCase
from .sign_in import SignInUseCase
from .sign_out import SignOutUseCase

__all__ = [
    "AuthenticateUseCase",
    "RefreshAccessTokenUseCase",
    "SignInUseCase",
    "SignOutUseCase",
]
