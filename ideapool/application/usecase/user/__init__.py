"""User use cases."""

from .delete_account import DeleteAccountUseCase
from .get_profile import GetProfileUseCase
from .sign_up import SignUpUseCase

__all__ = ["DeleteAccountUseCase", "GetProfileUseCase", "SignUpUseCase"]
