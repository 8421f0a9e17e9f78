"""Account use cases."""

from .change_access_level import ChangeAccessLevelUseCase
from .get_account_profile import GetAccountProfileUseCase
from .update_account_profile import UpdateAccountProfileUseCase

__all__ = [
    "ChangeAccessLevelUseCase",
    "GetAccountProfileUseCase",
    "UpdateAccountProfileUseCase",
]
