"""Authentication use cases."""

from .get_current_account import GetCurrentAccountUseCase
from .login import LoginUseCase

__all__ = ["LoginUseCase", "GetCurrentAccountUseCase"]
