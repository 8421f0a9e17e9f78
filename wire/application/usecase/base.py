"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """A single application action: one request model in, one response out."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
