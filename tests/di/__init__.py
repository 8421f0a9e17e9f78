"""Mock providers for testing."""

from .google import MockGoogleProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGoogleProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
