"""Mock providers for testing."""

from .identity import MockIdentityProvider
from .parser import MockParserProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockParserProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
