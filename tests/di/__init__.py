"""Mock providers for testing."""

from .backend import MockBackendProvider
from .container import build_test_container

__all__ = [
    "MockBackendProvider",
    "build_test_container",
]
