"""Shared fixtures for the versrange test suite."""

import pytest

from versioning import VersionFactory
from versioning.schemes import BUILTIN_PROVIDERS


@pytest.fixture
def factory():
    """Create a fresh factory with the built-in providers."""
    return VersionFactory(BUILTIN_PROVIDERS)
