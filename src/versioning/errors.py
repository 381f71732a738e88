"""Exception types raised by version parsing and range operations."""

from __future__ import annotations

from typing import Optional


class VersError(ValueError):
    """Base class for all version and range errors."""


class InvalidVersionError(VersError):
    """A version string does not match the grammar of its scheme."""

    def __init__(self, scheme: str, version_str: Optional[str], message: Optional[str] = None):
        self.scheme = scheme
        self.version_str = version_str
        if message is None:
            message = f'Invalid {scheme} version "{version_str}"'
        super().__init__(message)


class InvalidRangeError(VersError):
    """A range or constraint is structurally invalid."""


class SchemeMismatchError(VersError):
    """Two values of different versioning schemes were combined."""


class UnsupportedSchemeError(VersError):
    """No version provider is available for a scheme."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"No version provider found for scheme: {scheme}")
