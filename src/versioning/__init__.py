"""Versions, their per-scheme comparators and the provider registry."""

from .errors import (
    InvalidRangeError,
    InvalidVersionError,
    SchemeMismatchError,
    UnsupportedSchemeError,
    VersError,
)
from .factory import VersionFactory, default_factory, for_scheme, register_provider
from .models import PRIORITY_BUILTIN, PRIORITY_HIGHEST, PRIORITY_LOWEST, Version, VersionProvider

__all__ = [
    "InvalidRangeError",
    "InvalidVersionError",
    "SchemeMismatchError",
    "UnsupportedSchemeError",
    "VersError",
    "Version",
    "VersionProvider",
    "VersionFactory",
    "default_factory",
    "for_scheme",
    "register_provider",
    "PRIORITY_BUILTIN",
    "PRIORITY_HIGHEST",
    "PRIORITY_LOWEST",
]
