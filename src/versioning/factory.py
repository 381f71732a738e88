"""Registry resolving versioning schemes to version providers."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import KnownSchemes

from .errors import UnsupportedSchemeError
from .models import Version, VersionProvider
from .schemes import BUILTIN_PROVIDERS, GENERIC_PROVIDER

logger = logging.getLogger(__name__)


class VersionFactory:
    """Creates versions by dispatching to the best provider for a scheme.

    Providers are ranked by priority; between providers of equal priority the
    one registered last wins. Lookups are cached per scheme.
    """

    def __init__(self, providers: Optional[Iterable[VersionProvider]] = None):
        self._providers: List[VersionProvider] = list(providers or [])
        self._cache: Dict[str, Optional[VersionProvider]] = {}
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def providers(self) -> List[VersionProvider]:
        return list(self._providers)

    def register(self, provider: VersionProvider) -> None:
        """Add a provider and forget all cached lookups."""
        with self._lock:
            self._providers.append(provider)
            self._cache.clear()
            self._generation += 1

    def provider_for(self, scheme: str) -> Optional[VersionProvider]:
        """Return the highest ranked provider supporting ``scheme``, if any."""
        with self._lock:
            if scheme in self._cache:
                return self._cache[scheme]
            providers = list(self._providers)
            generation = self._generation

        best: Optional[VersionProvider] = None
        for provider in providers:
            if provider.supports_scheme(scheme) and (best is None or provider.priority >= best.priority):
                best = provider

        if is_debug_enabled(logger):
            logger.debug(
                "Resolved version provider",
                extra=extra_context(
                    event="provider_resolved",
                    component="version_factory",
                    scheme=scheme,
                    outcome="found" if best else "missing",
                    provider=best.name if best else None,
                ),
            )

        with self._lock:
            # a provider registered meanwhile may outrank best
            if generation == self._generation:
                self._cache[scheme] = best
        return best

    def for_scheme(self, scheme: str, version_str: str) -> Version:
        """Create a version of ``scheme`` from ``version_str``.

        Schemes without a provider fall back to the generic comparator while
        keeping the requested scheme.

        Raises:
            UnsupportedSchemeError: If nothing, not even the generic fallback,
                can handle the scheme.
            InvalidVersionError: If ``version_str`` is not valid for the scheme.
        """
        provider = self.provider_for(scheme)
        if provider is None and scheme != KnownSchemes.GENERIC.value:
            provider = self.provider_for(KnownSchemes.GENERIC.value)
        if provider is None:
            raise UnsupportedSchemeError(scheme)
        return provider.get_version(scheme, version_str)


_default_factory: Optional[VersionFactory] = None
_default_lock = threading.Lock()


def default_factory() -> VersionFactory:
    """Return the process-wide factory holding the built-in providers."""
    global _default_factory  # pylint: disable=global-statement
    with _default_lock:
        if _default_factory is None:
            _default_factory = VersionFactory(BUILTIN_PROVIDERS)
        return _default_factory


def for_scheme(scheme: str, version_str: str) -> Version:
    """Create a version using the default factory."""
    return default_factory().for_scheme(scheme, version_str)


def register_provider(provider: VersionProvider) -> None:
    """Register a provider with the default factory."""
    default_factory().register(provider)


__all__ = [
    "VersionFactory",
    "default_factory",
    "for_scheme",
    "register_provider",
    "GENERIC_PROVIDER",
]
