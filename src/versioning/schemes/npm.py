"""npm package versions (SemVer 2.0) backed by ``semantic_version``."""

from __future__ import annotations

from typing import Optional, Tuple

import semantic_version

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version


def _clean(version_str: str) -> str:
    # npm accepts "v1.2.3", "=1.2.3" and surrounding whitespace
    text = version_str.strip()
    if text[:1] in ("v", "="):
        text = text[1:].strip()
    return text


class NpmVersion(Version):
    """A semantic version as used by npm."""

    def __init__(self, version_str: str):
        super().__init__(KnownSchemes.NPM.value, version_str)
        try:
            self._parsed = semantic_version.Version(_clean(version_str or ""))
        except ValueError as exc:
            raise InvalidVersionError(
                KnownSchemes.NPM.value,
                version_str,
                f'Provided version "{version_str}" is not a valid semantic version',
            ) from exc

    @property
    def major(self) -> int:
        return self._parsed.major

    @property
    def minor(self) -> int:
        return self._parsed.minor

    @property
    def patch(self) -> int:
        return self._parsed.patch

    @property
    def prerelease(self) -> Tuple[str, ...]:
        return tuple(self._parsed.prerelease)

    @property
    def build(self) -> Optional[str]:
        return ".".join(self._parsed.build) or None

    def is_stable(self) -> bool:
        return not self._parsed.prerelease

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        # the trailing build component of precedence_key takes no part in precedence
        key_a = self._parsed.precedence_key[:4]
        key_b = other._parsed.precedence_key[:4]
        return (key_a > key_b) - (key_a < key_b)
