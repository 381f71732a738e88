"""Python package versions (PEP 440) backed by ``packaging``."""

from __future__ import annotations

from typing import Optional, Tuple

from packaging import version as pep440

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version


class PypiVersion(Version):
    """A PEP 440 version.

    ``str()`` returns the text as given; the normalized form is available as
    :attr:`normalized`.
    """

    def __init__(self, version_str: str):
        super().__init__(KnownSchemes.PYPI.value, version_str)
        try:
            self._parsed = pep440.Version((version_str or "").strip())
        except pep440.InvalidVersion as exc:
            raise InvalidVersionError(
                KnownSchemes.PYPI.value,
                version_str,
                f'Provided version "{version_str}" is not a valid PEP 440 version',
            ) from exc

    @property
    def epoch(self) -> int:
        return self._parsed.epoch

    @property
    def release(self) -> Tuple[int, ...]:
        return self._parsed.release

    @property
    def pre(self) -> Optional[Tuple[str, int]]:
        return self._parsed.pre

    @property
    def post(self) -> Optional[int]:
        return self._parsed.post

    @property
    def dev(self) -> Optional[int]:
        return self._parsed.dev

    @property
    def local(self) -> Optional[str]:
        return self._parsed.local

    @property
    def normalized(self) -> str:
        return str(self._parsed)

    def is_stable(self) -> bool:
        return self.pre is None and self.dev is None and self.local is None

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        if self._parsed == other._parsed:
            return 0
        return -1 if self._parsed < other._parsed else 1
