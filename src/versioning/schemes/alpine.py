"""Alpine Linux (apk) package versions.

See ``src/version.c`` of apk-tools for the reference implementation.
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import List, NamedTuple

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version


class TokenType(IntEnum):
    """Token kinds, in the order used when two kinds have to be ranked."""

    COMMIT_HASH = 0
    DIGIT = 1
    LETTER = 2
    REVISION = 3
    SUFFIX_ALPHA = 4
    SUFFIX_BETA = 5
    SUFFIX_CVS = 6
    SUFFIX_GIT = 7
    SUFFIX_HG = 8
    SUFFIX_P = 9
    SUFFIX_PRE = 10
    SUFFIX_RC = 11
    SUFFIX_SVN = 12

    @property
    def is_pre_release_suffix(self) -> bool:
        return self in _PRE_RELEASE_SUFFIXES


_PRE_RELEASE_SUFFIXES = frozenset(
    {TokenType.SUFFIX_ALPHA, TokenType.SUFFIX_BETA, TokenType.SUFFIX_PRE, TokenType.SUFFIX_RC}
)

_SUFFIX_TYPES = {
    "alpha": TokenType.SUFFIX_ALPHA,
    "beta": TokenType.SUFFIX_BETA,
    "cvs": TokenType.SUFFIX_CVS,
    "git": TokenType.SUFFIX_GIT,
    "hg": TokenType.SUFFIX_HG,
    "p": TokenType.SUFFIX_P,
    "pre": TokenType.SUFFIX_PRE,
    "rc": TokenType.SUFFIX_RC,
    "svn": TokenType.SUFFIX_SVN,
}

_TOKEN_RE = re.compile(
    r"(?P<digit>[0-9]+)"
    r"|(?P<letter>[a-z])"
    r"|(?P<suffix>_(?:alpha|beta|pre|rc|cvs|svn|git|hg|p))"
    r"|(?P<commit>~[0-9a-f]+)"
    r"|(?P<revision>-r[0-9]+)"
    r"|(?P<dot>\.)"
    r"|(?P<other>.)"
)


class Token(NamedTuple):
    type: TokenType
    value: str

    @property
    def has_leading_zero(self) -> bool:
        return len(self.value) > 1 and self.value.startswith("0")


def tokenize(version_str: str) -> List[Token]:
    """Split an apk version string into comparable tokens."""
    tokens: List[Token] = []
    for match in _TOKEN_RE.finditer(version_str):
        kind = match.lastgroup
        if kind == "digit":
            tokens.append(Token(TokenType.DIGIT, match.group("digit")))
        elif kind == "letter":
            tokens.append(Token(TokenType.LETTER, match.group("letter")))
        elif kind == "suffix":
            suffix = match.group("suffix")[1:]
            tokens.append(Token(_SUFFIX_TYPES[suffix], suffix))
        elif kind == "commit":
            tokens.append(Token(TokenType.COMMIT_HASH, match.group("commit")[1:]))
        elif kind == "revision":
            tokens.append(Token(TokenType.REVISION, match.group("revision")[2:]))
    return tokens


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_token_values(token_a: Token, token_b: Token) -> int:
    kind = token_a.type
    if kind == TokenType.DIGIT:
        if token_a.has_leading_zero or token_b.has_leading_zero:
            return _cmp(token_a.value, token_b.value)
        return _cmp(int(token_a.value), int(token_b.value))
    if kind == TokenType.REVISION:
        return _cmp(int(token_a.value), int(token_b.value))
    if kind in (TokenType.LETTER, TokenType.COMMIT_HASH):
        return _cmp(token_a.value, token_b.value)
    # Suffixes of the same kind are equal; a trailing number is its own token.
    return 0


def compare_tokens(tokens_a: List[Token], tokens_b: List[Token]) -> int:
    """Compare two token lists produced by :func:`tokenize`."""
    for i in range(max(len(tokens_a), len(tokens_b))):
        if i >= len(tokens_a):
            return 1 if tokens_b[i].type.is_pre_release_suffix else -1
        if i >= len(tokens_b):
            return -1 if tokens_a[i].type.is_pre_release_suffix else 1

        token_a = tokens_a[i]
        token_b = tokens_b[i]
        if token_a.type != token_b.type:
            if token_a.type.is_pre_release_suffix and not token_b.type.is_pre_release_suffix:
                return -1
            if token_b.type.is_pre_release_suffix and not token_a.type.is_pre_release_suffix:
                return 1
            return _cmp(token_a.type, token_b.type)

        result = _compare_token_values(token_a, token_b)
        if result != 0:
            return result
    return 0


class AlpineVersion(Version):
    """An Alpine Linux package version."""

    def __init__(self, version_str: str):
        super().__init__(KnownSchemes.ALPINE.value, version_str)
        self._tokens = tuple(tokenize(version_str or ""))
        if not self._tokens:
            raise InvalidVersionError(
                KnownSchemes.ALPINE.value, version_str, f"Failed to parse Alpine version: {version_str}"
            )

    @property
    def tokens(self):
        return self._tokens

    def is_stable(self) -> bool:
        return not any(token.type.is_pre_release_suffix for token in self._tokens)

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        return compare_tokens(list(self._tokens), list(other._tokens))
