"""Tests for Go module version parsing and ordering."""

import pytest

from ordering import EQUAL, HIGHER, LOWER, assert_ordering
from versioning.errors import InvalidVersionError
from versioning.schemes.golang import GoVersion


class TestGoVersionCompare:
    """Ordering per golang.org/x/mod/semver."""

    @pytest.mark.parametrize(
        "version_a,expectation,version_b",
        [
            ("v1.0.0-alpha", LOWER, "v1.0.0-alpha.1"),
            ("v1.0.0-alpha.1", LOWER, "v1.0.0-alpha.beta"),
            ("v1.0.0-alpha.beta", LOWER, "v1.0.0-beta"),
            ("v1.0.0-beta", LOWER, "v1.0.0-beta.2"),
            ("v1.0.0-beta.2", LOWER, "v1.0.0-beta.11"),
            ("v1.0.0-beta.11", LOWER, "v1.0.0-rc.1"),
            ("v1.0.0-rc.1", LOWER, "v1.0.0"),
            ("v1.0.0", LOWER, "v1.2.0"),
            ("v1.2.0", LOWER, "v1.10.0"),
            ("v1", EQUAL, "v1.0.0"),
            ("v1.2", EQUAL, "v1.2.0"),
            ("v1.2.3", EQUAL, "v1.2.3+meta"),
            ("v1.2.3+meta", EQUAL, "v1.2.3+other"),
            ("1.2.3", EQUAL, "v1.2.3"),
            ("v2.0.0", HIGHER, "v1.99.99"),
            ("v0.0.0-20230101000000-abcdef123456", LOWER, "v0.0.1"),
        ],
    )
    def test_compare(self, version_a, expectation, version_b):
        assert_ordering(GoVersion(version_a), expectation, GoVersion(version_b))


class TestGoVersionParsing:
    """Grammar checks and decomposed fields."""

    def test_fields(self):
        version = GoVersion("v1.2.3-rc.1+build.5")
        assert (version.major, version.minor, version.patch) == (1, 2, 3)
        assert version.prerelease == ("rc", "1")
        assert version.build == "build.5"
        assert str(version) == "v1.2.3-rc.1+build.5"
        assert version.scheme == "golang"

    def test_short_form(self):
        version = GoVersion("v1.2")
        assert (version.major, version.minor, version.patch) == (1, 2, 0)

    @pytest.mark.parametrize(
        "version,stable",
        [("v1.2.3", True), ("v1.2.3+meta", True), ("v1.2.3-pre", False)],
    )
    def test_is_stable(self, version, stable):
        assert GoVersion(version).is_stable() is stable

    @pytest.mark.parametrize(
        "version",
        [
            "",
            "v",
            "bad",
            "v01.2.3",
            "v1.02.3",
            "v1.2.03",
            "v1.2-pre",
            "v1.2.3-",
            "v1.2.3-01",
            "v1.2.3-a..b",
            "v1.2.3+",
            "v1.2.3+a_b",
            "v1.2.3.4",
            "v1.2.3junk",
        ],
    )
    def test_invalid(self, version):
        with pytest.raises(InvalidVersionError):
            GoVersion(version)
