"""Tests for npm (SemVer 2.0) version parsing and ordering."""

import pytest

from ordering import EQUAL, HIGHER, LOWER, assert_ordering
from versioning.errors import InvalidVersionError
from versioning.schemes.npm import NpmVersion


class TestNpmVersionCompare:
    """Precedence rules of semver.org."""

    @pytest.mark.parametrize(
        "version_a,expectation,version_b",
        [
            ("1.0.0-alpha", LOWER, "1.0.0-alpha.1"),
            ("1.0.0-alpha.1", LOWER, "1.0.0-alpha.beta"),
            ("1.0.0-alpha.beta", LOWER, "1.0.0-beta"),
            ("1.0.0-beta", LOWER, "1.0.0-beta.2"),
            ("1.0.0-beta.2", LOWER, "1.0.0-beta.11"),
            ("1.0.0-beta.11", LOWER, "1.0.0-rc.1"),
            ("1.0.0-rc.1", LOWER, "1.0.0"),
            ("1.0.0", LOWER, "2.0.0"),
            ("2.0.0", LOWER, "2.1.0"),
            ("2.1.0", LOWER, "2.1.1"),
            ("1.10.0", HIGHER, "1.9.0"),
            ("1.0.0+build.1", EQUAL, "1.0.0+build.2"),
            ("1.0.0", EQUAL, "1.0.0+sha.5114f85"),
            ("v1.2.3", EQUAL, "1.2.3"),
            ("=1.2.3", EQUAL, "1.2.3"),
            (" 1.2.3 ", EQUAL, "1.2.3"),
            ("7.0.0-M1", LOWER, "7.0.7"),
        ],
    )
    def test_compare(self, version_a, expectation, version_b):
        assert_ordering(NpmVersion(version_a), expectation, NpmVersion(version_b))


class TestNpmVersionParsing:
    """Decomposed fields, stability and rejected input."""

    def test_fields(self):
        version = NpmVersion("1.2.3-beta.4+exp.sha")
        assert (version.major, version.minor, version.patch) == (1, 2, 3)
        assert version.prerelease == ("beta", "4")
        assert version.build == "exp.sha"
        assert str(version) == "1.2.3-beta.4+exp.sha"

    def test_no_build(self):
        assert NpmVersion("1.2.3").build is None

    @pytest.mark.parametrize(
        "version,stable",
        [("1.2.3", True), ("1.2.3+build", True), ("1.2.3-rc.1", False)],
    )
    def test_is_stable(self, version, stable):
        assert NpmVersion(version).is_stable() is stable

    @pytest.mark.parametrize("version", ["", "1.0", "abc", "1.2.3-"])
    def test_invalid(self, version):
        with pytest.raises(InvalidVersionError) as exc_info:
            NpmVersion(version)
        assert exc_info.value.scheme == "npm"


class TestNpmBuildMetadata:
    """Build metadata takes no part in precedence or equality."""

    @pytest.mark.parametrize(
        "version_a,version_b",
        [
            ("1.0.0", "1.0.0+sha.5114f85"),
            ("1.0.0+build.1", "1.0.0+build.2"),
            ("1.0.0-rc.1+a", "1.0.0-rc.1+b.7"),
        ],
    )
    def test_build_is_ignored(self, version_a, version_b):
        a, b = NpmVersion(version_a), NpmVersion(version_b)
        assert a.compare_to(b) == 0
        assert a == b
        assert hash(a) == hash(b)

    def test_prerelease_still_counts(self):
        assert NpmVersion("1.0.0-rc.1+z") < NpmVersion("1.0.0+a")
