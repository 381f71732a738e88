"""Tests for Debian version parsing and ordering."""

import pytest

from ordering import EQUAL, HIGHER, LOWER, assert_ordering
from versioning.errors import InvalidVersionError, SchemeMismatchError
from versioning.schemes.debian import DebianVersion
from versioning.schemes.rpm import RpmVersion


class TestDebianVersionCompare:
    """Ordering according to deb-version(5)."""

    @pytest.mark.parametrize(
        "version_a,expectation,version_b",
        [
            ("0", LOWER, "1"),
            ("114.0.5735.106-1~deb11u1", LOWER, "114.0.5735.133-1~deb12u1"),
            ("114.0.5735.133-1", HIGHER, "114.0.5735.133-1~deb12u1"),
            ("1.0~rc1", LOWER, "1.0"),
            ("1.0~rc1", LOWER, "1.0~rc2"),
            ("1.0~~", LOWER, "1.0~"),
            ("1.0", LOWER, "1.0a"),
            ("1.0", LOWER, "1.0+dfsg"),
            ("1:0.9", HIGHER, "2.0"),
            ("2.0-1", EQUAL, "2.0-1"),
            ("2.0", EQUAL, "2.0-0"),
            ("1.2.10", HIGHER, "1.2.9"),
            ("1.0-2", HIGHER, "1.0-1"),
            ("1.0-1ubuntu1", HIGHER, "1.0-1"),
        ],
    )
    def test_compare(self, version_a, expectation, version_b):
        assert_ordering(DebianVersion(version_a), expectation, DebianVersion(version_b))


class TestDebianVersionParsing:
    """Decomposition into epoch, upstream version and revision."""

    def test_full_version(self):
        version = DebianVersion("2:1.4.1-3+deb11u1")
        assert version.epoch == 2
        assert version.upstream_version == "1.4.1"
        assert version.debian_revision == "3+deb11u1"
        assert str(version) == "2:1.4.1-3+deb11u1"

    def test_defaults(self):
        version = DebianVersion("1.4.1")
        assert version.epoch == 0
        assert version.debian_revision == "0"
        assert version.is_stable()

    def test_hyphen_in_upstream_version(self):
        version = DebianVersion("1.0-beta-2")
        assert version.upstream_version == "1.0-beta"
        assert version.debian_revision == "2"

    @pytest.mark.parametrize("version", ["", "1.0 beta", "1.0_1"])
    def test_invalid(self, version):
        with pytest.raises(InvalidVersionError) as exc_info:
            DebianVersion(version)
        assert exc_info.value.scheme == "deb"
        assert exc_info.value.version_str == version

    def test_compare_with_other_scheme_fails(self):
        with pytest.raises(SchemeMismatchError):
            DebianVersion("1.0").compare_to(RpmVersion("1.0"))
