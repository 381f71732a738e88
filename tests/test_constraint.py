"""Tests for parsing and evaluating single constraints."""

import pytest

from vers import Comparator, Constraint
from versioning.errors import InvalidRangeError, SchemeMismatchError
from versioning.schemes import NpmVersion


class TestConstraintParse:
    """Operator prefixes, percent decoding and rejected text."""

    @pytest.mark.parametrize(
        "text,comparator,version",
        [
            ("<=1.2.3", Comparator.LESS_THAN_OR_EQUAL, "1.2.3"),
            (">=1.2.3", Comparator.GREATER_THAN_OR_EQUAL, "1.2.3"),
            ("!=1.2.3", Comparator.NOT_EQUAL, "1.2.3"),
            ("<1.2.3", Comparator.LESS_THAN, "1.2.3"),
            (">1.2.3", Comparator.GREATER_THAN, "1.2.3"),
            ("1.2.3", Comparator.EQUAL, "1.2.3"),
            (">= 1.2.3", Comparator.GREATER_THAN_OR_EQUAL, "1.2.3"),
        ],
    )
    def test_prefixes(self, factory, text, comparator, version):
        constraint = Constraint.parse("npm", text, factory)
        assert constraint.scheme == "npm"
        assert constraint.comparator is comparator
        assert str(constraint.version) == version

    def test_percent_encoded_version(self, factory):
        constraint = Constraint.parse("npm", ">=1.0.0%2Bbuild", factory)
        assert str(constraint.version) == "1.0.0+build"

    @pytest.mark.parametrize("text", ["", ">=", "<", "!= "])
    def test_missing_version(self, factory, text):
        with pytest.raises(InvalidRangeError):
            Constraint.parse("npm", text, factory)


class TestConstraintValidation:
    """Wildcard and version combinations."""

    def test_wildcard(self):
        constraint = Constraint.wildcard("npm")
        assert constraint.comparator is Comparator.WILDCARD
        assert constraint.version is None
        assert str(constraint) == "*"

    def test_wildcard_with_version(self):
        with pytest.raises(InvalidRangeError):
            Constraint("npm", Comparator.WILDCARD, NpmVersion("1.0.0"))

    def test_comparator_without_version(self):
        with pytest.raises(InvalidRangeError):
            Constraint("npm", Comparator.LESS_THAN)

    def test_empty_scheme(self):
        with pytest.raises(InvalidRangeError):
            Constraint("", Comparator.WILDCARD)


class TestConstraintMatches:
    """Evaluation of each comparator against a version."""

    @pytest.mark.parametrize(
        "text,version,expected",
        [
            ("<2.0.0", "1.0.0", True),
            ("<2.0.0", "2.0.0", False),
            ("<=2.0.0", "2.0.0", True),
            ("<=2.0.0", "3.0.0", False),
            (">=2.0.0", "2.0.0", True),
            (">=2.0.0", "1.0.0", False),
            (">2.0.0", "3.0.0", True),
            (">2.0.0", "2.0.0", False),
            ("2.0.0", "2.0.0", True),
            ("2.0.0", "2.0.1", False),
            ("!=2.0.0", "2.0.1", True),
            ("!=2.0.0", "2.0.0", False),
        ],
    )
    def test_matches(self, factory, text, version, expected):
        constraint = Constraint.parse("npm", text, factory)
        assert constraint.matches(NpmVersion(version)) is expected

    def test_wildcard_matches_everything(self):
        assert Constraint.wildcard("npm").matches(NpmVersion("0.0.1"))

    def test_scheme_mismatch(self, factory):
        constraint = Constraint.parse("maven", "<2.0", factory)
        with pytest.raises(SchemeMismatchError):
            constraint.matches(NpmVersion("1.0.0"))


class TestConstraintFormatting:
    """String form and ordering."""

    @pytest.mark.parametrize("text", ["<1.0.0", "<=1.0.0", ">1.0.0", ">=1.0.0", "!=1.0.0", "1.0.0"])
    def test_str(self, factory, text):
        assert str(Constraint.parse("npm", text, factory)) == text

    def test_str_encodes_plus(self, factory):
        assert str(Constraint.parse("npm", "1.0.0+build", factory)) == "1.0.0%2Bbuild"

    def test_sorting(self, factory):
        constraints = [
            Constraint.parse("npm", ">=2.0.0", factory),
            Constraint.wildcard("npm"),
            Constraint.parse("npm", "<1.0.0", factory),
        ]
        assert [str(c) for c in sorted(constraints)] == ["*", "<1.0.0", ">=2.0.0"]

    def test_value_equality(self, factory):
        assert Constraint.parse("maven", "1", factory) == Constraint.parse("maven", "1.0", factory)
