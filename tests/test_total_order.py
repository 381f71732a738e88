"""Property tests: every comparator is a total order and ranges agree with it."""

import pytest
from hypothesis import given, settings, strategies as st

from ordering import sign
from vers import Vers
from versioning import VersionFactory
from versioning.schemes import BUILTIN_PROVIDERS

FACTORY = VersionFactory(BUILTIN_PROVIDERS)


def _joined(*parts):
    return st.tuples(*parts).map("".join)


def _optional(strategy):
    return st.one_of(st.just(""), strategy)


def _prefixed(prefix, strategy):
    return strategy.map(lambda text: prefix + text)


number = st.integers(min_value=0, max_value=20).map(str)
dotted = st.lists(number, min_size=1, max_size=4).map(".".join)
epoch = _optional(number.map(lambda n: n + ":"))

debian = _joined(
    epoch,
    dotted,
    st.lists(st.sampled_from(["~", "~~", "~rc1", "+dfsg", "+b1", "a", ".0"]), max_size=2).map("".join),
    _optional(_prefixed("-", st.sampled_from(["0", "1", "1~deb11u1", "2ubuntu1", "1+b2"]))),
)

rpm_part = st.lists(
    st.sampled_from(["0", "1", "2", "10", "007", "a", "b", "rc", "git", ".", "_", "+", "~", "^"]),
    min_size=1,
    max_size=6,
).map("".join)
rpm = _joined(epoch, rpm_part, _optional(_prefixed("-", rpm_part)))

alpine = _joined(
    dotted,
    _optional(st.sampled_from(["a", "b", "z"])),
    st.lists(
        _joined(
            st.sampled_from(["_alpha", "_beta", "_pre", "_rc", "_p", "_cvs", "_svn", "_git", "_hg"]),
            _optional(number),
        ),
        max_size=2,
    ).map("".join),
    _optional(st.sampled_from(["~abc123", "~0f"])),
    _optional(_prefixed("-r", number)),
)

semver_core = st.lists(number, min_size=3, max_size=3).map(".".join)
prerelease = st.lists(
    st.sampled_from(["alpha", "beta", "rc", "0", "1", "2", "11", "x-y"]), min_size=1, max_size=3
).map(".".join)
build = st.lists(st.sampled_from(["b1", "sha", "001", "exp"]), min_size=1, max_size=2).map(".".join)
npm = _joined(semver_core, _optional(_prefixed("-", prerelease)), _optional(_prefixed("+", build)))

pypi = _joined(
    _optional(st.just("1!")),
    dotted,
    _optional(_joined(st.sampled_from(["a", "b", "rc"]), number)),
    _optional(_prefixed(".post", number)),
    _optional(_prefixed(".dev", number)),
    _optional(st.sampled_from(["+local", "+ubuntu.1", "+1"])),
)

# Qualifiers only after a dash: mixing dotted and dashed qualifiers is not
# transitive in Maven's own ComparableVersion.
maven = _joined(
    dotted,
    _optional(
        _prefixed(
            "-",
            st.sampled_from(
                ["alpha", "alpha1", "beta2", "m1", "rc", "rc1", "cr1", "SNAPSHOT", "ga", "final", "sp", "sp1", "foo", "1", "2"]
            ),
        )
    ),
)

generic = (
    st.lists(st.sampled_from(["0", "1", "2", "10", "a", "b", "rc", "beta", ".", "-", "_"]), min_size=1, max_size=6)
    .map("".join)
    .filter(lambda text: any(char.isalnum() for char in text))
)

SCHEMES = {
    "apk": alpine,
    "deb": debian,
    "generic": generic,
    "golang": _prefixed("v", npm),
    "maven": maven,
    "npm": npm,
    "pypi": pypi,
    "rpm": rpm,
}


def _versions(scheme, count):
    return st.lists(SCHEMES[scheme], min_size=count, max_size=count).map(
        lambda texts: [FACTORY.for_scheme(scheme, t) for t in texts]
    )


class TestTotalOrder:
    """Reflexivity, antisymmetry and transitivity of compare_to."""

    @pytest.mark.parametrize("scheme", sorted(SCHEMES))
    def test_total_order(self, scheme):
        @settings(max_examples=300, deadline=None)
        @given(versions=_versions(scheme, 3))
        def check(versions):
            a, b, c = versions
            assert a.compare_to(a) == 0
            assert sign(a.compare_to(b)) == -sign(b.compare_to(a))
            if a <= b and b <= c:
                assert a <= c
            if a.compare_to(b) == 0:
                assert a == b
                assert hash(a) == hash(b)

        check()

    @pytest.mark.parametrize("scheme", sorted(SCHEMES))
    def test_sorting_is_stable_under_reversal(self, scheme):
        @settings(max_examples=100, deadline=None)
        @given(versions=_versions(scheme, 5))
        def check(versions):
            forward = sorted(versions)
            backward = sorted(reversed(versions))
            assert [sign(x.compare_to(y)) for x, y in zip(forward, backward)] == [0] * len(versions)

        check()


class TestBuildMetadata:
    """Versions differing only in build metadata are equal."""

    @pytest.mark.parametrize("scheme,prefix", [("npm", ""), ("golang", "v")])
    def test_build_is_ignored(self, scheme, prefix):
        @settings(max_examples=100, deadline=None)
        @given(
            core=semver_core,
            pre=_optional(_prefixed("-", prerelease)),
            build_a=_optional(_prefixed("+", build)),
            build_b=_optional(_prefixed("+", build)),
        )
        def check(core, pre, build_a, build_b):
            a = FACTORY.for_scheme(scheme, prefix + core + pre + build_a)
            b = FACTORY.for_scheme(scheme, prefix + core + pre + build_b)
            assert a.compare_to(b) == 0
            assert a == b
            assert hash(a) == hash(b)
            assert Vers.parse(f"vers:{scheme}/{prefix}{core}{pre}", FACTORY).contains(b)

        check()


class TestRangeAgreesWithOrder:
    """A two-sided range contains exactly the versions between its bounds."""

    @settings(max_examples=200, deadline=None)
    @given(versions=_versions("generic", 3))
    def test_half_open_range(self, versions):
        lower, upper, tested = versions
        if lower.compare_to(upper) >= 0:
            return
        vers = Vers.parse(f"vers:generic/>={lower}|<{upper}", FACTORY)
        expected = lower.compare_to(tested) <= 0 < upper.compare_to(tested)
        assert vers.contains(tested) is expected

    @settings(max_examples=100, deadline=None)
    @given(versions=_versions("npm", 2))
    def test_simplify_drops_redundant_lower_bound(self, versions):
        low, tested = versions
        simplified = Vers.parse(f"vers:npm/>={low}|>{low}|<=99.0.0", FACTORY).simplify()
        assert simplified == Vers.parse(f"vers:npm/>={low}|<=99.0.0", FACTORY)
        assert simplified.contains(tested) is (low.compare_to(tested) <= 0)
