# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import sys

import pytest

from semver_expr import (
    ComparisonContext,
    Side,
    admits,
    compare_versions,
    equal,
    greater,
    greater_or_equal,
    less,
    less_or_equal,
    parse_glob_version,
    parse_range,
    parse_version,
    version_greater,
    version_greater_or_equal,
    version_key,
    version_less,
    version_less_or_equal,
    versions_equal,
)

HONOR = ComparisonContext.honoring()

# (left, right, expected ordering), pre-release ignored
VERSION_COMPARISONS = [
    ("1.3", "1.1", 1),
    ("2.4.2", "2.4.2", 0),
    ("4.1", "4", 1),
    ("4.1.1", "4.1", 1),
    ("3.1.3", "3.1.20", -1),
    ("0", "1", -1),
    ("0.1", "0.1", 0),
    ("1.3.0-0", "1.3.0-1", 0),
]


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_omitted_components(self):
        """Test that omitted components compare as 0."""
        assert compare_versions("1", "1.0.0") == 0
        assert compare_versions("1.3", "1.3.0") == 0

    def test_prerelease_ignored_by_default(self):
        """Test that pre-release does not take part without a context."""
        assert compare_versions("1.3.0-0", "1.3.0-1") == 0
        assert compare_versions("1.0.0-alpha", "1.0.0") == 0

    def test_prerelease_honored(self):
        """Test that an honoring context orders pre-releases."""
        assert compare_versions("1.3.0-0", "1.3.0-1", HONOR) == -1
        assert compare_versions("1.0.0-alpha", "1.0.0", HONOR) == -1
        assert compare_versions("1.0.0", "1.0.0-rc", HONOR) == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2", HONOR) == 0
        assert compare_versions("1.0.0+build", "1.0.0", HONOR) == 0

    def test_custom_comparator_result_clamped(self):
        """Test that comparator results are normalized to -1, 0 or 1."""
        ctx = ComparisonContext().with_prerelease_comparator(lambda a, b: len(a) - len(b))
        assert compare_versions("1.0.0-aaaa", "1.0.0-a", ctx) == 1

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(parse_version("1.0.0"), parse_version("2.0.0")) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0


class TestComparableOperators:
    """Tests for the limit-based operators over Comparables."""

    @pytest.mark.parametrize("left,right,expected", VERSION_COMPARISONS)
    def test_greater(self, left, right, expected):
        """Test greater in both directions."""
        v1, v2 = parse_version(left), parse_version(right)
        assert greater(v1, v2) == (expected > 0)
        if expected != 0:
            assert greater(v2, v1) == (expected < 0)

    @pytest.mark.parametrize("left,right,expected", VERSION_COMPARISONS)
    def test_less(self, left, right, expected):
        """Test less in both directions."""
        v1, v2 = parse_version(left), parse_version(right)
        assert less(v1, v2) == (expected < 0)
        if expected != 0:
            assert less(v2, v1) == (expected > 0)

    @pytest.mark.parametrize("left,right,expected", VERSION_COMPARISONS)
    def test_or_equal(self, left, right, expected):
        """Test greater_or_equal and less_or_equal."""
        v1, v2 = parse_version(left), parse_version(right)
        assert greater_or_equal(v1, v2) == (expected >= 0)
        assert less_or_equal(v1, v2) == (expected <= 0)

    @pytest.mark.parametrize("left,right,expected", VERSION_COMPARISONS)
    def test_equal(self, left, right, expected):
        """Test that equal is symmetric."""
        v1, v2 = parse_version(left), parse_version(right)
        assert equal(v1, v2) == (expected == 0)
        assert equal(v2, v1) == (expected == 0)

    def test_honored_prerelease_breaks_equality(self):
        """Test that an honoring context separates pre-releases."""
        v1, v2 = parse_version("1.3.0-0"), parse_version("1.3.0-1")
        assert equal(v1, v2, HONOR) is False
        assert less(v1, v2, HONOR) is True
        assert greater(v2, v1, HONOR) is True

    def test_range_against_version(self):
        """Test comparing a range against a version through its limits."""
        r = parse_range("^1.2.0")
        assert less(parse_version("1.0.0"), r) is True
        assert greater(parse_version("2.0.0"), r) is True
        assert greater(parse_version("1.9.9"), r) is False

    def test_ranges_against_each_other(self):
        """Test comparing two ranges."""
        assert less(parse_range("~1.2"), parse_range("~1.3")) is True
        assert greater(parse_range(">=1.0.0"), parse_range("<2.0.0")) is True

    def test_unbounded_range_outranks_largest_version(self):
        """Test that the infinite limits stay beyond every parseable version."""
        largest = parse_version(f"{sys.maxsize - 1}.{sys.maxsize - 1}.{sys.maxsize - 1}")
        assert greater(largest, parse_range(">=1.0.0")) is False
        assert less(parse_range(">=1.0.0"), largest) is True
        assert parse_range(">=1.0.0").contains(largest) is True
        assert parse_range("<=1.0.0").contains(parse_version("0.0.0")) is True

    def test_equivalent_ranges_are_equal(self):
        """Test that ranges with the same limits are equal."""
        assert equal(parse_range("1.2.x"), parse_range("~1.2.0")) is True
        assert equal(parse_range(">1.2.3"), parse_range(">=1.2.4")) is True
        assert equal(parse_range("<1.3.0"), parse_range("<=1.2.x")) is True
        assert equal(parse_range("^1.2.0"), parse_range("~1.2.0")) is False


class TestGlobComparison:
    """Tests for comparing concrete versions against GlobVersions."""

    def test_wildcard_equality(self):
        """Test that 1.x equals any 1.y.z."""
        glob = parse_glob_version("1.x")
        for text in ["1.0.0", "1.2.3", "1.99.7"]:
            assert versions_equal(parse_version(text), glob) is True
        assert versions_equal(parse_version("2.0.0"), glob) is False

    def test_wildcard_neither_less_nor_greater(self):
        """Test that 1.x is neither less nor greater than 1.y.z."""
        glob = parse_glob_version("1.x")
        for text in ["1.0.0", "1.2.3", "1.99.7"]:
            v = parse_version(text)
            assert version_less(v, glob) is False
            assert version_greater(v, glob) is False

    def test_wildcard_decides_before_reaching_wildcard(self):
        """Test that a difference before the wildcard decides the order."""
        glob = parse_glob_version("1.x")
        assert version_less(parse_version("0.9.0"), glob) is True
        assert version_greater(parse_version("2.0.0"), glob) is True

    def test_patch_wildcard(self):
        """Test ordering against a patch wildcard."""
        glob = parse_glob_version("1.2.x")
        assert version_greater(parse_version("1.3.0"), glob) is True
        assert version_less(parse_version("1.1.9"), glob) is True
        assert versions_equal(parse_version("1.2.7"), glob) is True

    def test_or_equal_variants(self):
        """Test the or-equal predicates against wildcards."""
        glob = parse_glob_version("1.x")
        assert version_less_or_equal(parse_version("1.5.0"), glob) is True
        assert version_greater_or_equal(parse_version("1.5.0"), glob) is True
        assert version_greater_or_equal(parse_version("0.5.0"), glob) is False

    def test_fixed_glob_behaves_like_version(self):
        """Test that a glob without wildcards compares like a version."""
        glob = parse_glob_version("1.2.3-beta")
        assert versions_equal(parse_version("1.2.3-beta"), glob, HONOR) is True
        assert version_greater(parse_version("1.2.3"), glob, HONOR) is True
        assert version_greater(parse_version("1.2.3"), glob) is False


class TestAdmits:
    """Tests for checking a version against a single range bound."""

    def test_absent_lower_bound(self):
        """Test that an absent lower bound admits everything."""
        assert admits(parse_version("0.0.0"), None, side=Side.LOWER, inclusive=False) is True

    def test_absent_upper_bound(self):
        """Test that an absent upper bound admits everything."""
        assert admits(parse_version("999.0.0"), None, side=Side.UPPER, inclusive=False) is True

    def test_inclusive_and_exclusive(self):
        """Test inclusive and exclusive bounds at the boundary."""
        bound = parse_glob_version("1.2.3")
        v = parse_version("1.2.3")
        assert admits(v, bound, side=Side.LOWER, inclusive=True) is True
        assert admits(v, bound, side=Side.LOWER, inclusive=False) is False
        assert admits(v, bound, side=Side.UPPER, inclusive=True) is True
        assert admits(v, bound, side=Side.UPPER, inclusive=False) is False

    def test_wrong_side(self):
        """Test versions outside a bound."""
        bound = parse_glob_version("1.2.3")
        assert admits(parse_version("1.2.2"), bound, side=Side.LOWER, inclusive=True) is False
        assert admits(parse_version("1.2.4"), bound, side=Side.UPPER, inclusive=True) is False


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases under an honoring context."""
        versions = ["1.0.0", "1.0.0-alpha", "1.0.0-beta", "1.0.0-rc"]
        assert sorted(versions, key=lambda v: version_key(v, HONOR)) == [
            "1.0.0-alpha",
            "1.0.0-beta",
            "1.0.0-rc",
            "1.0.0",
        ]

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a, b, c = "1.0.0-alpha", "1.0.0-beta", "1.0.0"
        assert compare_versions(a, b, HONOR) == -1
        assert compare_versions(b, c, HONOR) == -1
        assert compare_versions(a, c, HONOR) == -1

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0+build"]:
            assert compare_versions(v, v, HONOR) == 0
