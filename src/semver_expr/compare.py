# SPDX-License-Identifier: MIT
"""Version comparison.

Concrete versions are ordered by (major, minor, patch). Pre-release only
breaks ties when the comparison context honors it, and build metadata never
takes part.

A concrete version compared against a GlobVersion:
- equal: every non-wildcard component matches
- less/greater: decided by the first differing component; reaching a
  wildcard first makes the predicate False, so ``1.x`` is neither less nor
  greater than any ``1.y.z``
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import Any, Optional, Protocol, Union

from .config import DEFAULT_CONTEXT, ComparisonContext
from .glob_version import GlobVersion
from .version import Version, parse_version


class Comparable(Protocol):
    """Anything with inclusive concrete limits: Version, GlobVersion, Range."""

    def lower_limit(self) -> Version: ...

    def upper_limit(self) -> Version: ...


class Side(Enum):
    """Which end of a range a bound sits on."""

    LOWER = "lower"
    UPPER = "upper"


def _coerce(version: Union[str, Version]) -> Version:
    return version if isinstance(version, Version) else parse_version(version)


def _components(version: Version) -> tuple[int, int, int]:
    return (version.major, version.minor, version.patch)


def _wildcards(glob: GlobVersion) -> tuple[bool, bool, bool]:
    return (glob.any_major, glob.any_minor, glob.any_patch)


def _is_glob(version: Version) -> bool:
    return isinstance(version, GlobVersion) and not version.is_fixed


def compare_versions(
    version1: Union[str, Version],
    version2: Union[str, Version],
    context: Optional[ComparisonContext] = None,
) -> int:
    """Compare two concrete versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        context: Pre-release policy; pre-release is ignored by default

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        MalformedVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("4.1", "4")
        1
        >>> compare_versions("1.3.0-0", "1.3.0-1")
        0
        >>> compare_versions("1.3.0-0", "1.3.0-1", ComparisonContext.honoring())
        -1
    """
    ctx = context or DEFAULT_CONTEXT
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for val1, val2 in zip(_components(v1), _components(v2)):
        if val1 != val2:
            return -1 if val1 < val2 else 1

    if not ctx.honor_prerelease:
        return 0
    # Build metadata is ignored
    result = ctx.prerelease_comparator(v1.prerelease or "", v2.prerelease or "")
    return max(-1, min(1, result))


def _glob_order(version: Version, glob: GlobVersion, want_less: bool) -> bool:
    for value, bound, wildcard in zip(_components(version), _components(glob), _wildcards(glob)):
        if wildcard:
            return False
        if value != bound:
            return (value < bound) == want_less
    return False


def versions_equal(
    version: Version, other: Version, context: Optional[ComparisonContext] = None
) -> bool:
    """Return True if ``version`` equals ``other`` (which may be a GlobVersion)."""
    if _is_glob(other):
        return all(
            wildcard or value == bound
            for value, bound, wildcard in zip(
                _components(version), _components(other), _wildcards(other)
            )
        )
    return compare_versions(version, other, context) == 0


def version_less(
    version: Version, other: Version, context: Optional[ComparisonContext] = None
) -> bool:
    """Return True if ``version`` is strictly less than ``other``."""
    if _is_glob(other):
        return _glob_order(version, other, want_less=True)
    return compare_versions(version, other, context) < 0


def version_greater(
    version: Version, other: Version, context: Optional[ComparisonContext] = None
) -> bool:
    """Return True if ``version`` is strictly greater than ``other``."""
    if _is_glob(other):
        return _glob_order(version, other, want_less=False)
    return compare_versions(version, other, context) > 0


def version_less_or_equal(
    version: Version, other: Version, context: Optional[ComparisonContext] = None
) -> bool:
    return version_less(version, other, context) or versions_equal(version, other, context)


def version_greater_or_equal(
    version: Version, other: Version, context: Optional[ComparisonContext] = None
) -> bool:
    return version_greater(version, other, context) or versions_equal(version, other, context)


def admits(
    version: Version,
    bound: Optional[GlobVersion],
    *,
    side: Side,
    inclusive: bool,
    context: Optional[ComparisonContext] = None,
) -> bool:
    """Check ``version`` against one bound of a range.

    An absent bound is unbounded: minus infinity on the lower side and plus
    infinity on the upper side, so it admits every version.
    """
    if bound is None:
        return True
    if side is Side.LOWER:
        beyond = version_greater(version, bound, context)
    else:
        beyond = version_less(version, bound, context)
    return beyond or (inclusive and versions_equal(version, bound, context))


def greater(e1: Comparable, e2: Comparable, context: Optional[ComparisonContext] = None) -> bool:
    """Check if element e1 is greater than e2 (by upper limits)."""
    return version_greater(e1.upper_limit(), e2.upper_limit(), context)


def less(e1: Comparable, e2: Comparable, context: Optional[ComparisonContext] = None) -> bool:
    """Check if element e1 is less than e2 (by lower limits)."""
    return version_less(e1.lower_limit(), e2.lower_limit(), context)


def greater_or_equal(
    e1: Comparable, e2: Comparable, context: Optional[ComparisonContext] = None
) -> bool:
    """Check if element e1 is greater than or equal to e2 (by upper limits)."""
    return version_greater_or_equal(e1.upper_limit(), e2.upper_limit(), context)


def less_or_equal(
    e1: Comparable, e2: Comparable, context: Optional[ComparisonContext] = None
) -> bool:
    """Check if element e1 is less than or equal to e2 (by lower limits)."""
    return version_less_or_equal(e1.lower_limit(), e2.lower_limit(), context)


def equal(e1: Comparable, e2: Comparable, context: Optional[ComparisonContext] = None) -> bool:
    """Check if e1 and e2 have the same lower and upper limits."""
    return versions_equal(e1.lower_limit(), e2.lower_limit(), context) and versions_equal(
        e1.upper_limit(), e2.upper_limit(), context
    )


def version_key(version: Union[str, Version], context: Optional[ComparisonContext] = None) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object
        context: Pre-release policy used for ordering

    Examples:
        >>> sorted(["2.0.0", "1.0.0", "1.1"], key=version_key)
        ['1.0.0', '1.1', '2.0.0']
    """
    key = functools.cmp_to_key(functools.partial(compare_versions, context=context))
    return key(_coerce(version))
