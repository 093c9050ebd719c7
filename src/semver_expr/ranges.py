# SPDX-License-Identifier: MIT
"""Version ranges: one operator-bounded constraint.

Supported forms:
- ``1.2.3`` / ``=1.2.3``: exactly that version (wildcards allowed: ``1.x``)
- ``>1.2.3``, ``>=1.2.3``, ``<1.2.3``, ``<=1.2.3``: one-sided bounds
- ``^1.2.3``: up to the next increment of the first non-zero component
- ``~1.2.3`` / ``~1.2``: up to the next minor; ``~1``: up to the next major
- ``1.2.3 - 2.3``: inclusive hyphen range; an upper bound without a patch
  component covers every patch of it
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .compare import Side, admits
from .config import ComparisonContext
from .errors import MalformedRangeError, MalformedVersionError, UnknownRangeOperatorError
from .glob_version import NEGATIVE_INFINITY, POSITIVE_INFINITY, GlobVersion, parse_glob_version
from .grammar import RANGE_PATTERN, match_named
from .version import Version

logger = logging.getLogger(__name__)

RANGE_OPERATORS = ("", "=", ">", ">=", "<", "<=", "^", "~", "-")


@dataclass(frozen=True)
class Range:
    """A parsed range.

    An absent bound leaves that side unbounded.

    Attributes:
        op: The operator the range was written with ("" for a bare version)
        min_version: Lower bound, or None for no lower bound
        max_version: Upper bound, or None for no upper bound
        allow_min_equality: Whether the lower bound itself is included
        allow_max_equality: Whether the upper bound itself is included
    """

    op: str
    min_version: Optional[GlobVersion]
    max_version: Optional[GlobVersion]
    allow_min_equality: bool = True
    allow_max_equality: bool = False

    def __post_init__(self) -> None:
        if self.min_version is None and self.max_version is None:
            raise ValueError("A range needs at least one bound")

    def __str__(self) -> str:
        if self.min_version == self.max_version and self.allow_min_equality and self.allow_max_equality:
            return str(self.min_version)
        parts = []
        if self.min_version is not None:
            parts.append(f"{'>=' if self.allow_min_equality else '>'}{self.min_version}")
        if self.max_version is not None:
            parts.append(f"{'<=' if self.allow_max_equality else '<'}{self.max_version}")
        return " ".join(parts)

    def contains(self, version: Version, context: Optional[ComparisonContext] = None) -> bool:
        """Check if the provided version lies within the range."""
        return admits(
            version,
            self.min_version,
            side=Side.LOWER,
            inclusive=self.allow_min_equality,
            context=context,
        ) and admits(
            version,
            self.max_version,
            side=Side.UPPER,
            inclusive=self.allow_max_equality,
            context=context,
        )

    def matches(self, version: Version, context: Optional[ComparisonContext] = None) -> bool:
        """Same as contains(); a range is the simplest expression."""
        return self.contains(version, context)

    def lower_limit(self) -> GlobVersion:
        """Smallest concrete version in the range (inclusive)."""
        if self.min_version is None:
            return NEGATIVE_INFINITY
        if self.allow_min_equality:
            return self.min_version.lower_limit()
        return self.min_version.successor()

    def upper_limit(self) -> GlobVersion:
        """Largest concrete version in the range (inclusive)."""
        if self.max_version is None:
            return POSITIVE_INFINITY
        if self.allow_max_equality:
            return self.max_version.upper_limit()
        return self.max_version.predecessor()


def _caret_max(version: GlobVersion) -> Optional[GlobVersion]:
    components = [
        (version.major, version.major_present, version.any_major),
        (version.minor, version.minor_present, version.any_minor),
        (version.patch, version.patch_present, version.any_patch),
    ]
    # Scan written, non-wildcard components up to the first non-zero one
    scanned = -1
    for index, (value, present, wildcard) in enumerate(components):
        if wildcard or not present:
            break
        scanned = index
        if value != 0:
            break
    if scanned < 0:
        return None
    bumped = [value for value, _, _ in components[:scanned]]
    bumped.append(components[scanned][0] + 1)
    bumped.extend([0] * (2 - scanned))
    return GlobVersion(*bumped)


def _tilde_max(version: GlobVersion) -> Optional[GlobVersion]:
    if version.any_major:
        return None
    if version.minor_present and not version.any_minor:
        return GlobVersion(version.major, version.minor + 1, 0)
    return GlobVersion(version.major + 1, 0, 0)


def _build_range(op: str, version: GlobVersion, upper_text: str) -> Range:
    if op in ("", "="):
        return Range(op, version, version, True, True)
    if op == ">":
        return Range(op, version, None, False, False)
    if op == ">=":
        return Range(op, version, None, True, False)
    if op == "<":
        return Range(op, None, version, False, False)
    if op == "<=":
        return Range(op, None, version, False, True)
    if op == "^":
        return Range(op, version, _caret_max(version), True, False)
    if op == "~":
        return Range(op, version, _tilde_max(version), True, False)
    if op == "-":
        upper = parse_glob_version(upper_text)
        if upper.patch_present:
            return Range(op, version, upper, True, True)
        return Range(op, version, upper.next_version(), True, False)
    raise UnknownRangeOperatorError(op)


def parse_range(range_string: str) -> Range:
    """Parse a single range such as ``^1.2.3`` or ``1.2 - 2``.

    Raises:
        MalformedRangeError: If the string is not exactly one range
        UnknownRangeOperatorError: If the operator is not supported

    Examples:
        >>> str(parse_range("^1.2.3"))
        '>=1.2.3 <2.0.0'
        >>> str(parse_range("1.3.2 - 1.4"))
        '>=1.3.2 <1.5.0'
        >>> parse_range(">=1.0.0").max_version is None
        True
    """
    if not isinstance(range_string, str):
        raise MalformedRangeError(
            str(range_string), f"Range must be a string, got {type(range_string).__name__}"
        )

    mapping = match_named(RANGE_PATTERN, range_string.strip(), full=True)
    if mapping is None:
        raise MalformedRangeError(range_string)

    op = mapping["op"]
    try:
        version = parse_glob_version(mapping["version1"])
        result = _build_range(op, version, mapping["version2"])
    except MalformedVersionError as e:
        raise MalformedRangeError(range_string, str(e)) from e

    logger.debug(
        "parsed range %r: op=%r min=%s max=%s",
        range_string,
        op,
        result.min_version,
        result.max_version,
    )
    return result
