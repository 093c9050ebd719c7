# SPDX-License-Identifier: MIT
"""Pre-release ordering policies.

A pre-release comparator is any callable taking two pre-release strings and
returning -1, 0 or 1. An empty string stands for "no pre-release", which is a
release and therefore newer than any pre-release of the same version.

Stage ordering used by the default policy:
    pre-alpha < alpha (a) < beta (b) < release_candidate (rc) < final

Each stage may carry a numeric qualifier (``beta2``, ``rc.1``, ``alpha-3``),
compared numerically when both sides are in the same stage.
"""

from __future__ import annotations

import logging
import re
import warnings
from typing import Callable, NamedTuple, Optional

from .errors import UnreliablePrereleaseComparison

logger = logging.getLogger(__name__)

PrereleaseComparator = Callable[[str, str], int]

# Stage index, lowest first
_STAGE_ORDER = {
    "pre-alpha": 0,
    "alpha": 1,
    "a": 1,
    "beta": 2,
    "b": 2,
    "release_candidate": 3,
    "rc": 3,
    "final": 4,
}

_STAGE_PATTERN = re.compile(
    r"^(?P<stage>pre-alpha|alpha|a|beta|b|release_candidate|rc|final)"
    r"(?:[._-]?(?P<number>\d+))?$",
    re.IGNORECASE | re.ASCII,
)

_NUMERIC_PATTERN = re.compile(r"[0-9]+")


class PrereleaseOrder(NamedTuple):
    """Result of a pre-release comparison.

    Attributes:
        result: -1, 0 or 1
        reliable: False when only one side had a recognizable stage and the
            result fell back to plain string ordering
    """

    result: int
    reliable: bool = True


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _lexical(pre1: str, pre2: str) -> int:
    return (pre1 > pre2) - (pre1 < pre2)


def classify_prerelease(prerelease: str) -> Optional[tuple[int, int]]:
    """Return ``(stage, number)`` for a known stage, otherwise None.

    Examples:
        >>> classify_prerelease("beta2")
        (2, 2)
        >>> classify_prerelease("RC.1")
        (3, 1)
        >>> classify_prerelease("nightly") is None
        True
    """
    match = _STAGE_PATTERN.match(prerelease)
    if match is None:
        return None
    number = match.group("number")
    return (_STAGE_ORDER[match.group("stage").lower()], int(number) if number else 0)


def prerelease_order(pre1: str, pre2: str) -> PrereleaseOrder:
    """Compare two pre-release strings with the stage-bucket policy.

    Unlike :func:`compare_prereleases`, the reliability signal is returned
    instead of being issued as a warning.
    """
    if pre1 == pre2:
        return PrereleaseOrder(0)
    # No pre-release means a release, which is newer than any pre-release
    if not pre1:
        return PrereleaseOrder(1)
    if not pre2:
        return PrereleaseOrder(-1)

    stage1 = classify_prerelease(pre1)
    stage2 = classify_prerelease(pre2)
    if stage1 is not None and stage2 is not None:
        if stage1 == stage2:
            return PrereleaseOrder(0)
        return PrereleaseOrder(-1 if stage1 < stage2 else 1)
    if stage1 is None and stage2 is None:
        return PrereleaseOrder(_lexical(pre1, pre2))
    return PrereleaseOrder(_lexical(pre1, pre2), reliable=False)


def compare_prereleases(pre1: str, pre2: str) -> int:
    """Default pre-release comparator.

    Returns:
        -1 if pre1 < pre2, 0 if equal, 1 if pre1 > pre2

    Warns:
        UnreliablePrereleaseComparison: If only one side has a known stage
    """
    order = prerelease_order(pre1, pre2)
    if not order.reliable:
        logger.debug("unreliable pre-release comparison %r %r", pre1, pre2)
        warnings.warn(UnreliablePrereleaseComparison(pre1, pre2), stacklevel=2)
    return order.result


def compare_revisions(pre1: str, pre2: str) -> int:
    """Comparator treating purely numeric pre-releases as revisions.

    A numeric identifier outranks any non-numeric one, including the empty
    (release) identifier, and two numeric identifiers compare as integers.
    Anything else is delegated to :func:`compare_prereleases`.

    Examples:
        >>> compare_revisions("2", "10")
        -1
        >>> compare_revisions("1", "rc")
        1
    """
    if pre1 == pre2:
        return 0
    numeric1 = _NUMERIC_PATTERN.fullmatch(pre1) is not None
    numeric2 = _NUMERIC_PATTERN.fullmatch(pre2) is not None
    if numeric1 and numeric2:
        return _sign(int(pre1) - int(pre2))
    if numeric1:
        return 1
    if numeric2:
        return -1
    return compare_prereleases(pre1, pre2)
