# SPDX-License-Identifier: MIT
"""Semantic version parsing, ranges and boolean range expressions.

This package parses tolerant semantic versions, wildcard (x-range) versions,
ranges such as ``^1.2.3`` or ``1.2 - 2`` and expressions combining ranges
with implicit AND and explicit ``||``, and tests versions against them.

Example:
    >>> from semver_expr import parse_version, parse_expression, matches, satisfies
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> expr = parse_expression("1.x || >=2.5.0 || 5.0.0 - 7.2.3")
    >>> matches(expr, parse_version("5.45.23"))
    True
    >>>
    >>> satisfies("2.4.99", expr)
    False
"""

import logging

__version__ = "0.1.0"

from .errors import (
    SemverError,
    MalformedVersionError,
    MalformedRangeError,
    MalformedExpressionError,
    UnknownRangeOperatorError,
    UnreliablePrereleaseComparison,
    SatisfiesError,
    ConfigError,
)
from .prerelease import (
    PrereleaseComparator,
    PrereleaseOrder,
    classify_prerelease,
    compare_prereleases,
    compare_revisions,
    prerelease_order,
)
from .config import (
    ComparisonContext,
    DEFAULT_CONTEXT,
)
from .version import (
    Version,
    parse_version,
    parse_permissive_version,
    is_valid,
)
from .glob_version import (
    GlobVersion,
    parse_glob_version,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
)
from .compare import (
    Comparable,
    Side,
    admits,
    compare_versions,
    versions_equal,
    version_less,
    version_greater,
    version_less_or_equal,
    version_greater_or_equal,
    equal,
    less,
    greater,
    less_or_equal,
    greater_or_equal,
    version_key,
)
from .ranges import (
    Range,
    parse_range,
    RANGE_OPERATORS,
)
from .expression import (
    Expression,
    TrueCondition,
    Condition,
    Combinator,
    parse_expression,
    matches,
    satisfies,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SemverError",
    "MalformedVersionError",
    "MalformedRangeError",
    "MalformedExpressionError",
    "UnknownRangeOperatorError",
    "UnreliablePrereleaseComparison",
    "SatisfiesError",
    "ConfigError",
    # Pre-release policies
    "PrereleaseComparator",
    "PrereleaseOrder",
    "classify_prerelease",
    "compare_prereleases",
    "compare_revisions",
    "prerelease_order",
    "ComparisonContext",
    "DEFAULT_CONTEXT",
    # Version parsing
    "Version",
    "parse_version",
    "parse_permissive_version",
    "is_valid",
    "GlobVersion",
    "parse_glob_version",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    # Version comparison
    "Comparable",
    "Side",
    "admits",
    "compare_versions",
    "versions_equal",
    "version_less",
    "version_greater",
    "version_less_or_equal",
    "version_greater_or_equal",
    "equal",
    "less",
    "greater",
    "less_or_equal",
    "greater_or_equal",
    "version_key",
    # Ranges and expressions
    "Range",
    "parse_range",
    "RANGE_OPERATORS",
    "Expression",
    "TrueCondition",
    "Condition",
    "Combinator",
    "parse_expression",
    "matches",
    "satisfies",
]
