# SPDX-License-Identifier: MIT
"""Boolean expressions over ranges.

Ranges separated by whitespace are combined with AND, ranges separated by
``||`` with OR. There is no precedence and there are no parentheses: the
expression is folded left to right, each range joining the expression built
so far with the separator read before it. ``A || B C`` is therefore
``(A OR B) AND C``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .config import ComparisonContext
from .errors import MalformedExpressionError, MalformedVersionError, SatisfiesError, SemverError
from .grammar import EXPRESSION_PATTERN, scan_named
from .ranges import Range, parse_range
from .version import Version, parse_version

logger = logging.getLogger(__name__)


class Combinator(Enum):
    """How two sub-expressions are joined."""

    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class TrueCondition:
    """Matches every version; the seed of the left fold."""

    def matches(self, version: Version, context: Optional[ComparisonContext] = None) -> bool:
        return True


@dataclass(frozen=True)
class Condition:
    """Two sub-expressions joined by AND or OR."""

    op: Combinator
    left: "Expression"
    right: "Expression"

    def matches(self, version: Version, context: Optional[ComparisonContext] = None) -> bool:
        if self.op is Combinator.AND:
            return self.left.matches(version, context) and self.right.matches(version, context)
        return self.left.matches(version, context) or self.right.matches(version, context)


Expression = Union[TrueCondition, Range, Condition]

ALWAYS = TrueCondition()


def parse_expression(expression_string: str) -> Expression:
    """Parse an expression such as ``1.x || >=2.5.0 || 5.0.0 - 7.2.3``.

    Raises:
        MalformedExpressionError: If no range can be read, or if text remains
            after the last range. In the latter case the exception's
            ``partial`` attribute holds the expression parsed so far.
        MalformedRangeError: If a range matches the grammar but cannot be built

    Examples:
        >>> expr = parse_expression(">=1.2.7 <1.3.0")
        >>> matches(expr, parse_version("1.2.8"))
        True
    """
    if not isinstance(expression_string, str):
        raise MalformedExpressionError(
            str(expression_string),
            f"Expression must be a string, got {type(expression_string).__name__}",
        )

    # Separators consume the whitespace after each range
    pos = len(expression_string) - len(expression_string.lstrip())
    condition: Expression = ALWAYS
    pending = Combinator.AND
    ranges = 0

    while True:
        scanned = scan_named(EXPRESSION_PATTERN, expression_string, pos)
        if scanned is None:
            break
        mapping, pos = scanned
        parsed = parse_range(mapping["range"])
        condition = Condition(pending, condition, parsed)
        ranges += 1
        logger.debug("expression %r: %s %s", expression_string, pending.value, parsed)

        # The separator after this range joins the next one
        pending = Combinator.OR if mapping["union"] == "||" else Combinator.AND

    remaining = expression_string[pos:]
    if ranges == 0:
        raise MalformedExpressionError(expression_string)
    if remaining.strip():
        raise MalformedExpressionError(
            expression_string,
            f"Extra characters found in expression: {remaining.strip()!r}",
            partial=condition,
        )
    return condition


def matches(
    expression: Expression, version: Version, context: Optional[ComparisonContext] = None
) -> bool:
    """Check if ``version`` satisfies ``expression``."""
    return expression.matches(version, context)


def satisfies(
    version: Union[str, Version],
    expression: Union[str, Expression],
    context: Optional[ComparisonContext] = None,
) -> bool:
    """Check a version against an expression, parsing strings as needed.

    Args:
        version: Version string or Version object
        expression: Expression string or parsed expression (a Range included)
        context: Pre-release policy used for comparisons

    Raises:
        SatisfiesError: If either argument fails to parse; ``argument`` tells
            which one, the version being parsed first

    Examples:
        >>> satisfies("1.2.3", "1.x || >=2.5.0")
        True
        >>> satisfies("2.4.99", "1.x || >=2.5.0")
        False
    """
    if isinstance(version, str):
        try:
            version = parse_version(version)
        except MalformedVersionError as e:
            raise SatisfiesError("version", e) from e
    if isinstance(expression, str):
        try:
            expression = parse_expression(expression)
        except SemverError as e:
            raise SatisfiesError("expression", e) from e
    return matches(expression, version, context)
