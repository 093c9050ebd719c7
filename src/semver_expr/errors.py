# SPDX-License-Identifier: MIT
"""Exception hierarchy for version, range and expression parsing."""

from __future__ import annotations

from typing import Any, Optional


class SemverError(Exception):
    """Base class for every error raised by semver_expr."""

    pass


class MalformedVersionError(SemverError):
    """Raised when a string does not follow the version grammar."""

    def __init__(self, text: Any, message: str = ""):
        self.text = text
        self.message = message or f"Malformed version string: {text!r}"
        super().__init__(self.message)


class MalformedRangeError(SemverError):
    """Raised when a string does not match any range pattern."""

    def __init__(self, text: Any, message: str = ""):
        self.text = text
        self.message = message or f"Malformed range expression: {text!r}"
        super().__init__(self.message)


class UnknownRangeOperatorError(MalformedRangeError):
    """Raised when a range carries an operator outside the known set."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(operator, f"Unknown range operator: {operator!r}")


class MalformedExpressionError(SemverError):
    """Raised when an expression has no ranges or has trailing text.

    Attributes:
        text: The text that failed to parse
        partial: The expression built before parsing stopped, or None when
            no range could be read at all
    """

    def __init__(self, text: Any, message: str = "", partial: Optional[Any] = None):
        self.text = text
        self.partial = partial
        self.message = message or f"Cannot parse expression: {text!r}"
        super().__init__(self.message)


class UnreliablePrereleaseComparison(SemverError, UserWarning):
    """Emitted when only one of two pre-release tags has a known stage.

    The comparison still produces a lexical best-effort result, so this is
    issued through :mod:`warnings` rather than raised.
    """

    def __init__(self, prerelease1: str, prerelease2: str):
        self.prerelease1 = prerelease1
        self.prerelease2 = prerelease2
        super().__init__(
            f"Unreliable pre-release comparison between {prerelease1!r} and {prerelease2!r}"
        )


class SatisfiesError(SemverError):
    """Raised by satisfies() when one of its arguments fails to parse.

    Attributes:
        argument: Which argument failed, "version" or "expression"
        error: The underlying parse error
    """

    def __init__(self, argument: str, error: SemverError):
        self.argument = argument
        self.error = error
        super().__init__(f"Invalid {argument}: {error}")


class ConfigError(SemverError):
    """Raised when a comparison context cannot be configured."""

    pass
