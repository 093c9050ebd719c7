# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports a tolerant MAJOR[.MINOR[.PATCH[-prerelease][+build]]] format:
- Omitted minor and patch default to 0 but are remembered as not written
- Leading "v" and "=" characters and surrounding whitespace are ignored
- Pre-release: -alpha, -alpha.1, -rc-2
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import MalformedVersionError
from .grammar import RELAXED_VERSION_PATTERN, VERSION_PATTERN, match_named, search_named

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\d+", re.ASCII)

# Infinite range limits use this value, so parsed components stay below it
MAX_COMPONENT = sys.maxsize


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality compares the numbers, pre-release and build. Whether minor and
    patch were written is kept for range operators but ignored by ``==``, so
    ``1``, ``1.0`` and ``1.0.0`` are equal. A Version never equals a
    GlobVersion under ``==``, even a fixed one; ``versions_equal`` compares
    across the two.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifier (e.g., "alpha.1", "beta", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")
        major_present: Whether the major component was written
        minor_present: Whether the minor component was written
        patch_present: Whether the patch component was written
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None
    major_present: bool = field(default=True, compare=False)
    minor_present: bool = field(default=True, compare=False)
    patch_present: bool = field(default=True, compare=False)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def next_version(self) -> "Version":
        """Increment the lowest written component and zero the ones after it.

        Examples:
            >>> str(parse_version("1.4").next_version())
            '1.5.0'
            >>> str(parse_version("1").next_version())
            '2.0.0'
        """
        if self.patch_present:
            return Version(self.major, self.minor, self.patch + 1)
        if self.minor_present:
            return Version(self.major, self.minor + 1, 0)
        return Version(self.major + 1, 0, 0)

    def lower_limit(self) -> "Version":
        """A version is its own lower limit."""
        return self

    def upper_limit(self) -> "Version":
        """A version is its own upper limit."""
        return self


def _check_text(text: Any) -> str:
    if not isinstance(text, str):
        raise MalformedVersionError(
            str(text), f"Version must be a string, got {type(text).__name__}"
        )
    if not text.strip():
        raise MalformedVersionError(text, "Version string cannot be empty")
    return text


def component_value(version_string: Any, digits: str) -> int:
    """Convert a captured numeric component; an empty capture is 0.

    Raises:
        MalformedVersionError: If the value is not below MAX_COMPONENT, which
            would put it level with or beyond the infinite range limits
    """
    significant = digits.lstrip("0")
    if len(significant) > len(str(MAX_COMPONENT)) or int(significant or 0) >= MAX_COMPONENT:
        raise MalformedVersionError(
            version_string, f"Version component out of range: {digits!r}"
        )
    return int(significant or 0)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; trailing text is an error.

    Args:
        version_string: A string like MAJOR[.MINOR[.PATCH[-prerelease][+build]]]

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the string does not follow the version grammar

    Examples:
        >>> parse_version("1.2.3").minor
        2

        >>> parse_version("1.3").patch_present
        False

        >>> str(parse_version(" v2.0.0-rc.1+build.456 "))
        '2.0.0-rc.1+build.456'
    """
    text = _check_text(version_string)

    mapping = match_named(VERSION_PATTERN, text)
    if mapping is None:
        raise MalformedVersionError(version_string)
    logger.debug("parsed version %r: %s", text, mapping)

    return Version(
        major=component_value(version_string, mapping["major"]),
        minor=component_value(version_string, mapping["minor"]),
        patch=component_value(version_string, mapping["patch"]),
        prerelease=mapping["prerelease"] or None,
        build=mapping["build"] or None,
        major_present=bool(mapping["major"]),
        minor_present=bool(mapping["minor"]),
        patch_present=bool(mapping["patch"]),
    )


def _leading_digits(component: str) -> str:
    match = _LEADING_DIGITS.match(component)
    return match.group() if match else ""


def parse_permissive_version(version_string: str) -> Version:
    """Parse a version, falling back to a relaxed grammar.

    Strict parsing is tried first. On failure the relaxed grammar accepts
    ``_`` and ``-`` as separators and components such as ``2b``; each
    component keeps only its leading digits. Text around the version is
    ignored.

    Raises:
        MalformedVersionError: If not even a leading number can be found

    Examples:
        >>> str(parse_permissive_version("release-1_4_2b"))
        '1.4.2'
        >>> str(parse_permissive_version("1.02"))
        '1.2.0'
    """
    try:
        return parse_version(version_string)
    except MalformedVersionError:
        text = _check_text(version_string)

    mapping = search_named(RELAXED_VERSION_PATTERN, text)
    if mapping is None:
        raise MalformedVersionError(version_string)
    logger.debug("parsed relaxed version %r: %s", text, mapping)

    return Version(
        major=component_value(version_string, _leading_digits(mapping["major"])),
        minor=component_value(version_string, _leading_digits(mapping["minor"])),
        patch=component_value(version_string, _leading_digits(mapping["patch"])),
        prerelease=mapping["prerelease"] or None,
        build=mapping["build"] or None,
        major_present=bool(mapping["major"]),
        minor_present=bool(mapping["minor"]),
        patch_present=bool(mapping["patch"]),
    )


def is_valid(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid("1.0.0")
        True
        >>> is_valid("1.0")
        True
        >>> is_valid("3.5.2  xxx")
        False
    """
    try:
        parse_version(version_string)
    except MalformedVersionError:
        return False
    return True
