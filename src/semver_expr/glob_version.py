# SPDX-License-Identifier: MIT
"""Versions with wildcard components (x-ranges).

A component written as ``x``, ``X`` or ``*`` matches any value. Wildcards
extend to the right: ``1.x`` also leaves the patch open, and a wildcard major
leaves everything open. A GlobVersion without wildcards orders and matches
like a Version through the comparison functions. ``==`` is dataclass equality
and also requires the same class, so use :func:`semver_expr.versions_equal`
to compare a GlobVersion with a Version.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from .errors import MalformedVersionError
from .grammar import GLOB_VERSION_PATTERN, match_named
from .version import MAX_COMPONENT, Version, component_value

logger = logging.getLogger(__name__)

MIN_COMPONENT = -sys.maxsize - 1

_WILDCARDS = frozenset({"*", "x", "X"})


@dataclass(frozen=True, slots=True)
class GlobVersion(Version):
    """A version whose trailing components may be wildcards.

    Wildcard components hold 0 as their numeric value.

    Attributes:
        any_major: Major component is a wildcard
        any_minor: Minor component is a wildcard
        any_patch: Patch component is a wildcard
    """

    any_major: bool = False
    any_minor: bool = False
    any_patch: bool = False

    def __post_init__(self) -> None:
        if (self.any_major and not self.any_minor) or (self.any_minor and not self.any_patch):
            raise ValueError(
                "Wildcard components must extend to the right "
                f"(any_major={self.any_major}, any_minor={self.any_minor}, "
                f"any_patch={self.any_patch})"
            )

    def __str__(self) -> str:
        parts = [
            "x" if self.any_major else str(self.major),
            "x" if self.any_minor else str(self.minor),
            "x" if self.any_patch else str(self.patch),
        ]
        version = ".".join(parts)
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_fixed(self) -> bool:
        """Return True if no component is a wildcard."""
        return not (self.any_major or self.any_minor or self.any_patch)

    @classmethod
    def from_version(cls, version: Version) -> "GlobVersion":
        """Wrap a plain Version as a fixed GlobVersion."""
        return cls(
            version.major,
            version.minor,
            version.patch,
            version.prerelease,
            version.build,
            version.major_present,
            version.minor_present,
            version.patch_present,
        )

    def next_version(self) -> Optional["GlobVersion"]:
        """Increment the lowest written, non-wildcard component.

        Returns None when every component is a wildcard, as nothing lies
        beyond such a version.
        """
        if self.patch_present and not self.any_patch:
            return GlobVersion(self.major, self.minor, self.patch + 1)
        if self.minor_present and not self.any_minor:
            return GlobVersion(self.major, self.minor + 1, 0)
        if not self.any_major:
            return GlobVersion(self.major + 1, 0, 0)
        return None

    def lower_limit(self) -> "GlobVersion":
        """Smallest concrete version matched; wildcards become 0."""
        if self.is_fixed:
            return self
        return GlobVersion(
            0 if self.any_major else self.major,
            0 if self.any_minor else self.minor,
            0 if self.any_patch else self.patch,
        )

    def upper_limit(self) -> "GlobVersion":
        """Largest concrete version matched; wildcards become the maximum."""
        if self.is_fixed:
            return self
        return GlobVersion(
            MAX_COMPONENT if self.any_major else self.major,
            MAX_COMPONENT if self.any_minor else self.minor,
            MAX_COMPONENT if self.any_patch else self.patch,
        )

    def successor(self) -> "GlobVersion":
        """Smallest concrete version strictly greater than everything matched."""
        if self.any_major:
            return POSITIVE_INFINITY
        if self.any_minor:
            return GlobVersion(self.major + 1, 0, 0)
        if self.any_patch:
            return GlobVersion(self.major, self.minor + 1, 0)
        return GlobVersion(self.major, self.minor, self.patch + 1)

    def predecessor(self) -> "GlobVersion":
        """Largest concrete version strictly less than everything matched."""
        floor = self.lower_limit()
        major, minor, patch = floor.major, floor.minor, floor.patch
        if patch > 0:
            return GlobVersion(major, minor, patch - 1)
        if minor > 0:
            return GlobVersion(major, minor - 1, MAX_COMPONENT)
        if major > 0:
            return GlobVersion(major - 1, MAX_COMPONENT, MAX_COMPONENT)
        return NEGATIVE_INFINITY


POSITIVE_INFINITY = GlobVersion(MAX_COMPONENT, MAX_COMPONENT, MAX_COMPONENT)
NEGATIVE_INFINITY = GlobVersion(MIN_COMPONENT, MIN_COMPONENT, MIN_COMPONENT)


def parse_glob_version(version_string: str) -> GlobVersion:
    """Parse a version that may contain ``x``, ``X`` or ``*`` components.

    A component is a wildcard when it is written as one, or when it is
    omitted and the component before it is a wildcard.

    Raises:
        MalformedVersionError: If the string is not a wildcard-capable version,
            or if a concrete component follows a wildcard (``x.2.3``)

    Examples:
        >>> str(parse_glob_version("1.x"))
        '1.x.x'
        >>> parse_glob_version("1.2").is_fixed
        True
    """
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    mapping = match_named(GLOB_VERSION_PATTERN, version_string.strip(), full=True)
    if mapping is None:
        raise MalformedVersionError(version_string)
    logger.debug("parsed glob version %r: %s", version_string, mapping)

    major, minor, patch = mapping["major"], mapping["minor"], mapping["patch"]
    any_major = major in _WILDCARDS
    any_minor = minor in _WILDCARDS or (not minor and any_major)
    any_patch = patch in _WILDCARDS or (not patch and any_minor)

    if (any_major and not any_minor) or (any_minor and not any_patch):
        raise MalformedVersionError(
            version_string, f"Concrete component after a wildcard: {version_string!r}"
        )

    return GlobVersion(
        major=0 if any_major else component_value(version_string, major),
        minor=0 if any_minor else component_value(version_string, minor),
        patch=0 if any_patch else component_value(version_string, patch),
        prerelease=mapping["prerelease"] or None,
        build=mapping["build"] or None,
        major_present=bool(major),
        minor_present=bool(minor),
        patch_present=bool(patch),
        any_major=any_major,
        any_minor=any_minor,
        any_patch=any_patch,
    )

