# SPDX-License-Identifier: MIT
"""Comparison context: the pre-release policy used by a comparison.

A context is passed explicitly to every comparison, containment and matching
call. There is no process-wide setting, so callers using different policies
never interfere with each other.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError
from .prerelease import PrereleaseComparator, compare_prereleases, compare_revisions

POLICY_ENV_VAR = "SEMVER_EXPR_PRERELEASE_POLICY"


@dataclass(frozen=True)
class ComparisonContext:
    """How pre-release identifiers take part in comparisons.

    Attributes:
        honor_prerelease: When False, versions that differ only in their
            pre-release compare as equal
        prerelease_comparator: Ordering used for pre-release identifiers
            when they are honored
    """

    honor_prerelease: bool = False
    prerelease_comparator: PrereleaseComparator = compare_prereleases

    @classmethod
    def default(cls) -> "ComparisonContext":
        """Pre-release identifiers are ignored."""
        return cls()

    @classmethod
    def honoring(cls) -> "ComparisonContext":
        """Pre-release identifiers are ordered by stage (alpha < beta < rc)."""
        return cls(honor_prerelease=True)

    @classmethod
    def revision(cls) -> "ComparisonContext":
        """Numeric pre-release identifiers act as revisions of the release."""
        return cls.default().with_prerelease_comparator(compare_revisions)

    def with_prerelease_comparator(
        self, comparator: PrereleaseComparator
    ) -> "ComparisonContext":
        """Return a copy using ``comparator``; pre-release becomes honored."""
        return replace(self, honor_prerelease=True, prerelease_comparator=comparator)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ComparisonContext":
        """Create a context from the SEMVER_EXPR_PRERELEASE_POLICY variable.

        Accepted values are ``default``, ``honor`` and ``revision``; unset or
        empty means ``default``.

        Raises:
            ConfigError: If the variable holds an unknown policy name
        """
        env = os.environ if environ is None else environ
        policy = env.get(POLICY_ENV_VAR, "").strip().lower() or "default"

        if policy == "default":
            return cls.default()
        if policy == "honor":
            return cls.honoring()
        if policy == "revision":
            return cls.revision()
        raise ConfigError(f"Unknown pre-release policy in {POLICY_ENV_VAR}: {policy!r}")


DEFAULT_CONTEXT = ComparisonContext.default()
