# SPDX-License-Identifier: MIT
"""Regular-expression grammar for versions, ranges and expressions.

The patterns are built from shared sub-patterns. Python does not allow a
group name to repeat inside one pattern, so every embedded copy of a
sub-pattern gets its group names tagged with a ``__<tag>`` suffix. The
:func:`match_named` helpers strip the tags again and merge the captures so
that the first non-empty capture of a name wins and is never overwritten by a
later one.

Captured names:
    major, minor, patch, prerelease, build: version components
    op: range operator
    version1, version2: the versions of a range
    range: a whole range inside an expression
    union: ``||`` or whitespace between two ranges

Every pattern is compiled with :data:`re.ASCII`, so digit and whitespace
classes only match ASCII characters.

An expression is scanned one step at a time with :func:`scan_named`; the
unparsed remainder starts where the step match ends.
"""

from __future__ import annotations

import re
from typing import Optional

# Alphanumerics and hyphens, dot-separated, never ending in an empty segment
IDENTIFIER = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z.-]*[0-9A-Za-z-])?"

_WILDCARD_COMPONENT = r"\d+|\*|[xX]"

_NAMED_GROUP = re.compile(r"\(\?P<(\w+)>")


def _tag(pattern: str, tag: str) -> str:
    """Suffix every group name in ``pattern`` with ``__<tag>``."""
    return _NAMED_GROUP.sub(lambda m: f"(?P<{m.group(1)}__{tag}>", pattern)


_VERSION_SOURCE = (
    # Major, with tolerated "v" and "=" prefixes
    r"\s*[v=]*(?P<major>\d+)"
    # Optional .minor
    r"(?:\.(?P<minor>\d+)"
    # Optional .patch, only then pre-release and build
    r"(?:\.(?P<patch>\d+)"
    rf"(?:-(?P<prerelease>{IDENTIFIER}))?"
    rf"(?:\+(?P<build>{IDENTIFIER}))?"
    r")?"
    r")?"
    r"\s*"
)

_RELAXED_VERSION_SOURCE = (
    r"\s*[=v]*(?P<major>\d[\da-zA-Z]*)"
    r"(?:[._-](?P<minor>\d[\da-zA-Z]*)?"
    r"(?:[._-](?P<patch>\d[\da-zA-Z]*)?"
    rf"(?:-?(?P<prerelease>{IDENTIFIER}))?"
    rf"(?:\+(?P<build>{IDENTIFIER}))?"
    r")?"
    r")?"
)

_GLOB_VERSION_SOURCE = (
    rf"\s*[=v]*(?P<major>{_WILDCARD_COMPONENT})"
    rf"(?:\.(?P<minor>{_WILDCARD_COMPONENT})"
    rf"(?:\.(?P<patch>{_WILDCARD_COMPONENT})"
    rf"(?:-?(?P<prerelease>{IDENTIFIER}))?"
    rf"(?:\+(?P<build>{IDENTIFIER}))?"
    r")?"
    r")?"
)

# Longer operators first so "<=" is never read as "<"
_RANGE_OPERATOR_SOURCE = r"\^|~|<=|>=|=|<|>|"

_SIMPLE_RANGE_SOURCE = (
    rf"(?P<op>{_RANGE_OPERATOR_SOURCE})\s*(?P<version1>{_GLOB_VERSION_SOURCE})"
)

_HYPHEN_RANGE_SOURCE = (
    rf"(?P<version1>{_tag(_GLOB_VERSION_SOURCE, '1')})"
    r"\s*(?P<op>-)\s*"
    rf"(?P<version2>{_tag(_GLOB_VERSION_SOURCE, '2')})"
)

# Hyphen form is tried first; "1.2.3 - 2" would otherwise stop at "1.2.3"
_RANGE_SOURCE = (
    rf"(?P<range>{_tag(_HYPHEN_RANGE_SOURCE, 'h')}|{_tag(_SIMPLE_RANGE_SOURCE, 's')})"
)

_EXPRESSION_SOURCE = (
    rf"{_tag(_RANGE_SOURCE, 'r')}\s*(?P<union>\|\||\s*)\s*"
)

VERSION_PATTERN = re.compile(rf"^{_VERSION_SOURCE}$", re.ASCII)
RELAXED_VERSION_PATTERN = re.compile(_RELAXED_VERSION_SOURCE, re.ASCII)
GLOB_VERSION_PATTERN = re.compile(_GLOB_VERSION_SOURCE, re.ASCII)
SIMPLE_RANGE_PATTERN = re.compile(_SIMPLE_RANGE_SOURCE, re.ASCII)
HYPHEN_RANGE_PATTERN = re.compile(_HYPHEN_RANGE_SOURCE, re.ASCII)
RANGE_PATTERN = re.compile(_RANGE_SOURCE, re.ASCII)
EXPRESSION_PATTERN = re.compile(_EXPRESSION_SOURCE, re.ASCII)


def _merge(match: re.Match[str]) -> dict[str, str]:
    """Collapse tagged group names, keeping the first non-empty capture."""
    mapping: dict[str, str] = {}
    groups = sorted(match.re.groupindex.items(), key=lambda item: item[1])
    for name, index in groups:
        base = name.split("__", 1)[0]
        if mapping.get(base):
            continue
        mapping[base] = match.group(index) or ""
    return mapping


def match_named(
    pattern: re.Pattern[str], text: str, *, full: bool = False
) -> Optional[dict[str, str]]:
    """Match ``pattern`` at the start of ``text`` and return merged captures.

    Args:
        pattern: One of the compiled grammar patterns
        text: The text to match
        full: Require the pattern to consume the whole text

    Returns:
        A mapping of capture name to captured text (empty string when the
        group did not participate), or None if the pattern does not match.
    """
    match = pattern.fullmatch(text) if full else pattern.match(text)
    if match is None:
        return None
    return _merge(match)


def search_named(pattern: re.Pattern[str], text: str) -> Optional[dict[str, str]]:
    """Like match_named, but the match may start anywhere in ``text``."""
    match = pattern.search(text)
    if match is None:
        return None
    return _merge(match)


def scan_named(
    pattern: re.Pattern[str], text: str, pos: int = 0
) -> Optional[tuple[dict[str, str], int]]:
    """Match ``pattern`` at offset ``pos`` of ``text`` without slicing it.

    Returns:
        The merged captures and the offset where the match ends, or None if
        the pattern does not match at ``pos``.
    """
    match = pattern.match(text, pos)
    if match is None:
        return None
    return _merge(match), match.end()
