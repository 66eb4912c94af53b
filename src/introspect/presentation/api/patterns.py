"""Wildcard pattern matching for names and paths.

Syntax:
    *    zero or more of any character (dots, slashes and newlines included)

Every other character is literal, including regex metacharacters and
backslashes. Matching is anchored on both ends and case-sensitive:
a pattern without * is plain string equality.

Examples:
    admin.*    matches admin.users, admin. ; not other.users
    *.show     matches users.show, .show
    /api/*     matches /api/users/{id}
"""

from __future__ import annotations

import re
from dataclasses import dataclass

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Compiled wildcard pattern.

    Immutable value object containing original pattern and compiled regex.

    Attributes:
        original: Original pattern string
        regex: Compiled regex for matching
    """

    original: str
    regex: re.Pattern[str]

    def match(self, value: str) -> bool:
        """Check if the whole value matches pattern.

        Args:
            value: Candidate string

        Returns:
            True if value matches pattern

        Raises:
            TypeError: If value is None
        """
        if value is None:
            raise TypeError("value must not be None")
        return self.regex.fullmatch(value) is not None

    def __str__(self) -> str:
        """Return original pattern string."""
        return self.original

    def __repr__(self) -> str:
        """Return repr with original pattern."""
        return f"CompiledPattern({self.original!r})"


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile wildcard pattern to regex.

    Literal segments between * are escaped, then joined with .*
    Any string is a valid pattern (empty pattern matches only "").

    Args:
        pattern: Wildcard pattern string

    Returns:
        CompiledPattern with original and compiled regex

    Raises:
        TypeError: If pattern is None or not a string
    """
    if pattern is None:
        raise TypeError("pattern must not be None")
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be str, got {type(pattern).__name__}")

    regex = ".*".join(re.escape(segment) for segment in pattern.split(WILDCARD))
    return CompiledPattern(original=pattern, regex=re.compile(regex, re.DOTALL))


def has_wildcard(pattern: str) -> bool:
    """Check if pattern contains a wildcard."""
    return WILDCARD in pattern
