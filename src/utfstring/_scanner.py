"""Cluster scanning for translation between character and code-unit indices."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

SURROGATE_PAIR: Final = "[\ud800-\udbff][\udc00-\udfff]"
REGIONAL_INDICATOR_PAIR: Final = (
    "\ud83c[\udde6-\uddff]\ud83c[\udde6-\uddff]"
)

# Widest cluster any pattern below can match, in code units
MAX_CLUSTER_WIDTH: Final = 4

SURROGATE_PATTERN: Final = re.compile(SURROGATE_PAIR)
CLUSTER_PATTERN: Final = re.compile(
    f"{REGIONAL_INDICATOR_PAIR}|{SURROGATE_PAIR}"
)


@dataclass(frozen=True)
class ClusterSpan:
    """Half-open span [start, end) of one multi-unit cluster."""

    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start


def cluster_pattern(*, regional_indicators: bool = True) -> re.Pattern[str]:
    """Returns the compiled pattern for the requested cluster rule."""
    return CLUSTER_PATTERN if regional_indicators else SURROGATE_PATTERN


def char_pattern(pattern: re.Pattern[str]) -> re.Pattern[str]:
    """Returns a pattern matching one logical character under ``pattern``."""
    return re.compile(f"{pattern.pattern}|.", re.DOTALL)


def contains_cluster(units: str, pattern: re.Pattern[str]) -> bool:
    return pattern.search(units) is not None


def next_cluster(
    units: str, pos: int, pattern: re.Pattern[str]
) -> ClusterSpan | None:
    """Finds the next cluster starting at or after ``pos``.

    Args:
        units: Code-unit string to scan
        pos: Code-unit offset to start from
        pattern: Cluster pattern

    Returns:
        Span of the match, or None when the rest of the text has no cluster
    """
    match = pattern.search(units, pos)
    if match is None:
        return None
    return ClusterSpan(match.start(), match.end())


def scan_byte_index(
    units: str,
    char_index: int,
    pattern: re.Pattern[str],
    *,
    has_clusters: bool | None = None,
) -> int | None:
    """Converts a character index into the code-unit offset it starts at.

    Walks from the start of the text, jumping over runs of single code units
    between clusters and counting each cluster as one character.

    Args:
        units: Code-unit string to scan
        char_index: Logical character index
        pattern: Cluster pattern
        has_clusters: Precomputed result of ``contains_cluster``

    Returns:
        Code-unit offset, which equals ``len(units)`` for the index one past
        the last character, or None if the index is beyond that
    """
    if char_index < 0:
        return None

    if has_clusters is None:
        has_clusters = contains_cluster(units, pattern)

    # Fast path: every code unit is a character
    if not has_clusters:
        return char_index if char_index <= len(units) else None

    byte_pos = 0
    char_pos = 0

    while char_pos < char_index:
        span = next_cluster(units, byte_pos, pattern)
        boundary = span.start if span is not None else len(units)

        # Ordinary code units before the next cluster
        remaining = char_index - char_pos
        gap = boundary - byte_pos
        if remaining <= gap:
            return byte_pos + remaining

        char_pos += gap
        byte_pos = boundary

        if span is None:
            return None

        byte_pos = span.end
        char_pos += 1

    return byte_pos


def scan_char_index(
    units: str,
    byte_index: int,
    pattern: re.Pattern[str],
    *,
    has_clusters: bool | None = None,
) -> int | None:
    """Converts a code-unit offset into the index of the character covering it.

    Args:
        units: Code-unit string to scan
        byte_index: Code-unit offset
        pattern: Cluster pattern
        has_clusters: Precomputed result of ``contains_cluster``

    Returns:
        Logical character index, or None if the offset is outside the text
    """
    if byte_index < 0 or byte_index >= len(units):
        return None

    if has_clusters is None:
        has_clusters = contains_cluster(units, pattern)

    if not has_clusters:
        return byte_index

    byte_pos = 0
    char_pos = 0

    while True:
        span = next_cluster(units, byte_pos, pattern)

        # Target sits in the run of ordinary units before the cluster
        if span is None or byte_index < span.start:
            return char_pos + (byte_index - byte_pos)

        char_pos += span.start - byte_pos

        if byte_index < span.end:
            return char_pos

        byte_pos = span.end
        char_pos += 1
