"""
UTF-safe string indexing over UTF-16 code units.

Provides character access, search and slicing by logical character position
for text stored as UTF-16 code units, so that surrogate pairs and regional
indicator pairs are never split.

The cluster rule is deliberately narrow: a logical character is one code
unit, one surrogate pair, or one pair of regional indicator symbols (a flag).
Combining marks, ZWJ sequences and the rest of Unicode grapheme segmentation
are not handled. Regional indicator pairs cluster for access and slicing but
``char_code_at`` still decodes them as two separate codepoints.
"""

import builtins
import math
import os
import re
import time
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from typing import Final
from typing import TypeAlias

from ._codec import InvalidCodePointError
from ._codec import bytes_to_units
from ._codec import code_point_to_units
from ._codec import code_points_to_units
from ._codec import combine_surrogates
from ._codec import from_units
from ._codec import is_high_surrogate
from ._codec import is_low_surrogate
from ._codec import to_units
from ._codec import units_to_bytes
from ._scanner import CLUSTER_PATTERN
from ._scanner import MAX_CLUSTER_WIDTH
from ._scanner import SURROGATE_PATTERN
from ._scanner import char_pattern
from ._scanner import cluster_pattern
from ._scanner import contains_cluster
from ._scanner import scan_byte_index
from ._scanner import scan_char_index

__version__ = "0.1.0"

# Type aliases for domain concepts
CharIndex: TypeAlias = int
ByteIndex: TypeAlias = int
# Codepoint, or math.nan when the index is out of range
CodePointResult: TypeAlias = int | float

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "UTFSTRING_PROFILE" in os.environ

NOT_FOUND: Final = -1

_CHAR_PATTERNS: Final = {
    CLUSTER_PATTERN: char_pattern(CLUSTER_PATTERN),
    SURROGATE_PATTERN: char_pattern(SURROGATE_PATTERN),
}


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during index translation."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    units_processed: int = 0

    def record_call(self, duration_ns: int, units: int = 0) -> None:
        """Records a function call with timing and code-unit count."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.units_processed += units


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, units_to_process: int = 0):
            self.func_name = func_name
            self.units = units_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.units)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, units: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


@dataclass(frozen=True)
class ClusterConfig:
    """
    Configures which code-unit sequences count as one logical character.

    With ``regional_indicators`` off only surrogate pairs cluster, so a flag
    counts as two characters. ``window_size`` bounds how many code units
    ``char_at`` inspects after a character's start.
    """

    regional_indicators: bool = True
    window_size: int = 8

    def __post_init__(self) -> None:
        if not isinstance(self.regional_indicators, bool):
            raise TypeError("regional_indicators must be a boolean")
        if isinstance(self.window_size, bool) or not isinstance(
            self.window_size, int
        ):
            raise TypeError("window_size must be an integer")
        if self.window_size < MAX_CLUSTER_WIDTH:
            raise ValueError(
                f"window_size must be at least {MAX_CLUSTER_WIDTH}"
            )


DEFAULT_CONFIG: Final = ClusterConfig()


def _require_str(value: object, name: str) -> str:
    if isinstance(value, IndexedText):
        return str(value)
    if not isinstance(value, str):
        raise TypeError(
            f"{name} must be str or IndexedText, not {type(value).__name__}"
        )
    return value


class IndexedText:
    """
    Immutable text indexed by logical character instead of code unit.

    Every index-based accessor converts its character indices into code-unit
    offsets with ``find_byte_index`` and delegates to plain string
    operations. Out-of-range input yields sentinels (-1, "", nan) or clamps,
    never an exception. Operations returning text return new instances.
    """

    def __init__(
        self,
        text: "str | IndexedText" = "",
        config: ClusterConfig | None = None,
    ) -> None:
        if isinstance(text, IndexedText):
            units = text._units
            config = config or text.config
        else:
            units = to_units(_require_str(text, "text"))

        self.config: Final = config or DEFAULT_CONFIG
        self._units: Final = units
        self._pattern = cluster_pattern(
            regional_indicators=self.config.regional_indicators
        )
        self._char_pattern = _CHAR_PATTERNS[self._pattern]
        self._has_clusters = contains_cluster(units, self._pattern)
        self._length: int | None = None

    @classmethod
    def _from_code_units(
        cls, units: str, config: ClusterConfig | None = None
    ) -> "IndexedText":
        # Surrogate characters already encode themselves as code units
        return cls(units, config)

    def _derive(self, units: str) -> "IndexedText":
        return type(self)._from_code_units(units, self.config)

    @classmethod
    def from_code_point(
        cls, code_point: int, config: ClusterConfig | None = None
    ) -> "IndexedText":
        """Creates text holding one codepoint, surrogate-encoded if astral.

        Raises:
            InvalidCodePointError: If ``code_point`` is outside 0..0x10FFFF
        """
        return cls._from_code_units(code_point_to_units(code_point), config)

    @classmethod
    def from_code_points(
        cls, code_points: Iterable[int], config: ClusterConfig | None = None
    ) -> "IndexedText":
        """Creates text from codepoints, encoded and joined in order."""
        return cls._from_code_units(code_points_to_units(code_points), config)

    @classmethod
    def from_bytes(
        cls, data: Iterable[int], config: ClusterConfig | None = None
    ) -> "IndexedText":
        """Creates text from big-endian UTF-16 byte pairs.

        Even length is the caller's responsibility; a missing final low byte
        is read as 0.
        """
        return cls._from_code_units(bytes_to_units(data), config)

    def _byte_index(
        self, char_index: CharIndex, pattern: re.Pattern[str] | None = None
    ) -> ByteIndex | None:
        with ProfileContext("scan_byte_index", len(self._units)):
            return scan_byte_index(
                self._units,
                char_index,
                pattern or self._pattern,
                has_clusters=self._has_clusters,
            )

    def _char_index(self, byte_index: ByteIndex) -> CharIndex | None:
        with ProfileContext("scan_char_index", len(self._units)):
            return scan_char_index(
                self._units,
                byte_index,
                self._pattern,
                has_clusters=self._has_clusters,
            )

    def _byte_index_in_range(self, char_index: CharIndex) -> ByteIndex | None:
        if not 0 <= char_index < self.length():
            return None
        return self._byte_index(char_index)

    def find_byte_index(self, char_index: CharIndex) -> ByteIndex:
        """Finds the code-unit offset at which a logical character starts.

        Args:
            char_index: Logical character index

        Returns:
            Code-unit offset, or -1 unless 0 <= char_index < length()
        """
        byte_index = self._byte_index_in_range(char_index)
        return NOT_FOUND if byte_index is None else byte_index

    def find_char_index(self, byte_index: ByteIndex) -> CharIndex:
        """Finds the logical character whose span covers a code-unit offset.

        Args:
            byte_index: Code-unit offset

        Returns:
            Character index, or -1 if the offset is outside the text
        """
        char_index = self._char_index(byte_index)
        return NOT_FOUND if char_index is None else char_index

    def length(self) -> int:
        """Returns the number of logical characters."""
        if self._length is None:
            # -1 for empty text, so the count comes out as 0
            self._length = self.find_char_index(len(self._units) - 1) + 1
        return self._length

    def char_at(self, index: CharIndex) -> str:
        """Returns the logical character at ``index``, or "" if outside."""
        byte_index = self._byte_index_in_range(index)
        if byte_index is None:
            return ""

        window_end = byte_index + self.config.window_size
        window = self._units[byte_index:window_end]
        match = self._pattern.match(window)
        return from_units(match.group() if match else window[0])

    def char_code_at(self, index: CharIndex) -> CodePointResult:
        """Returns the codepoint at ``index``, or nan if out of range.

        Only surrogate pairs decode into one codepoint, so this counts a flag
        as two characters even when ``char_at`` treats it as one.
        """
        byte_index = self._byte_index(index, SURROGATE_PATTERN)
        if byte_index is None or byte_index >= len(self._units):
            return math.nan

        code = ord(self._units[byte_index])
        if is_high_surrogate(code) and byte_index + 1 < len(self._units):
            low = ord(self._units[byte_index + 1])
            if is_low_surrogate(low):
                return combine_surrogates(code, low)
        return code

    def index_of(
        self, needle: "str | IndexedText", start: CharIndex = 0
    ) -> CharIndex:
        """Finds the first occurrence of ``needle`` at or after ``start``.

        A negative start searches from the beginning; a start at or past
        ``length()`` finds nothing.
        """
        needle_units = to_units(_require_str(needle, "needle"))
        start_byte = self._byte_index_in_range(max(start, 0))
        if start_byte is None:
            return NOT_FOUND

        found = self._units.find(needle_units, start_byte)
        return NOT_FOUND if found < 0 else self.find_char_index(found)

    def last_index_of(
        self, needle: "str | IndexedText", start: CharIndex | None = None
    ) -> CharIndex:
        """Finds the last ``needle`` beginning at or before ``start``.

        Without ``start`` the whole text is searched.
        """
        needle_units = to_units(_require_str(needle, "needle"))

        if start is None:
            found = self._units.rfind(needle_units)
        else:
            start_byte = self._byte_index_in_range(max(start, 0))
            if start_byte is None:
                return NOT_FOUND
            found = self._units.rfind(
                needle_units, 0, start_byte + len(needle_units)
            )

        return NOT_FOUND if found < 0 else self.find_char_index(found)

    def slice(
        self, start: CharIndex, end: CharIndex | None = None
    ) -> "IndexedText":
        """Returns the characters from ``start`` up to, not including, ``end``.

        Out-of-range bounds clamp to the end of the text.
        """
        size = len(self._units)

        start_byte = self.find_byte_index(start)
        if start_byte < 0:
            start_byte = size

        if end is None:
            end_byte = size
        else:
            end_byte = self.find_byte_index(end)
            if end_byte < 0:
                end_byte = size

        return self._derive(self._units[start_byte:end_byte])

    def substr(
        self, start: CharIndex, length: int | None = None
    ) -> "IndexedText":
        """Returns ``length`` characters from ``start``, or all remaining.

        A negative ``start`` counts back from the end.
        """
        if start < 0:
            start = self.length() + start

        if length is None:
            return self.slice(start)
        return self.slice(start, start + length)

    def substring(
        self, start: CharIndex, length: int | None = None
    ) -> "IndexedText":
        """Same as ``substr``."""
        return self.substr(start, length)

    def to_code_points(self) -> list[int]:
        """Returns the codepoints, stopping early at the first U+0000."""
        result: list[int] = []

        for match in _CHAR_PATTERNS[SURROGATE_PATTERN].finditer(self._units):
            units = match.group()
            if len(units) == 2:
                code = combine_surrogates(ord(units[0]), ord(units[1]))
            else:
                code = ord(units)

            # A zero codepoint ends the sequence
            if not code:
                break
            result.append(code)

        return result

    def to_bytes(self) -> list[int]:
        """Returns the code units as big-endian byte pairs."""
        return units_to_bytes(self._units)

    def to_char_array(self) -> list[str]:
        """Returns the logical characters in order."""
        return list(self)

    def __iter__(self) -> Iterator[str]:
        for match in self._char_pattern.finditer(self._units):
            yield from_units(match.group())

    def __len__(self) -> int:
        return self.length()

    def __getitem__(
        self, key: int | builtins.slice
    ) -> "str | IndexedText":
        if isinstance(key, builtins.slice):
            if key.step not in (None, 1):
                raise ValueError("IndexedText slices must have step 1")
            start, stop, _ = key.indices(self.length())
            return self.slice(start, stop)

        index = key + self.length() if key < 0 else key
        char = self.char_at(index)
        if not char:
            raise IndexError("IndexedText index out of range")
        return char

    def __contains__(self, needle: object) -> bool:
        return to_units(_require_str(needle, "needle")) in self._units

    def __add__(self, other: object) -> "IndexedText":
        if isinstance(other, IndexedText):
            return self._derive(self._units + other._units)
        if isinstance(other, str):
            return self._derive(self._units + to_units(other))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexedText):
            return NotImplemented
        return self._units == other._units

    def __hash__(self) -> int:
        return hash(self._units)

    def __str__(self) -> str:
        return from_units(self._units)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


# Alternative name for callers used to the utfstring API
UtfString = IndexedText


def string_from_code_point(code_point: int) -> str:
    """Returns the text for one codepoint.

    Raises:
        InvalidCodePointError: If ``code_point`` is outside 0..0x10FFFF
    """
    return from_units(code_point_to_units(code_point))


def code_points_to_string(code_points: Iterable[int]) -> str:
    return from_units(code_points_to_units(code_points))


def string_to_code_points(text: str) -> list[int]:
    return IndexedText(text).to_code_points()


def string_to_bytes(text: str) -> list[int]:
    return IndexedText(text).to_bytes()


def bytes_to_string(data: Iterable[int]) -> str:
    return str(IndexedText.from_bytes(data))


def string_to_char_array(text: str) -> list[str]:
    """Splits text into logical characters, keeping clusters whole."""
    return IndexedText(text).to_char_array()


__all__ = [
    "DEFAULT_CONFIG",
    "NOT_FOUND",
    "ClusterConfig",
    "HotPathStats",
    "IndexedText",
    "InvalidCodePointError",
    "ProfileContext",
    "UtfString",
    "__version__",
    "bytes_to_string",
    "clear_hot_path_stats",
    "code_points_to_string",
    "get_hot_path_stats",
    "string_from_code_point",
    "string_to_bytes",
    "string_to_char_array",
    "string_to_code_points",
]
