"""Conversions between Python text, UTF-16 code units, codepoints and bytes."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from typing import Final

MAX_CODE_POINT: Final = 0x10FFFF
BMP_LIMIT: Final = 0xFFFF
HIGH_SURROGATE_START: Final = 0xD800
HIGH_SURROGATE_END: Final = 0xDBFF
LOW_SURROGATE_START: Final = 0xDC00
LOW_SURROGATE_END: Final = 0xDFFF
SUPPLEMENTARY_OFFSET: Final = 0x10000


class InvalidCodePointError(ValueError):
    """Raised for an integer that is not a Unicode codepoint."""

    def __init__(self, code_point: int) -> None:
        self.code_point = code_point
        super().__init__(
            f"code point {code_point!r} outside range 0..{MAX_CODE_POINT:#x}"
        )


def to_units(text: str) -> str:
    """Splits astral characters of ``text`` into surrogate characters.

    The result has one character per UTF-16 code unit. Lone surrogates
    already present in ``text`` are kept as they are.
    """
    if text.isascii() or max(text) <= "\uffff":
        return text

    data = text.encode("utf-16-be", "surrogatepass")
    return "".join(
        chr(unit) for unit in struct.unpack(f">{len(data) // 2}H", data)
    )


def from_units(units: str) -> str:
    """Joins surrogate pairs in ``units`` back into single characters."""
    return units.encode("utf-16-be", "surrogatepass").decode(
        "utf-16-be", "surrogatepass"
    )


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def combine_surrogates(high: int, low: int) -> int:
    return (
        (high - HIGH_SURROGATE_START) * 0x400
        + (low - LOW_SURROGATE_START)
        + SUPPLEMENTARY_OFFSET
    )


def code_point_to_units(code_point: int) -> str:
    """Encodes one codepoint as one or two code units.

    Raises:
        InvalidCodePointError: If ``code_point`` is outside 0..0x10FFFF
    """
    if (
        isinstance(code_point, bool)
        or not 0 <= code_point <= MAX_CODE_POINT
    ):
        raise InvalidCodePointError(code_point)

    if code_point > BMP_LIMIT:
        offset = code_point - SUPPLEMENTARY_OFFSET
        return chr(HIGH_SURROGATE_START + (offset >> 10)) + chr(
            LOW_SURROGATE_START + (offset & 0x3FF)
        )
    return chr(code_point)


def code_points_to_units(code_points: Iterable[int]) -> str:
    return "".join(code_point_to_units(cp) for cp in code_points)


def units_to_bytes(units: str) -> list[int]:
    """Serializes code units as big-endian byte pairs."""
    return list(units.encode("utf-16-be", "surrogatepass"))


def bytes_to_units(data: Iterable[int]) -> str:
    """Reads big-endian byte pairs as code units.

    A missing low byte at the end of odd-length input is read as 0.
    """
    raw = bytes(data)
    if len(raw) % 2:
        raw += b"\x00"
    return "".join(
        chr(unit) for unit in struct.unpack(f">{len(raw) // 2}H", raw)
    )
