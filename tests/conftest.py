"""
Pytest configuration and shared fixtures for utfstring tests.

Provides immutable text fixtures mixing plain code units, surrogate pairs
and regional indicator pairs.
"""

from dataclasses import dataclass

import pytest

GRINNING_FACE = "\U0001f600"
PILE_OF_POO = "\U0001f4a9"
FLAG_US = "\U0001f1fa\U0001f1f8"
FLAG_DE = "\U0001f1e9\U0001f1ea"


@dataclass(frozen=True)
class TextCase:
    """
    Immutable container for indexed text test data.

    Holds input text with its expected logical characters and the code-unit
    offset where each of them starts.
    """

    description: str
    text: str
    chars: tuple[str, ...]
    byte_offsets: tuple[int, ...]


@pytest.fixture
def emoji_text() -> str:
    """Text with a surrogate pair between two ASCII letters."""
    return "a" + GRINNING_FACE + "b"


@pytest.fixture
def text_cases() -> list[TextCase]:
    """
    Provides texts covering every cluster shape the scanner knows.
    """
    return [
        TextCase("empty", "", (), ()),
        TextCase("ascii", "abc", ("a", "b", "c"), (0, 1, 2)),
        TextCase(
            "bmp only",
            "\u00e9\u4e2d\uffff",
            ("\u00e9", "\u4e2d", "\uffff"),
            (0, 1, 2),
        ),
        TextCase(
            "surrogate pair in the middle",
            "a" + GRINNING_FACE + "b",
            ("a", GRINNING_FACE, "b"),
            (0, 1, 3),
        ),
        TextCase(
            "adjacent surrogate pairs",
            GRINNING_FACE + PILE_OF_POO,
            (GRINNING_FACE, PILE_OF_POO),
            (0, 2),
        ),
        TextCase(
            "flag",
            "x" + FLAG_US + "y",
            ("x", FLAG_US, "y"),
            (0, 1, 5),
        ),
        TextCase(
            "two flags then emoji",
            FLAG_US + FLAG_DE + GRINNING_FACE,
            (FLAG_US, FLAG_DE, GRINNING_FACE),
            (0, 4, 8),
        ),
        TextCase(
            "odd regional indicator",
            FLAG_US + "\U0001f1e9",
            (FLAG_US, "\U0001f1e9"),
            (0, 4),
        ),
        TextCase(
            "lone surrogates",
            "a\ud83db\ude00",
            ("a", "\ud83d", "b", "\ude00"),
            (0, 1, 2, 3),
        ),
    ]
