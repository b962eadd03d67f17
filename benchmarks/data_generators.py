"""
Test data generators for indexing benchmarks.

Creates texts shaped to stress different paths of the scanner:
- ASCII only (identity fast path)
- Sparse astral characters in long ASCII runs
- Dense astral characters (every character a surrogate pair)
- Flags mixed with emoji and CJK text
"""

import random
import string

# Constants for random data generation
_SPARSE_LENGTH = 10_000
_SPARSE_PROBABILITY = 0.01
_DENSE_LENGTH = 2_000
_MIXED_LENGTH = 5_000
_FLAG_TYPE = 1
_EMOJI_TYPE = 2
_CJK_TYPE = 3

_EMOJI_START = 0x1F600
_EMOJI_END = 0x1F64F
_REGIONAL_INDICATOR_START = 0x1F1E6
_REGIONAL_INDICATOR_END = 0x1F1FF
_CJK_START = 0x4E00
_CJK_END = 0x9FFF


def generate_test_text(text_type: str) -> str:
    """Generates benchmark text based on specified type."""
    generators = {
        "ascii": _generate_ascii,
        "sparse_astral": _generate_sparse_astral,
        "dense_astral": _generate_dense_astral,
        "mixed_clusters": _generate_mixed_clusters,
    }

    if text_type not in generators:
        raise ValueError(f"Unknown text type: {text_type}")

    return generators[text_type]()


def _generate_ascii() -> str:
    """Generates ASCII text with no clusters at all."""
    return _random_string(_SPARSE_LENGTH)


def _generate_sparse_astral() -> str:
    """Generates long ASCII runs with an occasional emoji."""
    chars = []
    for _ in range(_SPARSE_LENGTH):
        if random.random() < _SPARSE_PROBABILITY:
            chars.append(_random_emoji())
        else:
            chars.append(random.choice(string.ascii_letters + " "))
    return "".join(chars)


def _generate_dense_astral() -> str:
    """Generates text where every character is a surrogate pair."""
    return "".join(_random_emoji() for _ in range(_DENSE_LENGTH))


def _generate_mixed_clusters() -> str:
    """Generates flags, emoji and BMP text in random order."""
    chars = []
    for _ in range(_MIXED_LENGTH):
        choice = random.randint(1, 4)
        if choice == _FLAG_TYPE:
            chars.append(_random_flag())
        elif choice == _EMOJI_TYPE:
            chars.append(_random_emoji())
        elif choice == _CJK_TYPE:
            chars.append(chr(random.randint(_CJK_START, _CJK_END)))
        else:
            chars.append(random.choice(string.ascii_letters))
    return "".join(chars)


def _random_emoji() -> str:
    return chr(random.randint(_EMOJI_START, _EMOJI_END))


def _random_flag() -> str:
    """Generates a pair of regional indicator symbols."""
    return "".join(
        chr(
            random.randint(_REGIONAL_INDICATOR_START, _REGIONAL_INDICATOR_END)
        )
        for _ in range(2)
    )


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
