"""
Memory usage benchmarks for indexed text.

Measures peak memory consumption of wrapping and splitting text compared
with the native str equivalents.
"""

import tracemalloc
from typing import Any

import pytest

from benchmarks.data_generators import generate_test_text
from utfstring import IndexedText


def measure_memory_usage(func: Any, *args: Any) -> tuple[Any, int]:
    """
    Measures peak memory usage during function execution.

    Returns:
        Tuple of (function_result, peak_memory_bytes)
    """
    tracemalloc.start()
    try:
        result = func(*args)
        current, peak = tracemalloc.get_traced_memory()
        return result, peak
    finally:
        tracemalloc.stop()


TEXT_TYPES = ["ascii", "sparse_astral", "dense_astral", "mixed_clusters"]


class TestMemoryUsage:
    """Memory usage benchmarks for indexed text."""

    @pytest.mark.parametrize("text_type", TEXT_TYPES)
    def test_native_split_memory(self, text_type: str) -> None:
        """Measures memory usage for splitting a str into codepoints."""
        text = generate_test_text(text_type)
        result, peak_memory = measure_memory_usage(list, text)

        print(f"\nstr {text_type}: {peak_memory:,} bytes")
        assert len(result) == len(text)

    @pytest.mark.parametrize("text_type", TEXT_TYPES)
    def test_construction_memory(self, text_type: str) -> None:
        """Measures memory usage for wrapping text in IndexedText."""
        text = generate_test_text(text_type)
        result, peak_memory = measure_memory_usage(IndexedText, text)

        print(f"\nIndexedText {text_type}: {peak_memory:,} bytes")
        assert str(result) == text

    @pytest.mark.parametrize("text_type", TEXT_TYPES)
    def test_char_array_memory(self, text_type: str) -> None:
        """Measures memory usage for splitting into logical characters."""
        indexed = IndexedText(generate_test_text(text_type))
        result, peak_memory = measure_memory_usage(indexed.to_char_array)

        print(f"\nto_char_array {text_type}: {peak_memory:,} bytes")
        assert len(result) == indexed.length()

    def test_memory_comparison_summary(self) -> None:
        """
        Prints a summary comparing IndexedText with str for each text type.
        """
        print("\n" + "=" * 60)
        print("MEMORY USAGE COMPARISON")
        print("=" * 60)

        for text_type in TEXT_TYPES:
            text = generate_test_text(text_type)
            _, native_peak = measure_memory_usage(list, text)
            indexed, indexed_peak = measure_memory_usage(IndexedText, text)

            ratio = indexed_peak / native_peak if native_peak else 0.0
            print(
                f"{text_type:>16}: str {native_peak:>10,}  "
                f"IndexedText {indexed_peak:>10,}  ({ratio:.2f}x)"
            )
            assert indexed.length() > 0
