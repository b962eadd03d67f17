"""
Benchmark suite for utfstring indexing performance.

Compares IndexedText operations against native Python str operations on
texts with and without surrogate and regional indicator pairs.

Measures translation speed and memory usage across different text shapes.
"""
