"""
Benchmark suite for jsonemit JSON encoding performance.

Compares jsonemit against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures encoding speed and memory usage across different data types.
"""
