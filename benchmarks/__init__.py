"""
Benchmark suite for jtree parsing, serialization and path lookups.

Compares jtree against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures speed and memory usage across different document shapes.
"""
