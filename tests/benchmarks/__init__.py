"""Performance benchmarks for strftimeengine.

Run with: pytest tests/benchmarks/ --benchmark-only
"""
