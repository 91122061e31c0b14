"""
Aggregation package for reducekit.

Re-exports the generic `reduce` fold and helpers built on it.
"""

from reducekit.aggregation.reducer import count_items, reduce

__all__ = [
    "count_items",
    "reduce",
]
