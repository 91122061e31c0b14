"""
reducekit - lessons on the array-reduction aggregation pattern.

This package provides:

- A generic `reduce` fold with an optional initial value
- Exact, case-insensitive, and prefix string matchers
- A record matcher selecting whole records by name
- Worked reductions from the lessons (batteries, word counts)
- A small CLI for trying the matchers and reductions from a shell
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from reducekit.aggregation import count_items, reduce
from reducekit.config import Settings, get_settings
from reducekit.domain import Driver, Record
from reducekit.errors import EmptySequenceError, ReducekitError, UnknownMatcherError
from reducekit.lab import total_batteries, word_count_map
from reducekit.matching import (
    AbstractMatchStrategy,
    CaseInsensitiveMatcher,
    ExactMatcher,
    MatchStrategy,
    PrefixMatcher,
    RecordMatcher,
    find_matching,
    fold_case,
    fuzzy_match,
    match_name,
    match_records,
)
from reducekit.runner import RunConfig, available_matchers, resolve_matcher, run_matcher
from reducekit.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Aggregation
    "count_items",
    "reduce",
    # Domain
    "Driver",
    "Record",
    # Errors
    "EmptySequenceError",
    "ReducekitError",
    "UnknownMatcherError",
    # Lessons
    "total_batteries",
    "word_count_map",
    # Matching
    "AbstractMatchStrategy",
    "MatchStrategy",
    "CaseInsensitiveMatcher",
    "ExactMatcher",
    "PrefixMatcher",
    "RecordMatcher",
    "find_matching",
    "fold_case",
    "fuzzy_match",
    "match_name",
    "match_records",
    # Runner
    "RunConfig",
    "available_matchers",
    "resolve_matcher",
    "run_matcher",
    # Logging
    "configure_logging",
    "get_logger",
]
