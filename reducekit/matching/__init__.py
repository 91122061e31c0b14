"""
Matching package for reducekit.

Re-exports the matcher functions, the matcher interfaces, and the concrete
matcher classes so downstream code can import from `reducekit.matching`.
"""

from reducekit.matching.abstract import AbstractMatchStrategy, MatchStrategy
from reducekit.matching.records import RecordMatcher, match_records
from reducekit.matching.strings import (
    CaseInsensitiveMatcher,
    ExactMatcher,
    PrefixMatcher,
    find_matching,
    fold_case,
    fuzzy_match,
    match_name,
)

__all__ = [
    # Interfaces
    "AbstractMatchStrategy",
    "MatchStrategy",
    # Functions
    "find_matching",
    "fold_case",
    "fuzzy_match",
    "match_name",
    "match_records",
    # Concrete matchers
    "CaseInsensitiveMatcher",
    "ExactMatcher",
    "PrefixMatcher",
    "RecordMatcher",
]
