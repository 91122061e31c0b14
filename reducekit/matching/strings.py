"""
String matchers: exact, case-insensitive, and prefix.

The exact and case-insensitive matchers return lists in input order; the
prefix matcher returns a set. Callers relying on the two return types should
not expect them to be interchangeable.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from reducekit.config import FoldingMode, get_settings
from reducekit.matching.abstract import AbstractMatchStrategy

_FOLDERS: Dict[str, Callable[[str], str]] = {
    "casefold": str.casefold,
    "lower": str.lower,
}


def fold_case(value: str, folding: FoldingMode = "casefold") -> str:
    """
    Normalize `value` for case-insensitive comparison.

    "casefold" applies Unicode full case folding ("Straße" == "STRASSE");
    "lower" only lowercases, which is enough for ASCII names.
    """
    try:
        folder = _FOLDERS[folding]
    except KeyError:
        raise ValueError(
            f"Unknown case folding '{folding}'. Available: {', '.join(_FOLDERS)}"
        ) from None
    return folder(value)


def find_matching(items: Iterable[str], target: str) -> List[str]:
    """Return every element equal to `target`, case-sensitive, in input order."""
    return [item for item in items if item == target]


def match_name(
    items: Iterable[str],
    target: str,
    folding: FoldingMode = "casefold",
) -> List[str]:
    """
    Return every element equal to `target` ignoring case, in input order.

    Matches keep their original casing.
    """
    folded_target = fold_case(target, folding)
    return [item for item in items if fold_case(item, folding) == folded_target]


def fuzzy_match(items: Iterable[str], prefix: str) -> Set[str]:
    """
    Return the set of elements starting with `prefix`.

    Case-sensitive and anchored at position 0: "mm" does not match "Sammy".
    """
    return {item for item in items if item.startswith(prefix)}


class ExactMatcher(AbstractMatchStrategy):
    name: str = "exact"
    description: str = "Elements equal to the target (case-sensitive), in order."

    def match(self, items: Sequence[str], target: str) -> List[str]:
        return find_matching(items, target)


class CaseInsensitiveMatcher(AbstractMatchStrategy):
    name: str = "case_insensitive"
    description: str = "Elements equal to the target ignoring case, original casing kept."

    def __init__(self, folding: Optional[FoldingMode] = None) -> None:
        self.folding: FoldingMode = folding or get_settings().case_folding

    def match(self, items: Sequence[str], target: str) -> List[str]:
        return match_name(items, target, folding=self.folding)


class PrefixMatcher(AbstractMatchStrategy):
    name: str = "prefix"
    description: str = "Set of elements starting with the target (case-sensitive)."

    def match(self, items: Sequence[str], target: str) -> Set[str]:
        return fuzzy_match(items, target)


__all__ = [
    "fold_case",
    "find_matching",
    "match_name",
    "fuzzy_match",
    "ExactMatcher",
    "CaseInsensitiveMatcher",
    "PrefixMatcher",
]
