"""
Matcher interfaces for reducekit.

Concrete matchers (exact, case-insensitive, prefix, record) implement the
MatchStrategy protocol so the runner and CLI can pick one by name. The
plain functions in `reducekit.matching.strings` and
`reducekit.matching.records` carry the actual matching logic.
"""

from __future__ import annotations

import abc
from typing import Any, Collection, Protocol, Sequence, runtime_checkable


@runtime_checkable
class MatchStrategy(Protocol):
    """
    Common interface all matchers implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the comparison performed.
    """

    name: str
    description: str

    def match(self, items: Sequence[Any], target: str) -> Collection[Any]:
        """
        Select the elements of `items` matching `target`.

        Parameters
        ----------
        items : Sequence
            Candidates, left untouched.
        target : str
            Value (or prefix) to compare candidates against.

        Returns
        -------
        Collection
            A new list or set of matching elements; empty when nothing matches.
        """
        ...


class AbstractMatchStrategy(abc.ABC):
    """
    Optional ABC helper for class-based matchers.

    Subclasses should set `name` and `description` and implement `match`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def match(self, items: Sequence[Any], target: str) -> Collection[Any]:  # pragma: no cover - interface only
        """Return the matching elements."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = ["MatchStrategy", "AbstractMatchStrategy"]
