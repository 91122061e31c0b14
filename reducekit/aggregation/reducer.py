"""
Generic fold over an ordered sequence.

`reduce` threads an accumulator through a caller-supplied combining function,
one element at a time, in iteration order. The accumulator is seeded by the
initial value when one is given, otherwise by the first element.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar, overload

from reducekit.errors import EmptySequenceError
from reducekit.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")
A = TypeVar("A")


class _Missing:
    """Marker type for an omitted initial value; `None` is a legal initial value."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


@overload
def reduce(items: Iterable[T], combine: Callable[[T, T], T]) -> T: ...


@overload
def reduce(items: Iterable[T], combine: Callable[[A, T], A], initial: A) -> A: ...


def reduce(items, combine, initial=_MISSING):
    """
    Fold `items` into a single value.

    Parameters
    ----------
    items : Iterable[T]
        Elements to combine. Consumed once, front to back; never mutated.
    combine : Callable[[A, T], A]
        Called as `combine(accumulator, element)`; its return value becomes the
        next accumulator.
    initial : A, optional
        Starting accumulator. When omitted the first element seeds the
        accumulator and is not passed to `combine`.

    Returns
    -------
    A
        The final accumulator. With an initial value and no elements this is
        `initial` itself, and `combine` is never called.

    Raises
    ------
    EmptySequenceError
        If `items` is empty and no initial value was given.
    """
    iterator = iter(items)
    if initial is _MISSING:
        try:
            accumulator = next(iterator)
        except StopIteration:
            log.debug("reduce called on an empty sequence without an initial value")
            raise EmptySequenceError() from None
    else:
        accumulator = initial

    for element in iterator:
        accumulator = combine(accumulator, element)
    return accumulator


def count_items(items: Iterable[Any]) -> int:
    """Count elements with a reduction; works for sets and other unsized iterables."""
    return reduce(items, lambda total, _: total + 1, 0)


__all__ = ["reduce", "count_items"]
