"""Semigroups, setoids, folds and unfolds over plain sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import reduce
from itertools import chain
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")
S = TypeVar("S")


def combine(a: Iterable[A], b: Iterable[A]) -> list[A]:
    """Semigroup combination of two sequences: concatenation."""
    return [*a, *b]


def concat(parts: Iterable[Iterable[A]]) -> list[A]:
    """Concatenate many sequences into one list."""
    return list(chain.from_iterable(parts))


def equals(a: Any, b: Any) -> bool:
    """Setoid equality: strings compare by content, other sequences by length."""
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if (
        isinstance(a, Sequence)
        and isinstance(b, Sequence)
        and not isinstance(a, str)
        and not isinstance(b, str)
    ):
        return len(a) == len(b)
    raise TypeError(
        f"no setoid equality for {type(a).__name__} and {type(b).__name__}"
    )


def fold_left(items: Iterable[A], initial: B, f: Callable[[B, A], B]) -> B:
    """Fold from the left; ``f`` takes the accumulator then the item."""
    return reduce(f, items, initial)


def fold_right(items: Iterable[A], initial: B, f: Callable[[A, B], B]) -> B:
    """Fold from the right; ``f`` takes the item then the accumulator."""
    return reduce(lambda acc, item: f(item, acc), reversed(list(items)), initial)


def total(items: Iterable[int]) -> int:
    """Sum the items with a left fold."""
    return fold_left(items, 0, lambda acc, item: acc + item)


def unfold(state: S, step: Callable[[S], tuple[A, S] | None]) -> Iterator[A]:
    """Yield values produced by ``step`` until it returns None."""
    while (produced := step(state)) is not None:
        value, state = produced
        yield value


def count_down(start: int, step: int) -> Iterator[int]:
    """Count from ``start`` down to (but not including) zero by ``step``.

    Stepping below zero raises ValueError, as counts are never negative.
    """
    if start < 0:
        raise ValueError("start must not be negative")

    def _next(current: int) -> tuple[int, int] | None:
        if current == 0:
            return None
        following = current - step
        if following < 0:
            raise ValueError(f"counting down from {current} by {step} goes below zero")
        return current, following

    return unfold(start, _next)