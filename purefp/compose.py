"""Function composition, identity, partial application and currying."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def compose_two(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Return a function that applies ``f`` first and then ``g``."""
    return lambda x: g(f(x))


def compose(*args: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: the first given is applied first."""
    if not args:
        raise TypeError("compose() needs at least one function")
    return reduce(compose_two, args)


def identity(value: A) -> A:
    """Apply the empty composition to ``value``, which leaves it unchanged."""
    no_functions: tuple[Callable[[A], A], ...] = ()
    return reduce(lambda acc, f: f(acc), no_functions, value)


def partial(func: Callable[..., A], *args: Any) -> Callable[..., A]:
    """Fix some arguments of ``func``; ``...`` marks a position left open.

    The returned function takes exactly one argument per open position.
    """
    holes = sum(1 for arg in args if arg is ...)

    def applied(*fill: Any) -> A:
        if len(fill) != holes:
            raise TypeError(f"expected {holes} arguments, got {len(fill)}")
        supply = iter(fill)
        return func(*(next(supply) if arg is ... else arg for arg in args))

    return applied


def add(x: int) -> Callable[[int], int]:
    """Curried addition."""
    return lambda y: x + y


def call(f: Callable[[A], B]) -> Callable[[A], B]:
    """Return a function that calls ``f`` with its argument."""
    return lambda x: f(x)