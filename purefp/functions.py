"""Small functions showing contracts, higher-order use, purity and closures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

A = TypeVar("A")
R = TypeVar("R")


class ContractError(ValueError):
    """Raised when a value breaks a function's contract."""


def contract(value: int) -> bool:
    """The contract for add_one: the value must exceed ten."""
    return value > 10


def add_one(value: int) -> int:
    """Add one to a value that satisfies the contract."""
    if not contract(value):
        raise ContractError("Cannot add one")
    return value + 1


def keep(predicate: Callable[[A], bool], items: Iterable[A]) -> list[A]:
    """Return the items for which ``predicate`` holds."""
    return [item for item in items if predicate(item)]


def is_even(value: int) -> bool:
    return value % 2 == 0


def greater_than_two(value: int) -> bool:
    return value > 2


def greet(name: str) -> str:
    return f"Hi! {name}"


def sort_values(values: Iterable[A]) -> list[A]:
    """Return a sorted copy; sorting twice changes nothing."""
    return sorted(values)


def absolute(value: int) -> int:
    return abs(value)


def add_to(x: int) -> Callable[[int], int]:
    """Return a closure that adds ``x`` to its argument."""
    return lambda y: x + y


def add_one_and_continue(value: int, continuation: Callable[[int], R]) -> R:
    """Add one and pass the result on to ``continuation``."""
    return continuation(value + 1)


def increment(value: int) -> int:
    return value + 1


def sum_two(a: int, b: int) -> int:
    return a + b


def uppercase(text: str) -> str:
    return text.upper()


def decrement(value: int) -> int:
    return value - 1


def hello_world() -> str:
    return "Hello World!"