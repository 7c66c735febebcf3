"""An optional value with functor, applicative, monad and comonad operations."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class NothingError(LookupError):
    """Raised when a value is demanded from an empty Maybe."""


@dataclass(frozen=True, repr=False)
class Maybe(Generic[A]):
    """Either holds a value (``present``) or holds nothing."""

    value: A | None = None
    present: bool = False

    def __repr__(self) -> str:
        return f"Just({self.value!r})" if self.present else "Nothing"

    @property
    def is_just(self) -> bool:
        return self.present

    @property
    def is_nothing(self) -> bool:
        return not self.present

    def fmap(self, f: Callable[[A], B]) -> Maybe[B]:
        """Apply ``f`` to the held value, if any."""
        return just(f(self.value)) if self.present else nothing()

    def ap(self, wrapped: Maybe[Callable[[A], B]]) -> Maybe[B]:
        """Apply a wrapped function to the held value when both are present."""
        if self.present and wrapped.present:
            return just(wrapped.value(self.value))
        return nothing()

    def chain(self, f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Feed the held value to ``f``, which itself returns a Maybe."""
        return f(self.value) if self.present else nothing()

    def extend(self, f: Callable[[Maybe[A]], B]) -> Maybe[B]:
        """Apply ``f`` to this whole Maybe when it holds a value."""
        return just(f(just(self.value))) if self.present else nothing()

    def extract(self) -> A:
        """Return the held value or raise NothingError."""
        if not self.present:
            raise NothingError("cannot extract a value from Nothing")
        return self.value


def just(value: A) -> Maybe[A]:
    """Wrap a value."""
    return Maybe(value, True)


def nothing() -> Maybe[Any]:
    """Return the empty Maybe."""
    return Maybe()


def of(value: A) -> Maybe[A]:
    """Lift a plain value into Maybe."""
    return just(value)


def lookup(mapping: Any, key: Hashable) -> Maybe[Any]:
    """Look ``key`` up in ``mapping``; Nothing when absent or not a mapping."""
    if isinstance(mapping, Mapping) and key in mapping:
        return just(mapping[key])
    return nothing()


def lookup_path(mapping: Any, *args: Hashable) -> Maybe[Any]:
    """Follow a chain of keys through nested mappings."""
    return reduce(
        lambda found, key: found.chain(lambda current: lookup(current, key)),
        args,
        just(mapping),
    )