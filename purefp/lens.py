"""Lenses for focusing on part of a value, and a simple isomorphism."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from purefp.maybe import Maybe, just, nothing

S = TypeVar("S")
A = TypeVar("A")


@dataclass(frozen=True)
class Lens(Generic[S, A]):
    """A getter and an immutable setter for one part of a whole."""

    getter: Callable[[S], Maybe[A]]
    setter: Callable[[A, S], S]

    def get(self, whole: S) -> Maybe[A]:
        """Return the focused part, if there is one."""
        return self.getter(whole)

    def set(self, part: A, whole: S) -> S:
        """Return a new whole with the focused part replaced."""
        return self.setter(part, whole)

    def over(self, whole: S, f: Callable[[Maybe[A]], A]) -> S:
        """Replace the focused part with ``f`` applied to the current one."""
        return self.set(f(self.get(whole)), whole)


@dataclass(frozen=True)
class Person:
    name: str


@dataclass(frozen=True)
class Coords:
    x: int
    y: int


def person_name_lens() -> Lens[Person, str]:
    """Lens onto a person's name."""
    return Lens(
        getter=lambda person: just(person.name),
        setter=lambda name, person: replace(person, name=name),
    )


def _first(items: Sequence[Any]) -> Maybe[Any]:
    return just(items[0]) if items else nothing()


def _set_first(part: Any, items: Sequence[Any]) -> list[Any]:
    return [part, *items[1:]]


def first_lens() -> Lens[Sequence[Any], Any]:
    """Lens onto the first element of a sequence."""
    return Lens(getter=_first, setter=_set_first)


def pair_to_coords(pair: tuple[int, int]) -> Coords:
    """Turn an ``(x, y)`` pair into Coords."""
    x, y = pair
    return Coords(x=x, y=y)


def coords_to_pair(coords: Coords) -> tuple[int, int]:
    """Turn Coords into an ``(x, y)`` pair."""
    return coords.x, coords.y