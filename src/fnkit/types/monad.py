"""Monad — a minimal single-value wrapper for chained transformation.

Not a law-abiding monad abstraction: there is no error handling and
``flat_map`` does not unwrap more than one level.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Monad(Generic[T]):
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @classmethod
    def of(cls, value: T) -> Monad[T]:
        return cls(value)

    def map(self, fn: Callable[[T], U]) -> Monad[U]:
        return Monad.of(fn(self._value))

    def flat_map(self, fn: Callable[[T], Monad[U]]) -> Monad[U]:
        return fn(self._value)

    def get(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Monad):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Monad.of({self._value!r})"
