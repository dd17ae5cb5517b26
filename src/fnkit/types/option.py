"""Option[T] — presence or absence of a value.

Presence is tracked by an explicit flag, never by truthiness:
``Some(0)``, ``Some("")`` and ``Some(None)`` are all present.

Python reserves ``None``, so the empty constructor is ``Nothing()``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from fnkit.errors import UnwrappedNoneError

T = TypeVar("T")
U = TypeVar("U")


class Option(BaseModel, Generic[T]):
    """Either ``Some(value)`` or ``Nothing()``.

    Not meant to be constructed directly; use :func:`Some`, :func:`Nothing`
    or :meth:`Option.from_nullable`.

    Attributes:
        present: Whether the Option holds a value.
        value: The held value, or None when empty.
    """

    model_config = {"frozen": True}

    present: bool
    value: Any = None

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """An Option holding *value*."""
        return cls(present=True, value=value)

    @classmethod
    def nothing(cls) -> Option[Any]:
        """An empty Option."""
        return cls(present=False)

    @classmethod
    def from_nullable(cls, value: T | None) -> Option[T]:
        """``Nothing()`` if *value* is None, ``Some(value)`` otherwise."""
        if value is None:
            return cls.nothing()
        return cls.some(value)

    def is_some(self) -> bool:
        return self.present

    def is_none(self) -> bool:
        return not self.present

    def unwrap(self) -> T:
        """Return the held value.

        Raises:
            UnwrappedNoneError: If the Option is empty.
        """
        if not self.present:
            raise UnwrappedNoneError
        return self.value

    def unwrap_unchecked(self) -> T:
        """Return the payload without checking presence.

        On an empty Option this is None. Only use it when presence has
        already been established some other way.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the held value, or *default* if empty.

        *default* is evaluated eagerly; use :meth:`unwrap_or_else` when it
        is expensive to compute.
        """
        return self.value if self.present else default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Return the held value, or the result of ``fn()`` if empty."""
        return self.value if self.present else fn()

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """``Some(fn(value))`` if present, ``Nothing()`` otherwise.

        Returns a new Option; the receiver is unchanged.
        """
        if not self.present:
            return Option.nothing()
        return Option.some(fn(self.value))

    def flat_map(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Return ``fn(value)`` if present, ``Nothing()`` otherwise."""
        if not self.present:
            return Option.nothing()
        return fn(self.value)

    def __repr__(self) -> str:
        if self.present:
            return f"Some({self.value!r})"
        return "Nothing()"

    __str__ = __repr__


Some = Option.some
Nothing = Option.nothing
from_nullable = Option.from_nullable

type AwaitableOption[V] = Awaitable[Option[V]]
