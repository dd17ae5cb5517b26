"""Result[T, E] — success or failure of a computation.

INVARIANT: ``is_error`` identifies which side ``value`` holds.
``map`` and ``map_err`` pass the untouched side through as the same instance.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from fnkit.errors import UnwrapMismatchError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Result(BaseModel, Generic[T, E]):
    """Either ``Ok(value)`` or ``Err(error)``.

    Not meant to be constructed directly; use :func:`Ok` or :func:`Err`.

    Attributes:
        value: The success value or the error value.
        is_error: True when ``value`` is an error.
    """

    model_config = {"frozen": True}

    value: Any
    is_error: bool

    @classmethod
    def ok(cls, value: T) -> Result[T, Any]:
        return cls(value=value, is_error=False)

    @classmethod
    def err(cls, error: E) -> Result[Any, E]:
        return cls(value=error, is_error=True)

    def is_ok(self) -> bool:
        return not self.is_error

    def is_err(self) -> bool:
        return self.is_error

    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            UnwrapMismatchError: If this is an Err. The message embeds the
                encoded error value.
        """
        if self.is_error:
            raise UnwrapMismatchError("unwrap", self.value)
        return self.value

    def unwrap_err(self) -> E:
        """Return the error value.

        Raises:
            UnwrapMismatchError: If this is an Ok. The message embeds the
                encoded success value.
        """
        if not self.is_error:
            raise UnwrapMismatchError("unwrap_err", self.value)
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the success value, or *default* on Err.

        Use :meth:`unwrap_or_else` when the default is expensive to compute.
        """
        return default if self.is_error else self.value

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Return the success value, or ``fn(error)`` on Err."""
        return fn(self.value) if self.is_error else self.value

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        if self.is_error:
            return self  # type: ignore[return-value]
        return Result.ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        if not self.is_error:
            return self  # type: ignore[return-value]
        return Result.err(fn(self.value))

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a Result-returning step; Err short-circuits."""
        if self.is_error:
            return self  # type: ignore[return-value]
        return fn(self.value)

    def __repr__(self) -> str:
        tag = "Err" if self.is_error else "Ok"
        return f"{tag}({self.value!r})"

    __str__ = __repr__


Ok = Result.ok
Err = Result.err

type AwaitableResult[V, X] = Awaitable[Result[V, X]]
