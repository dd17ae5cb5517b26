"""Sequence builders — times, range, repeat, zip.

``range`` and ``zip`` shadow the builtins on purpose; import the module
(``from fnkit import arrays``) or alias them if that gets in the way.
"""

from __future__ import annotations

import builtins
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")
N = TypeVar("N", int, float)

__all__ = ["range", "repeat", "times", "zip"]


def times(n: int, fn: Callable[[int], T]) -> list[T]:
    """``[fn(0), fn(1), ..., fn(n - 1)]``; empty when ``n <= 0``."""
    return [fn(i) for i in builtins.range(n)]


def range(start: N, end: N, step: N = 1) -> list[N]:  # noqa: A001
    """Ascending values ``start, start + step, ...`` strictly below *end*.

    Accepts floats as well as ints.

    Examples:
        >>> range(1, 5)
        [1, 2, 3, 4]
        >>> range(1, 10, 2)
        [1, 3, 5, 7, 9]

    Raises:
        ValueError: If *step* is not positive.
    """
    if step <= 0:
        msg = f"step must be positive, got {step}"
        raise ValueError(msg)
    result: list[N] = []
    current = start
    while current < end:
        result.append(current)
        current += step
    return result


def repeat(n: int, value: T) -> list[T]:
    """*n* references to the same *value* (not copies)."""
    return times(n, lambda _: value)


def zip(a: Iterable[T], b: Sequence[U]) -> list[tuple[T, U | None]]:  # noqa: A001
    """Pair items of *a* and *b* by position.

    The result always has ``len(a)`` pairs: positions past the end of *b*
    pair with None, and extra items of *b* are dropped.
    """
    return [(item, b[i] if i < len(b) else None) for i, item in enumerate(a)]
