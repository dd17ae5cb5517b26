"""pure — memoize a referentially transparent function.

The wrapped function is called at most once per distinct argument list;
later calls return the very object computed the first time. Argument lists
are keyed by their canonical encoding (:func:`fnkit.encoding.encode_call`),
so values that encode identically share an entry: ``{"a": 1, "b": 2}`` and
``{"b": 2, "a": 1}`` do not, ``(1, 2)`` and ``[1, 2]`` do.

Arguments whose only encoding is an address-bearing repr (plain objects,
functions) are rejected with TypeError when the wrapper is called. To
memoize a method, give the class a value-based repr, or make it a dataclass
or pydantic model, so ``self`` keys by state rather than by identity.

Each wrapper owns its cache. It is unbounded unless a ``maxsize`` is given
(or configured via ``[memo] maxsize``), in which case the least recently
used entry is evicted. ``cache_clear()`` empties it explicitly.
"""

from __future__ import annotations

import functools
import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from typing import Any, NamedTuple, ParamSpec, TypeVar, overload

from fnkit.config.settings import get_settings
from fnkit.encoding import encode_call

logger = logging.getLogger(__name__)

_P = ParamSpec("_P")
_R = TypeVar("_R")

_UNSET: Any = object()


class CacheInfo(NamedTuple):
    """Cache statistics, shaped like ``functools.lru_cache``'s."""

    hits: int
    misses: int
    maxsize: int | None
    currsize: int


@overload
def pure(fn: Callable[_P, _R], /) -> Callable[_P, _R]: ...


@overload
def pure(
    *, maxsize: int | None = ...
) -> Callable[[Callable[_P, _R]], Callable[_P, _R]]: ...


def pure(fn: Callable[..., Any] | None = None, /, *, maxsize: int | None = _UNSET) -> Any:
    """Memoize *fn*. Usable as ``@pure`` or ``@pure(maxsize=128)``.

    Args:
        fn: The function to wrap. Must be free of observable side effects.
        maxsize: Bound on cached entries; None for unbounded. Defaults to
            ``get_settings().memo.maxsize``.

    Raises:
        ValueError: If *maxsize* is not positive.

    The returned wrapper raises TypeError for arguments that cannot be keyed
    by value (see :func:`fnkit.encoding.encode_call`).
    """
    if maxsize is _UNSET:
        maxsize = get_settings().memo.maxsize
    if maxsize is not None and maxsize <= 0:
        msg = f"maxsize must be positive or None, got {maxsize}"
        raise ValueError(msg)

    def decorate(func: Callable[_P, _R]) -> Callable[_P, _R]:
        return _memoize(func, maxsize)

    if fn is None:
        return decorate
    return decorate(fn)


def _memoize(fn: Callable[_P, _R], maxsize: int | None) -> Callable[_P, _R]:
    cache: OrderedDict[str, Any] = OrderedDict()
    lock = threading.Lock()
    hits = 0
    misses = 0
    name = getattr(fn, "__qualname__", repr(fn))

    @functools.wraps(fn)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        nonlocal hits, misses
        key = encode_call(args, kwargs)
        with lock:
            if key in cache:
                hits += 1
                if maxsize is not None:
                    cache.move_to_end(key)
                return cache[key]
            misses += 1

        logger.debug("pure cache miss: %s %s", name, key, extra={"function": name})
        result = fn(*args, **kwargs)

        with lock:
            # Another thread may have stored this key while fn ran.
            if key in cache:
                return cache[key]
            cache[key] = result
            if maxsize is not None and len(cache) > maxsize:
                evicted, _ = cache.popitem(last=False)
                logger.debug(
                    "pure cache evict: %s %s", name, evicted, extra={"function": name}
                )
        return result

    def cache_info() -> CacheInfo:
        with lock:
            return CacheInfo(hits, misses, maxsize, len(cache))

    def cache_clear() -> None:
        nonlocal hits, misses
        with lock:
            cache.clear()
            hits = misses = 0

    wrapper.cache_info = cache_info  # type: ignore[attr-defined]
    wrapper.cache_clear = cache_clear  # type: ignore[attr-defined]
    return wrapper
