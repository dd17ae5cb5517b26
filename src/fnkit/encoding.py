"""Canonical value encoding.

Compact JSON via ``pydantic_core.to_json``: tuples, lists and sets become
arrays, dicts keep insertion order, pydantic models and dataclasses become
objects.

Two flavours:
- :func:`encode` never fails. Values without a JSON form fall back to
  ``repr()``; used for unwrap error messages.
- :func:`encode_call` builds memo cache keys. It refuses arguments whose
  only encoding is an identity-based repr (``<X object at 0x...>``), since
  a freed object's address is reused by later objects.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic_core import to_json

_ADDRESS = re.compile(r" at 0x[0-9a-fA-F]+")


def encode(value: Any) -> str:
    """Encode *value* as compact, order-preserving JSON text."""
    try:
        return to_json(value, fallback=repr).decode("utf-8")
    except ValueError:
        # Known but unserializable types (non-UTF-8 bytes), circular refs.
        return to_json(repr(value)).decode("utf-8")


def encode_call(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Encode a call's argument list as ``[positional, keyword]``.

    Keyword arguments keep the order they were passed in, so
    ``f(a=1, b=2)`` and ``f(b=2, a=1)`` encode differently. Bytes that are
    not valid UTF-8 are keyed by their base64 form.

    Raises:
        TypeError: An argument only encodes through an identity-based repr,
            or the argument list cannot be encoded at all.
    """
    opaque: list[str] = []

    def fallback(value: Any) -> str:
        text = repr(value)
        if _ADDRESS.search(text):
            opaque.append(type(value).__qualname__)
        return text

    call = [args, kwargs]
    try:
        raw = to_json(call, fallback=fallback)
    except ValueError:
        # Retry once for non-UTF-8 bytes; anything else is unkeyable.
        opaque.clear()
        try:
            raw = to_json(call, fallback=fallback, bytes_mode="base64")
        except ValueError as exc:
            msg = f"cannot build a cache key from these arguments: {exc}"
            raise TypeError(msg) from exc

    if opaque:
        msg = (
            f"cannot build a cache key from {', '.join(sorted(set(opaque)))}: "
            "its repr is identity-based; give it a value-based __repr__ "
            "or make it a dataclass or pydantic model"
        )
        raise TypeError(msg)
    return raw.decode("utf-8")
