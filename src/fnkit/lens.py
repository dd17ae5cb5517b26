"""Lens — a reusable accessor bound to one field name.

Works on any record shape: mappings are read by key, everything else
(dataclasses, pydantic models, named tuples, plain objects) by attribute.
Writes never touch the input; they return a shallow copy with the one field
replaced, so every other field is shared by reference.
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Callable, Hashable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
R = TypeVar("R")

_MISSING: Any = object()


@dataclasses.dataclass(frozen=True)
class Lens(Generic[T]):
    """Accessor for the field keyed by *field*.

    Any hashable key works on mappings (``Lens(0)`` reads ``d[0]``); objects
    are only addressable by ``str`` attribute names.

    Example:
        >>> count = Lens("count")
        >>> count.map({"count": 1, "name": "a"}, lambda n: n + 1)
        {'count': 2, 'name': 'a'}
    """

    field: Hashable

    def get(self, obj: Any) -> T:
        """Return the field's value.

        Raises:
            KeyError: *obj* is a mapping without the field.
            AttributeError: *obj* is an object without the field.
        """
        if isinstance(obj, Mapping):
            return obj[self.field]
        return getattr(obj, self.field)

    def maybe_get(self, obj: Any, default: T | None = None) -> T | None:
        """Return the field's value, or *default* when it is absent."""
        if isinstance(obj, Mapping):
            return obj.get(self.field, default)
        return getattr(obj, self.field, default)

    def has(self, obj: Any) -> bool:
        value = self.maybe_get(obj, _MISSING)
        return value is not _MISSING

    def set(self, obj: R, value: T) -> R:
        """Return a copy of *obj* with the field set to *value*.

        On a mapping the field may be new. On objects the copy mechanism
        decides: dataclasses, pydantic models and named tuples reject or
        ignore unknown fields the way their own copy helpers do.
        """
        return _replace(obj, self.field, value)

    def change(self, obj: R, value: T) -> R:
        """Like :meth:`set`, but the field must already exist.

        Raises:
            KeyError: *obj* is a mapping without the field.
            AttributeError: *obj* is an object without the field.
        """
        self.get(obj)
        return _replace(obj, self.field, value)

    def map(self, obj: R, fn: Callable[[T], Any]) -> R:
        """Return a copy of *obj* with the field replaced by ``fn(current)``."""
        return _replace(obj, self.field, fn(self.get(obj)))


def _replace(obj: Any, name: Any, value: Any) -> Any:
    if isinstance(obj, Mapping):
        return {**obj, name: value}
    if isinstance(obj, BaseModel):
        return obj.model_copy(update={name: value})
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.replace(obj, **{name: value})
    if isinstance(obj, tuple) and hasattr(obj, "_replace"):
        return obj._replace(**{name: value})
    clone = copy.copy(obj)
    setattr(clone, name, value)
    return clone
