"""fnkit — small functional utilities.

Option and Result containers, a memoizing ``pure`` decorator, ``Lens``
field accessors, a minimal ``Monad`` wrapper and a few sequence builders.
"""

from fnkit.arrays import range, repeat, times, zip  # noqa: A004
from fnkit.errors import ConfigError, FnkitError, UnwrapMismatchError, UnwrappedNoneError
from fnkit.lens import Lens
from fnkit.pure import CacheInfo, pure
from fnkit.types import (
    AwaitableOption,
    AwaitableResult,
    Err,
    Monad,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    from_nullable,
)

__version__ = "0.1.0"

__all__ = [
    "AwaitableOption",
    "AwaitableResult",
    "CacheInfo",
    "ConfigError",
    "Err",
    "FnkitError",
    "Lens",
    "Monad",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapMismatchError",
    "UnwrappedNoneError",
    "from_nullable",
    "pure",
    "range",
    "repeat",
    "times",
    "zip",
]
