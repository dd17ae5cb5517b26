"""Value containers — Option, Result and Monad.

This layer depends only on stdlib, pydantic and :mod:`fnkit.errors`.
"""

from fnkit.types.monad import Monad
from fnkit.types.option import AwaitableOption, Nothing, Option, Some, from_nullable
from fnkit.types.result import AwaitableResult, Err, Ok, Result

__all__ = [
    "AwaitableOption",
    "AwaitableResult",
    "Err",
    "Monad",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "from_nullable",
]
