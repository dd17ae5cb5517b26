"""Exception hierarchy for fnkit.

Every error raised by the library derives from :class:`FnkitError`.
Unwrap errors are programmer-error signals: nothing in fnkit catches them.
"""

from __future__ import annotations

from typing import Any

from fnkit.encoding import encode


class FnkitError(Exception):
    """Base class for all fnkit errors."""


class UnwrappedNoneError(FnkitError):
    """``Option.unwrap()`` was called on an empty Option."""

    def __init__(self, message: str = "Unwrapped None") -> None:
        super().__init__(message)


class UnwrapMismatchError(FnkitError):
    """A Result was unwrapped on the wrong side.

    Attributes:
        method: ``"unwrap"`` or ``"unwrap_err"``.
        value: The payload the Result actually held.
    """

    def __init__(self, method: str, value: Any) -> None:
        self.method = method
        self.value = value
        held = "Err" if method == "unwrap" else "Ok"
        super().__init__(f"Called {method} on an {held} value: {encode(value)}")


class ConfigError(FnkitError):
    """``fnkit.toml`` could not be parsed."""
