"""Error types raised by helperkit.

Every helper raises a subclass of :class:`HelperError` so callers can
catch library failures in one place.  The concrete errors also derive
from the matching built-in (``TypeError`` / ``ValueError``) so code that
already guards those keeps working.
"""

from typing import Optional


class HelperError(Exception):
    """Base class for all helperkit errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class UnsupportedTypeError(HelperError, TypeError):
    """Raised when a value cannot be copied because its kind is unknown.

    Parameters
    ----------
    type_name:
        Name of the offending value's type, e.g. ``"set"`` or
        ``"function"``.
    """

    def __init__(self, type_name: str, message: Optional[str] = None) -> None:
        self.type_name = type_name
        super().__init__(message or f"Unable to copy value of type '{type_name}': type isn't supported.")


class InvalidArgumentError(HelperError, ValueError):
    """Raised when an argument violates a helper's preconditions."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.argument = argument
        super().__init__(message)


__all__ = ["HelperError", "UnsupportedTypeError", "InvalidArgumentError"]
