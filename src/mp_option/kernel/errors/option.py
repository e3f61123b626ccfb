"""Option errors — forcing a value out of ``Nothing``."""

from __future__ import annotations

from typing import Any

from mp_option.kernel.errors.base import BaseError

UNWRAP_NOTHING_MESSAGE = "Called `unwrap()` on a `Nothing` value"


class OptionError(BaseError):
    """A value was required but the option held none.

    ``str(exc)`` is the JSON payload of :meth:`BaseError.to_dict`; read
    ``exc.message`` for the plain text.
    """

    default_code = "option_error"


class EmptyValueError(OptionError, ValueError):
    """``unwrap()`` was called on ``Nothing``.

    The message is fixed so callers can recognise the failure.
    """

    default_code = "empty_value"

    def __init__(self, message: str = UNWRAP_NOTHING_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ExpectationError(OptionError, ValueError):
    """``expect(message)`` was called on ``Nothing``; carries the caller's message."""

    default_code = "expectation_failed"


__all__ = [
    "UNWRAP_NOTHING_MESSAGE",
    "EmptyValueError",
    "ExpectationError",
    "OptionError",
]
