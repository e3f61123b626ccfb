"""Kernel – Option type, factories and error hierarchy."""

from mp_option.kernel.errors import (
    BaseError,
    EmptyValueError,
    ExpectationError,
    OptionError,
)

__all__ = [
    "BaseError",
    "EmptyValueError",
    "ExpectationError",
    "OptionError",
]
