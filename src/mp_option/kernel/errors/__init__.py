"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── OptionError          (option.py)
    │   ├── EmptyValueError
    │   └── ExpectationError
    └── ConfigError          (mp_option.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from mp_option.kernel.errors.base import BaseError
from mp_option.kernel.errors.option import (
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
