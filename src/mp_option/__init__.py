"""
mp_option – Option[T] for the platform shared libraries.

Import path convention::

    from mp_option import Some, Nothing, Option
    from mp_option import from_mapping, try_catch
    from mp_option.kernel.errors import EmptyValueError
    from mp_option.observability.logging import JsonLoggerFactory
"""

from mp_option.kernel.errors import EmptyValueError, ExpectationError, OptionError
from mp_option.kernel.types import (
    NOTHING,
    Nothing,
    Option,
    Some,
    from_awaitable,
    from_mapping,
    from_nullable,
    from_predicate,
    from_sequence,
    try_catch,
)

__version__ = "0.1.0"
__all__ = [
    "NOTHING",
    "EmptyValueError",
    "ExpectationError",
    "Nothing",
    "Option",
    "OptionError",
    "Some",
    "__version__",
    "from_awaitable",
    "from_mapping",
    "from_nullable",
    "from_predicate",
    "from_sequence",
    "try_catch",
]
