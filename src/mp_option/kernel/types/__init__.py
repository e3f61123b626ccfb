"""Kernel types — public re-export surface.

Modules:
  option.py    — Some, Nothing, Option, NOTHING
  factories.py — try_catch, from_nullable, from_sequence, from_predicate,
                 from_mapping, from_awaitable
"""

from mp_option.kernel.types.factories import (
    from_awaitable,
    from_mapping,
    from_nullable,
    from_predicate,
    from_sequence,
    try_catch,
)
from mp_option.kernel.types.option import NOTHING, Nothing, Option, Some

__all__ = [
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "from_awaitable",
    "from_mapping",
    "from_nullable",
    "from_predicate",
    "from_sequence",
    "try_catch",
]
