"""Option factories — lift fallible sources into ``Option[T]``.

Plain module-level functions; each is stateless and independently callable.
``try_catch`` and ``from_awaitable`` are the only places where exceptions are
caught: they are discarded (after a DEBUG log line) and become ``Nothing``.
Only ``Exception`` is suppressed, so ``KeyboardInterrupt``, ``SystemExit``
and ``asyncio.CancelledError`` still reach the caller.
"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping, Sequence
from typing import Callable, TypeVar

from mp_option.kernel.types.option import Nothing, Option, Some
from mp_option.observability.logging import get_logger

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

_log = get_logger(__name__)


def _suppressed(source: str, exc: Exception) -> None:
    _log.debug("option.suppressed_error", source=source, error_type=type(exc).__name__)


def try_catch(func: Callable[[], T]) -> Option[T]:
    """Run *func*; ``Some(result)`` if it returns, ``Nothing`` if it raises."""
    try:
        return Some(func())
    except Exception as exc:  # noqa: BLE001
        _suppressed("try_catch", exc)
        return Nothing()


def from_nullable(value: T | None) -> Option[T]:
    return Some(value) if value is not None else Nothing()


def from_sequence(items: Sequence[T]) -> Option[T]:
    """First element of *items*, or ``Nothing`` when it is empty."""
    return Some(items[0]) if len(items) > 0 else Nothing()


def from_predicate(value: T, predicate: Callable[[T], bool]) -> Option[T]:
    return Some(value) if predicate(value) else Nothing()


def from_mapping(mapping: Mapping[K, V], key: K) -> Option[V]:
    """``Some(mapping[key])`` whenever *key* is a member of *mapping*.

    Membership decides, not the stored value: a key mapped to ``None``
    yields ``Some(None)``.
    """
    if key in mapping:
        return Some(mapping[key])
    return Nothing()


async def from_awaitable(awaitable: Awaitable[T]) -> Option[T]:
    """Await *awaitable* once; ``Nothing`` if it raises.

    No timeout or retry is applied. Wrap the awaitable in
    :func:`asyncio.wait_for` beforehand if one is needed.
    """
    try:
        result = await awaitable
    except Exception as exc:  # noqa: BLE001
        _suppressed("from_awaitable", exc)
        return Nothing()
    return Some(result)


__all__ = [
    "from_awaitable",
    "from_mapping",
    "from_nullable",
    "from_predicate",
    "from_sequence",
    "try_catch",
]
