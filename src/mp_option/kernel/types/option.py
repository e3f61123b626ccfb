"""Option[T] monad — Some and Nothing variants.

``Option[T]`` is a closed union of two classes. Branch on it either with the
``is_some()`` / ``is_none()`` queries or exhaustively with ``match``::

    match find_user(uid):
        case Some(user):
            greet(user)
        case Nothing():
            sign_up()

Every combinator returns a fresh option; neither variant is ever mutated.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar

from mp_option.kernel.errors import EmptyValueError, ExpectationError

T = TypeVar("T")
U = TypeVar("U")


class Some(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Some[T]], tuple[T]]:
        return (Some, (self._value,))

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    is_present = is_some
    is_absent = is_none

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_raise(self, error: BaseException) -> T:  # noqa: ARG002
        return self._value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self._value

    def or_else(self, alternative: Option[T]) -> Some[T]:  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if predicate(self._value):
            return self
        return Nothing()

    def map(self, func: Callable[[T], U]) -> Some[U]:
        return Some(func(self._value))

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return func(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Some):
            return bool(self._value == other._value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Generic[T]):
    """Empty option.

    Stateless: all ``Nothing`` instances compare equal, and callables handed
    to its combinators are never invoked.
    """

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    is_present = is_some
    is_absent = is_none

    def unwrap(self) -> NoReturn:
        raise EmptyValueError()

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_raise(self, error: BaseException) -> NoReturn:
        raise error

    def expect(self, message: str) -> NoReturn:
        raise ExpectationError(message)

    def or_else(self, alternative: Option[T]) -> Option[T]:
        return alternative

    def filter(self, predicate: Callable[[T], bool]) -> Nothing[T]:  # noqa: ARG002
        return self

    def map(self, func: Callable[[T], U]) -> Nothing[U]:  # noqa: ARG002
        return self  # type: ignore[return-value]

    def flat_map(self, func: Callable[[T], Option[U]]) -> Nothing[U]:  # noqa: ARG002
        return self  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Nothing):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Nothing[Any] = Nothing()

type Option[T] = Some[T] | Nothing[T]

__all__ = ["NOTHING", "Nothing", "Option", "Some"]
