"""Option type: Some[T] | Nothing, the conversion target of Outcome.

Only the surface the outcome types convert to and from lives here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from klaw_outcome.outcome import Failure, Success

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """A present optional value.

    Examples:
        >>> Some(3).map(lambda x: x + 1)
        Some(value=4)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply f to the contained value."""
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        return f(self.value)

    def to_outcome[E](self, _error: E) -> Success[T]:
        """Convert to Success(value); the error is unused."""
        from klaw_outcome.outcome import Success

        return Success(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """An absent optional value.

    Use the ``Nothing`` singleton rather than instantiating this class.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise, since there is no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        return self

    def to_outcome[E](self, error: E) -> Failure[E]:
        """Convert to Failure(error)."""
        from klaw_outcome.outcome import Failure

        return Failure(error)


Nothing: NothingType = NothingType()

type Option[T] = Some[T] | NothingType
