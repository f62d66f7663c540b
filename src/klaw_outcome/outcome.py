"""Outcome type: Success[T] | Failure[E] for explicit failure handling.

Both variants are frozen msgspec structs, so equality is structural and they
work with ``match``:

```python
match parse(raw):
    case Success(value):
        ...
    case Failure(error):
        ...
```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_outcome.errors import MissingPatternError, UnsafeCoerceError

if TYPE_CHECKING:
    from klaw_outcome.optional import NothingType, Some

__all__ = [
    'Failure',
    'Outcome',
    'Success',
    'encase',
    'errs',
    'is_outcome',
    'of',
    'oks',
    'sequence',
]


def _missing_patterns(
    success: Callable[..., Any] | None,
    failure: Callable[..., Any] | None,
) -> MissingPatternError:
    missing = tuple(name for name, handler in (('success', success), ('failure', failure)) if handler is None)
    return MissingPatternError(missing)


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Outcome containing a value of type T.

    Examples:
        >>> Success(2).map(lambda x: x * 10)
        Success(value=20)
        >>> Success(2).chain(lambda x: Failure('too small') if x < 5 else Success(x))
        Failure(error='too small')
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success.

        Narrows the type to Success[T] for type checkers.
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply f to the contained value.

        Args:
            f: Function to apply to the success value.

        Returns:
            Success containing f(value).
        """
        return Success(f(self.value))

    def map_failure[F](self, _f: Callable[[Any], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def bimap[F, U](self, _f: Callable[[Any], F], g: Callable[[T], U]) -> Success[U]:
        """Map the success value with g; f is only used for Failure."""
        return Success(g(self.value))

    def chain[U, E](self, f: Callable[[T], Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Apply a function returning an Outcome to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Outcome[U, E].

        Returns:
            The Outcome returned by f.
        """
        return f(self.value)

    def chain_failure[U, F](self, _f: Callable[[Any], Success[U] | Failure[F]]) -> Success[T]:
        """Return self unchanged since there is nothing to recover from."""
        return self

    def join[U, E](self: Success[Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Flatten Outcome[Outcome[U, E], E] into Outcome[U, E]."""
        return self.value

    def alt(self, _other: Success[T] | Failure[Any]) -> Success[T]:
        """Return self; the first Success wins."""
        return self

    def alt_lazy(self, _thunk: Callable[[], Success[T] | Failure[Any]]) -> Success[T]:
        """Return self without calling the thunk."""
        return self

    def ap[U, E](self, other: Success[Callable[[T], U]] | Failure[E]) -> Success[U] | Failure[E]:
        """Apply a Success-wrapped function to the contained value.

        Returns:
            Success(fn(value)) if other is Success(fn), otherwise other.
        """
        if isinstance(other, Success):
            return Success(other.value(self.value))
        return other

    def extend[U](self, f: Callable[[Success[T]], U]) -> Success[U]:
        """Wrap f(self) in a new Success."""
        return Success(f(self))

    def reduce[A](self, f: Callable[[A, T], A], initial: A) -> A:
        """Fold the value into an accumulator: f(initial, value)."""
        return f(initial, self.value)

    def unsafe_coerce(self) -> T:
        """Return the contained value."""
        return self.value

    def case_of[U](
        self,
        *,
        success: Callable[[T], U] | None = None,
        failure: Callable[[Any], U] | None = None,
        otherwise: Callable[[], U] | None = None,
    ) -> U:
        """Match on the variant.

        Either ``otherwise`` or both ``success`` and ``failure`` must be given.
        When ``otherwise`` is given it wins and the handler pair is ignored.

        Raises:
            MissingPatternError: If neither form is complete.
        """
        if otherwise is not None:
            return otherwise()
        if success is None or failure is None:
            raise _missing_patterns(success, failure)
        return success(self.value)

    def extract(self) -> T:
        return self.value

    def or_default(self, _default: T) -> T:
        return self.value

    def err_or_default[E](self, default: E) -> E:
        return default

    def or_default_lazy(self, _thunk: Callable[[], T]) -> T:
        return self.value

    def err_or_default_lazy[E](self, thunk: Callable[[], E]) -> E:
        return thunk()

    def if_success(self, effect: Callable[[T], Any]) -> Success[T]:
        """Call effect with the value and return self."""
        effect(self.value)
        return self

    def if_failure(self, _effect: Callable[[Any], Any]) -> Success[T]:
        return self

    def to_optional(self) -> Some[T]:
        """Convert to Some(value)."""
        from klaw_outcome.optional import Some

        return Some(self.value)

    def failure_to_optional(self) -> NothingType:
        """Convert to Nothing since there is no failure."""
        from klaw_outcome.optional import Nothing

        return Nothing

    def swap(self) -> Failure[T]:
        """Return Failure holding the same payload."""
        return Failure(self.value)

    def equals(self, other: object) -> bool:
        """Return True if other is a Success with an equal value."""
        return self == other

    def to_json(self) -> bytes:
        """Encode the value as JSON.

        Raises:
            TypeError: If msgspec cannot encode the value.
        """
        return msgspec.json.encode(self.value)


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Outcome containing an error of type E.

    Examples:
        >>> Failure('boom').map(lambda x: x * 10)
        Failure(error='boom')
        >>> Failure('boom').alt(Success(1))
        Success(value=1)
    """

    error: E

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True since this is Failure.

        Narrows the type to Failure[E] for type checkers.
        """
        return True

    def map[U](self, _f: Callable[[Any], U]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def map_failure[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply f to the contained error.

        Args:
            f: Function to apply to the failure payload.

        Returns:
            Failure containing f(error).
        """
        return Failure(f(self.error))

    def bimap[F, U](self, f: Callable[[E], F], _g: Callable[[Any], U]) -> Failure[F]:
        """Map the error with f; g is only used for Success."""
        return Failure(f(self.error))

    def chain[U, F](self, _f: Callable[[Any], Success[U] | Failure[F]]) -> Failure[E]:
        """Return self unchanged; a Failure is a left zero for chain."""
        return self

    def chain_failure[U, F](self, f: Callable[[E], Success[U] | Failure[F]]) -> Success[U] | Failure[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Outcome.

        Returns:
            The Outcome returned by f.
        """
        return f(self.error)

    def join(self) -> Failure[E]:
        return self

    def alt[T, F](self, other: Success[T] | Failure[F]) -> Success[T] | Failure[F]:
        """Return other.

        When both sides fail, the argument's failure is the one that survives.
        """
        return other

    def alt_lazy[T, F](self, thunk: Callable[[], Success[T] | Failure[F]]) -> Success[T] | Failure[F]:
        """Call the thunk and return its Outcome."""
        return thunk()

    def ap[F](self, other: Success[Any] | Failure[F]) -> Failure[E] | Failure[F]:
        """Return the function side's Failure if there is one, else self."""
        if isinstance(other, Failure):
            return other
        return self

    def extend[U](self, _f: Callable[[Any], U]) -> Failure[E]:
        return self

    def reduce[A](self, _f: Callable[[A, Any], A], initial: A) -> A:
        """Return initial unchanged."""
        return initial

    def unsafe_coerce(self) -> NoReturn:
        """Raise the failure.

        Raises:
            BaseException: The payload itself, when it is an exception.
            UnsafeCoerceError: When the payload is any other value.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnsafeCoerceError(self.error)

    def case_of[U](
        self,
        *,
        success: Callable[[Any], U] | None = None,
        failure: Callable[[E], U] | None = None,
        otherwise: Callable[[], U] | None = None,
    ) -> U:
        """Match on the variant. See ``Success.case_of``.

        Raises:
            MissingPatternError: If neither form is complete.
        """
        if otherwise is not None:
            return otherwise()
        if success is None or failure is None:
            raise _missing_patterns(success, failure)
        return failure(self.error)

    def extract(self) -> E:
        return self.error

    def or_default[T](self, default: T) -> T:
        return default

    def err_or_default(self, _default: E) -> E:
        return self.error

    def or_default_lazy[T](self, thunk: Callable[[], T]) -> T:
        return thunk()

    def err_or_default_lazy(self, _thunk: Callable[[], E]) -> E:
        return self.error

    def if_success(self, _effect: Callable[[Any], Any]) -> Failure[E]:
        return self

    def if_failure(self, effect: Callable[[E], Any]) -> Failure[E]:
        """Call effect with the error and return self."""
        effect(self.error)
        return self

    def to_optional(self) -> NothingType:
        """Convert to Nothing since there is no value."""
        from klaw_outcome.optional import Nothing

        return Nothing

    def failure_to_optional(self) -> Some[E]:
        """Convert to Some(error)."""
        from klaw_outcome.optional import Some

        return Some(self.error)

    def swap(self) -> Success[E]:
        """Return Success holding the same payload."""
        return Success(self.error)

    def equals(self, other: object) -> bool:
        """Return True if other is a Failure with an equal error."""
        return self == other

    def to_json(self) -> bytes:
        """Encode the error as JSON.

        Raises:
            TypeError: If msgspec cannot encode the error.
        """
        return msgspec.json.encode(self.error)


type Outcome[T, E = Exception] = Success[T] | Failure[E]


def of[T](value: T) -> Success[T]:
    """Wrap a value in Success."""
    return Success(value)


def is_outcome(x: object) -> TypeIs[Success[Any] | Failure[Any]]:
    """Return True if x is a Success or a Failure."""
    return isinstance(x, Success | Failure)


def errs[E](outcomes: Iterable[Success[Any] | Failure[E]]) -> list[E]:
    """Return the failure payloads, in order.

    Examples:
        >>> errs([Failure('a'), Success(1), Failure('b')])
        ['a', 'b']
    """
    return [o.error for o in outcomes if isinstance(o, Failure)]


def oks[T](outcomes: Iterable[Success[T] | Failure[Any]]) -> list[T]:
    """Return the success payloads, in order."""
    return [o.value for o in outcomes if isinstance(o, Success)]


def sequence[T, E](outcomes: Iterable[Success[T] | Failure[E]]) -> Success[list[T]] | Failure[E]:
    """Turn an iterable of Outcomes into an Outcome of list.

    Stops at the first Failure.

    Examples:
        >>> sequence([Success(1), Success(2)])
        Success(value=[1, 2])
        >>> sequence([Success(1), Failure('x'), Success(3)])
        Failure(error='x')
    """
    values: list[T] = []
    for outcome in outcomes:
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
    return Success(values)


def encase[T](fn: Callable[[], T]) -> Success[T] | Failure[Exception]:
    """Call fn, returning Success(result) or Failure(exception)."""
    try:
        return Success(fn())
    except Exception as e:
        return Failure(e)
