"""@safe and @lazy decorators for building outcomes from plain functions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from klaw_outcome.async_.outcome import AsyncOutcome, Helpers
from klaw_outcome.outcome import Failure, Success

__all__ = ['lazy', 'safe']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Success[Any] | Failure[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator returning Success(result) or Failure(exception).

    Can be used with or without arguments:
        @safe
        def parse(raw): ...

        @safe(exceptions=(ValueError,))
        def parse_int(raw): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to (Exception,); other
            exceptions propagate.

    Example:
        ```python
        @safe
        def ratio(a: int, b: int) -> float:
            return a / b

        ratio(1, 0)
        # Failure(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[Any] | Failure[Any]:
        try:
            return Success(wrapped(*args, **kwargs))
        except catch as e:
            return Failure(e)

    if func is not None:
        return wrapper(func)
    return wrapper


def lazy[T, E](
    func: Callable[..., Awaitable[T]],
) -> Callable[..., AsyncOutcome[T, E]]:
    """Turn an async producer taking helpers first into an AsyncOutcome factory.

    Calling the decorated function does not run anything; it returns an
    AsyncOutcome that calls the original function on every run.

    Example:
        ```python
        @lazy
        async def load_user(helpers: Helpers[str], user_id: int) -> User:
            if user_id < 0:
                helpers.throw_failure('negative id')
            return await repo.get(user_id)

        outcome = await load_user(7)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Awaitable[T]],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> AsyncOutcome[T, E]:
        def producer(helpers: Helpers[E]) -> Awaitable[T]:
            return wrapped(helpers, *args, **kwargs)

        return AsyncOutcome(producer)

    return wrapper(func)
