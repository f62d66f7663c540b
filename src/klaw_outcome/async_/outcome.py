"""AsyncOutcome: a lazy, re-runnable async computation producing an Outcome.

An AsyncOutcome holds a producer, an async function that receives a
``Helpers`` bundle and returns the success value. Nothing runs until the
AsyncOutcome is awaited or ``run()`` is called, and every run calls the
producer again.

Whatever happens inside the producer, a run resolves to an Outcome:

- the producer returns: ``Success(value)``
- the producer escapes through its helpers: ``Failure(error)``
- the producer (or anything it awaits) raises: ``Failure(exception)``

Example:
    ```python
    async def load(helpers: Helpers[str]) -> dict:
        user_id = await helpers.lift_outcome(parse_id(raw))
        if user_id == 0:
            helpers.throw_failure('anonymous')
        return await fetch_user(user_id)

    outcome = await AsyncOutcome(load).map(lambda u: u['name'])
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator, Iterable
from typing import TYPE_CHECKING, Any, NoReturn

import anyio

from klaw_outcome._config import get_config
from klaw_outcome._logging import get_logger
from klaw_outcome.escape import Escape, failure_payload
from klaw_outcome.outcome import Failure, Success

if TYPE_CHECKING:
    from klaw_outcome.optional import Option
    from klaw_outcome.outcome import Outcome

__all__ = ['AsyncOutcome', 'Helpers']

logger = get_logger(__name__)


async def _settle(value: Any) -> Any:
    """Await value if it is awaitable, else return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


class Helpers[E]:
    """Per-run helpers handed to an AsyncOutcome producer.

    ``lift_outcome`` and ``from_async`` unwrap a Success for the producer and
    stop the run on a Failure. ``throw_failure`` stops the run outright.
    """

    __slots__ = ()

    async def lift_outcome[T](self, outcome: Outcome[T, E]) -> T:
        """Return the value of a Success, or stop the run with a Failure's error.

        Raises:
            TypeError: If given something that is not an Outcome. Like any
                exception raised in a producer, it folds into the run's Failure.
        """
        if isinstance(outcome, Success):
            return outcome.value
        if isinstance(outcome, Failure):
            raise Escape(outcome.error)
        msg = f'expected Success or Failure, got {type(outcome).__name__}'
        raise TypeError(msg)

    async def from_async[T](self, awaitable: Awaitable[Outcome[T, E]]) -> T:
        """Await an Outcome and lift it.

        If the awaitable itself raises, the exception propagates and the run
        fails with it.
        """
        return await self.lift_outcome(await awaitable)

    def throw_failure(self, error: E) -> NoReturn:
        """Stop the run with Failure(error)."""
        raise Escape(error)


class AsyncOutcome[T, E]:
    """Lazy async Outcome with a single failure channel.

    Combinators return new AsyncOutcome instances and never run anything
    themselves. Awaiting an AsyncOutcome is the same as awaiting ``run()``.

    Note:
        An AsyncOutcome is a recipe, not a cached result. Awaiting it twice
        runs the producer twice, so side effects in the producer repeat.

    Example:
        ```python
        async def main():
            total = await (
                AsyncOutcome.from_success(20)
                .map(lambda x: x + 1)
                .chain(lambda x: AsyncOutcome.from_success(x * 2))
            )
            assert total == Success(42)
        ```
    """

    __slots__ = ('_producer',)

    def __init__(self, producer: Callable[[Helpers[E]], Awaitable[T]]) -> None:
        """Create an AsyncOutcome from a producer.

        Args:
            producer: Called with a fresh Helpers bundle on every run. It may
                return a plain value instead of an awaitable.
        """
        self._producer = producer

    def __await__(self) -> Generator[Any, Any, Outcome[T, E]]:
        """Support ``await``, resolving to the Outcome of a fresh run."""
        return self.run().__await__()

    async def _produce(self, helpers: Helpers[E]) -> T:
        return await _settle(self._producer(helpers))

    async def run(self) -> Outcome[T, E]:
        """Run the producer and fold every failure into a Failure.

        Never raises an ``Exception``. Cancellation and other
        ``BaseException``s that are not ``Exception``s pass through.
        """
        try:
            value = await self._produce(Helpers())
        except Exception as exc:
            error = failure_payload(exc)
            if get_config().trace_runs:
                logger.debug(
                    'outcome.run.folded',
                    cause='escaped' if isinstance(exc, Escape) else 'raised',
                    error=repr(error),
                )
            return Failure(error)
        return Success(value)

    # --- Construction ---

    @classmethod
    def lift_outcome(cls, outcome: Outcome[T, E]) -> AsyncOutcome[T, E]:
        """Wrap an already known Outcome."""

        async def _lifted(helpers: Helpers[E]) -> T:
            return await helpers.lift_outcome(outcome)

        return cls(_lifted)

    @classmethod
    def from_async(cls, factory: Callable[[], Awaitable[Outcome[T, E]]]) -> AsyncOutcome[T, E]:
        """Wrap a function returning an awaitable Outcome.

        The factory is called once per run. If the awaitable raises, the run
        fails with that exception.

        Example:
            ```python
            async def fetch() -> Outcome[int, str]:
                return Success(1)

            assert await AsyncOutcome.from_async(fetch) == Success(1)
            ```
        """

        async def _awaited(helpers: Helpers[E]) -> T:
            return await helpers.from_async(factory())

        return cls(_awaited)

    @classmethod
    def from_success(cls, value: T) -> AsyncOutcome[T, E]:
        return cls.lift_outcome(Success(value))

    @classmethod
    def from_failure(cls, error: E) -> AsyncOutcome[T, E]:
        return cls.lift_outcome(Failure(error))

    # --- Collections ---

    @staticmethod
    def errs[F](items: Iterable[AsyncOutcome[Any, F]]) -> Coroutine[Any, Any, list[F]]:
        """Run all concurrently and return the failure payloads in input order."""
        from klaw_outcome.async_.collect import errs

        return errs(items)

    @staticmethod
    def oks[U](items: Iterable[AsyncOutcome[U, Any]]) -> Coroutine[Any, Any, list[U]]:
        """Run all concurrently and return the success payloads in input order."""
        from klaw_outcome.async_.collect import oks

        return oks(items)

    @staticmethod
    def sequence[U, F](items: Iterable[AsyncOutcome[U, F]]) -> AsyncOutcome[list[U], F]:
        """Run one at a time, stopping at the first Failure."""
        from klaw_outcome.async_.collect import sequence

        return sequence(items)

    @staticmethod
    def all[U, F](items: Iterable[AsyncOutcome[U, F]]) -> AsyncOutcome[list[U], F]:  # noqa: A003
        """Run all concurrently, resolving to the first Failure to complete."""
        from klaw_outcome.async_.collect import all_

        return all_(items)

    # --- Functor / Bifunctor ---

    def map[U](self, f: Callable[[T], U]) -> AsyncOutcome[U, E]:
        """Apply f to the success value.

        A failing run never reaches f. If f raises, the run fails with the
        exception.
        """

        async def _mapped(helpers: Helpers[E]) -> U:
            return f(await self._produce(helpers))

        return AsyncOutcome(_mapped)

    def map_failure[F](self, f: Callable[[E], F]) -> AsyncOutcome[T, F]:
        """Apply f to the failure payload, whatever produced it."""

        async def _mapped(helpers: Helpers[F]) -> T:
            try:
                return await self._produce(helpers)  # type: ignore[arg-type]
            except Exception as exc:
                helpers.throw_failure(f(failure_payload(exc)))

        return AsyncOutcome(_mapped)

    def bimap[F, U](self, f: Callable[[E], F], g: Callable[[T], U]) -> AsyncOutcome[U, F]:
        """Map the failure with f or the success with g."""

        async def _mapped(helpers: Helpers[F]) -> U:
            outcome = await self.run()
            return await helpers.lift_outcome(outcome.bimap(f, g))

        return AsyncOutcome(_mapped)

    def void(self) -> AsyncOutcome[None, E]:
        """Discard the success value."""
        return self.map(lambda _: None)

    # --- Monad ---

    def chain[U, F](self, f: Callable[[T], Awaitable[Outcome[U, F]]]) -> AsyncOutcome[U, E | F]:
        """Continue with f(value), an awaitable Outcome such as another AsyncOutcome.

        Example:
            ```python
            def load_orders(user_id: int) -> AsyncOutcome[list[Order], str]:
                ...

            orders = AsyncOutcome.from_success(7).chain(load_orders)
            ```
        """

        async def _chained(helpers: Helpers[E | F]) -> U:
            value = await self._produce(helpers)  # type: ignore[arg-type]
            return await helpers.from_async(f(value))

        return AsyncOutcome(_chained)

    def chain_failure[U, F](self, f: Callable[[E], Awaitable[Outcome[U, F]]]) -> AsyncOutcome[T | U, F]:
        """Recover from a failure with f(error); success passes through."""

        async def _recovered(helpers: Helpers[F]) -> T | U:
            try:
                return await self._produce(helpers)  # type: ignore[arg-type]
            except Exception as exc:
                error = failure_payload(exc)
            return await helpers.from_async(f(error))

        return AsyncOutcome(_recovered)

    def join[U](self: AsyncOutcome[AsyncOutcome[U, E], E]) -> AsyncOutcome[U, E]:
        """Flatten AsyncOutcome[AsyncOutcome[U, E], E] into AsyncOutcome[U, E]."""

        async def _joined(helpers: Helpers[E]) -> U:
            outcome = await self.run()
            if isinstance(outcome, Success):
                return await helpers.from_async(outcome.value)
            return await helpers.lift_outcome(outcome)

        return AsyncOutcome(_joined)

    # --- Alt / Apply / Extend ---

    def alt(self, other: AsyncOutcome[T, E]) -> AsyncOutcome[T, E]:
        """Return the receiver's Success, else whatever other resolves to.

        other is not run at all when the receiver succeeds.
        """

        async def _alternative(helpers: Helpers[E]) -> T:
            outcome = await self.run()
            if isinstance(outcome, Success):
                return outcome.value
            return await helpers.from_async(other)

        return AsyncOutcome(_alternative)

    def ap[U](self, other: Awaitable[Outcome[Callable[[T], U], E]]) -> AsyncOutcome[U, E]:
        """Apply the function other resolves to over the receiver's value.

        The function side runs first. If it fails, the receiver is never run
        and the run fails with the function side's error. This gives the same
        result as ``Outcome.ap`` for every combination of variants.
        """

        async def _applied(helpers: Helpers[E]) -> U:
            fn = await helpers.from_async(other)
            return fn(await self._produce(helpers))

        return AsyncOutcome(_applied)

    def extend[U](self, f: Callable[[AsyncOutcome[T, E]], U | Awaitable[U]]) -> AsyncOutcome[U, E]:
        """Wrap f(receiver) in a Success, unless the receiver fails.

        f receives a lifted copy of the completed run, so it can inspect the
        result without running the producer again. An awaitable returned by f
        is awaited.
        """

        async def _extended(helpers: Helpers[E]) -> U:
            outcome = await self.run()
            if isinstance(outcome, Failure):
                return await helpers.lift_outcome(outcome)
            return await _settle(f(AsyncOutcome.lift_outcome(outcome)))

        return AsyncOutcome(_extended)

    # --- Effects ---

    def if_failure(self, effect: Callable[[E], Any]) -> AsyncOutcome[T, E]:
        """Call effect with the error on failure; the outcome is unchanged.

        An awaitable returned by effect is awaited. If effect raises, the run
        fails with that exception, unlike ``finally_run``.
        """

        async def _inspected(helpers: Helpers[E]) -> T:
            outcome = await self.run()
            if isinstance(outcome, Failure):
                await _settle(effect(outcome.error))
            return await helpers.lift_outcome(outcome)

        return AsyncOutcome(_inspected)

    def if_success(self, effect: Callable[[T], Any]) -> AsyncOutcome[T, E]:
        """Call effect with the value on success; the outcome is unchanged.

        If effect raises, the run fails with that exception.
        """

        async def _inspected(helpers: Helpers[E]) -> T:
            outcome = await self.run()
            if isinstance(outcome, Success):
                await _settle(effect(outcome.value))
            return await helpers.lift_outcome(outcome)

        return AsyncOutcome(_inspected)

    def finally_run(self, effect: Callable[[], Any]) -> AsyncOutcome[T, E]:
        """Call effect after every run, whichever variant it resolves to.

        The effect also runs when the run is cancelled, inside a shielded
        cancel scope, and the cancellation then continues. An exception raised
        by effect is logged and dropped; it never changes the outcome.
        """

        async def _finalized(helpers: Helpers[E]) -> T:
            try:
                outcome = await self.run()
            finally:
                with anyio.CancelScope(shield=True):
                    try:
                        await _settle(effect())
                    except Exception:
                        logger.warning('outcome.finally.effect_failed', exc_info=True)
            return await helpers.lift_outcome(outcome)

        return AsyncOutcome(_finalized)

    def swap(self) -> AsyncOutcome[E, T]:
        """Turn a Success into a Failure and vice versa, keeping the payload."""

        async def _swapped(helpers: Helpers[T]) -> E:
            outcome = await self.run()
            if isinstance(outcome, Success):
                helpers.throw_failure(outcome.value)
            return outcome.error

        return AsyncOutcome(_swapped)

    # --- Extraction ---

    def or_default(self, default: T) -> Coroutine[Any, Any, T]:
        """Return a coroutine producing the success value or default."""

        async def _unwrap() -> T:
            return (await self.run()).or_default(default)

        return _unwrap()

    def err_or_default(self, default: E) -> Coroutine[Any, Any, E]:
        """Return a coroutine producing the failure payload or default."""

        async def _unwrap() -> E:
            return (await self.run()).err_or_default(default)

        return _unwrap()

    def case_of[U](
        self,
        *,
        success: Callable[[T], U] | None = None,
        failure: Callable[[E], U] | None = None,
        otherwise: Callable[[], U] | None = None,
    ) -> Coroutine[Any, Any, U]:
        """Return a coroutine matching on the run's Outcome. See ``Success.case_of``."""

        async def _matched() -> U:
            outcome = await self.run()
            return outcome.case_of(success=success, failure=failure, otherwise=otherwise)

        return _matched()

    def to_optional(self) -> Coroutine[Any, Any, Option[T]]:
        """Return a coroutine producing Some(value) or Nothing."""

        async def _optional() -> Option[T]:
            return (await self.run()).to_optional()

        return _optional()

    def failure_to_optional(self) -> Coroutine[Any, Any, Option[E]]:
        """Return a coroutine producing Some(error) or Nothing."""

        async def _optional() -> Option[E]:
            return (await self.run()).failure_to_optional()

        return _optional()

    def __repr__(self) -> str:
        return f'AsyncOutcome({self._producer!r})'
