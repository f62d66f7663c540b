"""Collection operators over AsyncOutcome values.

``sequence`` runs items one at a time and never starts the items after the
first failure. ``all_``, ``errs`` and ``oks`` start every item concurrently in
an anyio task group and keep input order in their results.

Examples:
    >>> async def example():
    ...     items = [AsyncOutcome.from_success(1), AsyncOutcome.from_failure('x')]
    ...     assert await errs(items) == ['x']
    ...     assert await sequence(items) == Failure('x')
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import anyio

from klaw_outcome.async_.outcome import AsyncOutcome, Helpers
from klaw_outcome.outcome import Failure
from klaw_outcome.outcome import errs as outcome_errs
from klaw_outcome.outcome import oks as outcome_oks

if TYPE_CHECKING:
    from klaw_outcome.outcome import Outcome

__all__ = [
    'all_',
    'errs',
    'oks',
    'run_all',
    'sequence',
]


async def run_all[T, E](items: Iterable[AsyncOutcome[T, E]]) -> list[Outcome[T, E]]:
    """Run every item concurrently and return their Outcomes in input order.

    Waits for every run to finish. Runs never raise, so one failure does not
    cancel the others.
    """
    pending = list(items)
    outcomes: list[Any] = [None] * len(pending)

    async def run_one(index: int, item: AsyncOutcome[T, E]) -> None:
        outcomes[index] = await item.run()

    async with anyio.create_task_group() as tg:
        for index, item in enumerate(pending):
            tg.start_soon(run_one, index, item)

    return outcomes


async def errs[E](items: Iterable[AsyncOutcome[Any, E]]) -> list[E]:
    """Run every item concurrently and return the failure payloads in input order.

    Examples:
        >>> async def example():
        ...     items = [
        ...         AsyncOutcome.from_failure('a'),
        ...         AsyncOutcome.from_failure('b'),
        ...         AsyncOutcome.from_success(5),
        ...     ]
        ...     assert await errs(items) == ['a', 'b']
    """
    return outcome_errs(await run_all(items))


async def oks[T](items: Iterable[AsyncOutcome[T, Any]]) -> list[T]:
    """Run every item concurrently and return the success payloads in input order."""
    return outcome_oks(await run_all(items))


def sequence[T, E](items: Iterable[AsyncOutcome[T, E]]) -> AsyncOutcome[list[T], E]:
    """Run items one at a time, in order, stopping at the first Failure.

    Items after the first failing one are never run, so their producers are
    never called.

    Args:
        items: AsyncOutcome values. Materialized now so the result can be
            run more than once.

    Returns:
        AsyncOutcome resolving to Success(values) or the first Failure.
    """
    pending = list(items)

    async def _sequenced(helpers: Helpers[E]) -> list[T]:
        values: list[T] = []
        for item in pending:
            values.append(await helpers.from_async(item))
        return values

    return AsyncOutcome(_sequenced)


def all_[T, E](items: Iterable[AsyncOutcome[T, E]]) -> AsyncOutcome[list[T], E]:
    """Run every item concurrently.

    Every producer is called, even when an earlier item fails. The result is
    Success(values) in input order, or the Failure of whichever run finished
    failing first.

    Note:
        The task group waits for all runs to finish before the result is
        returned.
    """
    pending = list(items)

    async def _gathered(helpers: Helpers[E]) -> list[T]:
        values: list[Any] = [None] * len(pending)
        first_failure: Failure[E] | None = None

        async def run_one(index: int, item: AsyncOutcome[T, E]) -> None:
            nonlocal first_failure
            outcome = await item.run()
            if isinstance(outcome, Failure):
                if first_failure is None:
                    first_failure = outcome
                return
            values[index] = outcome.value

        async with anyio.create_task_group() as tg:
            for index, item in enumerate(pending):
                tg.start_soon(run_one, index, item)

        if first_failure is not None:
            return await helpers.lift_outcome(first_failure)
        return values

    return AsyncOutcome(_gathered)
