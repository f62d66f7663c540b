"""Async outcomes: AsyncOutcome, its Helpers, and collection operators.

Examples:
    >>> from klaw_outcome.async_ import AsyncOutcome, sequence
    >>>
    >>> async def main():
    ...     doubled = await AsyncOutcome.from_success(21).map(lambda x: x * 2)
    ...     everything = await sequence([AsyncOutcome.from_success(1), AsyncOutcome.from_success(2)])
"""

from klaw_outcome.async_.collect import all_, errs, oks, run_all, sequence
from klaw_outcome.async_.outcome import AsyncOutcome, Helpers

__all__ = [
    'AsyncOutcome',
    'Helpers',
    'all_',
    'errs',
    'oks',
    'run_all',
    'sequence',
]
