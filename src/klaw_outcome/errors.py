"""Exceptions raised when an Outcome is forced out of its failure channel."""

from __future__ import annotations

from typing import Any

__all__ = [
    'MissingPatternError',
    'UnsafeCoerceError',
]


class UnsafeCoerceError(RuntimeError):
    """unsafe_coerce was called on a Failure whose payload is not an exception."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'unsafe_coerce used on a Failure: {error!r}')


class MissingPatternError(TypeError):
    """case_of was called without a catch-all and without both variant handlers."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(f"case_of requires 'otherwise' or both handlers, missing: {', '.join(missing)}")
