"""Named capabilities shared by Outcome and AsyncOutcome.

Each capability is a structural Protocol, so ``Success``, ``Failure`` and
``AsyncOutcome`` satisfy them without inheriting from anything. They are
runtime checkable, which only verifies the method names exist.

Laws the implementations follow:

- Functor: ``x.map(lambda v: v) == x`` and
  ``x.map(f).map(g) == x.map(lambda v: g(f(v)))``.
- Chain: ``Failure(e).chain(f) == Failure(e)`` and
  ``Success(v).chain(f) == f(v)``.
- Alt: ``Success(v).alt(y) == Success(v)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, Self, runtime_checkable

__all__ = [
    'Alt',
    'Apply',
    'Bifunctor',
    'Chain',
    'Extend',
    'Foldable',
    'Functor',
    'Setoid',
]


@runtime_checkable
class Functor(Protocol):
    """Values whose success side can be mapped."""

    def map(self, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Bifunctor(Functor, Protocol):
    """Values whose failure and success sides can both be mapped."""

    def bimap(self, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Any: ...

    def map_failure(self, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Apply(Functor, Protocol):
    """Values that can apply a wrapped function to themselves."""

    def ap(self, other: Any) -> Any: ...


@runtime_checkable
class Chain(Apply, Protocol):
    """Values that can be sequenced with a function returning a new value."""

    def chain(self, f: Callable[[Any], Any]) -> Any: ...

    def chain_failure(self, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Alt(Functor, Protocol):
    """Values with a left-biased choice between two alternatives."""

    def alt(self, other: Self) -> Any: ...


@runtime_checkable
class Extend(Functor, Protocol):
    """Values that can be extended by a function over the whole value."""

    def extend(self, f: Callable[[Self], Any]) -> Any: ...


@runtime_checkable
class Foldable(Protocol):
    """Values that can be reduced into an accumulator."""

    def reduce(self, f: Callable[[Any, Any], Any], initial: Any) -> Any: ...


@runtime_checkable
class Setoid(Protocol):
    """Values with structural equality."""

    def equals(self, other: object) -> bool: ...
