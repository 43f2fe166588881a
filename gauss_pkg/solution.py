"""Outcome of solving a linear system.

There are three kinds of outcome:
- none: the system is inconsistent
- infinite: the system is consistent but has free variables
- unique: exactly one solution, carried as the payload

Callers dispatch with ``match``::

    match solution:
        case UniqueSolution(value=x): ...
        case InfiniteSolutions(): ...
        case NoSolution(): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


class _SolutionBase:
    kind: ClassVar[str]

    @property
    def is_none(self) -> bool:
        return self.kind == "none"

    @property
    def is_infinite(self) -> bool:
        return self.kind == "infinite"

    @property
    def is_unique(self) -> bool:
        return self.kind == "unique"


@dataclass(frozen=True)
class NoSolution(_SolutionBase):
    kind: ClassVar[str] = "none"

    def map(self, func: Callable[[T], R]) -> NoSolution:
        return self


@dataclass(frozen=True)
class InfiniteSolutions(_SolutionBase):
    kind: ClassVar[str] = "infinite"

    def map(self, func: Callable[[T], R]) -> InfiniteSolutions:
        return self


@dataclass(frozen=True)
class UniqueSolution(_SolutionBase, Generic[T]):
    kind: ClassVar[str] = "unique"

    value: T

    def map(self, func: Callable[[T], R]) -> UniqueSolution[R]:
        """Transform the payload, keeping the outcome unique."""
        return UniqueSolution(func(self.value))


Solution = Union[NoSolution, InfiniteSolutions, UniqueSolution[T]]
