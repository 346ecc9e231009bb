"""Specifications compose with ``&`` instead of growing new filter methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..domain.specification import ISpecification
from .exceptions import NotASpecificationError

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Base class giving every rule the ``&`` operator."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """True when *candidate* meets the rule. Never raises for valid items."""

    def __and__(self, other: Any) -> AndSpecification[T]:
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    """Both rules must hold. ``second`` is skipped once ``first`` fails."""

    def __init__(self, first: ISpecification[T], second: ISpecification[T]) -> None:
        for operand in (first, second):
            if not isinstance(operand, ISpecification):
                raise NotASpecificationError(operand)
        self.first = first
        self.second = second

    def is_satisfied_by(self, candidate: T) -> bool:
        if not self.first.is_satisfied_by(candidate):
            return False
        return self.second.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"({self.first!r} & {self.second!r})"
