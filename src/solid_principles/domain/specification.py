"""Structural type for anything that can judge an item."""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """A rule an item either meets or does not.

    Implementations are pure: the same item always gets the same answer
    and judging it changes nothing.
    """

    def is_satisfied_by(self, candidate: T) -> bool: ...
