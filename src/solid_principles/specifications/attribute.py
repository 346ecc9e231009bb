from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from .base import Specification

T = TypeVar("T")

_ABSENT = object()


class AttributeSpecification(Specification[T]):
    """
    Holds when the item's ``attr`` equals ``expected``.

    Items may be objects or mappings. An item lacking the attribute, or
    holding a value of another type, simply does not match.
    """

    def __init__(self, attr: str, expected: Any) -> None:
        self.attr = attr
        self.expected = expected

    def is_satisfied_by(self, candidate: T) -> bool:
        if isinstance(candidate, Mapping):
            actual = candidate.get(self.attr, _ABSENT)
        else:
            actual = getattr(candidate, self.attr, _ABSENT)
        return actual is not _ABSENT and bool(actual == self.expected)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attr}={self.expected!r})"
