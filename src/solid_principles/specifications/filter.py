"""Filter engine: apply a specification to a collection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..domain.specification import ISpecification

T = TypeVar("T")

logger = logging.getLogger(__name__)


class IFilter(Protocol[T]):
    """Protocol for anything that narrows a collection by a specification."""

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> list[T]:
        ...


class SpecificationFilter(Generic[T]):
    """
    Returns the items satisfying a specification, in input order.

    The input is consumed once and never mutated; the result is a new list.
    The filter knows nothing about the criteria, so new ones are added by
    writing (or composing) specifications rather than new filter methods.
    """

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> list[T]:
        result = [item for item in items if spec.is_satisfied_by(item)]
        logger.debug(
            "%s matched %d item(s)", type(spec).__name__, len(result)
        )
        return result
