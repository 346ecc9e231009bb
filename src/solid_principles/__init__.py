"""SOLID design principles shown through small runnable examples.

The reusable piece is the specification filter in
:mod:`solid_principles.specifications`; :mod:`solid_principles.principles`
holds one illustrative page per principle.
"""

from __future__ import annotations

from .domain import ISpecification, Record
from .specifications import (
    AndSpecification,
    AttributeSpecification,
    IFilter,
    Specification,
    SpecificationFilter,
)

__all__: list[str] = [
    "AndSpecification",
    "AttributeSpecification",
    "IFilter",
    "ISpecification",
    "Record",
    "Specification",
    "SpecificationFilter",
]
