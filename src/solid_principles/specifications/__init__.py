from .attribute import AttributeSpecification
from .base import AndSpecification, Specification
from .exceptions import NotASpecificationError, SpecificationError
from .filter import IFilter, SpecificationFilter

__all__ = [
    "AndSpecification",
    "AttributeSpecification",
    "IFilter",
    "NotASpecificationError",
    "Specification",
    "SpecificationError",
    "SpecificationFilter",
]
