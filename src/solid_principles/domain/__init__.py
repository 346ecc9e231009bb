"""Domain primitives shared by the filter engine and the principle pages."""

from __future__ import annotations

from .record import Record
from .specification import ISpecification

__all__: list[str] = [
    "ISpecification",
    "Record",
]
