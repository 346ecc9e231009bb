"""Errors raised while assembling specifications.

Judging an item never raises; only wiring the wrong kind of object into a
composite does.
"""

from __future__ import annotations

from typing import Any


class SpecificationError(Exception):
    """Root of the errors raised by this package."""


class NotASpecificationError(SpecificationError, TypeError):
    """An operand of a composite has no ``is_satisfied_by``."""

    def __init__(self, operand: Any) -> None:
        self.operand = operand
        super().__init__(
            f"Cannot combine {type(operand).__name__} with a specification: "
            "it has no is_satisfied_by()"
        )
