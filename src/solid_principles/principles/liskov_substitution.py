"""Liskov substitution: subtypes must be usable wherever the base type is.

Making ``Square`` a mutable subclass of ``Rectangle`` breaks callers that set
width and height independently (3×4 would measure 16). Here each shape is an
independent frozen variant of a tagged union with its own ``area``, so there
is no base-class contract for a variant to break.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from ..domain.record import Record


class Rectangle(Record):
    kind: Literal["rectangle"] = "rectangle"
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)

    @property
    def area(self) -> int:
        return self.width * self.height


class Square(Record):
    kind: Literal["square"] = "square"
    side: int = Field(default=0, ge=0)

    @property
    def area(self) -> int:
        return self.side * self.side


class Circle(Record):
    kind: Literal["circle"] = "circle"
    radius: float = Field(default=0.0, ge=0)

    @property
    def area(self) -> float:
        return math.pi * self.radius**2


Shape = Annotated[Rectangle | Square | Circle, Field(discriminator="kind")]

_shape_adapter: TypeAdapter[Shape] = TypeAdapter(Shape)


def parse_shape(data: dict[str, Any]) -> Shape:
    """Build the right shape variant from its ``kind`` tag."""
    return _shape_adapter.validate_python(data)


def set_and_measure(rectangle: Rectangle) -> int:
    """Resize a copy of *rectangle* to 3×4 and return its area (always 12)."""
    resized = rectangle.model_copy(update={"width": 3, "height": 4})
    return resized.area


def run() -> None:
    area = set_and_measure(Rectangle())
    print(f"We are expecting to see 12 and the output is {area}")
    for shape in (
        parse_shape({"kind": "rectangle", "width": 3, "height": 4}),
        parse_shape({"kind": "square", "side": 4}),
        parse_shape({"kind": "circle", "radius": 1}),
    ):
        print(f"{shape.kind} area: {shape.area:g}")
