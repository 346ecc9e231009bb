"""Open/closed: open for extension, closed for modification.

``BadProductFilter`` grows a new method for every criterion. The
specification approach adds criteria as new (or composed) specification
classes and leaves :class:`SpecificationFilter` untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ..domain.record import Record
from ..specifications.attribute import AttributeSpecification
from ..specifications.filter import SpecificationFilter

if TYPE_CHECKING:
    from collections.abc import Iterable


class Color(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    WHITE = "white"
    ORANGE = "orange"


class Size(str, Enum):
    SMALL = "small"
    AVERAGE = "average"
    LARGE = "large"


class Product(Record):
    name: str
    size: Size
    color: Color


class BadProductFilter:
    """Each new criterion means editing this class."""

    def filter_by_color(
        self, products: Iterable[Product], color: Color
    ) -> list[Product]:
        return [p for p in products if p.color == color]

    def filter_by_size(self, products: Iterable[Product], size: Size) -> list[Product]:
        return [p for p in products if p.size == size]

    def filter_by_size_and_color(
        self, products: Iterable[Product], size: Size, color: Color
    ) -> list[Product]:
        return [p for p in products if p.size == size and p.color == color]


class ColorSpecification(AttributeSpecification[Product]):
    def __init__(self, color: Color) -> None:
        super().__init__("color", color)


class SizeSpecification(AttributeSpecification[Product]):
    def __init__(self, size: Size) -> None:
        super().__init__("size", size)


def sample_products() -> list[Product]:
    return [
        Product(name="objectOne", size=Size.SMALL, color=Color.GREEN),
        Product(name="objectTwo", size=Size.AVERAGE, color=Color.ORANGE),
        Product(name="objectThree", size=Size.SMALL, color=Color.WHITE),
        Product(name="objectFour", size=Size.LARGE, color=Color.ORANGE),
        Product(name="objectFive", size=Size.SMALL, color=Color.GREEN),
        Product(name="objectSix", size=Size.LARGE, color=Color.YELLOW),
    ]


def run() -> None:
    products = sample_products()

    print("Green products (old):")
    for p in BadProductFilter().filter_by_color(products, Color.GREEN):
        print(f" - {p.name} is green")

    spec = ColorSpecification(Color.GREEN) & SizeSpecification(Size.SMALL)
    print("Small green products (new):")
    for p in SpecificationFilter[Product]().filter(products, spec):
        print(f" - {p.name} is small and green")
