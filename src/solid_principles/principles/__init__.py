"""One module per SOLID principle, each with a ``run()`` console demo."""

from __future__ import annotations

from collections.abc import Callable

from . import (
    dependency_inversion,
    interface_segregation,
    liskov_substitution,
    open_closed,
    single_responsibility,
)

PAGES: dict[str, tuple[str, Callable[[], None]]] = {
    "srp": ("Single responsibility principle", single_responsibility.run),
    "ocp": ("Open/closed principle", open_closed.run),
    "lsp": ("Liskov substitution principle", liskov_substitution.run),
    "isp": ("Interface segregation principle", interface_segregation.run),
    "dip": ("Dependency inversion principle", dependency_inversion.run),
}

__all__ = ["PAGES"]
