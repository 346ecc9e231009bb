"""Interface segregation: clients should not depend on methods they don't use.

Instead of one ``Machine`` interface that forces a plain printer to stub out
scanning and faxing, each capability is a small role interface and devices
implement only the roles they support.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from ..domain.record import Record

logger = logging.getLogger(__name__)


class Document(Record):
    title: str = "untitled"


@runtime_checkable
class Printer(Protocol):
    def print(self, document: Document) -> None: ...


@runtime_checkable
class Scanner(Protocol):
    def scan(self, document: Document) -> None: ...


@runtime_checkable
class Fax(Protocol):
    def fax(self, document: Document) -> None: ...


@runtime_checkable
class MultiFunctionDevice(Printer, Scanner, Fax, Protocol):
    """All three roles combined, for devices that really support them."""


class OrdinaryPrinter:
    def print(self, document: Document) -> None:
        logger.info("%s printing %s", type(self).__name__, document.title)


class Photocopier:
    def print(self, document: Document) -> None:
        logger.info("%s printing %s", type(self).__name__, document.title)

    def scan(self, document: Document) -> None:
        logger.info("%s scanning %s", type(self).__name__, document.title)


class MultiFunctionPrinter:
    def print(self, document: Document) -> None:
        logger.info("%s printing %s", type(self).__name__, document.title)

    def scan(self, document: Document) -> None:
        logger.info("%s scanning %s", type(self).__name__, document.title)

    def fax(self, document: Document) -> None:
        logger.info("%s faxing %s", type(self).__name__, document.title)


def capabilities(device: object) -> list[str]:
    """Names of the role interfaces *device* implements."""
    roles: list[tuple[str, type]] = [
        ("print", Printer),
        ("scan", Scanner),
        ("fax", Fax),
    ]
    return [name for name, role in roles if isinstance(device, role)]


def run() -> None:
    for device in (OrdinaryPrinter(), Photocopier(), MultiFunctionPrinter()):
        print(f"{type(device).__name__} can: {', '.join(capabilities(device))}")
