from __future__ import annotations

import logging

import pytest

from solid_principles.principles.interface_segregation import (
    Document,
    Fax,
    MultiFunctionDevice,
    MultiFunctionPrinter,
    OrdinaryPrinter,
    Photocopier,
    Printer,
    Scanner,
    capabilities,
)


@pytest.mark.parametrize(
    ("device", "expected"),
    [
        (OrdinaryPrinter(), ["print"]),
        (Photocopier(), ["print", "scan"]),
        (MultiFunctionPrinter(), ["print", "scan", "fax"]),
    ],
)
def test_devices_implement_only_their_roles(device, expected):
    assert capabilities(device) == expected


def test_role_interfaces():
    assert isinstance(OrdinaryPrinter(), Printer)
    assert not isinstance(OrdinaryPrinter(), Scanner)
    assert isinstance(Photocopier(), Scanner)
    assert not isinstance(Photocopier(), Fax)


def test_only_mfp_is_a_multi_function_device():
    assert isinstance(MultiFunctionPrinter(), MultiFunctionDevice)
    assert not isinstance(Photocopier(), MultiFunctionDevice)


def test_devices_log_operations(caplog):
    doc = Document(title="report")

    with caplog.at_level(logging.INFO):
        MultiFunctionPrinter().fax(doc)
        Photocopier().scan(doc)

    assert "MultiFunctionPrinter faxing report" in caplog.text
    assert "Photocopier scanning report" in caplog.text
