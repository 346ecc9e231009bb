"""Shared fixtures for solid_principles tests."""

from __future__ import annotations

import pytest

from solid_principles.principles.open_closed import Product, sample_products


@pytest.fixture
def products() -> list[Product]:
    """The six reference products, in their canonical order."""
    return sample_products()
