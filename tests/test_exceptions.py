"""Tests for exceptions module."""

from __future__ import annotations

import pytest

from solid_principles.specifications import (
    AndSpecification,
    AttributeSpecification,
    NotASpecificationError,
    SpecificationError,
)


def test_and_rejects_non_specification_operand():
    with pytest.raises(NotASpecificationError) as exc_info:
        AttributeSpecification("color", "green") & 3

    assert exc_info.value.operand == 3
    assert "Cannot combine int" in str(exc_info.value)


def test_first_operand_is_checked_too():
    with pytest.raises(NotASpecificationError):
        AndSpecification("green", AttributeSpecification("color", "green"))


def test_hierarchy():
    assert issubclass(NotASpecificationError, SpecificationError)
    assert issubclass(NotASpecificationError, TypeError)
