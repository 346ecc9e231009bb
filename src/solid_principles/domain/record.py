"""Immutable records the examples operate on."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base for domain items that never change after construction.

    Frozen pydantic models compare and hash by their field values, so two
    records with the same data are interchangeable.
    """

    model_config = ConfigDict(frozen=True)
