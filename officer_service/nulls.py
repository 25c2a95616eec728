"""Normalisation of optional text fields."""

from __future__ import annotations


def normalize_optional(value: str | None) -> str | None:
    """Strip *value*; blank or missing text becomes ``None``."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None