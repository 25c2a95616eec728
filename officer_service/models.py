"""Database record types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Officer:
    """A row of the ``officers`` table."""

    id: int
    name: str
    title: str
    linkedin: str | None = None
    image_uri: str | None = None


@dataclass(frozen=True)
class CreateOfficerParams:
    """Values for inserting a new officer."""

    name: str
    title: str
    linkedin: str | None = None
    image_uri: str | None = None