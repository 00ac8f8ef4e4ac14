"""Person model."""

from __future__ import annotations

from pydantic import Field

from shavtzak.models._base import RosterBaseModel


class Person(RosterBaseModel):
    """A convoy participant."""

    id_number: str = Field(...)
    """Personal number, 7 ASCII digits. Unique key across people."""
    full_name: str = Field(default="")
    """Free-text display name."""
