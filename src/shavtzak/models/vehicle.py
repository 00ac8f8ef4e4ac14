"""Vehicle model."""

from __future__ import annotations

from pydantic import Field

from shavtzak.models._base import RosterBaseModel


class Vehicle(RosterBaseModel):
    """A vehicle taking part in the convoy."""

    vehicle_id: str = Field(...)
    """Vehicle number, 5-9 ASCII digits. Unique key across vehicles."""
    designation: str = Field(default="")
    """Human label (e.g. ``"Jeep"``)."""
