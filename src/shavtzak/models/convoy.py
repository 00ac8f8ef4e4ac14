"""Convoy metadata model."""

from __future__ import annotations

from pydantic import Field

from shavtzak.models._base import RosterBaseModel


class ConvoyInfo(RosterBaseModel):
    """Roster-wide convoy details printed at the top of the report."""

    goal: str = Field(default="")
    date: str = Field(default="")
    time: str = Field(default="")
