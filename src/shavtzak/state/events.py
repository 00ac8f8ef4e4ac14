"""Change sections published by the roster store."""

from __future__ import annotations

from enum import StrEnum

from shavtzak.models import AppData


class RosterSection(StrEnum):
    PEOPLE = "people"
    VEHICLES = "vehicles"
    ASSIGNMENTS = "assignments"
    CONVOY_INFO = "convoy_info"


def changed_sections(before: AppData, after: AppData) -> frozenset[RosterSection]:
    """Sections whose value differs between two snapshots."""
    return frozenset(
        section for section in RosterSection if getattr(before, section.value) != getattr(after, section.value)
    )
