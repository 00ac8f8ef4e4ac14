"""Assignment model."""

from __future__ import annotations

from pydantic import Field

from shavtzak.models._base import RosterBaseModel

AssignmentKey = tuple[str, str]
"""``(vehicle_id, person_id)`` identity of an assignment."""


class Assignment(RosterBaseModel):
    """Links one person to one vehicle.

    Referenced ids are not checked on construction; dangling
    assignments are filtered out when the report is generated.
    """

    vehicle_id: str = Field(...)
    person_id: str = Field(...)
    """``Person.id_number`` of the assigned person."""
    stay: bool = Field(default=False)
    """Whether the person stays overnight."""

    @property
    def key(self) -> AssignmentKey:
        return (self.vehicle_id, self.person_id)
