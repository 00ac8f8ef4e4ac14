"""Full roster snapshot model.

:class:`AppData` is both the persisted blob and the import/export
document. Collections are tuples so a published snapshot cannot be
changed behind the store's back.
"""

from __future__ import annotations

from pydantic import Field

from shavtzak.models._base import RosterBaseModel
from shavtzak.models.assignment import Assignment
from shavtzak.models.convoy import ConvoyInfo
from shavtzak.models.person import Person
from shavtzak.models.vehicle import Vehicle


class AppData(RosterBaseModel):
    """The three roster collections plus optional convoy metadata."""

    people: tuple[Person, ...] = Field(default=())
    vehicles: tuple[Vehicle, ...] = Field(default=())
    assignments: tuple[Assignment, ...] = Field(default=())
    convoy_info: ConvoyInfo | None = Field(default=None)
    """Absent (``None``) unless set; omitted from the JSON when absent."""

    @property
    def is_empty(self) -> bool:
        return not (self.people or self.vehicles or self.assignments or self.convoy_info)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize with camelCase keys; ``convoyInfo`` is omitted when absent."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> AppData:
        """Parse a JSON document.

        Raises :class:`pydantic.ValidationError` for invalid JSON or a
        payload that does not have the snapshot shape.
        """
        return cls.model_validate_json(data)
