"""Base model for roster records.

Every roster model inherits from :class:`RosterBaseModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys of the stored
  blob (``idNumber``, ``vehicleId`` ...) map to snake_case fields.
* A ``model_validator(mode="before")`` that drops ``null`` values so
  the field default is used instead.
* Alias-keyed dumping via :meth:`RosterBaseModel.to_wire`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class RosterBaseModel(BaseModel):
    """Base for persisted roster records.

    Instances are frozen: a record is replaced, never edited in place.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Treat ``null`` the same as a missing key."""
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}

    def to_wire(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict keyed by the camelCase aliases."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
