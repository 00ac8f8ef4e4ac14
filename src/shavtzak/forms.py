"""Field rules and lookup helpers for roster input.

These mirror what an input form does before handing a well-formed
:class:`Person` or :class:`Vehicle` to the store: trim, validate, and
resolve free-text picks ("Jeep 12345") back to records.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from shavtzak._constants import (
    FULL_NAME_MESSAGE,
    MIN_NAME_WORDS,
    PERSON_ID_MESSAGE,
    PERSON_ID_PATTERN,
    REQUIRED_MESSAGE,
    VEHICLE_ID_MESSAGE,
    VEHICLE_ID_PATTERN,
)
from shavtzak.exceptions import RosterValidationError
from shavtzak.models import Person, Vehicle

_PERSON_ID_RE = re.compile(PERSON_ID_PATTERN, re.ASCII)
_VEHICLE_ID_RE = re.compile(VEHICLE_ID_PATTERN, re.ASCII)

# ------------------------------------------------------------------
# Validators
# ------------------------------------------------------------------


def _required(value: str | None, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise RosterValidationError(REQUIRED_MESSAGE, field=field)
    return text


def validate_person_id(value: str | None) -> str:
    """Return the trimmed personal number; it must be exactly 7 digits."""
    text = _required(value, "id_number")
    if not _PERSON_ID_RE.match(text):
        raise RosterValidationError(PERSON_ID_MESSAGE, field="id_number")
    return text


def validate_vehicle_id(value: str | None) -> str:
    """Return the trimmed vehicle number; it must be 5-9 digits."""
    text = _required(value, "vehicle_id")
    if not _VEHICLE_ID_RE.match(text):
        raise RosterValidationError(VEHICLE_ID_MESSAGE, field="vehicle_id")
    return text


def validate_full_name(value: str | None) -> str:
    """Return the trimmed name; it needs a first and a last name."""
    text = _required(value, "full_name")
    if len(text.split()) < MIN_NAME_WORDS:
        raise RosterValidationError(FULL_NAME_MESSAGE, field="full_name")
    return text


def validate_designation(value: str | None) -> str:
    return _required(value, "designation")


def make_person(full_name: str | None, id_number: str | None) -> Person:
    return Person(id_number=validate_person_id(id_number), full_name=validate_full_name(full_name))


def make_vehicle(designation: str | None, vehicle_id: str | None) -> Vehicle:
    return Vehicle(vehicle_id=validate_vehicle_id(vehicle_id), designation=validate_designation(designation))


# ------------------------------------------------------------------
# Display labels and search
# ------------------------------------------------------------------


def person_label(person: Person) -> str:
    return f"{person.full_name} {person.id_number}"


def vehicle_label(vehicle: Vehicle) -> str:
    return f"{vehicle.designation} {vehicle.vehicle_id}"


def filter_people(people: Iterable[Person], query: str) -> list[Person]:
    """Case-insensitive substring match on name or personal number."""
    needle = query.lower()
    return [p for p in people if needle in p.full_name.lower() or needle in p.id_number]


def filter_vehicles(vehicles: Iterable[Vehicle], query: str) -> list[Vehicle]:
    """Case-insensitive substring match on designation or vehicle number."""
    needle = query.lower()
    return [v for v in vehicles if needle in v.designation.lower() or needle in v.vehicle_id.lower()]


def resolve_person(people: Iterable[Person], value: str) -> Person | None:
    """Find a person by display label (``"Dana Levi 1234567"``) or by bare id."""
    text = value.strip()
    for person in people:
        if person_label(person) == text or person.id_number == text:
            return person
    return None


def resolve_vehicle(vehicles: Iterable[Vehicle], value: str) -> Vehicle | None:
    """Find a vehicle by display label (``"Jeep 12345"``) or by bare id."""
    text = value.strip()
    for vehicle in vehicles:
        if vehicle_label(vehicle) == text or vehicle.vehicle_id == text:
            return vehicle
    return None
