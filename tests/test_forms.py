from __future__ import annotations

import pytest

from shavtzak import forms
from shavtzak.exceptions import RosterValidationError
from shavtzak.models import Person, Vehicle

PEOPLE = [
    Person(id_number="1234567", full_name="Dana Levi"),
    Person(id_number="7654321", full_name="Omer Cohen"),
]
VEHICLES = [
    Vehicle(vehicle_id="12345", designation="Jeep"),
    Vehicle(vehicle_id="987654", designation="Hummer"),
]


class TestValidators:
    @pytest.mark.parametrize("value", ["1234567", " 1234567 "])
    def test_person_id_valid(self, value: str) -> None:
        assert forms.validate_person_id(value) == "1234567"

    @pytest.mark.parametrize("value", ["123456", "12345678", "12345a7", "١٢٣٤٥٦٧"])
    def test_person_id_invalid(self, value: str) -> None:
        with pytest.raises(RosterValidationError, match="7 ספרות") as excinfo:
            forms.validate_person_id(value)
        assert excinfo.value.field == "id_number"

    @pytest.mark.parametrize("value", ["12345", "123456789"])
    def test_vehicle_id_valid(self, value: str) -> None:
        assert forms.validate_vehicle_id(value) == value

    @pytest.mark.parametrize("value", ["1234", "1234567890", "12-345"])
    def test_vehicle_id_invalid(self, value: str) -> None:
        with pytest.raises(RosterValidationError, match="5-9"):
            forms.validate_vehicle_id(value)

    def test_full_name_needs_two_words(self) -> None:
        assert forms.validate_full_name("  Dana   Levi ") == "Dana   Levi"
        with pytest.raises(RosterValidationError) as excinfo:
            forms.validate_full_name("Dana")
        assert excinfo.value.field == "full_name"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required(self, value: str | None) -> None:
        with pytest.raises(RosterValidationError, match="שדה חובה"):
            forms.validate_designation(value)


def test_make_person_and_vehicle_trim_inputs() -> None:
    assert forms.make_person(" Dana Levi ", " 1234567") == Person(id_number="1234567", full_name="Dana Levi")
    assert forms.make_vehicle(" Jeep ", "12345 ") == Vehicle(vehicle_id="12345", designation="Jeep")


def test_labels() -> None:
    assert forms.person_label(PEOPLE[0]) == "Dana Levi 1234567"
    assert forms.vehicle_label(VEHICLES[0]) == "Jeep 12345"


def test_filters_are_case_insensitive_substring_matches() -> None:
    assert forms.filter_people(PEOPLE, "dana") == [PEOPLE[0]]
    assert forms.filter_people(PEOPLE, "4321") == [PEOPLE[1]]
    assert forms.filter_people(PEOPLE, "") == PEOPLE
    assert forms.filter_vehicles(VEHICLES, "HUM") == [VEHICLES[1]]
    assert forms.filter_vehicles(VEHICLES, "123") == [VEHICLES[0]]


def test_resolve_by_label_or_id() -> None:
    assert forms.resolve_person(PEOPLE, "Omer Cohen 7654321") == PEOPLE[1]
    assert forms.resolve_person(PEOPLE, "1234567") == PEOPLE[0]
    assert forms.resolve_person(PEOPLE, "Dana") is None
    assert forms.resolve_vehicle(VEHICLES, " Jeep 12345 ") == VEHICLES[0]
    assert forms.resolve_vehicle(VEHICLES, "987654") == VEHICLES[1]
    assert forms.resolve_vehicle(VEHICLES, "Jeep") is None
