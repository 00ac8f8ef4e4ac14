"""Tests for the grouped convoy report."""

from __future__ import annotations

from shavtzak.models import AppData, Assignment, ConvoyInfo, Person, Vehicle
from shavtzak.report import ReportLabels, generate, vehicle_groups
from shavtzak.state import RosterStore
from shavtzak.storage import MemoryBlobStore

DANA = Person(id_number="1234567", full_name="Dana Levi")
OMER = Person(id_number="7654321", full_name="Omer Cohen")
JEEP = Vehicle(vehicle_id="12345", designation="Jeep")
TRUCK = Vehicle(vehicle_id="987654", designation="Truck")


def _snapshot(**kwargs: object) -> AppData:
    return AppData.model_validate(kwargs)


def test_single_vehicle_single_person() -> None:
    data = _snapshot(
        people=[DANA],
        vehicles=[JEEP],
        assignments=[Assignment(vehicle_id="12345", person_id="1234567", stay=True)],
    )

    assert generate(data) == "Jeep 12345\nDana Levi 1234567 - שהיה"


def test_removed_vehicle_yields_empty_report() -> None:
    store = RosterStore(MemoryBlobStore())
    store.add_person(DANA)
    store.add_vehicle(JEEP)
    store.add_assignment(Assignment(vehicle_id="12345", person_id="1234567", stay=True))

    store.remove_vehicle("12345")

    assert store.assignments == ()
    assert generate(store.export_snapshot()) == ""


def test_header_only_when_no_groups() -> None:
    data = _snapshot(convoy_info=ConvoyInfo(goal="Supply run", date="18/10", time="06:00"))

    assert generate(data) == "מטרת השיירה: Supply run\nתאריך: 18/10\nשעה: 06:00\n\n"


def test_full_report_keeps_collection_order() -> None:
    data = _snapshot(
        people=[OMER, DANA],
        vehicles=[TRUCK, JEEP],
        assignments=[
            Assignment(vehicle_id="12345", person_id="7654321"),
            Assignment(vehicle_id="987654", person_id="1234567", stay=True),
            Assignment(vehicle_id="12345", person_id="1234567", stay=True),
        ],
        convoy_info=ConvoyInfo(goal="g", date="d", time="t"),
    )

    assert generate(data) == (
        "מטרת השיירה: g\nתאריך: d\nשעה: t\n\n"
        "Truck 987654\n"
        "Dana Levi 1234567 - שהיה\n"
        "\n"
        "Jeep 12345\n"
        "Omer Cohen 7654321 - ללא שהיה\n"
        "Dana Levi 1234567 - שהיה"
    )


def test_dangling_assignments_and_empty_vehicles_are_omitted() -> None:
    data = _snapshot(
        people=[DANA],
        vehicles=[JEEP, TRUCK, Vehicle(vehicle_id="55555", designation="Bus")],
        assignments=[
            Assignment(vehicle_id="12345", person_id="0000000"),
            Assignment(vehicle_id="987654", person_id="1234567"),
            Assignment(vehicle_id="99999", person_id="1234567"),
        ],
    )

    assert generate(data) == "Truck 987654\nDana Levi 1234567 - ללא שהיה"
    assert [g.vehicle.vehicle_id for g in vehicle_groups(data)] == ["987654"]


def test_duplicate_person_ids_resolve_to_first() -> None:
    data = _snapshot(
        people=[DANA, Person(id_number="1234567", full_name="Someone Else")],
        vehicles=[JEEP],
        assignments=[Assignment(vehicle_id="12345", person_id="1234567")],
    )

    assert generate(data) == "Jeep 12345\nDana Levi 1234567 - ללא שהיה"


def test_generate_is_deterministic() -> None:
    data = _snapshot(
        people=[DANA, OMER],
        vehicles=[JEEP, TRUCK],
        assignments=[
            Assignment(vehicle_id="987654", person_id="7654321", stay=True),
            Assignment(vehicle_id="12345", person_id="1234567"),
        ],
    )

    assert generate(data) == generate(data)
    assert generate(data) == generate(AppData.from_json(data.to_json()))


def test_custom_labels() -> None:
    labels = ReportLabels(goal="Goal", date="Date", time="Time", stay="stays", no_stay="returns")
    data = _snapshot(
        people=[DANA, OMER],
        vehicles=[JEEP],
        assignments=[
            Assignment(vehicle_id="12345", person_id="1234567", stay=True),
            Assignment(vehicle_id="12345", person_id="7654321"),
        ],
        convoy_info=ConvoyInfo(goal="Supply", date="Mon", time="06:00"),
    )

    assert generate(data, labels) == (
        "Goal: Supply\nDate: Mon\nTime: 06:00\n\nJeep 12345\nDana Levi 1234567 - stays\nOmer Cohen 7654321 - returns"
    )


def test_subscriber_can_render_report_on_every_change() -> None:
    store = RosterStore(MemoryBlobStore())
    reports: list[str] = []
    store.subscribe(lambda data: reports.append(generate(data)))

    store.add_vehicle(JEEP)
    store.add_person(DANA)
    store.add_assignment(Assignment(vehicle_id="12345", person_id="1234567", stay=True))

    assert reports == ["", "", "", "Jeep 12345\nDana Levi 1234567 - שהיה"]
