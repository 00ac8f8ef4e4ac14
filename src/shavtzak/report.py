"""Grouped text report over a roster snapshot.

The report lists every vehicle that has at least one resolvable
occupant, in collection order, followed by its occupants in the order
they were assigned::

    Jeep 12345
    Dana Levi 1234567 - שהיה

When convoy info is set, a three-line header and a blank line come
first. Nothing is sorted, so the same snapshot always renders to the
same string.
"""

from __future__ import annotations

from dataclasses import dataclass

from shavtzak._constants import DATE_LABEL, GOAL_LABEL, NO_STAY_LABEL, STAY_LABEL, TIME_LABEL
from shavtzak.models import AppData, ConvoyInfo, Person, Vehicle


@dataclass(frozen=True)
class ReportLabels:
    """Fixed strings used in the report."""

    goal: str = GOAL_LABEL
    date: str = DATE_LABEL
    time: str = TIME_LABEL
    stay: str = STAY_LABEL
    no_stay: str = NO_STAY_LABEL

    def stay_label(self, stay: bool) -> str:
        return self.stay if stay else self.no_stay


DEFAULT_LABELS = ReportLabels()


@dataclass(frozen=True)
class AssignedPerson:
    person: Person
    stay: bool


@dataclass(frozen=True)
class VehicleGroup:
    vehicle: Vehicle
    people: tuple[AssignedPerson, ...]


def vehicle_groups(snapshot: AppData) -> list[VehicleGroup]:
    """Resolve assignments per vehicle, dropping dangling ones and empty vehicles."""
    people_by_id: dict[str, Person] = {}
    for person in snapshot.people:
        # first match wins when ids repeat
        people_by_id.setdefault(person.id_number, person)

    groups: list[VehicleGroup] = []
    for vehicle in snapshot.vehicles:
        assigned = tuple(
            AssignedPerson(person=people_by_id[a.person_id], stay=a.stay)
            for a in snapshot.assignments
            if a.vehicle_id == vehicle.vehicle_id and a.person_id in people_by_id
        )
        if assigned:
            groups.append(VehicleGroup(vehicle=vehicle, people=assigned))
    return groups


def render_header(info: ConvoyInfo, labels: ReportLabels = DEFAULT_LABELS) -> str:
    return f"{labels.goal}: {info.goal}\n{labels.date}: {info.date}\n{labels.time}: {info.time}\n\n"


def render_group(group: VehicleGroup, labels: ReportLabels = DEFAULT_LABELS) -> str:
    lines = [f"{group.vehicle.designation} {group.vehicle.vehicle_id}"]
    lines.extend(
        f"{item.person.full_name} {item.person.id_number} - {labels.stay_label(item.stay)}" for item in group.people
    )
    return "\n".join(lines)


def generate(snapshot: AppData, labels: ReportLabels = DEFAULT_LABELS) -> str:
    """Render the full report for *snapshot*."""
    header = render_header(snapshot.convoy_info, labels) if snapshot.convoy_info is not None else ""
    body = "\n\n".join(render_group(group, labels) for group in vehicle_groups(snapshot))
    return header + body
