"""Command-line front end for the convoy roster.

Usage
-----
::

    shavtzak vehicle add Jeep 12345
    shavtzak person add "Dana Levi" 1234567
    shavtzak assign "Jeep 12345" 1234567 --stay
    shavtzak convoy --goal "Supply run" --date 2026-10-18 --time 06:00
    shavtzak report

The roster lives in ``$SHAVTZAK_DATA_DIR`` (default ``~/.shavtzak``);
``--data-dir`` overrides it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from shavtzak import forms
from shavtzak.config import RosterConfig
from shavtzak.exceptions import RosterConfigError, RosterImportError, RosterValidationError
from shavtzak.models import Assignment, ConvoyInfo
from shavtzak.report import generate
from shavtzak.state import RosterStore
from shavtzak.transfer import read_import, write_export

EXIT_OK = 0
EXIT_USAGE = 2


class _CommandError(Exception):
    """A command could not run; the message is shown to the user."""


# ── commands ─────────────────────────────────────────────────


def _cmd_person_add(store: RosterStore, args: argparse.Namespace) -> None:
    person = forms.make_person(args.full_name, args.id_number)
    if store.find_person(person.id_number) is not None:
        raise _CommandError(f"person {person.id_number} already exists")
    store.add_person(person)
    print(f"added {forms.person_label(person)}")


def _cmd_person_remove(store: RosterStore, args: argparse.Namespace) -> None:
    if store.find_person(args.id_number) is None:
        raise _CommandError(f"no person {args.id_number}")
    store.remove_person(args.id_number)
    print(f"removed {args.id_number}")


def _cmd_person_list(store: RosterStore, args: argparse.Namespace) -> None:
    for person in forms.filter_people(store.people, args.query or ""):
        print(forms.person_label(person))


def _cmd_vehicle_add(store: RosterStore, args: argparse.Namespace) -> None:
    vehicle = forms.make_vehicle(args.designation, args.vehicle_id)
    if store.find_vehicle(vehicle.vehicle_id) is not None:
        raise _CommandError(f"vehicle {vehicle.vehicle_id} already exists")
    store.add_vehicle(vehicle)
    print(f"added {forms.vehicle_label(vehicle)}")


def _cmd_vehicle_remove(store: RosterStore, args: argparse.Namespace) -> None:
    if store.find_vehicle(args.vehicle_id) is None:
        raise _CommandError(f"no vehicle {args.vehicle_id}")
    store.remove_vehicle(args.vehicle_id)
    print(f"removed {args.vehicle_id}")


def _cmd_vehicle_list(store: RosterStore, args: argparse.Namespace) -> None:
    for vehicle in forms.filter_vehicles(store.vehicles, args.query or ""):
        print(forms.vehicle_label(vehicle))


def _cmd_assign(store: RosterStore, args: argparse.Namespace) -> None:
    vehicle = forms.resolve_vehicle(store.vehicles, args.vehicle)
    if vehicle is None:
        raise _CommandError(f"no vehicle matches {args.vehicle!r}")
    person = forms.resolve_person(store.people, args.person)
    if person is None:
        raise _CommandError(f"no person matches {args.person!r}")
    store.add_assignment(Assignment(vehicle_id=vehicle.vehicle_id, person_id=person.id_number, stay=args.stay))
    print(f"assigned {forms.person_label(person)} to {forms.vehicle_label(vehicle)}")


def _cmd_unassign(store: RosterStore, args: argparse.Namespace) -> None:
    store.remove_assignment(args.vehicle_id, args.person_id)
    print(f"unassigned {args.person_id} from {args.vehicle_id}")


def _cmd_convoy(store: RosterStore, args: argparse.Namespace) -> None:
    store.set_convoy_info(ConvoyInfo(goal=args.goal, date=args.date, time=args.time))
    print("convoy info updated")


def _cmd_clear(store: RosterStore, args: argparse.Namespace) -> None:
    if not args.yes:
        raise _CommandError("this deletes all people, vehicles and assignments; pass --yes to confirm")
    store.clear_all()
    print("roster cleared")


def _cmd_clear_assignments(store: RosterStore, args: argparse.Namespace) -> None:
    store.clear_assignments()
    print("assignments and convoy info cleared")


def _cmd_report(store: RosterStore, args: argparse.Namespace) -> None:
    text = generate(store.export_snapshot())
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"report written to {args.output}")
    else:
        print(text)


def _cmd_export(store: RosterStore, args: argparse.Namespace) -> None:
    directory = Path(args.output_dir) if args.output_dir else Path.cwd()
    path = write_export(store.export_snapshot(), directory, filename=args.config.export_filename)
    print(f"exported to {path}")


def _cmd_import(store: RosterStore, args: argparse.Namespace) -> None:
    data = read_import(args.file)
    store.import_snapshot(data)
    print(f"imported {len(data.people)} people, {len(data.vehicles)} vehicles, {len(data.assignments)} assignments")


def _cmd_search(store: RosterStore, args: argparse.Namespace) -> None:
    for vehicle in forms.filter_vehicles(store.vehicles, args.query):
        print(f"vehicle  {forms.vehicle_label(vehicle)}")
    for person in forms.filter_people(store.people, args.query):
        print(f"person   {forms.person_label(person)}")


# ── parser ───────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shavtzak", description="Organize people and vehicles for a convoy.")
    parser.add_argument("--data-dir", help="Directory holding the roster (default: $SHAVTZAK_DATA_DIR or ~/.shavtzak)")
    parser.add_argument("--storage-key", help="Key the roster is stored under (default: shavtzak-data)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    person = commands.add_parser("person", help="Manage people").add_subparsers(dest="action", required=True)
    p_add = person.add_parser("add", help="Add a person")
    p_add.add_argument("full_name", help="First and last name")
    p_add.add_argument("id_number", help="7-digit personal number")
    p_add.set_defaults(handler=_cmd_person_add)
    p_remove = person.add_parser("remove", help="Remove a person and their assignments")
    p_remove.add_argument("id_number")
    p_remove.set_defaults(handler=_cmd_person_remove)
    p_list = person.add_parser("list", help="List people")
    p_list.add_argument("query", nargs="?", help="Only show matches")
    p_list.set_defaults(handler=_cmd_person_list)

    vehicle = commands.add_parser("vehicle", help="Manage vehicles").add_subparsers(dest="action", required=True)
    v_add = vehicle.add_parser("add", help="Add a vehicle")
    v_add.add_argument("designation", help="Vehicle label, e.g. Jeep")
    v_add.add_argument("vehicle_id", help="5-9 digit vehicle number")
    v_add.set_defaults(handler=_cmd_vehicle_add)
    v_remove = vehicle.add_parser("remove", help="Remove a vehicle and its assignments")
    v_remove.add_argument("vehicle_id")
    v_remove.set_defaults(handler=_cmd_vehicle_remove)
    v_list = vehicle.add_parser("list", help="List vehicles")
    v_list.add_argument("query", nargs="?", help="Only show matches")
    v_list.set_defaults(handler=_cmd_vehicle_list)

    assign = commands.add_parser("assign", help="Assign a person to a vehicle (updates stay if already assigned)")
    assign.add_argument("vehicle", help='Vehicle number or label ("Jeep 12345")')
    assign.add_argument("person", help='Personal number or label ("Dana Levi 1234567")')
    assign.add_argument("--stay", action="store_true", help="Person stays overnight")
    assign.set_defaults(handler=_cmd_assign)

    unassign = commands.add_parser("unassign", help="Remove an assignment")
    unassign.add_argument("vehicle_id")
    unassign.add_argument("person_id")
    unassign.set_defaults(handler=_cmd_unassign)

    convoy = commands.add_parser("convoy", help="Set convoy goal, date and time")
    convoy.add_argument("--goal", required=True)
    convoy.add_argument("--date", required=True)
    convoy.add_argument("--time", required=True)
    convoy.set_defaults(handler=_cmd_convoy)

    clear = commands.add_parser("clear", help="Delete all people, vehicles and assignments")
    clear.add_argument("--yes", action="store_true", help="Confirm deletion")
    clear.set_defaults(handler=_cmd_clear)

    clear_assignments = commands.add_parser("clear-assignments", help="Delete all assignments and convoy info")
    clear_assignments.set_defaults(handler=_cmd_clear_assignments)

    report = commands.add_parser("report", help="Print the grouped convoy report")
    report.add_argument("--output", "-o", help="Write the report to FILE instead of stdout")
    report.set_defaults(handler=_cmd_report)

    export = commands.add_parser("export", help="Export the roster as JSON")
    export.add_argument("--output-dir", help="Directory to write into (default: current directory)")
    export.set_defaults(handler=_cmd_export)

    import_ = commands.add_parser("import", help="Replace the roster with a JSON export")
    import_.add_argument("file")
    import_.set_defaults(handler=_cmd_import)

    search = commands.add_parser("search", help="Find vehicles and people by name or number")
    search.add_argument("query")
    search.set_defaults(handler=_cmd_search)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    handler: Callable[[RosterStore, argparse.Namespace], None] = args.handler
    try:
        args.config = RosterConfig.from_env(data_dir=args.data_dir, storage_key=args.storage_key)
        store = RosterStore.from_config(args.config)
        handler(store, args)
    except (RosterConfigError, RosterValidationError, RosterImportError, _CommandError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
