"""JSON import/export of roster snapshots."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from shavtzak._constants import EXPORT_FILENAME, IMPORT_FAILED_MESSAGE
from shavtzak.exceptions import RosterImportError
from shavtzak.models import AppData

_logger = logging.getLogger(__name__)


def export_json(snapshot: AppData) -> str:
    """Pretty-printed export document (2-space indent, camelCase keys)."""
    return snapshot.to_json(indent=2)


def write_export(snapshot: AppData, directory: Path | str, *, filename: str = EXPORT_FILENAME) -> Path:
    """Write the export document into *directory* and return its path."""
    target = Path(directory) / filename
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(export_json(snapshot) + "\n", encoding="utf-8")
    _logger.debug("Exported roster to %s", target)
    return target


def parse_import(text: str | bytes) -> AppData:
    """Parse an import document.

    Missing collections default to empty and a missing ``convoyInfo``
    means absent. Referential integrity is not checked here.

    Raises
    ------
    RosterImportError
        If *text* is not JSON or does not have the snapshot shape.
    """
    try:
        return AppData.from_json(text)
    except ValidationError as exc:
        _logger.debug("Rejected import payload: %s", exc.errors(include_url=False, include_input=False))
        raise RosterImportError(f"{IMPORT_FAILED_MESSAGE}: {_first_error(exc)}") from exc


def read_import(path: Path | str) -> AppData:
    """Read and parse an import file; I/O failures also raise RosterImportError."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise RosterImportError(f"{IMPORT_FAILED_MESSAGE}: {exc}") from exc
    return parse_import(raw)


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False, include_input=False)
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
