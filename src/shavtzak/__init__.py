"""shavtzak - convoy roster: people, vehicles, assignments and a grouped report."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("shavtzak")
except PackageNotFoundError:
    __version__ = "0+local"
from shavtzak.config import RosterConfig
from shavtzak.exceptions import (
    RosterConfigError,
    RosterImportError,
    RosterValidationError,
    ShavtzakError,
    StorageError,
)
from shavtzak.models import AppData, Assignment, ConvoyInfo, Person, Vehicle
from shavtzak.report import DEFAULT_LABELS, ReportLabels, generate
from shavtzak.state import RosterSection, RosterStore
from shavtzak.storage import BlobStore, FileBlobStore, MemoryBlobStore
from shavtzak.transfer import EXPORT_FILENAME, export_json, parse_import, read_import, write_export

__all__ = [
    "__version__",
    "AppData",
    "Assignment",
    "BlobStore",
    "ConvoyInfo",
    "DEFAULT_LABELS",
    "EXPORT_FILENAME",
    "FileBlobStore",
    "MemoryBlobStore",
    "Person",
    "ReportLabels",
    "RosterConfig",
    "RosterConfigError",
    "RosterImportError",
    "RosterSection",
    "RosterStore",
    "RosterValidationError",
    "ShavtzakError",
    "StorageError",
    "Vehicle",
    "export_json",
    "generate",
    "parse_import",
    "read_import",
    "write_export",
]
