"""Key-value blob stores the roster persists through.

The store layer only needs ``load(key)`` and ``save(key, data)``; what
sits behind them is up to the host. Two implementations ship here: a
dict-backed one for tests and embedding, and a directory of JSON files
for the CLI.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from shavtzak.exceptions import StorageError

_logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9._-]+$")


@runtime_checkable
class BlobStore(Protocol):
    """Opaque key-value persistence transport."""

    def load(self, key: str) -> bytes | None:
        """Return the stored bytes, or ``None`` when the key is missing."""
        ...

    def save(self, key: str, data: bytes) -> None:
        """Store *data* under *key*, replacing any previous value."""
        ...


class MemoryBlobStore:
    """In-process blob store backed by a dict."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._blobs: dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> bytes | None:
        return self._blobs.get(key)

    def save(self, key: str, data: bytes) -> None:
        self._blobs[key] = bytes(data)

    def keys(self) -> list[str]:
        return list(self._blobs)


class FileBlobStore:
    """Blob store keeping one ``<key>.json`` file per key in *directory*.

    Writes go to a temporary file in the same directory which is then
    moved over the target, so a crash mid-write leaves the previous
    blob intact.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise StorageError(f"invalid storage key {key!r}", key=key)
        return self._directory / f"{key}.json"

    def load(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"cannot read {path}: {exc}", key=key) from exc

    def save(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"cannot write {path}: {exc}", key=key) from exc
        _logger.debug("Wrote %d bytes to %s", len(data), path)
