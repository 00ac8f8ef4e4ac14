from __future__ import annotations

from pathlib import Path

import pytest

from shavtzak.exceptions import StorageError
from shavtzak.storage import BlobStore, FileBlobStore, MemoryBlobStore


def test_memory_blob_store() -> None:
    store = MemoryBlobStore()
    assert isinstance(store, BlobStore)
    assert store.load("k") is None

    store.save("k", b"one")
    store.save("k", b"two")

    assert store.load("k") == b"two"
    assert store.keys() == ["k"]


def test_file_blob_store_creates_directory_and_replaces(tmp_path: Path) -> None:
    directory = tmp_path / "nested" / "data"
    store = FileBlobStore(directory)
    assert isinstance(store, BlobStore)
    assert store.load("shavtzak-data") is None

    store.save("shavtzak-data", b'{"people": []}')
    store.save("shavtzak-data", b"{}")

    assert (directory / "shavtzak-data.json").read_bytes() == b"{}"
    assert store.load("shavtzak-data") == b"{}"
    assert [p.name for p in directory.iterdir()] == ["shavtzak-data.json"]


@pytest.mark.parametrize("key", ["", "../escape", "a/b", "with space"])
def test_file_blob_store_rejects_unsafe_keys(tmp_path: Path, key: str) -> None:
    store = FileBlobStore(tmp_path)
    with pytest.raises(StorageError):
        store.save(key, b"{}")


def test_file_blob_store_wraps_io_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file", encoding="utf-8")
    store = FileBlobStore(blocker)

    with pytest.raises(StorageError) as excinfo:
        store.save("shavtzak-data", b"{}")
    assert excinfo.value.key == "shavtzak-data"
