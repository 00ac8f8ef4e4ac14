"""Roster configuration for shavtzak."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from shavtzak._constants import DEFAULT_DATA_DIR, EXPORT_FILENAME, STORAGE_KEY
from shavtzak.exceptions import RosterConfigError


@dataclasses.dataclass(frozen=True)
class RosterConfig:
    """Roster configuration.

    Parameters
    ----------
    data_dir : Path
        Directory holding the persisted roster blob and exports.
        Defaults to ``~/.shavtzak``.
    storage_key : str
        Key the full snapshot is saved under in the blob store.
    export_filename : str
        File name used when exporting the roster as JSON.
    """

    data_dir: Path = dataclasses.field(default_factory=lambda: Path(DEFAULT_DATA_DIR).expanduser())
    storage_key: str = STORAGE_KEY
    export_filename: str = EXPORT_FILENAME

    def __post_init__(self) -> None:
        if not isinstance(self.data_dir, Path):
            object.__setattr__(self, "data_dir", Path(self.data_dir).expanduser())
        if not self.storage_key.strip():
            raise RosterConfigError("storage_key must be non-empty")
        if not self.export_filename.strip():
            raise RosterConfigError("export_filename must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> RosterConfig:
        """Create configuration from environment variables.

        Reads ``SHAVTZAK_DATA_DIR``, ``SHAVTZAK_STORAGE_KEY`` and
        ``SHAVTZAK_EXPORT_FILENAME``. Explicit keyword arguments
        override environment values; ``None`` overrides are ignored.

        Returns
        -------
        RosterConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "SHAVTZAK_DATA_DIR": "data_dir",
            "SHAVTZAK_STORAGE_KEY": "storage_key",
            "SHAVTZAK_EXPORT_FILENAME": "export_filename",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update({key: value for key, value in overrides.items() if value is not None})

        if "data_dir" in config_kwargs:
            config_kwargs["data_dir"] = Path(config_kwargs["data_dir"]).expanduser()

        return cls(**config_kwargs)
