"""DataStore: documents kept as files under a base directory.

A storage name ``"robot"`` maps to ``<base_directory>/robot<suffix>``
(``./robot.json`` with the default config).  Loading never raises: a missing
or unreadable file is logged and returns None, just like malformed content.

The base directory belongs to the store object, not to the process, so two
stores with different directories can be used side by side.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from pathlib import Path

from json_data_io.config import StorageConfig
from json_data_io.document import Document
from json_data_io.resolver import Handle, node_of
from json_data_io.result import EntryListing
from json_data_io.tree.codec import serialize

__all__ = ["DataStore"]

logger = logging.getLogger(__name__)


class DataStore:
    """Loads, saves and lists documents stored as files.

    Example::

        store = DataStore(StorageConfig(base_directory="config"))
        doc = store.load("robot")          # reads config/robot.json
        if doc is not None:
            store.save("robot_backup", doc)
        store.list_entries().names         # ('robot', 'robot_backup')

    Args:
        config: Storage settings.  Defaults to ``StorageConfig()``.
    """

    def __init__(self, config: StorageConfig | None = None) -> None:
        self._config: StorageConfig = config if config is not None else StorageConfig()

    @property
    def config(self) -> StorageConfig:
        return self._config

    @property
    def base_directory(self) -> Path:
        return Path(self._config.base_directory)

    def set_base_directory(self, directory: str | os.PathLike[str] | None) -> None:
        """Resolve subsequent storage names against ``directory``.

        None or an empty string means the current working directory.
        """
        base = "" if directory is None else os.fspath(directory)
        self._config = dataclasses.replace(self._config, base_directory=base)

    def path_for(self, name: str) -> Path:
        return self.base_directory / f"{name}{self._config.suffix}"

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def load(self, name: str | None) -> Document | None:
        """Read and parse the document stored under ``name``."""
        if name is None:
            return None

        file_path = self.path_for(name)
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("could not open file %s: %s", file_path, exc)
            return None

        document = Document.from_string(text)
        if document is None:
            logger.error("could not parse file %s", file_path)
            return None

        logger.debug("loaded %s", file_path)
        return document

    def save(self, name: str, data: Handle, indent: int | None = None) -> bool:
        """Write ``data`` under ``name``; False for absent data or on I/O failure."""
        node = node_of(data)
        if node is None:
            return False

        file_path = self.path_for(name)
        try:
            # Encoded before any disk access: a failed save leaves no file.
            payload = serialize(node, indent).encode("utf-8")
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(payload)
        except (OSError, UnicodeEncodeError) as exc:
            logger.error("could not write file %s: %s", file_path, exc)
            return False

        logger.debug("saved %s", file_path)
        return True

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_entries(
        self, directory: str | os.PathLike[str] | None = None
    ) -> EntryListing:
        """List storage names in ``directory`` (default: the base directory).

        Regular files ending with the configured suffix are reported with the
        suffix stripped, in sorted order.  At most ``max_entries`` names are
        returned; names longer than ``max_name_length`` and names that would
        overflow ``max_names_size`` are left out.  ``EntryListing.available``
        still counts every matching file, so callers can tell when the listing
        was truncated.
        """
        folder = self.base_directory if directory is None else Path(directory)
        suffix = self._config.suffix

        try:
            with os.scandir(folder) as entries:
                candidates = sorted(
                    entry.name[: -len(suffix)]
                    for entry in entries
                    if entry.is_file()
                    and entry.name.endswith(suffix)
                    and len(entry.name) > len(suffix)
                )
        except OSError as exc:
            logger.warning("could not list directory %s: %s", folder, exc)
            return EntryListing(names=(), available=0)

        names: list[str] = []
        used = 0
        for name in candidates:
            if len(names) >= self._config.max_entries:
                break
            if len(name) > self._config.max_name_length:
                continue
            if used + len(name) + 1 >= self._config.max_names_size:
                continue
            names.append(name)
            used += len(name) + 1

        listing = EntryListing(names=tuple(names), available=len(candidates))
        if listing.truncated:
            logger.debug(
                "listed %d of %d entries in %s", len(listing), listing.available, folder
            )
        return listing
