"""Persistent store for per-destination path overrides."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError as ModelValidationError

from ..errors import PersistenceFailure, ValidationError
from .configuration import DestinationKey, PathOverrideRecord

logger = logging.getLogger(__name__)

SUFFIX = ".yml"


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class ConfigurationStore:
    """One YAML document per (destination id, target triple).

    Documents live at ``<directory>/<destination id>/<target triple>.yml``.
    Neither key part may contain a path separator, so distinct keys never
    share a file. No locking is performed; concurrent writers to the same
    key must be serialized by the caller.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: DestinationKey) -> Path:
        return self.directory / key.destination_id / f"{key.target_triple}{SUFFIX}"

    def exists(self, key: DestinationKey) -> bool:
        return self.path_for(key).is_file()

    def load(self, key: DestinationKey) -> PathOverrideRecord | None:
        path = self.path_for(key)
        if not path.is_file():
            return None
        data = self._read(path)
        if self._key_of(path, data) != key:
            raise PersistenceFailure(f"Configuration in {path} belongs to another destination")
        try:
            return PathOverrideRecord.from_document(data.get("pathsConfiguration"))
        except ModelValidationError as exc:
            raise PersistenceFailure(f"Malformed configuration in {path}") from exc

    def update(self, key: DestinationKey, record: PathOverrideRecord) -> None:
        if record.is_empty():
            logger.debug("Every property of %s is absent, removing its record", key)
            self.reset_all(key)
            return
        document = {
            "destinationID": key.destination_id,
            "targetTriple": key.target_triple,
            "pathsConfiguration": record.to_document(),
        }
        self._write(self.path_for(key), document)
        logger.debug("Stored configuration for %s", key)

    def reset_all(self, key: DestinationKey) -> bool:
        path = self.path_for(key)
        if not path.is_file():
            return False
        try:
            path.unlink()
            if not any(path.parent.iterdir()):
                path.parent.rmdir()
        except OSError as exc:
            raise PersistenceFailure(f"Could not remove {path}") from exc
        logger.debug("Removed configuration for %s", key)
        return True

    def keys(self) -> List[DestinationKey]:
        if not self.directory.is_dir():
            return []
        return [self._key_of(path, self._read(path)) for path in sorted(self.directory.glob(f"*/*{SUFFIX}"))]

    def _key_of(self, path: Path, data: Dict[str, Any]) -> DestinationKey:
        if "destinationID" not in data or "targetTriple" not in data:
            raise PersistenceFailure(f"Malformed configuration in {path}")
        try:
            return DestinationKey(str(data["destinationID"]), str(data["targetTriple"]))
        except ValidationError as exc:
            raise PersistenceFailure(f"Malformed configuration in {path}") from exc

    def _read(self, path: Path) -> Dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise PersistenceFailure(f"Could not read {path}") from exc
        if not isinstance(data, dict):
            raise PersistenceFailure(f"Malformed configuration in {path}")
        return data

    def _write(self, path: Path, document: Dict[str, Any]) -> None:
        try:
            _ensure_dir(path.parent)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    yaml.safe_dump(document, handle, sort_keys=True)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, yaml.YAMLError) as exc:
            raise PersistenceFailure(f"Could not write {path}") from exc
