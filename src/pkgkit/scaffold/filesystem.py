"""File-system abstraction used by the package scaffolder."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Dict, Protocol, Set


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool:
        """Return whether a file or directory exists at path."""

    def create_directory(self, path: Path) -> None:
        """Create path and any missing parents."""

    def write_text(self, path: Path, content: str) -> None:
        """Write content to path, replacing any existing file."""


class LocalFileSystem:
    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def create_directory(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")


class InMemoryFileSystem:
    """Dictionary backed file system for tests and dry runs."""

    def __init__(self) -> None:
        self.files: Dict[PurePosixPath, str] = {}
        self.directories: Set[PurePosixPath] = {PurePosixPath("/")}

    def exists(self, path: Path) -> bool:
        key = PurePosixPath(path)
        return key in self.files or key in self.directories

    def create_directory(self, path: Path) -> None:
        key = PurePosixPath(path)
        if key in self.files:
            raise FileExistsError(str(key))
        self.directories.add(key)
        self.directories.update(key.parents)

    def write_text(self, path: Path, content: str) -> None:
        key = PurePosixPath(path)
        if key.parent not in self.directories:
            raise FileNotFoundError(f"No such directory: {key.parent}")
        self.files[key] = content

    def read_text(self, path: Path) -> str:
        return self.files[PurePosixPath(path)]
