"""Exception types shared across pkgkit commands."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class PkgkitError(Exception):
    """Base class for failures surfaced to the CLI."""


class ValidationError(PkgkitError):
    """Invalid arguments, rejected before anything is persisted."""


class PersistenceFailure(PkgkitError):
    """Reading or writing the configuration store failed."""


class ScaffoldError(PkgkitError):
    """The package skeleton could not be written."""


class PackagePathNotFound(PkgkitError):
    """No dependency checkout matches the requested package name."""

    def __init__(self, package_name: str, search_root: Path):
        super().__init__(f"No checkout for package '{package_name}' under {search_root}")
        self.package_name = package_name
        self.search_root = search_root


class ExecutionFailure(PkgkitError):
    """A product exited with a non-zero status."""

    def __init__(self, arguments: Sequence[str], exit_code: int, stdout: str, stderr: str):
        self.arguments = list(arguments)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"{self.arguments[0] if self.arguments else '<unknown>'} exited with code {exit_code}: "
            f"{stderr.strip() or stdout.strip() or 'no output'}"
        )
