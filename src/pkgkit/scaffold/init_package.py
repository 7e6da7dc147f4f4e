"""Write the skeleton of a new package."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from ..errors import ScaffoldError, ValidationError
from . import templates
from .filesystem import FileSystem

logger = logging.getLogger(__name__)

MANIFEST_NAME = "Package.swift"


class PackageType(str, Enum):
    LIBRARY = "library"
    EXECUTABLE = "executable"
    TOOL = "tool"
    BUILD_TOOL_PLUGIN = "build-tool-plugin"
    COMMAND_PLUGIN = "command-plugin"
    MACRO = "macro"
    EMPTY = "empty"

    @property
    def is_plugin(self) -> bool:
        return self in (PackageType.BUILD_TOOL_PLUGIN, PackageType.COMMAND_PLUGIN)

    @property
    def has_tests(self) -> bool:
        return self in (PackageType.LIBRARY, PackageType.EXECUTABLE, PackageType.TOOL, PackageType.MACRO)


@dataclass(frozen=True)
class InitPackageOptions:
    package_type: PackageType = PackageType.LIBRARY
    with_docs: bool = False

    def __post_init__(self) -> None:
        if self.with_docs and self.package_type is not PackageType.LIBRARY:
            raise ValidationError("--with-docs flag is available only for library modules")


def module_name(package_name: str) -> str:
    """Turn a package name into a valid module identifier."""
    name = re.sub(r"[^0-9A-Za-z_]", "_", package_name)
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


class InitPackage:
    def __init__(
        self,
        name: str,
        options: InitPackageOptions,
        destination: Path,
        file_system: FileSystem,
        progress_reporter: Optional[Callable[[str], None]] = None,
    ):
        if not name:
            raise ValidationError("Package name must not be empty")
        self.name = name
        self.module = module_name(name)
        self.options = options
        self.destination = Path(destination)
        self.file_system = file_system
        self.progress_reporter = progress_reporter

    @property
    def package_type(self) -> PackageType:
        return self.options.package_type

    def write_package_structure(self) -> None:
        self._progress(f"Creating {self.package_type.value} package: {self.name}")
        self._write_manifest()
        self._write_file(self.destination / ".gitignore", templates.GITIGNORE)
        self._write_sources()
        self._write_plugins()
        self._write_tests()
        self._write_docs()

    def _progress(self, message: str) -> None:
        logger.debug(message)
        if self.progress_reporter:
            self.progress_reporter(message)

    def _write_file(self, path: Path, content: str) -> None:
        self._progress(f"Creating {path.relative_to(self.destination)}")
        try:
            self.file_system.create_directory(path.parent)
            self.file_system.write_text(path, content)
        except OSError as exc:
            raise ScaffoldError(f"Could not write {path}: {exc}") from exc

    def _write_manifest(self) -> None:
        manifest = self.destination / MANIFEST_NAME
        if self.file_system.exists(manifest):
            raise ScaffoldError("a manifest file already exists in this directory")
        body = {
            PackageType.EMPTY: templates.EMPTY_MANIFEST,
            PackageType.LIBRARY: templates.LIBRARY_MANIFEST,
            PackageType.EXECUTABLE: templates.EXECUTABLE_MANIFEST,
            PackageType.TOOL: templates.TOOL_MANIFEST,
            PackageType.BUILD_TOOL_PLUGIN: templates.PLUGIN_MANIFEST,
            PackageType.COMMAND_PLUGIN: templates.PLUGIN_MANIFEST,
            PackageType.MACRO: templates.MACRO_MANIFEST,
        }[self.package_type]
        capability = ""
        if self.package_type is PackageType.BUILD_TOOL_PLUGIN:
            capability = templates.BUILD_TOOL_CAPABILITY
        elif self.package_type is PackageType.COMMAND_PLUGIN:
            capability = templates.COMMAND_CAPABILITY.format(name=self.name)
        content = templates.MANIFEST_HEADER.format(tools_version=templates.TOOLS_VERSION) + body.format(
            name=self.name, module=self.module, capability=capability
        )
        self._write_file(manifest, content)

    def _write_sources(self) -> None:
        if self.package_type is PackageType.EMPTY or self.package_type.is_plugin:
            return
        sources = self.destination / "Sources"
        if self.package_type is PackageType.LIBRARY:
            self._write_file(sources / self.module / f"{self.module}.swift", templates.LIBRARY_SOURCE)
        elif self.package_type is PackageType.EXECUTABLE:
            self._write_file(sources / self.module / "main.swift", templates.EXECUTABLE_SOURCE)
        elif self.package_type is PackageType.TOOL:
            self._write_file(
                sources / self.module / f"{self.module}.swift",
                templates.TOOL_SOURCE.format(module=self.module),
            )
        elif self.package_type is PackageType.MACRO:
            self._write_file(
                sources / self.module / f"{self.module}.swift",
                templates.MACRO_SOURCE.format(module=self.module),
            )
            self._write_file(
                sources / f"{self.module}Macros" / f"{self.module}Macro.swift",
                templates.MACRO_IMPLEMENTATION.format(module=self.module),
            )

    def _write_plugins(self) -> None:
        if not self.package_type.is_plugin:
            return
        template = (
            templates.BUILD_TOOL_PLUGIN_SOURCE
            if self.package_type is PackageType.BUILD_TOOL_PLUGIN
            else templates.COMMAND_PLUGIN_SOURCE
        )
        self._write_file(
            self.destination / "Plugins" / self.module / "plugin.swift",
            template.format(module=self.module),
        )

    def _write_tests(self) -> None:
        if not self.package_type.has_tests:
            return
        tests_dir = self.destination / "Tests" / f"{self.module}Tests"
        self._write_file(tests_dir / f"{self.module}Tests.swift", templates.TEST_SOURCE.format(module=self.module))

    def _write_docs(self) -> None:
        if not self.options.with_docs:
            return
        catalog = self.destination / "Sources" / self.module / f"{self.module}.docc"
        self._write_file(catalog / f"{self.module}.md", templates.DOCC_ARTICLE.format(module=self.module))
