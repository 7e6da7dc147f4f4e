"""Typer CLI for pkgkit."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Mapping, Optional

import typer
from rich import print as rprint

from .config import Settings, load_settings
from .destinations import (
    ConfigurationStore,
    DestinationKey,
    reset_configuration,
    show_configuration,
    update_configuration,
)
from .diagnostics import DiagnosticsSink, LoggingSink, configure_logging
from .errors import PkgkitError, ValidationError
from .scaffold import FileSystem, InitPackage, InitPackageOptions, LocalFileSystem, PackageType

app = typer.Typer(help="Package scaffolding and destination configuration")
config_app = typer.Typer(help="Manage configuration of installed destinations")
app.add_typer(config_app, name="config")

# (command-line flag, configuration property) in declaration order.
RESET_FLAGS = (
    ("sdk_root_path", "sdkRootPath"),
    ("swift_resources_path", "swiftResourcesPath"),
    ("swift_static_resources_path", "swiftStaticResourcesPath"),
    ("include_search_path", "includeSearchPaths"),
    ("library_search_path", "librarySearchPaths"),
    ("toolset_path", "toolsetPaths"),
)


def _fail(error: PkgkitError) -> None:
    if isinstance(error, ValidationError):
        raise typer.BadParameter(str(error)) from error
    rprint(f"[red]error:[/red] {error}")
    raise typer.Exit(code=1) from error


def run_init(
    cwd: Path,
    package_type: PackageType,
    name: Optional[str],
    with_docs: bool,
    file_system: FileSystem,
) -> None:
    """Validate options and write a package skeleton into ``cwd``."""
    options = InitPackageOptions(package_type=package_type, with_docs=with_docs)
    package = InitPackage(
        name=name or cwd.name,
        options=options,
        destination=cwd,
        file_system=file_system,
        progress_reporter=rprint,
    )
    package.write_package_structure()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    configure_logging(verbose)


@app.command()
def init(
    package_type: PackageType = typer.Option(
        PackageType.LIBRARY,
        "--type",
        help="Package type: library, executable, tool, build-tool-plugin, command-plugin, macro or empty",
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Provide custom package name"),
    with_docs: bool = typer.Option(
        False, "--with-docs", help="Adds default documentation. Only available for library package type."
    ),
    package_path: Optional[Path] = typer.Option(None, "--package-path", help="Directory to create the package in"),
) -> None:
    """Initialize a new package."""
    cwd = (package_path or Path.cwd()).resolve()
    try:
        run_init(cwd, package_type, name, with_docs, LocalFileSystem())
    except PkgkitError as error:
        _fail(error)


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


def _store(ctx: typer.Context) -> ConfigurationStore:
    return ConfigurationStore(_settings(ctx).configuration_dir)


def _key(destination_id: str, target_triple: str) -> DestinationKey:
    try:
        return DestinationKey(destination_id, target_triple)
    except ValidationError as error:
        raise typer.BadParameter(str(error)) from error


@config_app.callback()
def config_main(
    ctx: typer.Context,
    destinations_dir: Optional[Path] = typer.Option(None, "--destinations-dir", help="Directory with installed destinations"),
) -> None:
    ctx.obj = load_config_settings(os.environ, destinations_dir)


def load_config_settings(env: Mapping[str, str], destinations_dir: Optional[Path]) -> Settings:
    return load_settings(env, destinations_dir=destinations_dir, dotenv_path=Path(".env"))


@config_app.command("reset")
def config_reset(
    ctx: typer.Context,
    destination_id: str = typer.Argument(..., help="An identifier of an already installed destination"),
    target_triple: str = typer.Argument(..., help="A run-time triple of the destination"),
    sdk_root_path: bool = typer.Option(False, "--sdk-root-path", help="Reset the SDK root path"),
    swift_resources_path: bool = typer.Option(
        False, "--swift-resources-path", help="Reset the path to resources for dynamic linking"
    ),
    swift_static_resources_path: bool = typer.Option(
        False, "--swift-static-resources-path", help="Reset the path to resources for static linking"
    ),
    include_search_path: bool = typer.Option(False, "--include-search-path", help="Reset header search paths"),
    library_search_path: bool = typer.Option(False, "--library-search-path", help="Reset library search paths"),
    toolset_path: bool = typer.Option(False, "--toolset-path", help="Reset toolset file paths"),
) -> None:
    """Reset configuration properties of a destination; all of them when none is given."""
    flags = {
        "sdk_root_path": sdk_root_path,
        "swift_resources_path": swift_resources_path,
        "swift_static_resources_path": swift_static_resources_path,
        "include_search_path": include_search_path,
        "library_search_path": library_search_path,
        "toolset_path": toolset_path,
    }
    properties = [prop for flag, prop in RESET_FLAGS if flags[flag]]
    run_reset(_store(ctx), _key(destination_id, target_triple), properties, LoggingSink())


def run_reset(
    store: ConfigurationStore,
    key: DestinationKey,
    properties: List[str],
    diagnostics: DiagnosticsSink,
) -> None:
    try:
        reset_configuration(store, key, properties, diagnostics)
    except PkgkitError as error:
        _fail(error)


@config_app.command("set")
def config_set(
    ctx: typer.Context,
    destination_id: str = typer.Argument(..., help="An identifier of an already installed destination"),
    target_triple: str = typer.Argument(..., help="A run-time triple of the destination"),
    sdk_root_path: Optional[str] = typer.Option(None, "--sdk-root-path", help="Path to the SDK root"),
    swift_resources_path: Optional[str] = typer.Option(
        None, "--swift-resources-path", help="Path to resources for dynamic linking"
    ),
    swift_static_resources_path: Optional[str] = typer.Option(
        None, "--swift-static-resources-path", help="Path to resources for static linking"
    ),
    include_search_path: Optional[List[str]] = typer.Option(
        None, "--include-search-path", help="Header search path, may be repeated"
    ),
    library_search_path: Optional[List[str]] = typer.Option(
        None, "--library-search-path", help="Library search path, may be repeated"
    ),
    toolset_path: Optional[List[str]] = typer.Option(None, "--toolset-path", help="Toolset file, may be repeated"),
) -> None:
    """Set configuration properties of a destination, keeping the others."""
    changes = {
        "sdkRootPath": sdk_root_path,
        "swiftResourcesPath": swift_resources_path,
        "swiftStaticResourcesPath": swift_static_resources_path,
        "includeSearchPaths": include_search_path or None,
        "librarySearchPaths": library_search_path or None,
        "toolsetPaths": toolset_path or None,
    }
    try:
        update_configuration(_store(ctx), _key(destination_id, target_triple), changes, LoggingSink())
    except PkgkitError as error:
        _fail(error)


@config_app.command("show")
def config_show(
    ctx: typer.Context,
    destination_id: Optional[str] = typer.Argument(None, help="An identifier of an installed destination"),
    target_triple: Optional[str] = typer.Argument(None, help="A run-time triple of the destination"),
) -> None:
    """Print stored configuration overrides."""
    store = _store(ctx)
    try:
        if destination_id is None:
            keys = store.keys()
        elif target_triple is None:
            raise typer.BadParameter("A target triple is required together with a destination id")
        else:
            keys = [_key(destination_id, target_triple)]
        for key in keys:
            document = show_configuration(store, key)
            if document is None:
                rprint(f"[yellow]No configuration for destination {key.destination_id}[/yellow]")
                continue
            rprint({"destinationID": key.destination_id, "targetTriple": key.target_triple, **document})
    except PkgkitError as error:
        _fail(error)


if __name__ == "__main__":
    app()
