"""Package skeleton generation."""

from .filesystem import FileSystem, InMemoryFileSystem, LocalFileSystem
from .init_package import InitPackage, InitPackageOptions, PackageType

__all__ = [
    "FileSystem",
    "InMemoryFileSystem",
    "InitPackage",
    "InitPackageOptions",
    "LocalFileSystem",
    "PackageType",
]
