"""Helpers for tests that drive built pkgkit products."""

from .product import ExecutionResult, Product, package_path, resolve_bin_dir

__all__ = ["ExecutionResult", "Product", "package_path", "resolve_bin_dir"]
