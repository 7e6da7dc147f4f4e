"""Diagnostic sinks that commands report their outcome to."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

from rich.logging import RichHandler

logger = logging.getLogger("pkgkit")


class DiagnosticsSink(Protocol):
    def info(self, message: str) -> None:
        """Report an informational outcome."""

    def warning(self, message: str) -> None:
        """Report a non-fatal condition."""


class LoggingSink:
    def __init__(self, target: logging.Logger | None = None):
        self.logger = target or logger

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)


@dataclass
class CollectingSink:
    """Keeps emitted diagnostics in memory, in emission order."""

    messages: List[Tuple[str, str]] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handler = RichHandler(show_time=False, show_path=False, markup=False)
    root = logging.getLogger("pkgkit")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False
