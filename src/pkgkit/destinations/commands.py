"""Reset, update and show operations over the configuration store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from ..diagnostics import DiagnosticsSink
from ..errors import ValidationError
from .configuration import DestinationKey, PathOverrideRecord, build_record, flag_for, in_declaration_order
from .store import ConfigurationStore


@dataclass
class ResetOutcome:
    key: DestinationKey
    reset_all: bool
    found: bool
    properties: List[str] = field(default_factory=list)


def reset_configuration(
    store: ConfigurationStore,
    key: DestinationKey,
    properties: Iterable[str],
    diagnostics: DiagnosticsSink,
) -> ResetOutcome:
    """Clear the flagged properties of a destination, or all of them when none are flagged."""
    requested = in_declaration_order(properties)
    if not requested:
        if not store.reset_all(key):
            diagnostics.warning(f"No configuration for destination {key.destination_id}")
            return ResetOutcome(key=key, reset_all=True, found=False)
        diagnostics.info(
            f"All configuration properties of destination `{key.destination_id}` for run-time triple "
            f"`{key.target_triple}` were successfully reset."
        )
        return ResetOutcome(key=key, reset_all=True, found=True)

    reported = [flag_for(name) for name in requested]
    current = store.load(key)
    # Clearing a property that was never set is still reported as reset.
    store.update(key, (current or PathOverrideRecord()).cleared(requested))
    diagnostics.info(
        f"These properties of destination `{key.destination_id}` for run-time triple "
        f"`{key.target_triple}` were successfully reset: {', '.join(reported)}."
    )
    return ResetOutcome(key=key, reset_all=False, found=current is not None, properties=reported)


def update_configuration(
    store: ConfigurationStore,
    key: DestinationKey,
    changes: Dict[str, Any],
    diagnostics: DiagnosticsSink,
) -> PathOverrideRecord:
    """Set only the given properties, keeping every other stored override."""
    provided = {name: value for name, value in changes.items() if value is not None}
    if not provided:
        raise ValidationError("At least one configuration property must be provided")
    updates = build_record(provided)
    record = (store.load(key) or PathOverrideRecord()).merged(updates)
    store.update(key, record)
    updated = ", ".join(flag_for(name) for name in in_declaration_order(provided))
    diagnostics.info(
        f"These properties of destination `{key.destination_id}` for run-time triple "
        f"`{key.target_triple}` were successfully updated: {updated}."
    )
    return record


def show_configuration(store: ConfigurationStore, key: DestinationKey) -> Dict[str, Any] | None:
    record = store.load(key)
    if record is None:
        return None
    return record.to_document()
