"""Destination configuration overrides."""

from .commands import ResetOutcome, reset_configuration, show_configuration, update_configuration
from .configuration import PROPERTY_NAMES, DestinationDescriptor, DestinationKey, PathOverrideRecord
from .store import ConfigurationStore

__all__ = [
    "ConfigurationStore",
    "DestinationDescriptor",
    "DestinationKey",
    "PROPERTY_NAMES",
    "PathOverrideRecord",
    "ResetOutcome",
    "reset_configuration",
    "show_configuration",
    "update_configuration",
]
