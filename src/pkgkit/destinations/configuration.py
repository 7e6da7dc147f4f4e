"""Path override records layered on top of installed destinations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ValidationError

# (property name, reset flag name, record attribute) in declaration order.
# Outcome messages name the reset flag; the property name is the serialized field.
PROPERTIES: Tuple[Tuple[str, str, str], ...] = (
    ("sdkRootPath", "sdkRootPath", "sdk_root_path"),
    ("swiftResourcesPath", "swiftResourcesPath", "swift_resources_path"),
    ("swiftStaticResourcesPath", "swiftStaticResourcesPath", "swift_static_resources_path"),
    ("includeSearchPaths", "includeSearchPath", "include_search_paths"),
    ("librarySearchPaths", "librarySearchPath", "library_search_paths"),
    ("toolsetPaths", "toolsetPath", "toolset_paths"),
)
PROPERTY_NAMES: Tuple[str, ...] = tuple(name for name, _, _ in PROPERTIES)
LIST_PROPERTIES = frozenset({"includeSearchPaths", "librarySearchPaths", "toolsetPaths"})
_ATTRIBUTES: Dict[str, str] = {name: attribute for name, _, attribute in PROPERTIES}
_FLAGS: Dict[str, str] = {name: flag for name, flag, _ in PROPERTIES}


def attribute_for(property_name: str) -> str:
    try:
        return _ATTRIBUTES[property_name]
    except KeyError:
        raise ValidationError(
            f"Unknown configuration property '{property_name}', expected one of: {', '.join(PROPERTY_NAMES)}"
        ) from None


def flag_for(property_name: str) -> str:
    attribute_for(property_name)
    return _FLAGS[property_name]


def in_declaration_order(properties: Iterable[str]) -> List[str]:
    requested = list(properties)
    for name in requested:
        attribute_for(name)
    return [name for name in PROPERTY_NAMES if name in requested]


@dataclass(frozen=True)
class DestinationKey:
    destination_id: str
    target_triple: str

    def __post_init__(self) -> None:
        for label, value in (("destination id", self.destination_id), ("target triple", self.target_triple)):
            if not value:
                raise ValidationError(f"The {label} must not be empty")
            if "/" in value or "\\" in value or value in {".", ".."}:
                raise ValidationError(f"The {label} '{value}' must not contain path separators")

    def __str__(self) -> str:
        return f"{self.destination_id} ({self.target_triple})"


class PathOverrideRecord(BaseModel):
    """Optional overrides; an absent field falls back to the destination default."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    sdk_root_path: Optional[str] = Field(None, alias="sdkRootPath")
    swift_resources_path: Optional[str] = Field(None, alias="swiftResourcesPath")
    swift_static_resources_path: Optional[str] = Field(None, alias="swiftStaticResourcesPath")
    include_search_paths: Optional[List[str]] = Field(None, alias="includeSearchPaths")
    library_search_paths: Optional[List[str]] = Field(None, alias="librarySearchPaths")
    toolset_paths: Optional[List[str]] = Field(None, alias="toolsetPaths")

    @classmethod
    def from_document(cls, data: Dict[str, Any] | None) -> "PathOverrideRecord":
        return cls.model_validate(data or {})

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathOverrideRecord):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    def present_properties(self) -> List[str]:
        return [name for name, _, attribute in PROPERTIES if getattr(self, attribute) is not None]

    def is_empty(self) -> bool:
        return not self.present_properties()

    def cleared(self, properties: Iterable[str]) -> "PathOverrideRecord":
        updates = {attribute_for(name): None for name in properties}
        return self.model_copy(update=updates, deep=True)

    def merged(self, other: "PathOverrideRecord") -> "PathOverrideRecord":
        updates = {
            attribute: getattr(other, attribute)
            for _, _, attribute in PROPERTIES
            if getattr(other, attribute) is not None
        }
        return self.model_copy(update=updates, deep=True)


def validate_path(property_name: str, value: str) -> str:
    if not PurePath(value).is_absolute():
        raise ValidationError(f"Path '{value}' for {property_name} must be absolute")
    return value


def build_record(changes: Dict[str, Any]) -> PathOverrideRecord:
    """Build a record from property-name keyed changes, checking every path is absolute."""
    values: Dict[str, Any] = {}
    for name, value in changes.items():
        attribute = attribute_for(name)
        if name in LIST_PROPERTIES:
            values[attribute] = [validate_path(name, item) for item in value]
        else:
            values[attribute] = validate_path(name, value)
    return PathOverrideRecord(**values)


class DestinationDescriptor(BaseModel):
    """An installed destination and its built-in default paths."""

    model_config = ConfigDict(populate_by_name=True)

    destination_id: str = Field(..., alias="destinationID")
    target_triple: str = Field(..., alias="targetTriple")
    paths_configuration: PathOverrideRecord = Field(
        default_factory=PathOverrideRecord, alias="pathsConfiguration"
    )

    @property
    def key(self) -> DestinationKey:
        return DestinationKey(self.destination_id, self.target_triple)

    def with_overrides(self, overrides: PathOverrideRecord | None) -> "DestinationDescriptor":
        if overrides is None:
            return self.model_copy(deep=True)
        return self.model_copy(
            update={"paths_configuration": self.paths_configuration.merged(overrides)}, deep=True
        )
