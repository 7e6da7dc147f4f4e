import pytest

from pkgkit.destinations import (
    PROPERTY_NAMES,
    PathOverrideRecord,
    reset_configuration,
    show_configuration,
    update_configuration,
)
from pkgkit.destinations.configuration import attribute_for, flag_for
from pkgkit.diagnostics import CollectingSink
from pkgkit.errors import ValidationError


@pytest.mark.parametrize("prop", PROPERTY_NAMES)
def test_single_property_reset_clears_only_that_field(store, key, full_record, prop):
    store.update(key, full_record)
    sink = CollectingSink()
    outcome = reset_configuration(store, key, [prop], sink)
    loaded = store.load(key)
    assert outcome.properties == [flag_for(prop)]
    for name in PROPERTY_NAMES:
        attribute = attribute_for(name)
        if name == prop:
            assert getattr(loaded, attribute) is None
        else:
            assert getattr(loaded, attribute) == getattr(full_record, attribute)
    assert len(sink.messages) == 1


def test_static_resources_flag_clears_static_field(store, key, full_record):
    store.update(key, full_record)
    reset_configuration(store, key, ["swiftStaticResourcesPath"], CollectingSink())
    loaded = store.load(key)
    assert loaded.swift_static_resources_path is None
    assert loaded.swift_resources_path == "/sdk/usr/lib/swift"


def test_reported_properties_follow_declaration_order(store, key, full_record):
    store.update(key, full_record)
    sink = CollectingSink()
    outcome = reset_configuration(store, key, ["toolsetPaths", "sdkRootPath", "includeSearchPaths"], sink)
    assert outcome.properties == ["sdkRootPath", "includeSearchPath", "toolsetPath"]
    level, message = sink.messages[0]
    assert level == "info"
    assert message.endswith("successfully reset: sdkRootPath, includeSearchPath, toolsetPath.")


def test_scenario_sdk_root_reset(store, key):
    store.update(key, PathOverrideRecord(sdk_root_path="/a", toolset_paths=["/t"]))
    outcome = reset_configuration(store, key, ["sdkRootPath"], CollectingSink())
    assert store.load(key) == PathOverrideRecord(toolset_paths=["/t"])
    assert outcome.properties == ["sdkRootPath"]


def test_full_reset_removes_record(store, key, full_record):
    store.update(key, full_record)
    sink = CollectingSink()
    outcome = reset_configuration(store, key, [], sink)
    assert outcome.reset_all and outcome.found
    assert store.load(key) is None
    assert sink.messages == [
        (
            "info",
            f"All configuration properties of destination `{key.destination_id}` for run-time triple "
            f"`{key.target_triple}` were successfully reset.",
        )
    ]


def test_full_reset_without_record_is_a_warning(store, key):
    sink = CollectingSink()
    outcome = reset_configuration(store, key, [], sink)
    assert not outcome.found
    assert sink.messages == [("warning", f"No configuration for destination {key.destination_id}")]
    assert store.keys() == []


def test_selective_reset_without_record_is_reported(store, key):
    sink = CollectingSink()
    outcome = reset_configuration(store, key, ["librarySearchPaths"], sink)
    assert outcome.properties == ["librarySearchPath"]
    assert not outcome.found
    assert store.load(key) is None
    assert sink.messages[0][0] == "info"


def test_clearing_last_field_removes_record(store, key):
    store.update(key, PathOverrideRecord(sdk_root_path="/a"))
    reset_configuration(store, key, ["sdkRootPath"], CollectingSink())
    assert not store.exists(key)


def test_unknown_property_is_rejected(store, key, full_record):
    store.update(key, full_record)
    with pytest.raises(ValidationError):
        reset_configuration(store, key, ["sysroot"], CollectingSink())
    assert store.load(key) == full_record


def test_first_unknown_property_is_named_in_error(store, key):
    with pytest.raises(ValidationError, match="'zz-first'") as excinfo:
        reset_configuration(store, key, ["zz-first", "sdkRootPath", "aa-second"], CollectingSink())
    assert "'aa-second'" not in str(excinfo.value)


def test_update_sets_only_given_fields(store, key, full_record):
    store.update(key, full_record)
    sink = CollectingSink()
    record = update_configuration(
        store, key, {"toolsetPaths": ["/new/toolset.json"], "sdkRootPath": None}, sink
    )
    assert record.toolset_paths == ["/new/toolset.json"]
    assert record.sdk_root_path == "/sdk/root"
    assert store.load(key) == record
    assert sink.messages[0][1].endswith("successfully updated: toolsetPath.")


def test_update_creates_record(store, key):
    update_configuration(store, key, {"sdkRootPath": "/a"}, CollectingSink())
    assert show_configuration(store, key) == {"sdkRootPath": "/a"}


def test_update_rejects_relative_paths(store, key, full_record):
    store.update(key, full_record)
    with pytest.raises(ValidationError):
        update_configuration(store, key, {"includeSearchPaths": ["/ok", "relative/include"]}, CollectingSink())
    assert store.load(key) == full_record


def test_update_requires_a_property(store, key):
    with pytest.raises(ValidationError):
        update_configuration(store, key, {"sdkRootPath": None}, CollectingSink())


def test_show_missing_configuration(store, key):
    assert show_configuration(store, key) is None
