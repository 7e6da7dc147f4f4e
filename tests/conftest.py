import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pkgkit.destinations import ConfigurationStore, DestinationKey, PathOverrideRecord  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    return ConfigurationStore(tmp_path / "destinations" / "configuration")


@pytest.fixture()
def key():
    return DestinationKey("6.0-RELEASE_static-linux", "aarch64-unknown-linux-musl")


@pytest.fixture()
def full_record():
    return PathOverrideRecord(
        sdk_root_path="/sdk/root",
        swift_resources_path="/sdk/usr/lib/swift",
        swift_static_resources_path="/sdk/usr/lib/swift_static",
        include_search_paths=["/sdk/usr/include", "/opt/include"],
        library_search_paths=["/sdk/usr/lib"],
        toolset_paths=["/sdk/toolset.json"],
    )
