from pathlib import Path

import pytest

from pkgkit.errors import ScaffoldError, ValidationError
from pkgkit.scaffold import InitPackage, InitPackageOptions, InMemoryFileSystem, LocalFileSystem, PackageType
from pkgkit.scaffold.init_package import module_name

ROOT = Path("/work/Demo")


def _generate(package_type, name="Demo", with_docs=False, fs=None):
    fs = fs or InMemoryFileSystem()
    messages = []
    InitPackage(
        name=name,
        options=InitPackageOptions(package_type=package_type, with_docs=with_docs),
        destination=ROOT,
        file_system=fs,
        progress_reporter=messages.append,
    ).write_package_structure()
    return fs, messages


def _relative(fs):
    return {str(path.relative_to(ROOT)) for path in fs.files}


@pytest.mark.parametrize("package_type", [t for t in PackageType if t is not PackageType.LIBRARY])
def test_with_docs_requires_library(package_type):
    with pytest.raises(ValidationError, match="--with-docs"):
        InitPackageOptions(package_type=package_type, with_docs=True)


def test_library_layout_with_docs():
    fs, messages = _generate(PackageType.LIBRARY, with_docs=True)
    assert _relative(fs) == {
        "Package.swift",
        ".gitignore",
        "Sources/Demo/Demo.swift",
        "Tests/DemoTests/DemoTests.swift",
        "Sources/Demo/Demo.docc/Demo.md",
    }
    assert messages[0] == "Creating library package: Demo"
    assert "Creating Package.swift" in messages
    manifest = fs.read_text(ROOT / "Package.swift")
    assert manifest.startswith("// swift-tools-version: ")
    assert '.library(\n            name: "Demo"' in manifest


def test_empty_package_only_has_manifest():
    fs, _ = _generate(PackageType.EMPTY)
    assert _relative(fs) == {"Package.swift", ".gitignore"}


def test_executable_package():
    fs, _ = _generate(PackageType.EXECUTABLE)
    assert "Sources/Demo/main.swift" in _relative(fs)
    assert ".executableTarget(" in fs.read_text(ROOT / "Package.swift")


def test_tool_package_depends_on_argument_parser():
    fs, _ = _generate(PackageType.TOOL)
    assert "swift-argument-parser" in fs.read_text(ROOT / "Package.swift")
    assert "struct Demo: ParsableCommand {" in fs.read_text(ROOT / "Sources/Demo/Demo.swift")


@pytest.mark.parametrize(
    "package_type, capability",
    [(PackageType.BUILD_TOOL_PLUGIN, ".buildTool()"), (PackageType.COMMAND_PLUGIN, 'verb: "Demo"')],
)
def test_plugin_packages(package_type, capability):
    fs, _ = _generate(package_type)
    assert _relative(fs) == {"Package.swift", ".gitignore", "Plugins/Demo/plugin.swift"}
    assert capability in fs.read_text(ROOT / "Package.swift")


def test_macro_package():
    fs, _ = _generate(PackageType.MACRO)
    assert "Sources/DemoMacros/DemoMacro.swift" in _relative(fs)
    assert "import CompilerPluginSupport" in fs.read_text(ROOT / "Package.swift")
    assert '"(\\(argument), \\(literal: argument.description))"' in fs.read_text(
        ROOT / "Sources/DemoMacros/DemoMacro.swift"
    )


def test_existing_manifest_is_not_overwritten():
    fs = InMemoryFileSystem()
    fs.create_directory(ROOT)
    fs.write_text(ROOT / "Package.swift", "existing")
    with pytest.raises(ScaffoldError):
        _generate(PackageType.LIBRARY, fs=fs)
    assert fs.read_text(ROOT / "Package.swift") == "existing"


def test_module_name_sanitizes_package_name():
    assert module_name("my-package") == "my_package"
    assert module_name("9lives") == "_9lives"


def test_local_file_system_writes_to_disk(tmp_path):
    InitPackage(
        name="disk-pkg",
        options=InitPackageOptions(),
        destination=tmp_path,
        file_system=LocalFileSystem(),
    ).write_package_structure()
    assert (tmp_path / "Package.swift").is_file()
    assert (tmp_path / "Sources" / "disk_pkg" / "disk_pkg.swift").is_file()
