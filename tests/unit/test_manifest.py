from pathlib import Path

from rustman.domain.shared import Err, Ok
from rustman.errors import ManifestParseError
from rustman.infrastructure.storage.manifest import ManifestReader
from tests.conftest import cargo_toml, write_manifest


def test_load_reads_name_and_description(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path / "foo", cargo_toml("foo", "bar"))

    result = ManifestReader().load(manifest)

    assert isinstance(result, Ok)
    assert result.value.name == "foo"
    assert result.value.description == "bar"


def test_load_without_description(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path / "foo", cargo_toml("foo"))

    result = ManifestReader().load(manifest)

    assert isinstance(result, Ok)
    assert result.value.description is None


def test_load_ignores_inherited_description(tmp_path: Path) -> None:
    content = '[package]\nname = "member"\ndescription.workspace = true\n'
    manifest = write_manifest(tmp_path / "member", content)

    result = ManifestReader().load(manifest)

    assert isinstance(result, Ok)
    assert result.value.name == "member"
    assert result.value.description is None


def test_load_invalid_toml_is_err(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path / "broken", "[package\nname = ")

    result = ManifestReader().load(manifest)

    assert isinstance(result, Err)
    assert isinstance(result.error, ManifestParseError)
    assert result.error.path == manifest
    assert "invalid TOML" in str(result.error)


def test_load_workspace_manifest_without_package_is_err(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path / "ws", '[workspace]\nmembers = ["a", "b"]\n')

    result = ManifestReader().load(manifest)

    assert isinstance(result, Err)
    assert result.error.reason == "no [package] table"


def test_load_non_string_name_is_err(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path / "odd", "[package]\nname = 42\n")

    result = ManifestReader().load(manifest)

    assert isinstance(result, Err)
    assert result.error.reason == "package has no name"


def test_load_missing_file_is_err(tmp_path: Path) -> None:
    result = ManifestReader().load(tmp_path / "absent" / "Cargo.toml")

    assert isinstance(result, Err)
    assert "read failed" in result.error.reason


def test_load_non_utf8_file_is_err(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_bytes(b'[package]\nname = "\xff\xfe"\n')

    result = ManifestReader().load(manifest)

    assert isinstance(result, Err)
    assert result.error.reason == "not UTF-8 text"
