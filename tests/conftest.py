from collections.abc import Callable
from pathlib import Path

import pytest


def write_manifest(directory: Path, content: str, name: str = "Cargo.toml") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / name
    manifest.write_text(content, encoding="utf-8")
    return manifest


def cargo_toml(name: str, description: str | None = None) -> str:
    lines = ["[package]", f'name = "{name}"', 'version = "0.1.0"', 'edition = "2021"']
    if description is not None:
        lines.append(f'description = "{description}"')
    lines.extend(["", "[dependencies]", 'serde = "1"', ""])
    return "\n".join(lines)


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create ``tmp_path/rust/<dirname>`` with a Cargo.toml."""

    def _make(dirname: str, name: str | None = None, description: str | None = None) -> Path:
        directory = tmp_path / "rust" / dirname
        write_manifest(directory, cargo_toml(name or dirname, description))
        return directory

    return _make


@pytest.fixture
def rust_root(tmp_path: Path) -> Path:
    root = tmp_path / "rust"
    root.mkdir(exist_ok=True)
    return root


@pytest.fixture
def fake_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv("RUSTMAN_PROJECTS_DIR", raising=False)
    return tmp_path
