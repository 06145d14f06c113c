import json
import logging
from pathlib import Path

import pytest

from rustman.global_config import RustmanConfig, get_config_dir, get_global_config


def test_defaults_without_config_file(fake_home: Path) -> None:
    config = get_global_config()

    assert config == RustmanConfig()
    assert config.resolve_projects_dir() == fake_home / "rust"
    assert not get_config_dir().exists()


def test_config_file_overrides_defaults(fake_home: Path) -> None:
    config_dir = fake_home / ".rustman"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(
        json.dumps({"projects_dir": str(fake_home / "code"), "on_parse_error": "skip"}),
        encoding="utf-8",
    )

    config = get_global_config()

    assert config.on_parse_error == "skip"
    assert config.resolve_projects_dir() == fake_home / "code"


def test_explicit_directory_wins(fake_home: Path) -> None:
    config = RustmanConfig(projects_dir=fake_home / "code")

    assert config.resolve_projects_dir(Path("/srv/rust")) == Path("/srv/rust")


def test_invalid_config_file_falls_back_to_defaults(
    fake_home: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    config_dir = fake_home / ".rustman"
    config_dir.mkdir()
    (config_dir / "config.json").write_text('{"on_parse_error": "explode"}', encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = get_global_config()

    assert config == RustmanConfig()
    assert "Ignoring invalid config" in caplog.text
