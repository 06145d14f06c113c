"""Global configuration for rustman.

Optional user preferences live in ~/.rustman/config.json. Nothing is
written; a missing file means defaults.
"""

import json
import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from rustman.domain.project import DEFAULT_BUILD_SUBPATH

logger = logging.getLogger(__name__)

PROJECTS_DIR_ENVVAR = "RUSTMAN_PROJECTS_DIR"


class RustmanConfig(BaseModel):
    """Scan settings."""

    projects_dir: Optional[Path] = Field(
        default=None,
        description="Directory to scan (default: ~/rust)",
    )
    manifest_name: str = "Cargo.toml"
    build_subpath: str = DEFAULT_BUILD_SUBPATH
    # "fallback" keeps the entry under its directory name, "skip" drops it
    on_parse_error: Literal["fallback", "skip"] = "fallback"

    def resolve_projects_dir(self, override: Optional[Path] = None) -> Path:
        """Pick the scan directory: explicit override, config file, then ~/rust."""
        if override is not None:
            return override.expanduser()
        if self.projects_dir is not None:
            return self.projects_dir.expanduser()
        return Path.home() / "rust"


def get_config_dir() -> Path:
    """Get the rustman config directory."""
    return Path.home() / ".rustman"


def get_global_config() -> RustmanConfig:
    """Load global configuration, falling back to defaults."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return RustmanConfig(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning(f"Ignoring invalid config {config_file}: {e}")
    return RustmanConfig()  # defaults
