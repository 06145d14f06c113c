"""Project domain models.

This module contains the records produced by a project scan.
These are pure data structures with no I/O or side effects.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_DESCRIPTION = "No description"
DEFAULT_BUILD_SUBPATH = "target/release"


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class ManifestInfo(BaseModel):
    """Metadata read from the ``[package]`` table of a manifest."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None

    @field_validator("description")
    @classmethod
    def _normalize_description(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class Project(BaseModel):
    """A Cargo project discovered in the scan directory.

    Built once per scan and immutable afterwards. The release build
    location is derived from ``path`` rather than stored.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Package name, or the directory name as fallback")
    description: str | None = None
    path: Path = Field(description="Absolute path to the project directory")
    build_subpath: str = Field(
        default=DEFAULT_BUILD_SUBPATH,
        description="Release build location relative to the project directory",
    )

    @field_validator("description")
    @classmethod
    def _normalize_description(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @property
    def build_output_path(self) -> Path:
        return self.path / self.build_subpath

    @property
    def display_description(self) -> str:
        return self.description or NO_DESCRIPTION
