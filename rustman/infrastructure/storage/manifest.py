"""Cargo manifest reading with Result-based error handling.

Provides a thin wrapper around reading ``Cargo.toml`` files, returning
Result types instead of raising exceptions.
"""

import tomllib
from pathlib import Path
from typing import Any

from rustman.domain.project import ManifestInfo
from rustman.domain.shared.result import Err, Ok, Result
from rustman.errors import ManifestParseError


class ManifestReader:
    """Low-level manifest I/O with Result-based error handling.

    Reads the ``[package]`` table and keeps only ``name`` and
    ``description``; every other key is ignored.

    Example:
        reader = ManifestReader()
        result = reader.load(Path("Cargo.toml"))
        if isinstance(result, Ok):
            info = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load(self, path: Path) -> Result[ManifestInfo, ManifestParseError]:
        """Load project metadata from a manifest file.

        Args:
            path: Path to the manifest to read.

        Returns:
            Ok(ManifestInfo) if successful, Err(ManifestParseError) if the
            file cannot be read, is not valid TOML, or has no package name.
        """
        try:
            content = path.read_text(encoding="utf-8")
            data = tomllib.loads(content)

        except tomllib.TOMLDecodeError as e:
            return Err(ManifestParseError(path, f"invalid TOML: {e}"))
        except UnicodeDecodeError:
            return Err(ManifestParseError(path, "not UTF-8 text"))
        except PermissionError:
            return Err(ManifestParseError(path, "permission denied"))
        except OSError as e:
            return Err(ManifestParseError(path, f"read failed: {e}"))

        return self.parse(path, data)

    def parse(
        self,
        path: Path,
        data: dict[str, Any],
    ) -> Result[ManifestInfo, ManifestParseError]:
        """Extract metadata from an already decoded manifest.

        Args:
            path: Manifest location, used in error messages.
            data: Decoded TOML document.

        Returns:
            Ok(ManifestInfo), or Err(ManifestParseError) when the package
            table or its name is missing.
        """
        package = data.get("package")
        if not isinstance(package, dict):
            return Err(ManifestParseError(path, "no [package] table"))

        name = package.get("name")
        if not isinstance(name, str) or not name.strip():
            return Err(ManifestParseError(path, "package has no name"))

        # Inherited fields such as `description.workspace = true` are tables
        description = package.get("description")
        if not isinstance(description, str):
            description = None

        return Ok(ManifestInfo(name=name, description=description))
