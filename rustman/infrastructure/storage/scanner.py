"""Project discovery in the scan directory.

Lists the immediate subdirectories of a root directory and builds a
Project for each one that holds a manifest. Read-only, not recursive.
"""

import logging
from pathlib import Path

from rustman.domain.project import Project
from rustman.domain.shared.result import is_ok
from rustman.errors import DirectoryAccessError, ManifestParseError
from rustman.global_config import RustmanConfig
from rustman.infrastructure.storage.manifest import ManifestReader

logger = logging.getLogger(__name__)


class ProjectScanner:
    """Scanner for Cargo projects one level below a root directory.

    Entries come back in directory-listing order. No sorting is applied,
    so the order can differ between filesystems.
    """

    def __init__(
        self,
        config: RustmanConfig | None = None,
        reader: ManifestReader | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            config: Scan settings. Uses defaults if not provided.
            reader: ManifestReader instance to use. Creates new one if not provided.
        """
        self._config = config or RustmanConfig()
        self._reader = reader or ManifestReader()

    def scan(self, root: Path) -> list[Project]:
        """List the projects under a root directory.

        Args:
            root: Directory whose subdirectories are candidate projects.

        Returns:
            One Project per subdirectory containing a manifest.

        Raises:
            DirectoryAccessError: If root is missing, not a directory, or
                cannot be listed.
        """
        root = root.expanduser().absolute()
        try:
            if not root.exists():
                raise DirectoryAccessError(root, "does not exist")
            if not root.is_dir():
                raise DirectoryAccessError(root, "not a directory")
            entries = list(root.iterdir())
        except PermissionError:
            raise DirectoryAccessError(root, "permission denied") from None
        except OSError as e:
            raise DirectoryAccessError(root, str(e)) from e

        projects: list[Project] = []
        for entry in entries:
            manifest = entry / self._config.manifest_name
            try:
                if not entry.is_dir():
                    continue
                if not manifest.is_file():
                    logger.debug(f"Skipping {entry.name}: no {self._config.manifest_name}")
                    continue
            except OSError as e:
                # Python 3.11 re-raises PermissionError from is_dir/is_file
                logger.warning(f"Skipping {entry.name}: {e}")
                continue

            project = self._load_project(entry, manifest)
            if project is not None:
                projects.append(project)

        logger.debug(f"Found {len(projects)} projects in {root}")
        return projects

    def _load_project(self, directory: Path, manifest: Path) -> Project | None:
        """Build a Project from one manifest, applying the parse-error policy."""
        result = self._reader.load(manifest)
        if is_ok(result):
            return Project(
                name=result.value.name,
                description=result.value.description,
                path=directory,
                build_subpath=self._config.build_subpath,
            )

        error: ManifestParseError = result.error
        if self._config.on_parse_error == "skip":
            logger.warning(f"Skipping {directory.name}: {error}")
            return None

        logger.warning(f"Using directory name for {directory.name}: {error}")
        return Project(
            name=directory.name,
            path=directory,
            build_subpath=self._config.build_subpath,
        )


def scan(root: Path, config: RustmanConfig | None = None) -> list[Project]:
    """Scan root with a default ProjectScanner."""
    return ProjectScanner(config).scan(root)
