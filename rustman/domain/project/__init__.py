"""Project domain package.

Models describing the Cargo projects found by a scan.
"""

from rustman.domain.project.models import (
    DEFAULT_BUILD_SUBPATH,
    NO_DESCRIPTION,
    ManifestInfo,
    Project,
)

__all__ = [
    "DEFAULT_BUILD_SUBPATH",
    "NO_DESCRIPTION",
    "ManifestInfo",
    "Project",
]
