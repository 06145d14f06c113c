"""Storage infrastructure: manifest reading and project scanning."""

from rustman.infrastructure.storage.manifest import ManifestReader
from rustman.infrastructure.storage.scanner import ProjectScanner, scan

__all__ = [
    "ManifestReader",
    "ProjectScanner",
    "scan",
]
