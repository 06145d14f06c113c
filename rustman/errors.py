"""Exception types raised by rustman."""

from pathlib import Path


class RustmanError(Exception):
    """Base class for rustman errors."""


class DirectoryAccessError(RustmanError):
    """The scan directory is missing or cannot be listed."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Could not read directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ManifestParseError(RustmanError):
    """A project manifest could not be read or lacks a package name."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")


class InvalidSelectionInput(RustmanError, ValueError):
    """Menu input that is neither a quit command nor a listed project number."""
