"""Exception types raised while generating a package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class GeneratorError(RuntimeError):
    """Raised when a package cannot be generated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidPackageNameError(GeneratorError):
    """Raised when the requested package name does not pass validation."""

    def __init__(self, package_name: str, reasons: Sequence[str]) -> None:
        super().__init__(f'Package name "{package_name}" is invalid.')
        self.package_name = package_name
        self.reasons = tuple(reasons)


class DirectoryTakenError(GeneratorError):
    """Raised when the package directory already exists."""

    def __init__(self, path: Path) -> None:
        super().__init__("Cannot create a directory as the location is already taken.")
        self.path = path


class DependencyLookupError(GeneratorError):
    """Raised when the package manager cannot report a package version."""


class GitError(GeneratorError):
    """Raised when the git repository cannot be created."""
