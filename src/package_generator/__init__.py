"""Generator of CKEditor 5 packages.

The package validates ``@scope/ckeditor5-*`` names, derives the identifiers
used by the generated build, and creates a package directory from templates
with its dependencies installed and a git repository initialized. It can be
used programmatically or through the ``ckeditor5-package-generator`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import DependencyVersions, GeneratorOptions, PackageConfig
from .errors import (
    DependencyLookupError,
    DirectoryTakenError,
    GeneratorError,
    GitError,
    InvalidPackageNameError,
)
from .generator import PackageGenerator
from .language import ConsolePrompter, ProgrammingLanguage, Prompter, choose_programming_language
from .naming import DerivedIdentifiers, ValidationResult, derive_identifiers, validate_package_name
from .scaffold import PackageScaffolder
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "ConsolePrompter",
    "DependencyLookupError",
    "DependencyVersions",
    "DerivedIdentifiers",
    "DirectoryTakenError",
    "GeneratorError",
    "GeneratorOptions",
    "GitError",
    "InvalidPackageNameError",
    "PackageConfig",
    "PackageGenerator",
    "PackageScaffolder",
    "ProgrammingLanguage",
    "Prompter",
    "TemplateRenderer",
    "TemplateRenderingError",
    "ValidationResult",
    "choose_programming_language",
    "derive_identifiers",
    "validate_package_name",
]
