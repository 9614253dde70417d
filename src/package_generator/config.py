"""Configuration shared by the package generator and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .language import ProgrammingLanguage
from .naming import derive_identifiers

__all__ = ["DependencyVersions", "GeneratorOptions", "PackageConfig"]


class GeneratorOptions(BaseModel):
    """Options accepted by the generator, as given on the command line."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    lang: str | None = Field(None, description="Short code of the programming language, if chosen up front.")
    verbose: bool = Field(False, description="Show the output of every step.")
    dev: bool = Field(False, description="Link the package tools from the local repository.")
    use_npm: bool = Field(False, description="Use npm instead of Yarn to install dependencies.")


@dataclass(frozen=True, slots=True)
class DependencyVersions:
    """Dependency specifiers written into the generated ``package.json``."""

    ckeditor5: str
    dev_utils: str
    eslint_config_ckeditor5: str
    stylelint_config_ckeditor5: str
    package_tools: str


@dataclass(slots=True)
class PackageConfig:
    """Everything the templates need to know about a new package.

    Attributes
    ----------
    name:
        The full, validated package name, e.g. ``@scope/ckeditor5-rich-text``.
    directory_name:
        The directory the package is created in, the name without its scope.
    programming_language:
        Short code of the language the sources are written in.
    dll_file_name:
        File name of the DLL-compatible build, e.g. ``rich-text.js``.
    dll_library:
        Key under which the build is exposed on ``window.CKEditor5``.
    versions:
        Specifiers of the dependencies added to ``package.json``.
    """

    name: str
    directory_name: str
    programming_language: str
    dll_file_name: str
    dll_library: str
    versions: DependencyVersions

    @classmethod
    def from_package_name(
        cls,
        name: str,
        *,
        programming_language: str,
        versions: DependencyVersions,
    ) -> "PackageConfig":
        """Build a :class:`PackageConfig` for the already validated ``name``."""

        if programming_language not in ProgrammingLanguage.codes():
            raise ValueError(f"unknown programming language '{programming_language}'")

        identifiers = derive_identifiers(name)
        return cls(
            name=name,
            directory_name=identifiers.directory_name,
            programming_language=programming_language,
            dll_file_name=identifiers.output_file_name,
            dll_library=identifiers.global_key,
            versions=versions,
        )

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "directory_name": self.directory_name,
            "programming_language": self.programming_language,
            "dll_file_name": self.dll_file_name,
            "dll_library": self.dll_library,
            "ckeditor5_version": self.versions.ckeditor5,
            "dev_utils_version": self.versions.dev_utils,
            "eslint_config_ckeditor5_version": self.versions.eslint_config_ckeditor5,
            "stylelint_config_ckeditor5_version": self.versions.stylelint_config_ckeditor5,
            "package_tools_version": self.versions.package_tools,
        }
