from __future__ import annotations

import pytest
from pydantic import ValidationError

from package_generator.config import DependencyVersions, GeneratorOptions, PackageConfig

VERSIONS = DependencyVersions(
    ckeditor5="^35.1.0",
    dev_utils="^30.5.0",
    eslint_config_ckeditor5="^4.1.0",
    stylelint_config_ckeditor5="^4.1.0",
    package_tools="^1.0.0",
)


def test_from_package_name_generates_expected_identifiers():
    config = PackageConfig.from_package_name(
        "@scope/ckeditor5-rich-text", programming_language="ts", versions=VERSIONS
    )
    assert config.name == "@scope/ckeditor5-rich-text"
    assert config.directory_name == "ckeditor5-rich-text"
    assert config.dll_file_name == "rich-text.js"
    assert config.dll_library == "richText"
    assert config.programming_language == "ts"


def test_from_package_name_rejects_unknown_language():
    with pytest.raises(ValueError):
        PackageConfig.from_package_name("@scope/ckeditor5-a", programming_language="py", versions=VERSIONS)


def test_context_includes_versions():
    config = PackageConfig.from_package_name("@scope/ckeditor5-a", programming_language="js", versions=VERSIONS)
    context = config.context()
    assert context["name"] == "@scope/ckeditor5-a"
    assert context["dll_file_name"] == "a.js"
    assert context["dll_library"] == "a"
    assert context["ckeditor5_version"] == "^35.1.0"
    assert context["dev_utils_version"] == "^30.5.0"
    assert context["package_tools_version"] == "^1.0.0"


def test_generator_options_defaults():
    options = GeneratorOptions()
    assert options.lang is None
    assert not options.verbose
    assert not options.dev
    assert not options.use_npm


def test_generator_options_are_strict():
    with pytest.raises(ValidationError):
        GeneratorOptions(language="js")

    options = GeneratorOptions(lang="ts")
    with pytest.raises(ValidationError):
        options.lang = "js"
