"""Looking up the versions of the dependencies of a generated package."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable

from .config import DependencyVersions
from .errors import DependencyLookupError

__all__ = ["PACKAGE_TOOLS", "get_dependencies_versions", "get_package_version", "local_package_tools_path"]


LOGGER = logging.getLogger(__name__)

CKEDITOR5 = "ckeditor5"
DEV_UTILS = "@ckeditor/ckeditor5-dev-utils"
ESLINT_CONFIG_CKEDITOR5 = "eslint-config-ckeditor5"
STYLELINT_CONFIG_CKEDITOR5 = "stylelint-config-ckeditor5"
PACKAGE_TOOLS = "@ckeditor/ckeditor5-package-tools"

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def local_package_tools_path(repository_root: Path) -> Path:
    """Return where a clone of the repository keeps the package tools sources."""

    return Path(repository_root) / "packages" / "ckeditor5-package-tools"


def _lookup_command(package: str, use_npm: bool) -> list[str]:
    if use_npm:
        return ["npm", "view", package, "version"]
    return ["yarnpkg", "info", package, "version", "--silent"]


def get_package_version(
    package: str,
    *,
    use_npm: bool,
    runner: Runner | None = None,
    logger: logging.Logger = LOGGER,
) -> str:
    """Return the latest published version of ``package`` as a caret range."""

    runner = runner or subprocess.run
    command = _lookup_command(package, use_npm)
    logger.debug("Checking the latest version of %s: %s", package, " ".join(command))
    try:
        result = runner(command, check=True, capture_output=True, text=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise DependencyLookupError(f"Cannot check the version of the {package} package: {exc}") from exc

    version = result.stdout.strip()
    if not version:
        raise DependencyLookupError(f"The package manager did not report a version of {package}.")
    return f"^{version}"


def get_dependencies_versions(
    *,
    dev_mode: bool,
    use_npm: bool,
    repository_root: Path | None = None,
    runner: Runner | None = None,
    logger: logging.Logger = LOGGER,
) -> DependencyVersions:
    """Collect the dependency specifiers written into ``package.json``.

    In development mode the package tools are linked from ``repository_root``
    so that local changes can be tried out in a generated package.
    """

    def lookup(package: str) -> str:
        return get_package_version(package, use_npm=use_npm, runner=runner, logger=logger)

    if dev_mode:
        if repository_root is None:
            raise ValueError("repository_root is required in development mode")
        local_path = local_package_tools_path(repository_root)
        if not local_path.is_dir():
            raise DependencyLookupError(f"The package tools cannot be linked, {local_path} does not exist.")
        package_tools = f"file:{local_path}"
    else:
        package_tools = lookup(PACKAGE_TOOLS)

    return DependencyVersions(
        ckeditor5=lookup(CKEDITOR5),
        dev_utils=lookup(DEV_UTILS),
        eslint_config_ckeditor5=lookup(ESLINT_CONFIG_CKEDITOR5),
        stylelint_config_ckeditor5=lookup(STYLELINT_CONFIG_CKEDITOR5),
        package_tools=package_tools,
    )
