"""Installing the dependencies of a generated package."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .versions import Runner

__all__ = ["install_packages", "install_command"]


LOGGER = logging.getLogger(__name__)


def install_command(directory: Path, *, use_npm: bool) -> list[str]:
    if use_npm:
        return ["npm", "install", "--prefix", str(directory)]
    return ["yarnpkg", "--cwd", str(directory)]


def install_packages(
    directory: str | Path,
    *,
    use_npm: bool = False,
    verbose: bool = False,
    runner: Runner | None = None,
    logger: logging.Logger = LOGGER,
) -> bool:
    """Install dependencies of the package in ``directory``.

    The package manager output is only shown when ``verbose`` is set. A failed
    installation is reported but does not stop the generator, the developer
    can always repeat it by hand. Returns whether the installation succeeded.
    """

    runner = runner or subprocess.run
    directory = Path(directory)
    command = install_command(directory, use_npm=use_npm)
    logger.debug("Running %s", " ".join(command))

    output = None if verbose else subprocess.DEVNULL
    try:
        result = runner(command, cwd=directory, stdout=output, text=True, check=False)
    except OSError as exc:
        logger.warning("Cannot run %s: %s", command[0], exc)
        return False

    if result.returncode != 0:
        logger.warning(
            "Installing dependencies failed (exit code %d). Run `%s` inside the package directory to retry.",
            result.returncode,
            "npm install" if use_npm else "yarn",
        )
        return False
    return True
