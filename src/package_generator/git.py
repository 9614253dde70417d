"""Initializing a git repository in a generated package."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from .errors import GitError
from .versions import Runner

__all__ = ["COMMIT_MESSAGE", "initialize_git_repository"]


LOGGER = logging.getLogger(__name__)

COMMIT_MESSAGE = "Initialize the package using CKEditor 5 Package Generator."


def initialize_git_repository(
    directory: str | Path,
    *,
    runner: Runner | None = None,
    logger: logging.Logger = LOGGER,
) -> bool:
    """Create a repository in ``directory`` with all files in the first commit.

    Committing fails when git has no user identity configured. The ``.git``
    directory is then removed so the developer can initialize it on their own.
    Returns whether the initial commit was created.
    """

    runner = runner or subprocess.run
    directory = Path(directory)

    def git(*args: str) -> None:
        runner(
            ["git", *args],
            cwd=directory,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )

    try:
        git("init")
    except (OSError, subprocess.CalledProcessError) as exc:
        raise GitError(f"Cannot initialize a git repository in {directory}: {exc}") from exc

    try:
        git("add", "-A")
        git("commit", "-m", COMMIT_MESSAGE)
    except subprocess.CalledProcessError as exc:
        logger.warning("Cannot create the initial commit (%s). Removing the git repository.", exc)
        shutil.rmtree(directory / ".git", ignore_errors=True)
        return False

    return True
