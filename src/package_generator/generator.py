"""Generating a new package from start to finish."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import GeneratorOptions, PackageConfig
from .errors import DirectoryTakenError, GeneratorError, InvalidPackageNameError
from .git import initialize_git_repository
from .install import install_packages
from .language import ConsolePrompter, Prompter, choose_programming_language
from .naming import derive_identifiers, validate_package_name
from .scaffold import PackageScaffolder
from .versions import Runner, get_dependencies_versions

__all__ = ["PackageGenerator", "REPOSITORY_ROOT"]


LOGGER = logging.getLogger(__name__)

# Root of the source checkout when running from one, used by the dev mode.
REPOSITORY_ROOT = Path(__file__).resolve().parents[2]


class PackageGenerator:
    """Create a package directory, fill it with files, install and commit it.

    Every collaborator that talks to the outside world can be replaced, which
    is how the test-suite runs the generator without a terminal, a package
    manager or git.
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        logger: logging.Logger = LOGGER,
        prompter: Prompter | None = None,
        scaffolder: PackageScaffolder | None = None,
        runner: Runner | None = None,
        repository_root: Path = REPOSITORY_ROOT,
    ) -> None:
        self.console = console or Console()
        self.logger = logger
        self.prompter = prompter or ConsolePrompter(self.console)
        self.scaffolder = scaffolder or PackageScaffolder()
        self.runner = runner
        self.repository_root = repository_root

    def _step(self, message: str) -> None:
        self.console.print(f"📍 {message}")

    def run(self, package_name: str, options: GeneratorOptions, base_dir: str | Path | None = None) -> Path:
        """Generate ``package_name`` inside ``base_dir`` and return its directory.

        ``base_dir`` defaults to the current working directory.
        """

        self._step("Verifying the specified package name.")
        result = validate_package_name(package_name)
        if not result.is_valid:
            raise InvalidPackageNameError(package_name, result.reasons)

        directory_name = derive_identifiers(package_name).directory_name
        directory_path = (Path(base_dir) if base_dir is not None else Path.cwd()).resolve() / directory_name

        self._step(f'Checking whether the "[cyan]{escape(directory_name)}[/cyan]" directory can be created.')
        if directory_path.exists():
            raise DirectoryTakenError(directory_path)

        programming_language = choose_programming_language(options.lang, self.prompter, self.logger)

        self._step("Collecting the latest CKEditor 5 packages versions...")
        versions = get_dependencies_versions(
            dev_mode=options.dev,
            use_npm=options.use_npm,
            repository_root=self.repository_root,
            runner=self.runner,
            logger=self.logger,
        )

        config = PackageConfig.from_package_name(
            package_name,
            programming_language=programming_language,
            versions=versions,
        )

        self._step(f'Creating the directory "[cyan]{escape(str(directory_path))}[/cyan]".')
        directory_path.mkdir(parents=True)

        # A half generated package would block the next attempt.
        try:
            self._step("Copying files...")
            self.scaffolder.create(config, directory_path, logger=self.logger)

            self._step("Installing dependencies...")
            install_packages(
                directory_path,
                use_npm=options.use_npm,
                verbose=options.verbose,
                runner=self.runner,
                logger=self.logger,
            )

            self._step("Initializing Git repository...")
            initialize_git_repository(directory_path, runner=self.runner, logger=self.logger)
        except (GeneratorError, OSError):
            shutil.rmtree(directory_path, ignore_errors=True)
            raise

        self._print_summary(directory_name, use_npm=options.use_npm)
        return directory_path

    def _print_summary(self, directory_name: str, *, use_npm: bool) -> None:
        manager = "npm" if use_npm else "yarn"
        self.console.print("[green]Done![/green]")
        self.console.print()
        self.console.print("Execute the following command to start working with the package.")
        self.console.print()
        self.console.print(f"  [gray50]cd {escape(directory_name)}[/gray50]")
        self.console.print(f"  [gray50]{manager} run start[/gray50]")
