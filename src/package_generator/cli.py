"""Command line interface for the package generator."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import GeneratorOptions
from .errors import DirectoryTakenError, GeneratorError, InvalidPackageNameError
from .generator import PackageGenerator
from .language import ProgrammingLanguage
from .log import build_logger
from .versions import local_package_tools_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ckeditor5-package-generator",
        description="Create a CKEditor 5 package with a plugin skeleton",
    )
    parser.add_argument("package_name", metavar="packageName", help="name of the package (@scope/ckeditor5-*)")
    parser.add_argument(
        "--lang",
        help=f"programming language of the package, one of: {', '.join(ProgrammingLanguage.codes())}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="output additional logs")
    parser.add_argument("--dev", action="store_true", help="execution of the script in the development mode")
    parser.add_argument("--use-npm", action="store_true", help="whether use npm to install packages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def is_repository_checkout(root: Path) -> bool:
    """Return whether ``root`` is a clone of the repository with the package tools to link."""

    return (root / ".git").exists() and local_package_tools_path(root).is_dir()


def main(
    argv: Sequence[str] | None = None,
    *,
    generator: PackageGenerator | None = None,
    base_dir: Path | None = None,
) -> int:
    parser = build_parser()
    # Unknown options are ignored rather than rejected.
    args, _ = parser.parse_known_args(argv)

    console = generator.console if generator is not None else Console()
    error_console = Console(stderr=True)
    logger = build_logger(args.verbose, error_console)
    if generator is None:
        generator = PackageGenerator(console=console, logger=logger)
    else:
        generator.logger = logger

    dev = args.dev
    if dev and not is_repository_checkout(generator.repository_root):
        # Installed from the registry, there is no local package to link.
        logger.warning(
            "The --dev option can only be used in a clone of the repository with the package tools sources. "
            "Ignoring it."
        )
        dev = False

    options = GeneratorOptions(lang=args.lang, verbose=args.verbose, dev=dev, use_npm=args.use_npm)

    try:
        generator.run(args.package_name, options, base_dir=base_dir)
    except InvalidPackageNameError as exc:
        error_console.print(str(exc), markup=False)
        for reason in exc.reasons:
            error_console.print(reason, markup=False)
        return 1
    except DirectoryTakenError as exc:
        error_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        error_console.print("Aborting.")
        return 1
    except GeneratorError as exc:
        error_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
