"""Writing the files of a new package."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .config import PackageConfig
from .template import TemplateRenderer

__all__ = ["PackageScaffolder", "TEMPLATES_PATH", "TEMPLATES_TO_FILL"]


LOGGER = logging.getLogger(__name__)

TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"

# Files that need to be filled with data. Everything else is copied as is.
TEMPLATES_TO_FILL = frozenset({"package.json", "README.md", "sample/dll.html"})

# Files that cannot be shipped under their real name.
RENAMED_FILES = {"gitignore": ".gitignore"}


@dataclass(slots=True)
class PackageScaffolder:
    """Copy the templates of a programming language into a package directory."""

    renderer: TemplateRenderer
    templates_path: Path

    def __init__(self, renderer: TemplateRenderer | None = None, templates_path: Path | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.templates_path = templates_path or TEMPLATES_PATH

    def collect_templates(self, programming_language: str) -> dict[str, Path]:
        """Map relative template paths to their sources.

        Language specific templates take precedence over the common ones.
        """

        templates: dict[str, Path] = {}
        for layer in ("common", programming_language):
            layer_path = self.templates_path / layer
            if not layer_path.is_dir():
                raise FileNotFoundError(layer_path)
            for source in sorted(layer_path.rglob("*")):
                if source.is_file() and "__pycache__" not in source.parts:
                    templates[source.relative_to(layer_path).as_posix()] = source
        return templates

    def create(
        self,
        config: PackageConfig,
        target_dir: str | Path,
        *,
        logger: logging.Logger = LOGGER,
    ) -> list[str]:
        """Write the package described by ``config`` into ``target_dir``.

        Returns the relative paths of the written files. Existing files are
        never overwritten.
        """

        target_path = Path(target_dir)
        context = config.context()
        written: list[str] = []

        for relative_path, source in self.collect_templates(config.programming_language).items():
            destination_name = _destination_name(relative_path)
            destination = target_path / destination_name
            if destination.exists():
                raise FileExistsError(f"{destination} already exists")

            logger.debug('* Copying "%s"...', relative_path)
            destination.parent.mkdir(parents=True, exist_ok=True)
            if relative_path in TEMPLATES_TO_FILL:
                self.renderer.render_file(source, context, target=destination)
            else:
                shutil.copyfile(source, destination)
            written.append(destination_name)

        return written


def _destination_name(relative_path: str) -> str:
    parent, _, name = relative_path.rpartition("/")
    name = RENAMED_FILES.get(name, name)
    return f"{parent}/{name}" if parent else name
