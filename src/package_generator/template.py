"""Filling ``{{ placeholder }}`` expressions in package templates."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

from .naming import get_global_key, get_index_file_name

__all__ = [
    "MissingValue",
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


class MissingValue(str, Enum):
    """What to do with a placeholder whose key is not in the context."""

    KEEP = "keep"
    EMPTY = "empty"
    ERROR = "error"


def _default_filters() -> dict[str, Callable[[Any], Any]]:
    return {
        "upper": lambda value: str(value).upper(),
        "lower": lambda value: str(value).lower(),
        "strip": lambda value: str(value).strip(),
        "global_key": lambda value: get_global_key(str(value)),
        "file_name": lambda value: get_index_file_name(str(value)),
        "json": json.dumps,
    }


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ key|filter|... }}`` expressions.

    Keys are looked up in a flat mapping. Filters are applied left to right;
    the built-in ones can be extended or replaced through ``filters``.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=_default_filters)

    def _evaluate(self, expression: str, context: Mapping[str, Any], missing: MissingValue) -> str | None:
        key, *filter_names = [part.strip() for part in expression.split("|")]
        if key not in context:
            if missing is MissingValue.ERROR:
                raise TemplateRenderingError(f"missing value for '{key}'")
            return None if missing is MissingValue.KEEP else ""

        value = context[key]
        for filter_name in filter_names:
            try:
                value = self.filters[filter_name](value)
            except KeyError as exc:
                raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc
        return str(value)

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: MissingValue | str = MissingValue.ERROR,
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template text.
        context:
            Values available to placeholders.
        missing:
            Policy for placeholders whose key is not in ``context``, see
            :class:`MissingValue`. Templates shipped with the generator are
            rendered with ``"error"`` so that a typo never reaches a package.
        """

        policy = MissingValue(missing)

        def substitute(match: re.Match[str]) -> str:
            rendered = self._evaluate(match.group("expression"), context, policy)
            return match.group(0) if rendered is None else rendered

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        target: str | Path | None = None,
        missing: MissingValue | str = MissingValue.ERROR,
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        rendered = self.render_string(template_path.read_text(encoding="utf-8"), context, missing=missing)

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(rendered, encoding="utf-8")

        return rendered
