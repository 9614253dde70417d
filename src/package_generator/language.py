"""Choosing the programming language of the generated package."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, Sequence

from rich.console import Console
from rich.prompt import Prompt

__all__ = [
    "ConsolePrompter",
    "ProgrammingLanguage",
    "Prompter",
    "choose_programming_language",
]


LOGGER = logging.getLogger(__name__)


class ProgrammingLanguage(str, Enum):
    """Languages a package can be generated in, keyed by their short code."""

    JAVASCRIPT = "js"
    TYPESCRIPT = "ts"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def codes(cls) -> tuple[str, ...]:
        return tuple(language.value for language in cls)

    @classmethod
    def from_display_name(cls, display_name: str) -> "ProgrammingLanguage":
        for language, name in _DISPLAY_NAMES.items():
            if name == display_name:
                return language
        raise ValueError(f"unknown programming language '{display_name}'")


_DISPLAY_NAMES = {
    ProgrammingLanguage.JAVASCRIPT: "JavaScript",
    ProgrammingLanguage.TYPESCRIPT: "TypeScript",
}


class Prompter(Protocol):
    """Asks the user to pick one of several options."""

    def prompt_for_choice(self, message: str, options: Sequence[str]) -> str:
        """Block until the user picks one of ``options`` and return it."""


class ConsolePrompter:
    """:class:`Prompter` reading answers from the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def prompt_for_choice(self, message: str, options: Sequence[str]) -> str:
        return Prompt.ask(
            f"📍 {message}",
            console=self.console,
            choices=list(options),
            default=options[0],
        )


def choose_programming_language(
    lang: str | None,
    prompter: Prompter,
    logger: logging.Logger = LOGGER,
) -> str:
    """Return the short code of the language to generate the package in.

    A valid ``lang`` is returned as is. An unknown one is reported and the
    user is asked to choose, as if no ``lang`` had been given.
    """

    if lang:
        codes = ProgrammingLanguage.codes()
        if lang in codes:
            return lang

        logger.warning(
            "--lang option has to be one of: %s. Falling back to manual choice.",
            ", ".join(codes),
        )

    choice = prompter.prompt_for_choice(
        "Choose your programming language:",
        [language.display_name for language in ProgrammingLanguage],
    )

    # "JavaScript" -> "js"
    return ProgrammingLanguage.from_display_name(choice).value
