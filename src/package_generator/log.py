"""Logger handed to the generator steps."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["LOGGER_NAME", "build_logger"]


LOGGER_NAME = "package_generator.run"


def build_logger(verbose: bool, console: Console | None = None, *, name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger writing to ``console``.

    Details of every step are logged at DEBUG level and only shown when
    ``verbose`` is set. Calling this again replaces the previous handler.
    """

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger
