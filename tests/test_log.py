from __future__ import annotations

import io
import logging

from rich.console import Console

from package_generator.log import build_logger


def test_debug_messages_only_when_verbose():
    output = io.StringIO()
    logger = build_logger(False, Console(file=output, width=200), name="tests.log.quiet")
    logger.debug("hidden detail")
    logger.warning("visible warning")

    text = output.getvalue()
    assert "hidden detail" not in text
    assert "visible warning" in text


def test_verbose_logger_shows_details():
    output = io.StringIO()
    logger = build_logger(True, Console(file=output, width=200), name="tests.log.verbose")
    logger.debug("shown detail")

    assert "shown detail" in output.getvalue()
    assert logger.propagate is False


def test_rebuilding_replaces_the_handler():
    first = build_logger(False, Console(file=io.StringIO()), name="tests.log.rebuilt")
    second = build_logger(True, Console(file=io.StringIO()), name="tests.log.rebuilt")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
