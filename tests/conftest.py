from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@dataclass
class FakePrompter:
    """Answers every prompt with ``answer`` and records what was asked."""

    answer: str = "JavaScript"
    calls: list[tuple[str, list[str]]] = field(default_factory=list)

    def prompt_for_choice(self, message: str, options: Sequence[str]) -> str:
        self.calls.append((message, list(options)))
        return self.answer


@dataclass
class FakeRunner:
    """Stand-in for :func:`subprocess.run` that never spawns a process.

    ``handler`` receives the command and returns ``(returncode, stdout)``.
    """

    handler: Callable[[list[str]], tuple[int, str]] = lambda command: (0, "")
    calls: list[tuple[list[str], dict[str, Any]]] = field(default_factory=list)

    def __call__(self, command: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append((list(command), kwargs))
        returncode, stdout = self.handler(list(command))
        if kwargs.get("check") and returncode != 0:
            raise subprocess.CalledProcessError(returncode, command)
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr="")

    def commands(self) -> list[list[str]]:
        return [command for command, _ in self.calls]


def registry_handler(command: list[str]) -> tuple[int, str]:
    if command[:2] == ["npm", "view"] or command[:2] == ["yarnpkg", "info"]:
        return 0, "35.1.0\n"
    return 0, ""


@pytest.fixture()
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner(handler=registry_handler)


@pytest.fixture()
def make_runner() -> type[FakeRunner]:
    return FakeRunner


@pytest.fixture()
def make_prompter() -> type[FakePrompter]:
    return FakePrompter
