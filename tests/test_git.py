from __future__ import annotations

import logging
from pathlib import Path

import pytest

from package_generator.errors import GitError
from package_generator.git import COMMIT_MESSAGE, initialize_git_repository


def test_repository_is_initialized_and_committed(runner, tmp_path: Path):
    assert initialize_git_repository(tmp_path, runner=runner)

    assert runner.commands() == [
        ["git", "init"],
        ["git", "add", "-A"],
        ["git", "commit", "-m", COMMIT_MESSAGE],
    ]
    assert all(kwargs["cwd"] == tmp_path for _, kwargs in runner.calls)


def test_failed_commit_removes_repository(make_runner, tmp_path: Path, caplog):
    def handler(command):
        if command[:2] == ["git", "init"]:
            (tmp_path / ".git").mkdir()
        return (1, "") if command[1] == "commit" else (0, "")

    runner = make_runner(handler=handler)
    with caplog.at_level(logging.WARNING):
        assert not initialize_git_repository(tmp_path, runner=runner)

    assert not (tmp_path / ".git").exists()
    assert "Removing the git repository" in caplog.text


def test_failed_init_raises(make_runner, tmp_path: Path):
    runner = make_runner(handler=lambda command: (128, ""))
    with pytest.raises(GitError):
        initialize_git_repository(tmp_path, runner=runner)
    assert runner.commands() == [["git", "init"]]
