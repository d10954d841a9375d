# Program: Copyright Updater Test Fixtures
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, Sequence

import pytest

# Ensure the package is importable when running tests without installation
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


def _git(repo: Path, *args: str, env: dict[str, str] | None = None) -> None:
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=repo,
        env=env,
        check=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )


@pytest.fixture()
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty git repository in ``tmp_path`` with UTC timestamps."""
    monkeypatch.setenv("TZ", "UTC")
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.name", "Test Author")
    _git(repo, "config", "user.email", "author@example.com")
    return repo


@pytest.fixture()
def commit(git_repo: Path) -> Callable[[Sequence[str], str], None]:
    """Commit the given repo-relative paths with a fixed ISO date."""

    def _commit(paths: Sequence[str], date: str) -> None:
        env = dict(os.environ, GIT_AUTHOR_DATE=date, GIT_COMMITTER_DATE=date, TZ="UTC")
        _git(git_repo, "add", "--", *paths, env=env)
        _git(git_repo, "commit", "-q", "-m", f"update {', '.join(paths)}", env=env)

    return _commit


# Created by Dr. Z. Bakhtiyorov
