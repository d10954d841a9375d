# Program: Git History Lookup
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Resolve creation and last-modification timestamps for a file.

The production provider shells out to ``git log`` once for the creation date
(oldest commit that added the file, author date) and once for the last
modification date (newest commit touching the file, committer date). Both
calls block and run with the base directory as working directory.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence

from .errors import HistoryUnavailableError, MalformedTimestampError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
GIT_DATE_OPTION = f"--date=format-local:{TIMESTAMP_FORMAT}"


@dataclass(frozen=True)
class FileHistory:
    """Created/modified timestamps for one file."""

    created: datetime
    modified: datetime

    @property
    def created_text(self) -> str:
        return self.created.strftime(TIMESTAMP_FORMAT)

    @property
    def modified_text(self) -> str:
        return self.modified.strftime(TIMESTAMP_FORMAT)

    @property
    def created_year(self) -> str:
        return f"{self.created.year:04d}"


class HistoryProvider(Protocol):
    def lookup(self, relative_path: Path, cwd: Path) -> FileHistory:
        ...


def parse_timestamp(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` value; empty input is rejected."""
    value = text.strip()
    if not value:
        raise HistoryUnavailableError("git log returned no history records")
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise MalformedTimestampError(f"Cannot parse timestamp {value!r}") from exc


@dataclass
class GitHistoryProvider:
    """History provider backed by the ``git`` executable on ``PATH``."""

    git_executable: str = "git"

    def lookup(self, relative_path: Path, cwd: Path) -> FileHistory:
        target = relative_path.as_posix()
        created_lines = self._run(
            ["log", "--diff-filter=A", "--format=%ad", GIT_DATE_OPTION, "--reverse", "--", target],
            cwd,
        )
        modified_lines = self._run(
            ["log", "-1", "--format=%cd", GIT_DATE_OPTION, "--", target],
            cwd,
        )
        if not created_lines or not modified_lines:
            raise HistoryUnavailableError(f"No git history for {target}")
        return FileHistory(
            created=parse_timestamp(created_lines[0]),
            modified=parse_timestamp(modified_lines[0]),
        )

    def _run(self, args: Sequence[str], cwd: Path) -> list[str]:
        proc = subprocess.run(
            [self.git_executable, "--literal-pathspecs", *args],
            cwd=cwd,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
        )
        if proc.returncode != 0:
            detail = "; ".join(line.strip() for line in proc.stderr.splitlines() if line.strip())
            raise HistoryUnavailableError(f"git {args[0]} failed (code {proc.returncode}): {detail}")
        return [line for line in proc.stdout.splitlines() if line.strip()]


@dataclass
class StaticHistoryProvider:
    """Provider returning canned timestamps instead of querying git.

    ``per_path`` entries win over ``default``; a path with neither behaves
    like an uncommitted file.
    """

    default: Optional[FileHistory] = None
    per_path: Mapping[str, FileHistory] = field(default_factory=dict)

    def lookup(self, relative_path: Path, cwd: Path) -> FileHistory:
        history = self.per_path.get(relative_path.as_posix(), self.default)
        if history is None:
            raise HistoryUnavailableError(f"No history for {relative_path.as_posix()}")
        return history


# Created by Dr. Z. Bakhtiyorov
