# Program: Directory Walker
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Walk a tree and rewrite the header of every file with an allowed extension."""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, Iterable, Iterator, Optional

from .config import RunConfig
from .errors import HeaderUpdateError
from .events import FileOutcome, RunResult
from .history import HistoryProvider
from .reporter import ConsoleReporter
from .rewriter import rewrite_file


def iter_source_files(
    root: Path,
    file_types: AbstractSet[str],
    skip_dirs: Iterable[str] = (),
    follow_symlinks: bool = False,
    _seen: Optional[set[Path]] = None,
) -> Iterator[Path]:
    """Yield files under ``root`` whose suffix is in ``file_types``.

    Every subdirectory is entered unless its name is listed in ``skip_dirs``.
    Symlinked directories are only entered with ``follow_symlinks``, and each
    real directory is visited at most once. Errors listing a directory
    propagate to the caller.
    """

    skipped = frozenset(skip_dirs)
    seen = _seen if _seen is not None else {root.resolve()}
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            if entry.name in skipped or (entry.is_symlink() and not follow_symlinks):
                continue
            real = entry.resolve()
            if real in seen:
                continue
            seen.add(real)
            yield from iter_source_files(entry, file_types, skipped, follow_symlinks, seen)
        elif entry.suffix in file_types:
            yield entry


def process_file(
    path: Path,
    config: RunConfig,
    provider: HistoryProvider,
    template: str,
) -> FileOutcome:
    # History first: a file without history is never opened for writing.
    history = provider.lookup(path.relative_to(config.base_path), config.base_path)
    had_comment = rewrite_file(path, history, template)
    return FileOutcome(path=str(path), status="success", had_existing_comment=had_comment)


def process_tree(
    config: RunConfig,
    provider: HistoryProvider,
    template: str,
    reporter: ConsoleReporter,
) -> RunResult:
    result = RunResult()
    for path in iter_source_files(
        config.base_path, config.file_types, config.skip_dirs, config.follow_symlinks
    ):
        reporter.processing(path)
        try:
            outcome = process_file(path, config, provider, template)
        except (HeaderUpdateError, OSError, ValueError) as exc:
            reporter.failure(path, exc)
            outcome = FileOutcome(path=str(path), status="failure", error=str(exc))
        result.record(outcome)
    return result


# Created by Dr. Z. Bakhtiyorov
