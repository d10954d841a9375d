# Program: Run Reporter
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Console output for progress, per-file failures and the final summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .events import RunResult


@dataclass
class ConsoleReporter:
    out: Console = field(default_factory=lambda: Console(soft_wrap=True, highlight=False, emoji=False))
    err: Console = field(
        default_factory=lambda: Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)
    )

    def processing(self, path: Path) -> None:
        self.out.print(f"Processing {escape(str(path))}")

    def failure(self, path: Path, error: BaseException) -> None:
        self.err.print(f"[red]Error processing[/] {escape(str(path))}: {escape(str(error))}")

    def summary(self, result: RunResult) -> None:
        self.out.print(f"Processed {result.total} files.")
        self.out.print(f"Success: {len(result.successes)}, Failure: {len(result.failures)}")
        if result.replaced_headers:
            self.out.print(f"Replaced existing headers: {result.replaced_headers}")


# Created by Dr. Z. Bakhtiyorov
