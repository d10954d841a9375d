# Program: Copyright Updater Result Models
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Per-file outcomes and the aggregate result of a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from pydantic import BaseModel


class FileOutcome(BaseModel):
    path: str
    status: Literal["success", "failure"]
    error: Optional[str] = None
    had_existing_comment: bool = False


@dataclass
class RunResult:
    """Outcomes collected by the directory walk, in visit order."""

    successes: list[FileOutcome] = field(default_factory=list)
    failures: list[FileOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successes) + len(self.failures)

    @property
    def replaced_headers(self) -> int:
        return sum(1 for outcome in self.successes if outcome.had_existing_comment)

    def record(self, outcome: FileOutcome) -> None:
        if outcome.status == "success":
            self.successes.append(outcome)
        else:
            self.failures.append(outcome)


# Created by Dr. Z. Bakhtiyorov
