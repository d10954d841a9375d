# Program: Copyright Updater Config
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Run configuration assembled from command-line arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

DEFAULT_BASE_PATH = "src"
DEFAULT_AUTHOR = "Leon"
DEFAULT_EMAIL = "silenceace@gmail.com"
DEFAULT_FILE_TYPES = ".tsx,.ts,.js"
DEFAULT_TEMPLATE_INDEX = "0"


@dataclass(frozen=True)
class RunConfig:
    base_path: Path
    author: str = DEFAULT_AUTHOR
    email: str = DEFAULT_EMAIL
    file_types: frozenset[str] = frozenset({".tsx", ".ts", ".js"})
    template_index: int = 0
    skip_dirs: frozenset[str] = field(default_factory=frozenset)
    strict: bool = False
    follow_symlinks: bool = False


def parse_file_types(text: str) -> frozenset[str]:
    """Split a comma-separated extension list such as ``.ts,.tsx``."""
    return frozenset(item.strip() for item in text.split(",") if item.strip())


def parse_template_index(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def build_config(
    base_path: str = DEFAULT_BASE_PATH,
    author: str = DEFAULT_AUTHOR,
    email: str = DEFAULT_EMAIL,
    file_types: str = DEFAULT_FILE_TYPES,
    template_index: str = DEFAULT_TEMPLATE_INDEX,
    skip_dirs: Optional[Iterable[str]] = None,
    strict: bool = False,
    follow_symlinks: bool = False,
) -> RunConfig:
    """Build the immutable run configuration with defaults applied."""
    return RunConfig(
        base_path=Path(base_path).resolve(),
        author=author,
        email=email,
        file_types=parse_file_types(file_types),
        template_index=parse_template_index(template_index),
        skip_dirs=frozenset(skip_dirs or ()),
        strict=strict,
        follow_symlinks=follow_symlinks,
    )


# Created by Dr. Z. Bakhtiyorov
