# Program: Copyright Updater Package Init
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Rewrite leading /** */ comments with copyright banners dated from git history."""

from .config import RunConfig, build_config
from .errors import (
    HeaderUpdateError,
    HistoryUnavailableError,
    MalformedTimestampError,
    UnresolvedPlaceholderError,
)
from .events import FileOutcome, RunResult
from .history import FileHistory, GitHistoryProvider, HistoryProvider, StaticHistoryProvider
from .reporter import ConsoleReporter
from .rewriter import build_content, rewrite_file, strip_blank_lines, strip_leading_comment
from .templates import build_templates, render_template, select_template
from .walker import iter_source_files, process_tree

__all__ = [
    "ConsoleReporter",
    "FileHistory",
    "FileOutcome",
    "GitHistoryProvider",
    "HeaderUpdateError",
    "HistoryProvider",
    "HistoryUnavailableError",
    "MalformedTimestampError",
    "RunConfig",
    "RunResult",
    "StaticHistoryProvider",
    "UnresolvedPlaceholderError",
    "build_config",
    "build_content",
    "build_templates",
    "iter_source_files",
    "process_tree",
    "render_template",
    "rewrite_file",
    "select_template",
    "strip_blank_lines",
    "strip_leading_comment",
]

# Created by Dr. Z. Bakhtiyorov
