# Program: Header Rewriter
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Replace the leading ``/** ... */`` block of a file with a fresh banner."""

from __future__ import annotations

import re
from pathlib import Path

from .history import FileHistory
from .templates import render_template

# Shortest /** ... */ block; the first one in the file, wherever it sits.
BLOCK_COMMENT_RE = re.compile(r"/\*\*[\s\S]*?\*/")
BLANK_LINE_RE = re.compile(r"^\s*\n", re.MULTILINE)


def strip_leading_comment(content: str) -> tuple[str, bool]:
    stripped, count = BLOCK_COMMENT_RE.subn("", content, count=1)
    return stripped, bool(count)


def strip_blank_lines(content: str) -> str:
    """Drop every empty or whitespace-only line, not only leading ones."""
    return BLANK_LINE_RE.sub("", content)


def build_content(content: str, banner: str) -> tuple[str, bool]:
    body, had_comment = strip_leading_comment(content)
    return banner + strip_blank_lines(body), had_comment


def render_banner(path: Path, history: FileHistory, template: str) -> str:
    return render_template(
        template,
        {
            "createdDate": history.created_text,
            "filename": path.name,
            "lastModifiedDate": history.modified_text,
            "year": history.created_year,
        },
    )


def rewrite_file(path: Path, history: FileHistory, template: str) -> bool:
    """Overwrite ``path`` in place with the rendered banner and cleaned body.

    Returns whether an existing block comment was replaced. No backup is kept.
    """

    banner = render_banner(path, history, template)
    # newline="" keeps CRLF bodies byte-for-byte
    with open(path, "r", encoding="utf-8", newline="") as f:
        original = f.read()
    updated, had_comment = build_content(original, banner)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(updated)
    return had_comment


# Created by Dr. Z. Bakhtiyorov
