# Program: Copyright Updater CLI
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Command-line entry point: ``copyright-updater [BASE] [AUTHOR] [EMAIL] [TYPES] [INDEX]``."""

from __future__ import annotations

from typing import List, Optional

import typer

from .config import (
    DEFAULT_AUTHOR,
    DEFAULT_BASE_PATH,
    DEFAULT_EMAIL,
    DEFAULT_FILE_TYPES,
    DEFAULT_TEMPLATE_INDEX,
    build_config,
)
from .errors import HeaderUpdateError
from .history import FileHistory, GitHistoryProvider, HistoryProvider, StaticHistoryProvider, parse_timestamp
from .reporter import ConsoleReporter
from .templates import build_templates, select_template
from .walker import process_tree

app = typer.Typer(add_completion=False)


@app.command()
def run(
    base_path: str = typer.Argument(DEFAULT_BASE_PATH, help="Directory to process"),
    author: str = typer.Argument(DEFAULT_AUTHOR, help="Author written into the banner"),
    email: str = typer.Argument(DEFAULT_EMAIL, help="Email written into the banner"),
    file_types: str = typer.Argument(DEFAULT_FILE_TYPES, help="Comma-separated extensions, e.g. .ts,.tsx"),
    template_index: str = typer.Argument(DEFAULT_TEMPLATE_INDEX, help="Built-in template index (0 if out of range)"),
    skip_dir: Optional[List[str]] = typer.Option(None, "--skip-dir", help="Directory name to leave out (repeatable)"),
    fixed_date: Optional[str] = typer.Option(
        None, help="Use this 'YYYY-MM-DD HH:MM:SS' timestamp instead of git history"
    ),
    strict: bool = typer.Option(False, help="Exit with status 1 when any file failed"),
    follow_symlinks: bool = typer.Option(False, help="Descend into symlinked directories (each real directory once)"),
):
    """Replace the leading /** */ comment of matching files with a copyright banner."""

    config = build_config(
        base_path=base_path,
        author=author,
        email=email,
        file_types=file_types,
        template_index=template_index,
        skip_dirs=skip_dir,
        strict=strict,
        follow_symlinks=follow_symlinks,
    )
    template = select_template(build_templates(config.author, config.email), config.template_index)

    provider: HistoryProvider
    if fixed_date is not None:
        try:
            stamp = parse_timestamp(fixed_date)
        except HeaderUpdateError as exc:
            raise typer.BadParameter(str(exc), param_hint="--fixed-date") from exc
        provider = StaticHistoryProvider(default=FileHistory(created=stamp, modified=stamp))
    else:
        provider = GitHistoryProvider()

    reporter = ConsoleReporter()
    result = process_tree(config, provider, template, reporter)
    reporter.summary(result)

    if config.strict and result.failures:
        raise typer.Exit(code=1)


def main() -> int:
    app()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

# Created by Dr. Z. Bakhtiyorov
