# Program: Copyright Updater CLI Tests
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""End-to-end runs of the command through typer's test runner."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from copyright_updater.cli import app

runner = CliRunner()
requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")
FIXED = "2022-02-03 04:05:06"


@requires_git
def test_tracked_ts_file_is_rewritten_and_txt_left_alone(git_repo: Path, commit) -> None:
    (git_repo / "a.ts").write_text("/**\n * stale\n */\nexport const a = 1;\n", encoding="utf-8")
    (git_repo / "b.txt").write_text("/** plain text */\n\nnotes\n", encoding="utf-8")
    commit(["a.ts", "b.txt"], "2023-04-01T10:20:30+00:00")

    result = runner.invoke(app, [str(git_repo), "Leon", "leon@example.com", ".ts", "0"])

    assert result.exit_code == 0, result.output
    assert "Processed 1 files." in result.stdout
    assert "Success: 1, Failure: 0" in result.stdout
    assert (git_repo / "a.ts").read_text(encoding="utf-8") == (
        "/**\n"
        " * Created by Leon<leon@example.com> at 2023-04-01 10:20:30.\n"
        " * Last modified at 2023-04-01 10:20:30\n"
        " */\n"
        "\n"
        "export const a = 1;\n"
    )
    assert (git_repo / "b.txt").read_text(encoding="utf-8") == "/** plain text */\n\nnotes\n"


@requires_git
def test_uncommitted_file_fails_without_changes(git_repo: Path, commit) -> None:
    (git_repo / "old.js").write_text("old();\n", encoding="utf-8")
    commit(["old.js"], "2023-04-01T10:20:30+00:00")
    (git_repo / "fresh.js").write_text("/** draft */\nfresh();\n", encoding="utf-8")

    result = runner.invoke(app, [str(git_repo), "Leon", "leon@example.com", ".js"])

    assert result.exit_code == 0
    assert "Success: 1, Failure: 1" in result.stdout
    assert (git_repo / "fresh.js").read_text(encoding="utf-8") == "/** draft */\nfresh();\n"


def test_out_of_range_template_index_uses_first_template(tmp_path: Path) -> None:
    target = tmp_path / "main.tsx"
    target.write_text("render();\n", encoding="utf-8")

    result = runner.invoke(app, ["--fixed-date", FIXED, str(tmp_path), "Ada", "ada@example.com", ".tsx", "99"])

    assert result.exit_code == 0, result.output
    assert target.read_text(encoding="utf-8") == (
        "/**\n"
        " * Created by Ada<ada@example.com> at 2022-02-03 04:05:06.\n"
        " * Last modified at 2022-02-03 04:05:06\n"
        " */\n"
        "\n"
        "render();\n"
    )


def test_structured_template_and_repeat_run(tmp_path: Path) -> None:
    target = tmp_path / "pkg" / "util.ts"
    target.parent.mkdir()
    target.write_text("export {};\n", encoding="utf-8")
    args = ["--fixed-date", FIXED, str(tmp_path), "Ada", "ada@example.com", ".ts", "1"]

    assert runner.invoke(app, args).exit_code == 0
    first = target.read_text(encoding="utf-8")
    assert runner.invoke(app, args).exit_code == 0

    assert target.read_text(encoding="utf-8") == first
    assert first.startswith("/**\n * @file util.ts\n")
    assert " * @copyright Copyright (c) 2022\n" in first
    assert first.count("/**") == 1


def test_strict_exit_code(tmp_path: Path) -> None:
    (tmp_path / "blob.js").write_bytes(b"\xff\xfe")

    relaxed = runner.invoke(app, ["--fixed-date", FIXED, str(tmp_path), "Ada", "ada@example.com", ".js"])
    strict = runner.invoke(app, ["--strict", "--fixed-date", FIXED, str(tmp_path), "Ada", "ada@example.com", ".js"])

    assert relaxed.exit_code == 0
    assert strict.exit_code == 1


def test_skip_dir_option(tmp_path: Path) -> None:
    vendored = tmp_path / "vendor" / "lib.js"
    vendored.parent.mkdir()
    vendored.write_text("lib();\n", encoding="utf-8")
    (tmp_path / "app.js").write_text("app();\n", encoding="utf-8")

    result = runner.invoke(
        app, ["--skip-dir", "vendor", "--fixed-date", FIXED, str(tmp_path), "Ada", "ada@example.com", ".js"]
    )

    assert result.exit_code == 0, result.output
    assert "Processed 1 files." in result.stdout
    assert vendored.read_text(encoding="utf-8") == "lib();\n"


def test_invalid_fixed_date_is_rejected(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--fixed-date", "yesterday", str(tmp_path)])
    assert result.exit_code == 2


# Created by Dr. Z. Bakhtiyorov
