"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from cedit.__main__ import build_config, main, parse_args


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("CEDIT_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_cli_flags_override_config(tmp_path: Path):
    path = tmp_path / "cedit.toml"
    path.write_text("[editor]\nmax_lines = 20\nmax_cols = 30\n", encoding="utf-8")

    config = build_config(parse_args(["--config", str(path), "--max-cols", "40", "--line-numbers"]))

    assert config.max_lines == 20
    assert config.max_cols == 40
    assert config.show_line_numbers is True


def test_invalid_limit_is_an_error(capsys):
    assert main(["--max-lines", "0", "--cat"]) == 2
    assert "cedit:" in capsys.readouterr().err


def test_cat_prints_highlighted_file(tmp_path: Path, capsys):
    path = tmp_path / "hello.c"
    path.write_text('#include <stdio.h>\nint main(void) { return 0; }\n', encoding="utf-8")

    assert main(["--cat", str(path)]) == 0

    out = capsys.readouterr().out
    assert "\x1b[" in out
    assert "main" in out
    assert "stdio.h" in out


def test_cat_reports_unreadable_file(tmp_path: Path, capsys):
    assert main(["--cat", str(tmp_path)]) == 1
    assert "Failed to read" in capsys.readouterr().err
