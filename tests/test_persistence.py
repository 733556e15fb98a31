"""Tests for loading and saving line files."""

from pathlib import Path

import pytest

from cedit.core.errors import IoFailure
from cedit.core.persistence import load_lines, save_lines


def test_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "prog.c"
    lines = ["#include <stdio.h>", "", "int main(void) {", '\tputs("hi");', "}"]

    assert save_lines(str(path), lines) == 5
    assert load_lines(str(path), 1000, 1000) == lines

    save_lines(str(path), load_lines(str(path), 1000, 1000))
    assert load_lines(str(path), 1000, 1000) == lines


def test_every_line_gets_one_newline(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    save_lines(str(path), ["a", ""])
    assert path.read_bytes() == b"a\n\n"


def test_missing_file_is_one_empty_line(tmp_path: Path) -> None:
    assert load_lines(str(tmp_path / "nope.c"), 10, 10) == [""]


def test_empty_file_is_one_empty_line(tmp_path: Path) -> None:
    path = tmp_path / "empty.c"
    path.write_bytes(b"")
    assert load_lines(str(path), 10, 10) == [""]


def test_missing_final_newline(tmp_path: Path) -> None:
    path = tmp_path / "a.c"
    path.write_bytes(b"one\ntwo")
    assert load_lines(str(path), 10, 10) == ["one", "two"]


def test_windows_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "dos.c"
    path.write_bytes(b"one\r\ntwo\r\n")
    assert load_lines(str(path), 10, 10) == ["one", "two"]


def test_old_mac_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "mac.c"
    path.write_bytes(b"one\rtwo")
    assert load_lines(str(path), 10, 10) == ["one", "two"]


def test_lines_past_limit_are_dropped(tmp_path: Path, caplog) -> None:
    path = tmp_path / "long.c"
    path.write_text("".join(f"{i}\n" for i in range(10)), encoding="utf-8")

    with caplog.at_level("WARNING", logger="cedit"):
        lines = load_lines(str(path), 4, 100)

    assert lines == ["0", "1", "2", "3"]
    assert "past the limit" in caplog.text


def test_long_lines_are_split(tmp_path: Path) -> None:
    path = tmp_path / "wide.c"
    path.write_text("abcdefgh\nxy\n", encoding="utf-8")
    assert load_lines(str(path), 10, 3) == ["abc", "def", "gh", "xy"]


def test_split_lines_respect_line_limit(tmp_path: Path) -> None:
    path = tmp_path / "wide.c"
    path.write_text("abcdefgh\n", encoding="utf-8")
    assert load_lines(str(path), 2, 3) == ["abc", "def"]


def test_invalid_utf8_is_replaced(tmp_path: Path) -> None:
    path = tmp_path / "bin.c"
    path.write_bytes(b"ok\xff\n")
    assert load_lines(str(path), 10, 10) == ["ok�"]


def test_unreadable_path_raises(tmp_path: Path) -> None:
    with pytest.raises(IoFailure) as exc_info:
        load_lines(str(tmp_path), 10, 10)
    assert exc_info.value.path == str(tmp_path)
    assert isinstance(exc_info.value, OSError)


def test_unwritable_path_raises(tmp_path: Path) -> None:
    with pytest.raises(IoFailure):
        save_lines(str(tmp_path / "no" / "such" / "file.c"), ["x"])


def test_failed_write_keeps_old_contents(tmp_path: Path) -> None:
    path = tmp_path / "keep.c"
    path.write_text("old\n", encoding="utf-8")

    def failing_lines():
        yield "new"
        raise OSError(28, "No space left on device")

    with pytest.raises(IoFailure):
        save_lines(str(path), failing_lines())

    assert path.read_text(encoding="utf-8") == "old\n"
    assert [p.name for p in tmp_path.iterdir()] == ["keep.c"]


def test_save_keeps_file_mode(tmp_path: Path) -> None:
    path = tmp_path / "run.sh"
    path.write_text("old\n", encoding="utf-8")
    path.chmod(0o755)

    save_lines(str(path), ["new"])

    assert path.stat().st_mode & 0o777 == 0o755
    assert path.read_text(encoding="utf-8") == "new\n"
