"""Tests for key translation and the input handler."""

import curses
from types import SimpleNamespace
from typing import List

import pytest

from cedit.core.editor import Editor
from cedit.core.events import EditEvent, EventKind
from cedit.ui.input_handler import InputHandler, translate_key


class FakeWindowManager(SimpleNamespace):

    def __init__(self) -> None:
        super().__init__(messages=[])

    def set_status(self, message: str) -> None:
        self.messages.append(message)


def make_handler(**editor_options) -> InputHandler:
    return InputHandler(Editor(**editor_options), FakeWindowManager())


def press(handler: InputHandler, keys: List[int]) -> None:
    for key in keys:
        assert handler.handle_input(key)


@pytest.mark.parametrize(
    "key, kind",
    [
        (curses.KEY_UP, EventKind.MOVE_UP),
        (curses.KEY_DOWN, EventKind.MOVE_DOWN),
        (curses.KEY_LEFT, EventKind.MOVE_LEFT),
        (curses.KEY_RIGHT, EventKind.MOVE_RIGHT),
        (curses.KEY_HOME, EventKind.MOVE_HOME),
        (curses.KEY_END, EventKind.MOVE_END),
        (10, EventKind.SPLIT_LINE),
        (13, EventKind.SPLIT_LINE),
        (curses.KEY_ENTER, EventKind.SPLIT_LINE),
        (127, EventKind.DELETE_BEFORE),
        (curses.KEY_BACKSPACE, EventKind.DELETE_BEFORE),
        (19, EventKind.SAVE),
        (17, EventKind.QUIT),
    ],
)
def test_translate_bound_keys(key, kind):
    assert translate_key(key) == EditEvent(kind)


def test_translate_printable_characters():
    assert translate_key(ord("a")) == EditEvent.insert("a")
    assert translate_key(ord(" ")) == EditEvent.insert(" ")
    assert translate_key(ord("~")) == EditEvent.insert("~")


def test_unbound_keys_are_ignored():
    assert translate_key(3) is None
    assert translate_key(curses.KEY_F1) is None


def test_typing_edits_buffer():
    handler = make_handler()
    press(handler, [ord(c) for c in "ab"] + [10] + [ord("c")])

    assert list(handler.editor.lines) == ["ab", "c"]
    assert handler.window_manager.messages == []


def test_capacity_error_reaches_status_line():
    handler = make_handler(max_cols=2)
    press(handler, [ord("a"), ord("b"), ord("c")])

    assert list(handler.editor.lines) == ["ab"]
    assert handler.window_manager.messages[-1].startswith("Error:")


def test_quit_without_changes():
    handler = make_handler()
    assert handler.handle_input(17) is False


def test_quit_with_changes_needs_confirmation():
    handler = make_handler()
    press(handler, [ord("x")])

    assert handler.handle_input(17) is True
    assert "unsaved changes" in handler.window_manager.messages[-1]
    assert handler.handle_input(17) is False


def test_other_key_resets_quit_confirmation():
    handler = make_handler()
    press(handler, [ord("x"), 17, curses.KEY_LEFT])

    assert handler.handle_input(17) is True


def test_quit_confirmation_can_be_disabled():
    handler = InputHandler(Editor(), FakeWindowManager(), confirm_quit=False)
    press(handler, [ord("x")])
    assert handler.handle_input(17) is False


def test_save_reports_filename(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    handler = make_handler()
    press(handler, [ord("x"), 19])

    assert handler.window_manager.messages[-1] == "Saved: untitled.txt"
    assert (tmp_path / "untitled.txt").read_text(encoding="utf-8") == "x\n"
