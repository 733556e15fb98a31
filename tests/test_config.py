"""Tests for configuration loading and logging setup."""

import importlib
import logging
from pathlib import Path

import pytest

from cedit.config import EditorConfig, deep_merge, load_config
from cedit.utils.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("CEDIT_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_defaults_without_file():
    config = load_config()
    assert config.max_lines == 1000
    assert config.max_cols == 1000
    assert config.default_filename == "untitled.txt"
    assert config.colors["keyword"] == "blue"
    assert config.show_line_numbers is False


def test_file_values_override_defaults(tmp_path: Path):
    path = tmp_path / "cedit.toml"
    path.write_text(
        '[editor]\nmax_cols = 80\nshow_line_numbers = true\n\n[colors]\ncomment = "green"\n',
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert config.max_cols == 80
    assert config.max_lines == 1000
    assert config.show_line_numbers is True
    assert config.colors["comment"] == "green"
    assert config.colors["keyword"] == "blue"


def test_env_var_points_to_file(tmp_path: Path, monkeypatch):
    path = tmp_path / "env.toml"
    path.write_text("[logging]\nlevel = \"debug\"\n", encoding="utf-8")
    monkeypatch.setenv("CEDIT_CONFIG", str(path))

    assert load_config().log_level == "DEBUG"


def test_user_config_file(tmp_path: Path):
    config_dir = tmp_path / ".config" / "cedit"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text("[editor]\nmax_lines = 50\n", encoding="utf-8")

    assert load_config().max_lines == 50


def test_malformed_file_falls_back(tmp_path: Path):
    path = tmp_path / "bad.toml"
    path.write_text("[editor\nmax_cols = ", encoding="utf-8")

    assert load_config(str(path)) == EditorConfig()


def test_missing_explicit_file_falls_back(tmp_path: Path):
    assert load_config(str(tmp_path / "absent.toml")) == EditorConfig()


def test_invalid_limits_rejected():
    with pytest.raises(ValueError):
        EditorConfig(max_cols=0)


def test_deep_merge_keeps_nested_defaults():
    merged = deep_merge({"a": {"x": 1, "y": 2}, "b": 3}, {"a": {"y": 5}})
    assert merged == {"a": {"x": 1, "y": 5}, "b": 3}


def test_setup_logging_writes_to_file(tmp_path: Path):
    log_path = tmp_path / "cedit.log"
    logger = setup_logging(str(log_path), "info")
    try:
        logging.getLogger("cedit.core.editor").info("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in log_path.read_text(encoding="utf-8")
    finally:
        setup_logging(None)


def test_setup_logging_without_file():
    logger = setup_logging(None, "WARNING")
    assert logger.name == LOGGER_NAME
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging(None, "chatty")


def test_setup_logging_from_checkout_tree(tmp_path: Path):
    logging_config = importlib.import_module("src.cedit.utils.logging_config")
    editor_module = importlib.import_module("src.cedit.core.editor")
    events = importlib.import_module("src.cedit.core.events")

    log_path = tmp_path / "cedit.log"
    logger = logging_config.setup_logging(str(log_path), "DEBUG")
    try:
        assert logger.name == "src.cedit"

        editor = editor_module.Editor(max_cols=1)
        editor.apply(events.EditEvent.insert("a"))
        assert not editor.apply(events.EditEvent.insert("b")).ok

        for handler in logger.handlers:
            handler.flush()
        assert "rejected" in log_path.read_text(encoding="utf-8")
    finally:
        logging_config.setup_logging(None)
