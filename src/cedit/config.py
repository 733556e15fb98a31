"""
Configuration loading from TOML files.
"""

import copy
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Final, Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR: Final[str] = 'CEDIT_CONFIG'
USER_CONFIG_PATH: Final[str] = os.path.join('~', '.config', 'cedit', 'config.toml')

DEFAULT_CONFIG: Final[Dict[str, Dict[str, Any]]] = {
    'editor': {
        'max_lines': 1000,
        'max_cols': 1000,
        'default_filename': 'untitled.txt',
        'show_line_numbers': False,
        'confirm_quit': True,
        'status_message_duration': 3,
    },
    'colors': {
        'keyword': 'blue',
        'string': 'green',
        'char': 'green',
        'comment': 'red',
        'number': 'magenta',
        'preprocessor': 'cyan',
    },
    'logging': {
        'file': '',
        'level': 'WARNING',
    },
}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries, values from ``override`` winning."""

    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


@dataclass
class EditorConfig:
    """Settings for one editor session."""

    max_lines: int = 1000
    max_cols: int = 1000
    default_filename: str = 'untitled.txt'
    show_line_numbers: bool = False
    confirm_quit: bool = True
    status_message_duration: float = 3
    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_CONFIG['colors']))
    log_file: str = ''
    log_level: str = 'WARNING'

    def __post_init__(self) -> None:
        if self.max_lines < 1 or self.max_cols < 1:
            raise ValueError("max_lines and max_cols must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EditorConfig':
        merged = deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)
        editor = merged['editor']
        log_settings = merged['logging']

        return cls(
            max_lines=int(editor['max_lines']),
            max_cols=int(editor['max_cols']),
            default_filename=str(editor['default_filename']),
            show_line_numbers=bool(editor['show_line_numbers']),
            confirm_quit=bool(editor['confirm_quit']),
            status_message_duration=float(editor['status_message_duration']),
            colors={str(k): str(v) for k, v in merged['colors'].items()},
            log_file=str(log_settings['file']),
            log_level=str(log_settings['level']).upper(),
        )


def find_config_file(path: Optional[str] = None) -> Optional[str]:
    """Return the first configuration file that applies, if any."""

    if path:
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path

    user_path = os.path.expanduser(USER_CONFIG_PATH)
    if os.path.isfile(user_path):
        return user_path

    return None


def load_config(path: Optional[str] = None) -> EditorConfig:
    """
    Load configuration, falling back to defaults if not found or invalid.

    Args:
        path: Explicit configuration file, overriding the usual lookup

    Returns:
        The merged configuration
    """

    config_path = find_config_file(path)
    if not config_path:
        return EditorConfig.from_dict({})

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = toml.load(f)
    except FileNotFoundError:
        logger.warning("Config file '%s' not found. Using defaults.", config_path)
        return EditorConfig.from_dict({})
    except toml.TomlDecodeError as e:
        logger.error("TOML parse error in %s: %s", config_path, e)
        return EditorConfig.from_dict({})

    logger.debug("Loaded configuration from %s", config_path)
    return EditorConfig.from_dict(user_config)
