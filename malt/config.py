from __future__ import annotations
import logging
import os
from pathlib import Path

# Defaults
_DEFAULT_PROMPT = "user> "
_DEFAULT_HISTORY_FILE = Path.home() / ".malt_history"
_DEFAULT_LOG_LEVEL = logging.WARNING


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw else default


def get_prompt() -> str:
    return str_from_env("MALT_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Path:
    return Path(str_from_env("MALT_HISTORY", str(_DEFAULT_HISTORY_FILE))).expanduser()


def get_log_level() -> int:
    """Logging level named by LOGLEVEL (e.g. DEBUG, INFO); WARNING if unset or unknown."""
    level = getattr(logging, str_from_env("LOGLEVEL", "").upper(), None)
    if isinstance(level, int):
        return level
    return _DEFAULT_LOG_LEVEL
