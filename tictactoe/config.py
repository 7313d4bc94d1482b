"""
Runtime settings for the Tic Tac Toe window.

Values come from environment variables (TICTACTOE_*) with the defaults below.
Bad values are logged and replaced by the default.
"""
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

log = logging.getLogger(__name__)

# light theme colours
PRIMARY_COLOR = "#1e88e5"
SECONDARY_COLOR = "#42a5f5"
ACCENT_COLOR = "#ffeb3b"

THEMES = ("light", "dark")
MIN_BOARD_SIZE_FLOOR = 90


def _parse_log_level(name: str) -> str:
    name = name.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"unknown log level {name!r}")
    return name


def _parse_board_size(value: str) -> int:
    size = int(value)
    if size < MIN_BOARD_SIZE_FLOOR:
        raise ValueError(f"board size must be >= {MIN_BOARD_SIZE_FLOOR}")
    return size


def _parse_theme(value: str) -> str:
    value = value.strip().lower()
    if value not in THEMES:
        raise ValueError(f"theme must be one of {THEMES}")
    return value


def _get(env: Mapping[str, str], name: str, default: Any,
         cast: Optional[Callable[[str], Any]] = None) -> Any:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    if cast is None:
        return raw
    try:
        return cast(raw)
    except ValueError as exc:
        log.warning("ignoring %s=%r (%s); using %r", name, raw, exc, default)
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    window_title: str = "Tic Tac Toe"
    min_board_size: int = 240
    theme: str = "light"


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    defaults = Settings()
    return Settings(
        log_level=_get(env, "TICTACTOE_LOG_LEVEL", defaults.log_level, _parse_log_level),
        window_title=_get(env, "TICTACTOE_WINDOW_TITLE", defaults.window_title),
        min_board_size=_get(env, "TICTACTOE_MIN_BOARD_SIZE", defaults.min_board_size, _parse_board_size),
        theme=_get(env, "TICTACTOE_THEME", defaults.theme, _parse_theme),
    )
