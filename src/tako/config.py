"""Runtime settings read from the environment."""

import os
import shutil
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError


DEFAULT_TREE_DEPTH = 4
DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_MAX_FILE_SIZE = 1024 * 1024  # 1MB


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI and the MCP server."""
    tree_depth: int = DEFAULT_TREE_DEPTH
    terminal_width: Optional[int] = None   # None = detect from the terminal
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(name, value) from None


def load_settings() -> Settings:
    """Build Settings from TAKO_* environment variables."""
    return Settings(
        tree_depth=_int_from_env("TAKO_TREE_DEPTH", DEFAULT_TREE_DEPTH),
        terminal_width=_int_from_env("TAKO_TERMINAL_WIDTH", None),
        max_file_size=_int_from_env("TAKO_MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE),
    )


def resolve_terminal_width(settings: Settings) -> int:
    """Return the width to render trees at.

    Call once per rendering session and pass the result down; the renderer
    never queries the terminal itself.
    """
    if settings.terminal_width is not None:
        return settings.terminal_width
    return shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
