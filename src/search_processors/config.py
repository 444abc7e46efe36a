"""
Environment configuration for search processors.

Values are read from the process environment, with `.env.local` in the
working directory loaded first if present:

    SEARCH_PROCESSORS_LOG_FILE            base path of the session log file
    SEARCH_PROCESSORS_LOG_LEVEL           console level name (INFO, DEBUG, ...)
    SEARCH_PROCESSORS_MAX_NESTING_DEPTH   markup nesting depth the HTML
                                          tokenizer will follow
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_LOG_FILE = "logs/search-processors.log"
DEFAULT_MAX_NESTING_DEPTH = 100
# Each nesting level costs one interpreter stack frame
MAX_NESTING_DEPTH_LIMIT = 500


@dataclass(frozen=True)
class Settings:
    """Resolved environment settings"""
    log_file: str = DEFAULT_LOG_FILE
    log_level: int = logging.INFO
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH


def _parse_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(
            f"SEARCH_PROCESSORS_LOG_LEVEL must be a logging level name, got: {value!r}"
        )
    return level


def _parse_depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise ValueError(
            f"SEARCH_PROCESSORS_MAX_NESTING_DEPTH must be an integer, got: {value!r}"
        ) from None
    if not 1 <= depth <= MAX_NESTING_DEPTH_LIMIT:
        raise ValueError(
            f"SEARCH_PROCESSORS_MAX_NESTING_DEPTH must be between 1 and {MAX_NESTING_DEPTH_LIMIT}, got: {depth}"
        )
    return depth


def load_settings() -> Settings:
    """Read settings from the environment (no caching)."""
    env_file = Path.cwd() / ".env.local"
    if env_file.exists():
        load_dotenv(env_file)

    log_level = os.getenv("SEARCH_PROCESSORS_LOG_LEVEL")
    max_depth = os.getenv("SEARCH_PROCESSORS_MAX_NESTING_DEPTH")
    return Settings(
        log_file=os.getenv("SEARCH_PROCESSORS_LOG_FILE") or DEFAULT_LOG_FILE,
        log_level=_parse_level(log_level) if log_level else logging.INFO,
        max_nesting_depth=_parse_depth(max_depth) if max_depth else DEFAULT_MAX_NESTING_DEPTH,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings singleton; call get_settings.cache_clear() after changing the environment."""
    return load_settings()
