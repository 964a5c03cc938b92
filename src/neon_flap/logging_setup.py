"""
logging_setup.py: One-shot python logging configuration for the game.
"""

import logging
import os
from typing import Any, Optional

ENV_LEVEL = "NEON_FLAP_LOG_LEVEL"


def _parse_level(s: Optional[str]) -> Optional[int]:
    """Maps a level name like "debug" or "warn" to its number, None if unknown."""
    if not s:
        return None
    level = logging.getLevelName(s.strip().upper())
    return level if isinstance(level, int) else None


def resolve_level(args: Any = None) -> int:
    """Env NEON_FLAP_LOG_LEVEL, then --quiet / --basic_debug, then INFO."""
    level = logging.INFO
    if args is not None:
        if getattr(args, "quiet", False):
            level = logging.WARNING
        if getattr(args, "basic_debug", False):
            level = logging.DEBUG
    env_level = _parse_level(os.environ.get(ENV_LEVEL))
    if env_level is not None:
        level = env_level
    return level


def setup_logging(args: Any = None, *, name: str = "neon_flap") -> None:
    """Configure python logging once."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = resolve_level(args)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger(name).debug("logging initialized (level=%s)", logging.getLevelName(level))
