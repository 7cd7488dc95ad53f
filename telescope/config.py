from __future__ import annotations
import logging
import os

_DEFAULT_PROMPT = "> "
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get("TELESCOPE_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    """Resolve TELESCOPE_LOG_LEVEL (a level name or number) to a logging level."""
    raw = os.environ.get("TELESCOPE_LOG_LEVEL", "").strip()
    if not raw:
        raw = _DEFAULT_LOG_LEVEL
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
