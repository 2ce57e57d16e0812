from __future__ import annotations

import logging


def resolve_log_level(level: int | str) -> int:
    """Translate a level name (``"debug"``) or number (``"10"``) to an int."""

    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def configure_logging(level: int | str = logging.WARNING) -> int:
    """Initialize root logging if needed and return the resolved level."""

    resolved = resolve_log_level(level)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return resolved
