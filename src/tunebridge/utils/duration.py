"""Duration parsing and formatting helpers."""

import logging

logger = logging.getLogger(__name__)


def format_duration(duration_ms: int) -> str:
    """Format milliseconds as ``m:ss`` (e.g. 354000 -> "5:54")."""
    total_seconds = max(duration_ms, 0) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def format_total_duration(duration_ms: int) -> str:
    """Format a playlist length as ``"1h 5m"`` or ``"42 min"``."""
    total_minutes = max(duration_ms, 0) // 1000 // 60
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes} min"


def parse_duration_ms(length: str | None) -> int:
    """Parse a duration string like '3:00' or '1:23:45' to milliseconds.

    Returns 0 for missing or unparseable values (logs a warning for the latter).
    """
    if not length:
        return 0

    try:
        parts = [int(p) for p in length.split(":")]
    except ValueError:
        logger.warning("Could not parse duration: %s", length)
        return 0

    if len(parts) == 2:
        minutes, seconds = parts
        return (minutes * 60 + seconds) * 1000
    if len(parts) == 3:
        hours, minutes, seconds = parts
        return (hours * 3600 + minutes * 60 + seconds) * 1000

    logger.warning("Unexpected duration format: %s", length)
    return 0
