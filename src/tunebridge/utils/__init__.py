"""Utility functions for tunebridge.

Available via `from tunebridge.utils import ...` for power users.
Not re-exported at the top-level `tunebridge` package.
"""

from tunebridge.utils.duration import (
    format_duration,
    format_total_duration,
    parse_duration_ms,
)

__all__ = [
    "format_duration",
    "format_total_duration",
    "parse_duration_ms",
]
