"""Color support for CLI output."""

import sys

from rich.console import Console


def should_use_color(color_flag: bool | None) -> bool:
    """Determine if color should be used based on flag and TTY detection.

    Args:
        color_flag: Explicit color preference (True/False) or None for auto-detect

    Returns:
        True if colors should be used, False otherwise
    """
    if color_flag is None:
        return sys.stdout.isatty()
    return color_flag


def build_console(color_enabled: bool) -> Console:
    """Build the Rich console used for command output."""
    return Console(no_color=not color_enabled, highlight=False, soft_wrap=True)
