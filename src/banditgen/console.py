"""ANSI color helpers for console output."""

import re
from typing import Final

ANSI_COLORS: Final[dict[str, str]] = {
    "RED": "\x1b[31m",
    "GREEN": "\x1b[32m",
    "YELLOW": "\x1b[33m",
    "CYAN": "\x1b[36m",
    "RESET": "\x1b[0m",
    "BOLD": "\x1b[1m",
    "DIM": "\x1b[2m",
}

ANSI_ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


def colorize(text: str, *colors: str) -> str:
    """
    Apply one or more ANSI styles to text.

    Args:
        text: The text to colorize
        colors: Names from ANSI_COLORS (e.g. 'CYAN', 'BOLD'); unknown names are ignored

    Returns:
        Text wrapped with ANSI codes, or unchanged if no known style was given
    """
    codes = "".join(ANSI_COLORS.get(color.upper(), "") for color in colors)
    if not codes:
        return text
    return f"{codes}{text}{ANSI_COLORS['RESET']}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)
