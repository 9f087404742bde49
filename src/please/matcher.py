"""Decide whether a pattern shows up as a live command fragment.

Matches inside quoted literals don't count, and neither do patterns that the
script uses as flag names (``Get-Date -Format ...``).
"""

from __future__ import annotations

from .quotes import outside_positions

COMMENT_PREFIXES = ("#", "//")


def matches_line(line: str, pattern: str) -> bool:
    pattern = pattern.lower()
    if not pattern:
        return False
    lowered = line.lower()
    last_start = len(lowered) - len(pattern) + 1
    for i in outside_positions(lowered, stop=last_start):
        if lowered[i : i + len(pattern)] == pattern:
            return True
    return False


def is_flag_name(script: str, pattern: str) -> bool:
    """True when the script uses the pattern as a ``-flag`` somewhere."""
    lowered = script.lower()
    pattern = pattern.lower()
    if ("-" + pattern) in lowered:
        return True
    # PowerShell: Get-Date -Format "HH:mm:ss"
    if pattern == "format" and "-format" in lowered:
        return True
    return False


def contains_command(script: str, pattern: str) -> bool:
    if is_flag_name(script, pattern):
        return False

    for raw in script.split("\n"):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        if matches_line(line, pattern):
            return True
    return False
