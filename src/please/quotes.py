"""Per-line quote tracking.

The scanner has no notion of backslash escapes or of literals that span
lines: state starts fresh on every line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class QuoteState:
    in_double: bool = False
    in_single: bool = False

    @property
    def outside(self) -> bool:
        return not self.in_double and not self.in_single

    def feed(self, char: str) -> bool:
        """Update the state for one character.

        Returns True when the character opened or closed a literal.
        """
        if char == '"' and not self.in_single:
            self.in_double = not self.in_double
            return True
        if char == "'" and not self.in_double:
            self.in_single = not self.in_single
            return True
        return False


def outside_positions(line: str, stop: int | None = None) -> Iterator[int]:
    """Yield indexes of non-delimiter characters that sit outside quotes."""
    state = QuoteState()
    end = len(line) if stop is None else min(stop, len(line))
    for i in range(end):
        if state.feed(line[i]):
            continue
        if state.outside:
            yield i


def is_outside_quotes(line: str, index: int) -> bool:
    if index < 0 or index >= len(line):
        return False
    state = QuoteState()
    for char in line[:index]:
        state.feed(char)
    if line[index] in ("'", '"'):
        # either opens a literal or sits inside one
        return False
    return state.outside
