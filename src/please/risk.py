"""Risk verdicts and the confirmation each verdict requires."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .classifier import ScriptWarning
from .patterns import Tier

YES = {"y", "yes"}

DEFAULT_CONFIRM_PHRASE = "EXECUTE"


class RiskLevel(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self]

    def __lt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


_LEVEL_RANKS = {RiskLevel.GREEN: 0, RiskLevel.YELLOW: 1, RiskLevel.RED: 2}

_RED_TIERS = (Tier.CRITICAL, Tier.HIGH)


def aggregate(warnings: Optional[Iterable[ScriptWarning]]) -> RiskLevel:
    """Reduce warnings to a single verdict.

    Critical and high warnings make the script red, a medium one makes it
    yellow. Info warnings never raise the level.
    """
    if not warnings:
        return RiskLevel.GREEN

    has_yellow = False
    for w in warnings:
        if w.tier in _RED_TIERS:
            return RiskLevel.RED
        if w.tier == Tier.MEDIUM:
            has_yellow = True
    return RiskLevel.YELLOW if has_yellow else RiskLevel.GREEN


def aggregate_texts(texts: Optional[Iterable[str]]) -> RiskLevel:
    """Same decision table as ``aggregate`` for already rendered warnings."""
    if not texts:
        return RiskLevel.GREEN

    red_markers = tuple(t.marker.split()[0] for t in _RED_TIERS)
    yellow_marker = Tier.MEDIUM.marker.split()[0]

    has_yellow = False
    for text in texts:
        if text.startswith(red_markers):
            return RiskLevel.RED
        if text.startswith(yellow_marker):
            has_yellow = True
    return RiskLevel.YELLOW if has_yellow else RiskLevel.GREEN


@dataclass(frozen=True)
class Confirmation:
    """What the UI has to ask before running a script of a given level."""
    level: RiskLevel
    prompt: str
    phrase: Optional[str] = None    # exact text to type (red)
    required: bool = True

    def accepts(self, answer: Optional[str]) -> bool:
        if not self.required:
            return True
        response = (answer or "").strip()
        if self.phrase is not None:
            return response == self.phrase
        return response.lower() in YES


def confirmation_for(level: RiskLevel, phrase: str = DEFAULT_CONFIRM_PHRASE) -> Confirmation:
    if level == RiskLevel.RED:
        return Confirmation(
            level=level,
            prompt=f"Type '{phrase}' to proceed or anything else to cancel:",
            phrase=phrase,
        )
    if level == RiskLevel.YELLOW:
        return Confirmation(level=level, prompt="Continue? [y/N]")
    return Confirmation(level=level, prompt="No confirmation needed.", required=False)
