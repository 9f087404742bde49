"""Severity tiers and the pattern tables the classifier checks.

Tables are tuples of frozen rules built at import time. Order inside a table
is the order warnings are reported in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Tier(str, Enum):
    """Severity of a warning, highest first."""
    CRITICAL = "critical"   # destroys filesystems or disks
    HIGH = "high"           # alters system state
    MEDIUM = "medium"       # consequential, verify the target
    INFO = "info"           # style and completeness hints

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def marker(self) -> str:
        return _MARKERS[self]


_RANKS: Dict[Tier, int] = {
    Tier.CRITICAL: 3,
    Tier.HIGH: 2,
    Tier.MEDIUM: 1,
    Tier.INFO: 0,
}

_MARKERS: Dict[Tier, str] = {
    Tier.CRITICAL: "⛔ CRITICAL",
    Tier.HIGH: "🔴 WARNING",
    Tier.MEDIUM: "🟡 CAUTION",
    Tier.INFO: "🟢 INFO",
}


@dataclass(frozen=True)
class PatternRule:
    pattern: str
    tier: Tier
    message: str


def _table(tier: Tier, *rows: Tuple[str, str]) -> Tuple[PatternRule, ...]:
    return tuple(PatternRule(pattern=p.lower(), tier=tier, message=m) for p, m in rows)


CRITICAL_PATTERNS = _table(
    Tier.CRITICAL,
    ("rm -rf /", "Attempts to delete entire filesystem"),
    ("rm -rf /*", "Attempts to delete entire filesystem"),
    ("del /s /q c:\\*", "Attempts to delete entire C: drive"),
    ("format c:", "Attempts to format C: drive"),
    ("format /dev/", "Attempts to format system devices"),
    ("dd if=/dev/zero", "Attempts to overwrite data with zeros"),
    ("mkfs", "Attempts to create new filesystem (destroys data)"),
)

HIGH_PATTERNS = _table(
    Tier.HIGH,
    ("shutdown", "Will shutdown the system"),
    ("reboot", "Will restart the system"),
    ("halt", "Will halt the system"),
    ("init 0", "Will shutdown the system"),
    ("init 6", "Will restart the system"),
    ("sudo su", "Escalates to root privileges"),
    ("chmod 777", "Makes files world-writable (security risk)"),
    ("chown root", "Changes ownership to root"),
)

MEDIUM_PATTERNS = _table(
    Tier.MEDIUM,
    ("rm -rf", "Recursive deletion - verify target path carefully"),
    ("del /s /q", "Recursive deletion - verify target path carefully"),
    ("crontab -r", "Removes all cron jobs"),
    ("systemctl stop", "Stops system services"),
    ("service stop", "Stops system services"),
)

# Evaluation order: every table is exhausted before the next one starts.
TABLES: Tuple[Tuple[PatternRule, ...], ...] = (
    CRITICAL_PATTERNS,
    HIGH_PATTERNS,
    MEDIUM_PATTERNS,
)
