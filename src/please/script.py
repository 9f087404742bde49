"""Script documents handed to the safety classifier.

A document is the generated script text plus the kind of shell it targets.
The kind only matters for the shebang heuristic, so unknown names fall back
to bash, which is the stricter of the two branches.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import List, Optional


class ScriptKind(str, Enum):
    """Shell families a generated script can target."""
    BASH = "bash"
    POWERSHELL = "powershell"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ScriptKind":
        if isinstance(value, ScriptKind):
            return value
        name = (value or "").strip().lower()
        return _KIND_ALIASES.get(name, cls.BASH)

    @classmethod
    def default(cls) -> "ScriptKind":
        if os.name == "nt":
            return cls.POWERSHELL
        return cls.BASH

    @classmethod
    def detect(cls, text: str, filename: Optional[str] = None) -> "ScriptKind":
        """Guess the kind from a file suffix, then a shebang, then the host OS."""
        if filename:
            suffix = PurePath(filename).suffix.lower()
            if suffix in (".ps1", ".psm1"):
                return cls.POWERSHELL
            if suffix in (".sh", ".bash"):
                return cls.BASH

        first = text.lstrip().split("\n", 1)[0].lower() if text else ""
        if first.startswith("#!"):
            if "pwsh" in first or "powershell" in first:
                return cls.POWERSHELL
            return cls.BASH

        return cls.default()


_KIND_ALIASES = {
    "bash": ScriptKind.BASH,
    "sh": ScriptKind.BASH,
    "zsh": ScriptKind.BASH,
    "shell": ScriptKind.BASH,
    "posix": ScriptKind.BASH,
    "powershell": ScriptKind.POWERSHELL,
    "pwsh": ScriptKind.POWERSHELL,
    "ps1": ScriptKind.POWERSHELL,
    "ps": ScriptKind.POWERSHELL,
}

KIND_NAMES = tuple(_KIND_ALIASES)


@dataclass(frozen=True)
class ScriptDocument:
    """A generated script and the shell it is meant for."""
    text: str
    kind: ScriptKind = ScriptKind.BASH

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"script text must be str, got {type(self.text).__name__}")
        if not isinstance(self.kind, ScriptKind):
            object.__setattr__(self, "kind", ScriptKind.parse(self.kind))

    @property
    def is_powershell(self) -> bool:
        return self.kind == ScriptKind.POWERSHELL

    def lines(self) -> List[str]:
        return self.text.split("\n")
