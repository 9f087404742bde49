from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .risk import DEFAULT_CONFIRM_PHRASE

APP = "please"

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def config_dir() -> Path:
    """
    Cross-platform config directory:
      - Windows: %APPDATA%\\please
      - macOS/Linux: $XDG_CONFIG_HOME/please or ~/.config/please
    """
    if os.name == "nt":
        base = os.environ.get("APPDATA") or str(Path.home())
        return Path(base) / APP
    return Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))) / APP


def config_path() -> Path:
    return config_dir() / "config.json"


def _as_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return default


def _as_str(value, default: str) -> str:
    if value is None:
        return default
    return str(value)


@dataclass
class Settings:
    script_kind: str = "auto"          # auto, bash, powershell
    log_level: str = "warning"
    confirm_phrase: str = DEFAULT_CONFIRM_PHRASE
    heuristics: bool = True

    @staticmethod
    def load(path: Optional[Path] = None) -> "Settings":
        path = path or config_path()

        data: dict = {}

        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning("ignoring unreadable config %s: %s", path, e)
                data = {}
            if not isinstance(data, dict):
                logger.warning("ignoring config %s: expected a JSON object", path)
                data = {}

        s = Settings(
            script_kind=_as_str(data.get("script_kind"), Settings.script_kind),
            log_level=_as_str(data.get("log_level"), Settings.log_level),
            confirm_phrase=_as_str(data.get("confirm_phrase"), Settings.confirm_phrase),
            heuristics=_as_bool(data.get("heuristics", Settings.heuristics), Settings.heuristics),
        )

        # Environment overrides (highest priority)
        s.script_kind = os.environ.get("PLEASE_SCRIPT_KIND", s.script_kind)
        s.log_level = os.environ.get("PLEASE_LOG_LEVEL", s.log_level)
        s.confirm_phrase = os.environ.get("PLEASE_CONFIRM_PHRASE", s.confirm_phrase)
        if "PLEASE_HEURISTICS" in os.environ:
            s.heuristics = _as_bool(os.environ["PLEASE_HEURISTICS"], s.heuristics)

        # red confirmation needs a non-empty phrase
        if not s.confirm_phrase.strip():
            s.confirm_phrase = DEFAULT_CONFIRM_PHRASE

        return s

    def save(self, path: Optional[Path] = None) -> Path:
        path = path or config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        payload = {
            "script_kind": self.script_kind,
            "log_level": self.log_level,
            "confirm_phrase": self.confirm_phrase,
            "heuristics": self.heuristics,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path
