"""Script safety classification.

``classify`` runs the pattern tables (Critical, then High, then Medium) over
a document and appends the script-wide heuristics as INFO warnings. The
result is a plain list; callers recompute it whenever the script text
changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .matcher import contains_command
from .patterns import TABLES, Tier
from .script import ScriptDocument

logger = logging.getLogger(__name__)

ERROR_HANDLING_IDIOMS = ("try {", "catch", "trap", "|| ", "&& ", "if [ $? -")

MIN_SCRIPT_LENGTH = 20
MIN_LINES_FOR_ERROR_HANDLING = 5


@dataclass(frozen=True)
class ScriptWarning:
    tier: Tier
    message: str

    @property
    def text(self) -> str:
        return f"{self.tier.marker}: {self.message}"

    def to_dict(self) -> dict:
        return {"tier": self.tier.value, "message": self.message, "text": self.text}

    def __str__(self) -> str:
        return self.text


def _require_document(document: ScriptDocument) -> None:
    if not isinstance(document, ScriptDocument):
        raise TypeError(f"expected ScriptDocument, got {type(document).__name__}")


def pattern_warnings(document: ScriptDocument) -> List[ScriptWarning]:
    """Warnings from the pattern tables only, in tier order."""
    _require_document(document)
    script = document.text.lower()

    warnings: List[ScriptWarning] = []
    for table in TABLES:
        for rule in table:
            if contains_command(script, rule.pattern):
                logger.debug("pattern %r matched (%s)", rule.pattern, rule.tier.value)
                warnings.append(ScriptWarning(rule.tier, rule.message))
    return warnings


def heuristics(document: ScriptDocument) -> List[ScriptWarning]:
    _require_document(document)
    text = document.text
    warnings: List[ScriptWarning] = []

    if not document.is_powershell and not text.startswith("#!"):
        warnings.append(ScriptWarning(Tier.INFO, "Consider adding a shebang line (#!/bin/bash) at the top"))

    if len(text.strip()) < MIN_SCRIPT_LENGTH:
        warnings.append(ScriptWarning(Tier.INFO, "Script seems very short - it might be incomplete"))

    lines = document.lines()
    has_error_handling = any(
        idiom in line.strip().lower()
        for line in lines
        for idiom in ERROR_HANDLING_IDIOMS
    )
    if not has_error_handling and len(lines) > MIN_LINES_FOR_ERROR_HANDLING:
        warnings.append(
            ScriptWarning(Tier.INFO, "Script has no error handling - consider adding try/catch or error checks")
        )

    return warnings


def classify(document: ScriptDocument, include_heuristics: bool = True) -> List[ScriptWarning]:
    warnings = pattern_warnings(document)
    if include_heuristics:
        warnings.extend(heuristics(document))
    logger.debug("classified %s script: %d warning(s)", document.kind.value, len(warnings))
    return warnings


def classify_text(text: str, kind: str | None = None) -> List[ScriptWarning]:
    """Convenience wrapper for callers holding raw text."""
    return classify(ScriptDocument(text=text, kind=kind))
