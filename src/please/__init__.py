"""please - safety review for AI-generated shell scripts."""

from .classifier import ScriptWarning, classify, heuristics, pattern_warnings
from .patterns import PatternRule, Tier
from .risk import RiskLevel, aggregate
from .script import ScriptDocument, ScriptKind

__version__ = "0.1.0"

__all__ = [
    "PatternRule",
    "RiskLevel",
    "ScriptDocument",
    "ScriptKind",
    "ScriptWarning",
    "Tier",
    "aggregate",
    "classify",
    "heuristics",
    "pattern_warnings",
]
