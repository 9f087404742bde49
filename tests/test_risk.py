"""Tests for risk aggregation and confirmation policy."""

import pytest

from please.classifier import ScriptWarning
from please.patterns import Tier
from please.risk import (
    DEFAULT_CONFIRM_PHRASE,
    RiskLevel,
    aggregate,
    aggregate_texts,
    confirmation_for,
)

CRITICAL = ScriptWarning(Tier.CRITICAL, "Attempts to delete entire filesystem")
HIGH = ScriptWarning(Tier.HIGH, "Will shutdown the system")
MEDIUM = ScriptWarning(Tier.MEDIUM, "Removes all cron jobs")
INFO = ScriptWarning(Tier.INFO, "Script seems very short - it might be incomplete")


class TestRiskLevel:
    """Tests for RiskLevel ordering."""

    def test_values(self):
        assert RiskLevel.GREEN.value == "green"
        assert RiskLevel.YELLOW.value == "yellow"
        assert RiskLevel.RED.value == "red"

    def test_ordering(self):
        assert RiskLevel.GREEN < RiskLevel.YELLOW < RiskLevel.RED
        assert max([RiskLevel.YELLOW, RiskLevel.RED, RiskLevel.GREEN]) == RiskLevel.RED


class TestAggregate:
    """Tests for aggregate."""

    def test_empty(self):
        assert aggregate([]) == RiskLevel.GREEN

    def test_none(self):
        assert aggregate(None) == RiskLevel.GREEN

    def test_info_only(self):
        assert aggregate([INFO, INFO]) == RiskLevel.GREEN

    def test_medium(self):
        assert aggregate([MEDIUM, INFO]) == RiskLevel.YELLOW

    def test_high_is_red(self):
        assert aggregate([HIGH]) == RiskLevel.RED

    def test_critical_is_red(self):
        assert aggregate([INFO, MEDIUM, CRITICAL]) == RiskLevel.RED

    def test_order_independent(self):
        assert aggregate([MEDIUM, HIGH, INFO]) == aggregate([INFO, HIGH, MEDIUM])

    @pytest.mark.parametrize("base", [[INFO], [MEDIUM], [HIGH], [MEDIUM, INFO], [CRITICAL]])
    @pytest.mark.parametrize("extra", [CRITICAL, HIGH])
    def test_monotonic(self, base, extra):
        """Adding a red warning never lowers the level."""
        before = aggregate(base)
        after = aggregate(base + [extra])
        assert after >= before
        assert after == RiskLevel.RED


class TestAggregateTexts:
    """Tests for aggregate_texts."""

    def test_same_table_as_aggregate(self):
        for warnings in ([], [INFO], [MEDIUM, INFO], [HIGH], [CRITICAL, MEDIUM]):
            assert aggregate_texts([w.text for w in warnings]) == aggregate(warnings)

    def test_none(self):
        assert aggregate_texts(None) == RiskLevel.GREEN

    def test_marker_must_be_prefix(self):
        assert aggregate_texts(["note: ⛔ CRITICAL looks scary"]) == RiskLevel.GREEN


class TestConfirmation:
    """Tests for confirmation_for."""

    def test_red_requires_phrase(self):
        c = confirmation_for(RiskLevel.RED)
        assert c.required is True
        assert c.phrase == DEFAULT_CONFIRM_PHRASE
        assert c.accepts("EXECUTE") is True
        assert c.accepts("  EXECUTE\n") is True
        assert c.accepts("execute") is False
        assert c.accepts("yes") is False
        assert c.accepts(None) is False

    def test_red_custom_phrase(self):
        c = confirmation_for(RiskLevel.RED, phrase="I UNDERSTAND")
        assert "I UNDERSTAND" in c.prompt
        assert c.accepts("I UNDERSTAND") is True
        assert c.accepts("EXECUTE") is False

    def test_yellow_is_yes_no(self):
        c = confirmation_for(RiskLevel.YELLOW)
        assert c.required is True
        assert c.phrase is None
        assert c.accepts("y") is True
        assert c.accepts("Yes") is True
        assert c.accepts("n") is False
        assert c.accepts("") is False

    def test_green_needs_no_prompt(self):
        c = confirmation_for(RiskLevel.GREEN)
        assert c.required is False
        assert c.accepts(None) is True
