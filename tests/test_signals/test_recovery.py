"""Tests for RecoverySignal — recovery debt and credit by rest days."""

from __future__ import annotations

import pytest

from load_engine.models.policy import DEFAULT_POLICY
from load_engine.signals.recovery import RecoverySignal


class TestRecoverySignal:
    def setup_method(self) -> None:
        self.signal = RecoverySignal()

    @pytest.mark.parametrize(
        "days,expected",
        [
            (0, 25.0),
            (1, 15.0),
            (2, 0.0),
            (3, 0.0),
            (4, -10.0),
            (6, -10.0),
            (7, -20.0),
            (30, -20.0),
            (999, -20.0),
        ],
    )
    def test_points_by_rest_days(self, signal_input, days, expected) -> None:
        result = self.signal.evaluate(signal_input(days_since_last_workout=days), DEFAULT_POLICY)
        assert result.points == expected

    def test_explanation_mentions_days(self, signal_input) -> None:
        result = self.signal.evaluate(signal_input(days_since_last_workout=8), DEFAULT_POLICY)
        assert "8 days" in result.explanation
