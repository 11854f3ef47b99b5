"""Recovery debt and credit from days since the last workout.

    0 days   → +25 (training again the same day)
    1 day    → +15
    4-6 days → -10
    7+ days  → -20
"""

from __future__ import annotations

from load_engine.models.fatigue import SignalContribution
from load_engine.models.policy import ScoringPolicy
from load_engine.signals.base import FatigueSignal, SignalInput


class RecoverySignal(FatigueSignal):
    """Adds fatigue after short breaks and removes it after long ones."""

    signal_id = "recovery"
    version = "1.0.0"
    order = 3

    def evaluate(self, metrics: SignalInput, policy: ScoringPolicy) -> SignalContribution:
        days = metrics.days_since_last_workout

        if days == 0:
            return self._contribution(policy.same_day_points, "Training again the same day.")
        if days == 1:
            return self._contribution(policy.next_day_points, "Only 1 day since the last workout.")
        if days >= policy.long_rest_days:
            return self._contribution(
                policy.long_rest_points, f"{days} days since the last workout; well rested."
            )
        if days >= policy.short_rest_days:
            return self._contribution(
                policy.short_rest_points, f"{days} days since the last workout; good rest."
            )
        return self._contribution(0.0, f"{days} days since the last workout.")
