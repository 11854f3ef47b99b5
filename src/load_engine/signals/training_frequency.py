"""Training frequency: number of sessions in the trailing 7 days."""

from __future__ import annotations

from load_engine.models.fatigue import SignalContribution
from load_engine.models.policy import ScoringPolicy
from load_engine.signals.base import FatigueSignal, SignalInput


class TrainingFrequencySignal(FatigueSignal):
    """Adds fatigue for 4, 5, or 6+ sessions in a week."""

    signal_id = "training_frequency"
    version = "1.0.0"
    order = 2

    def evaluate(self, metrics: SignalInput, policy: ScoringPolicy) -> SignalContribution:
        count = metrics.workouts_last_7_days
        # Tiers are ordered from the highest minimum down
        for min_workouts, points in sorted(policy.frequency_tiers, reverse=True):
            if count >= min_workouts:
                return self._contribution(
                    points, f"{count} workouts in the last 7 days (>= {min_workouts})."
                )
        return self._contribution(0.0, f"{count} workouts in the last 7 days.")
