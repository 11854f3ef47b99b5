"""Volume overload: this week's volume compared with the 30-day session average.

Thresholds (ScoringPolicy):
    recent > 1.5 x average → +25
    recent > 1.2 x average → +15
    otherwise              →   0
"""

from __future__ import annotations

from load_engine.models.fatigue import SignalContribution
from load_engine.models.policy import ScoringPolicy
from load_engine.signals.base import FatigueSignal, SignalInput


class VolumeOverloadSignal(FatigueSignal):
    """Adds fatigue when recent volume runs well above the user's average."""

    signal_id = "volume_overload"
    version = "1.0.0"
    order = 1

    def evaluate(self, metrics: SignalInput, policy: ScoringPolicy) -> SignalContribution:
        recent = metrics.recent_volume_kg
        average = metrics.avg_volume_kg

        if recent > average * policy.volume_high_ratio:
            return self._contribution(
                policy.volume_high_points,
                f"Recent volume {recent:.0f} kg exceeds "
                f"{policy.volume_high_ratio}x average ({average:.0f} kg).",
            )
        if recent > average * policy.volume_moderate_ratio:
            return self._contribution(
                policy.volume_moderate_points,
                f"Recent volume {recent:.0f} kg exceeds "
                f"{policy.volume_moderate_ratio}x average ({average:.0f} kg).",
            )
        return self._contribution(0.0, "Recent volume within normal range.")
