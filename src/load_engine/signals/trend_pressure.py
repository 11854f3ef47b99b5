"""Trend pressure: ramping volume accumulates fatigue, tapering sheds it."""

from __future__ import annotations

from load_engine.models.enums import VolumeTrend
from load_engine.models.fatigue import SignalContribution
from load_engine.models.policy import ScoringPolicy
from load_engine.signals.base import FatigueSignal, SignalInput


class TrendPressureSignal(FatigueSignal):
    """+20 when volume is increasing and above average, -10 when decreasing."""

    signal_id = "trend_pressure"
    version = "1.0.0"
    order = 4

    def evaluate(self, metrics: SignalInput, policy: ScoringPolicy) -> SignalContribution:
        trend = metrics.volume_trend

        if trend == VolumeTrend.INCREASING and metrics.recent_volume_kg > metrics.avg_volume_kg:
            return self._contribution(
                policy.trend_increasing_points,
                f"Volume up more than {policy.trend_threshold_pct:.0f}% week over week "
                f"and above average.",
            )
        if trend == VolumeTrend.DECREASING:
            return self._contribution(
                policy.trend_decreasing_points,
                f"Volume down more than {policy.trend_threshold_pct:.0f}% week over week.",
            )
        return self._contribution(0.0, f"Volume trend {trend.name.lower()}.")
