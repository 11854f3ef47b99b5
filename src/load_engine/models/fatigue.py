"""Fatigue analysis output — score, recommendation, and the metrics behind them."""

from __future__ import annotations

from dataclasses import dataclass, field

from load_engine.models.enums import Recommendation, VolumeTrend


@dataclass(frozen=True)
class FatigueMetrics:
    """Intermediate metrics derived from the session history.

    Volumes are rounded to whole kilograms for display; the score is
    computed from the unrounded values.
    """

    recent_volume_kg: int
    avg_volume_kg: int
    workouts_last_7_days: int
    days_since_last_workout: int
    volume_trend: VolumeTrend = VolumeTrend.STABLE


@dataclass(frozen=True)
class SignalContribution:
    """Points one fatigue signal added to (or removed from) the score."""

    signal_id: str
    points: float
    explanation: str = ""


@dataclass(frozen=True)
class ScoreTrace:
    """Audit trail of how the fatigue score was assembled."""

    contributions: tuple[SignalContribution, ...] = field(default_factory=tuple)
    raw_score: float = 0.0
    clamped_score: int = 0

    def points_for(self, signal_id: str) -> float:
        """Points contributed by *signal_id*, 0.0 if it is not in the trace."""
        for contribution in self.contributions:
            if contribution.signal_id == signal_id:
                return contribution.points
        return 0.0


@dataclass(frozen=True)
class FatigueAnalysis:
    """Result of analyze_fatigue().

    ``degraded`` is True when history could not be read and the cold-start
    default was substituted; callers should tell the user that
    personalization is temporarily limited.
    """

    fatigue_score: int
    recommendation: Recommendation
    reason: str
    metrics: FatigueMetrics
    trace: ScoreTrace | None = None
    degraded: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.fatigue_score <= 100:
            raise ValueError(f"fatigue_score must be in [0, 100], got {self.fatigue_score}")


@dataclass(frozen=True)
class FatigueStatus:
    """Display band for a fatigue score."""

    label: str
    min_score: int
