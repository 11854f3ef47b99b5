"""Scoring policy — every tunable weight and threshold of the fatigue model.

The shape of the scoring algorithm lives in ``load_engine.signals`` and
``load_engine.analysis``; the numbers live here so they can be iterated
without touching that code. Pass a modified copy via ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringPolicy:
    """Heuristic weights for the additive fatigue score and recommendation ladder.

    Attributes:
        history_window_days: Trailing window of sessions considered at all.
        recent_window_days: "This week" window for volume and frequency.
        trend_window_days: End of the previous-week window used for the trend.
        min_sessions_for_baseline: Below this, the cold-start default applies.
        cold_start_score: Fatigue score reported during cold start.
        no_history_days_sentinel: days_since_last_workout with no usable history.
        volume_high_ratio / volume_high_points: recent > ratio x average.
        volume_moderate_ratio / volume_moderate_points: second overload tier.
        frequency_tiers: (min workouts in recent window, points), checked in order.
        same_day_points / next_day_points: recovery debt for 0 / 1 rest days.
        long_rest_days / long_rest_points: recovery credit for a long break.
        short_rest_days / short_rest_points: recovery credit for a short break.
        trend_threshold_pct: Week-over-week change that counts as a trend.
        trend_increasing_points: Applied when increasing and above average.
        trend_decreasing_points: Applied when decreasing.
        min_score / max_score: Clamp bounds.
        rest_high_score, rest_moderate_score, well_recovered_score,
        well_recovered_days, fresh_score: recommendation ladder thresholds.
    """

    # Windows
    history_window_days: int = 30
    recent_window_days: int = 7
    trend_window_days: int = 14
    min_sessions_for_baseline: int = 2
    cold_start_score: int = 30
    no_history_days_sentinel: int = 999

    # Signal 1: volume overload
    volume_high_ratio: float = 1.5
    volume_high_points: float = 25.0
    volume_moderate_ratio: float = 1.2
    volume_moderate_points: float = 15.0

    # Signal 2: training frequency
    frequency_tiers: tuple[tuple[int, float], ...] = ((6, 25.0), (5, 15.0), (4, 10.0))

    # Signal 3: recovery debt / credit
    same_day_points: float = 25.0
    next_day_points: float = 15.0
    long_rest_days: int = 7
    long_rest_points: float = -20.0
    short_rest_days: int = 4
    short_rest_points: float = -10.0

    # Signal 4: trend pressure
    trend_threshold_pct: float = 20.0
    trend_increasing_points: float = 20.0
    trend_decreasing_points: float = -10.0

    # Clamp
    min_score: int = 0
    max_score: int = 100

    # Recommendation ladder
    rest_high_score: int = 70
    rest_moderate_score: int = 50
    well_recovered_score: int = 20
    well_recovered_days: int = 3
    fresh_score: int = 30

    def __post_init__(self) -> None:
        if not 0 <= self.min_score <= self.max_score <= 100:
            raise ValueError(
                f"score bounds must satisfy 0 <= min <= max <= 100, got {self.min_score}/{self.max_score}"
            )
        if not self.min_score <= self.cold_start_score <= self.max_score:
            raise ValueError(
                f"cold_start_score must lie within [{self.min_score}, {self.max_score}], "
                f"got {self.cold_start_score}"
            )
        if not self.recent_window_days < self.trend_window_days <= self.history_window_days:
            raise ValueError(
                "windows must satisfy recent < trend <= history, got "
                f"{self.recent_window_days}/{self.trend_window_days}/{self.history_window_days}"
            )
        if self.volume_moderate_ratio > self.volume_high_ratio:
            raise ValueError("volume_moderate_ratio must not exceed volume_high_ratio")


DEFAULT_POLICY = ScoringPolicy()
