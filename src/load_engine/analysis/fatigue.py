"""Fatigue analyzer — session history to fatigue score and recommendation.

The score is the clamped sum of independent additive signals (see
``load_engine.signals``); the recommendation comes from the decision table in
``load_engine.analysis.recommendation``. Everything here is pure and
deterministic for identical inputs.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable

from load_engine.analysis.recommendation import REASON_BASELINE, build_ladder, recommend
from load_engine.math.volume import (
    classify_trend,
    days_between,
    mean_volume,
    sessions_in_window,
    sessions_since,
    total_volume,
)
from load_engine.models.enums import Recommendation, VolumeTrend
from load_engine.models.fatigue import (
    FatigueAnalysis,
    FatigueMetrics,
    FatigueStatus,
    ScoreTrace,
)
from load_engine.models.policy import DEFAULT_POLICY, ScoringPolicy
from load_engine.models.session import CompletedSession
from load_engine.registry import SignalRegistry
from load_engine.signals.base import SignalInput

logger = logging.getLogger(__name__)

# Display bands, highest first
_STATUS_BANDS: tuple[FatigueStatus, ...] = (
    FatigueStatus(label="Very Fatigued", min_score=70),
    FatigueStatus(label="Fatigued", min_score=50),
    FatigueStatus(label="Normal", min_score=30),
    FatigueStatus(label="Fresh", min_score=15),
    FatigueStatus(label="Very Fresh", min_score=0),
)


def cold_start_analysis(
    policy: ScoringPolicy = DEFAULT_POLICY,
    workouts_last_7_days: int = 0,
    degraded: bool = False,
) -> FatigueAnalysis:
    """The default analysis used when there is not enough history to score.

    Also used in place of a real analysis when history could not be read, in
    which case *degraded* is set.
    """
    return FatigueAnalysis(
        fatigue_score=policy.cold_start_score,
        recommendation=Recommendation.VOLUME,
        reason=REASON_BASELINE,
        metrics=FatigueMetrics(
            recent_volume_kg=0,
            avg_volume_kg=0,
            workouts_last_7_days=workouts_last_7_days,
            days_since_last_workout=policy.no_history_days_sentinel,
            volume_trend=VolumeTrend.STABLE,
        ),
        degraded=degraded,
    )


def analyze_fatigue(
    sessions: Iterable[CompletedSession],
    now: datetime,
    policy: ScoringPolicy = DEFAULT_POLICY,
    registry: SignalRegistry | None = None,
) -> FatigueAnalysis:
    """Score a user's recent training history.

    Args:
        sessions: Completed sessions in any order. Non-completed sessions and
            sessions outside ``[now - history_window_days, now]`` are ignored.
        now: The instant the analysis is made for.
        policy: Scoring weights and thresholds.
        registry: Signals to sum; defaults to every discovered signal.

    Returns:
        FatigueAnalysis with a score clamped to the policy bounds.
    """
    window = [
        s for s in sessions_since(list(sessions), now, policy.history_window_days)
        if s.is_completed
    ]
    window.sort(key=lambda s: s.started_at, reverse=True)
    recent = sessions_since(window, now, policy.recent_window_days)

    if len(window) < policy.min_sessions_for_baseline:
        logger.debug("Cold start: %d session(s) in window", len(window))
        return cold_start_analysis(policy, workouts_last_7_days=len(recent))

    recent_start = now - timedelta(days=policy.recent_window_days)
    previous = sessions_in_window(
        window, now - timedelta(days=policy.trend_window_days), recent_start
    )

    recent_volume = total_volume(recent)
    previous_volume = total_volume(previous)
    signal_input = SignalInput(
        recent_volume_kg=recent_volume,
        avg_volume_kg=mean_volume(window),
        previous_week_volume_kg=previous_volume,
        workouts_last_7_days=len(recent),
        days_since_last_workout=days_between(window[0].started_at, now),
        volume_trend=classify_trend(previous_volume, recent_volume, policy.trend_threshold_pct),
    )

    trace = score_signals(signal_input, policy, registry)
    rung = recommend(
        trace.clamped_score,
        signal_input.days_since_last_workout,
        build_ladder(policy),
    )
    logger.debug(
        "Fatigue score %d (raw %.1f) -> %s via %s",
        trace.clamped_score,
        trace.raw_score,
        rung.recommendation.name,
        rung.name,
    )

    return FatigueAnalysis(
        fatigue_score=trace.clamped_score,
        recommendation=rung.recommendation,
        reason=rung.reason,
        metrics=FatigueMetrics(
            recent_volume_kg=round(signal_input.recent_volume_kg),
            avg_volume_kg=round(signal_input.avg_volume_kg),
            workouts_last_7_days=signal_input.workouts_last_7_days,
            days_since_last_workout=signal_input.days_since_last_workout,
            volume_trend=signal_input.volume_trend,
        ),
        trace=trace,
    )


def score_signals(
    signal_input: SignalInput,
    policy: ScoringPolicy = DEFAULT_POLICY,
    registry: SignalRegistry | None = None,
) -> ScoreTrace:
    """Sum every signal's contribution and clamp the total.

    Intermediate points are summed unrounded; only the final score is
    rounded to an integer.
    """
    if registry is None:
        registry = SignalRegistry.default()
    contributions = tuple(
        signal.evaluate(signal_input, policy) for signal in registry.ordered()
    )
    raw = sum(c.points for c in contributions)
    clamped = round(max(policy.min_score, min(policy.max_score, raw)))
    return ScoreTrace(contributions=contributions, raw_score=raw, clamped_score=int(clamped))


def fatigue_status(score: int) -> FatigueStatus:
    """Map a fatigue score to its display band."""
    for band in _STATUS_BANDS:
        if score >= band.min_score:
            return band
    return _STATUS_BANDS[-1]
