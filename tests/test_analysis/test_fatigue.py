"""Tests for the fatigue analyzer — scoring, cold start and recommendation."""

from __future__ import annotations

from dataclasses import replace
from datetime import timedelta

import numpy as np
import pytest

from load_engine.analysis.fatigue import (
    analyze_fatigue,
    cold_start_analysis,
    fatigue_status,
    score_signals,
)
from load_engine.analysis.recommendation import (
    REASON_BASELINE,
    REASON_FRESH,
    REASON_HIGH_FATIGUE,
    REASON_WELL_RECOVERED,
    recommend,
)
from load_engine.models.enums import Recommendation, VolumeTrend
from load_engine.models.policy import DEFAULT_POLICY
from load_engine.models.session import CompletedSession
from load_engine.registry import SignalRegistry
from load_engine.signals.base import SignalInput


class TestColdStart:
    def test_no_history(self, now) -> None:
        result = analyze_fatigue([], now)
        assert result.fatigue_score == 30
        assert result.recommendation == Recommendation.VOLUME
        assert result.reason == REASON_BASELINE
        assert result.metrics.days_since_last_workout == 999
        assert result.metrics.recent_volume_kg == 0
        assert result.trace is None
        assert result.degraded is False

    def test_single_recent_session(self, now, make_session) -> None:
        result = analyze_fatigue([make_session(days_ago=1)], now)
        assert result.fatigue_score == 30
        assert result.recommendation == Recommendation.VOLUME
        assert result.metrics.workouts_last_7_days == 1
        assert result.metrics.days_since_last_workout == 999

    def test_sessions_outside_window_do_not_count(self, now, make_session) -> None:
        result = analyze_fatigue([make_session(days_ago=31), make_session(days_ago=1)], now)
        assert result.reason == REASON_BASELINE

    def test_non_completed_sessions_ignored(self, now, make_session) -> None:
        sessions = [make_session(days_ago=1), make_session(days_ago=2, status="in_progress")]
        assert analyze_fatigue(sessions, now).reason == REASON_BASELINE

    def test_degraded_default(self) -> None:
        result = cold_start_analysis(degraded=True)
        assert result.degraded is True
        assert result.metrics.workouts_last_7_days == 0


class TestScenarios:
    def test_overloaded_history_needs_rest(self, now, overloaded_history) -> None:
        result = analyze_fatigue(overloaded_history, now)
        assert result.metrics.recent_volume_kg == 7000
        assert result.metrics.avg_volume_kg == 3500
        assert result.metrics.workouts_last_7_days == 7
        assert result.metrics.days_since_last_workout == 0
        assert result.metrics.volume_trend == VolumeTrend.STABLE
        assert result.fatigue_score == 75
        assert result.recommendation == Recommendation.REST
        assert result.reason == REASON_HIGH_FATIGUE

    def test_overloaded_trace(self, now, overloaded_history) -> None:
        trace = analyze_fatigue(overloaded_history, now).trace
        assert trace is not None
        assert trace.points_for("volume_overload") == 25.0
        assert trace.points_for("training_frequency") == 25.0
        assert trace.points_for("recovery") == 25.0
        assert trace.points_for("trend_pressure") == 0.0
        assert trace.raw_score == pytest.approx(75.0)

    def test_rested_history_clamps_to_zero(self, now, rested_history) -> None:
        result = analyze_fatigue(rested_history, now)
        assert result.metrics.recent_volume_kg == 0
        assert result.metrics.volume_trend == VolumeTrend.DECREASING
        assert result.metrics.days_since_last_workout == 8
        assert result.trace.raw_score == pytest.approx(-30.0)
        assert result.fatigue_score == 0
        assert result.recommendation == Recommendation.INTENSITY
        assert result.reason == REASON_WELL_RECOVERED

    def test_steady_history(self, now, steady_history) -> None:
        result = analyze_fatigue(steady_history, now)
        assert result.fatigue_score == 25
        assert result.metrics.workouts_last_7_days == 3
        assert result.recommendation == Recommendation.INTENSITY
        assert result.reason == REASON_FRESH

    def test_input_order_does_not_matter(self, now, steady_history) -> None:
        forward = analyze_fatigue(steady_history, now)
        backward = analyze_fatigue(list(reversed(steady_history)), now)
        assert forward == backward

    def test_future_sessions_ignored(self, now, make_session, rested_history) -> None:
        with_future = rested_history + [make_session(days_ago=-2, volume=50_000.0)]
        assert analyze_fatigue(with_future, now) == analyze_fatigue(rested_history, now)

    def test_increasing_trend_adds_pressure(self, now, make_session) -> None:
        # previous week 2000, this week 6000 across two sessions 2-3 days ago
        sessions = [
            make_session(days_ago=2, volume=3000.0),
            make_session(days_ago=3, volume=3000.0),
            make_session(days_ago=10, volume=2000.0),
        ]
        result = analyze_fatigue(sessions, now)
        assert result.metrics.volume_trend == VolumeTrend.INCREASING
        assert result.trace.points_for("trend_pressure") == 20.0


class TestFrequencyMonotonicity:
    def _history(self, make_session, count: int) -> list[CompletedSession]:
        # Zero volume and a fixed last session isolate the frequency signal
        offsets = [2.0, 2.5, 3.0, 4.0, 5.0, 6.0][:count]
        return [make_session(days_ago=d, volume=None) for d in offsets]

    def test_more_workouts_never_lower_the_score(self, now, make_session) -> None:
        scores = [
            analyze_fatigue(self._history(make_session, n), now).fatigue_score
            for n in range(3, 7)
        ]
        assert scores == [0, 10, 15, 25]
        assert scores == sorted(scores)


class TestScoreProperties:
    def _random_history(self, rng: np.random.RandomState, now) -> list[CompletedSession]:
        count = rng.randint(0, 25)
        return [
            CompletedSession(
                id=f"r{i}",
                started_at=now - timedelta(hours=float(rng.uniform(0, 35 * 24))),
                total_volume_kg=float(rng.choice([0.0, rng.uniform(0, 20_000)])),
            )
            for i in range(count)
        ]

    def test_score_always_in_range_and_consistent_with_ladder(self, now) -> None:
        rng = np.random.RandomState(42)
        for _ in range(300):
            result = analyze_fatigue(self._random_history(rng, now), now)
            assert 0 <= result.fatigue_score <= 100
            if result.trace is None:
                continue
            rung = recommend(result.fatigue_score, result.metrics.days_since_last_workout)
            assert rung.recommendation == result.recommendation
            assert rung.reason == result.reason
            if result.fatigue_score >= 70:
                assert result.recommendation == Recommendation.REST

    def test_deterministic(self, now) -> None:
        history = self._random_history(np.random.RandomState(7), now)
        assert analyze_fatigue(history, now) == analyze_fatigue(history, now)


class TestScoreSignals:
    def _input(self, **overrides) -> SignalInput:
        base = SignalInput(
            recent_volume_kg=50_000.0,
            avg_volume_kg=1000.0,
            previous_week_volume_kg=1000.0,
            workouts_last_7_days=10,
            days_since_last_workout=0,
            volume_trend=VolumeTrend.INCREASING,
        )
        return replace(base, **overrides)

    def test_clamps_to_max(self) -> None:
        trace = score_signals(self._input())
        assert trace.raw_score == pytest.approx(95.0)
        assert trace.clamped_score == 95
        capped = score_signals(self._input(), replace(DEFAULT_POLICY, max_score=80))
        assert capped.clamped_score == 80

    def test_empty_registry_scores_zero(self) -> None:
        trace = score_signals(self._input(), registry=SignalRegistry())
        assert trace.contributions == ()
        assert trace.clamped_score == 0

    def test_contributions_in_signal_order(self) -> None:
        ids = [c.signal_id for c in score_signals(self._input()).contributions]
        assert ids == ["volume_overload", "training_frequency", "recovery", "trend_pressure"]


class TestFatigueStatus:
    @pytest.mark.parametrize(
        "score,label",
        [
            (100, "Very Fatigued"),
            (70, "Very Fatigued"),
            (69, "Fatigued"),
            (50, "Fatigued"),
            (30, "Normal"),
            (29, "Fresh"),
            (15, "Fresh"),
            (14, "Very Fresh"),
            (0, "Very Fresh"),
        ],
    )
    def test_bands(self, score, label) -> None:
        assert fatigue_status(score).label == label
