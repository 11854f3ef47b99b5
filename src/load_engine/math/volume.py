"""Training volume calculations: windowed totals, averages, recency, trend.

All functions are pure. Volumes are in kilograms of load-volume
(weight x reps summed across a session); unknown volumes count as zero.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence

import numpy as np

from load_engine.models.enums import VolumeTrend
from load_engine.models.session import CompletedSession

_SECONDS_PER_DAY = 24 * 60 * 60


def sessions_in_window(
    sessions: Sequence[CompletedSession],
    start: datetime,
    end: datetime,
    include_end: bool = False,
) -> list[CompletedSession]:
    """Return sessions with ``start <= started_at < end`` (``<= end`` if *include_end*)."""
    if include_end:
        return [s for s in sessions if start <= s.started_at <= end]
    return [s for s in sessions if start <= s.started_at < end]


def sessions_since(
    sessions: Sequence[CompletedSession], now: datetime, days: int
) -> list[CompletedSession]:
    """Sessions in the trailing *days* up to and including *now*."""
    return sessions_in_window(sessions, now - timedelta(days=days), now, include_end=True)


def _volumes(sessions: Sequence[CompletedSession]) -> np.ndarray:
    return np.array([s.volume_kg for s in sessions], dtype=np.float64)


def total_volume(sessions: Sequence[CompletedSession]) -> float:
    """Sum of session volumes. 0.0 for no sessions."""
    if not sessions:
        return 0.0
    return float(np.sum(_volumes(sessions)))


def mean_volume(sessions: Sequence[CompletedSession]) -> float:
    """Mean session volume. 0.0 for no sessions."""
    if not sessions:
        return 0.0
    return float(np.mean(_volumes(sessions)))


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days elapsed from *earlier* to *later* (floored, never negative)."""
    elapsed = (later - earlier).total_seconds() / _SECONDS_PER_DAY
    return max(0, math.floor(elapsed))


def percent_change(previous: float, current: float) -> float | None:
    """Percentage change from *previous* to *current*; None when previous is 0."""
    if previous == 0:
        return None
    return (current - previous) / previous * 100.0


def classify_trend(previous: float, current: float, threshold_pct: float) -> VolumeTrend:
    """Classify week-over-week volume change.

    A zero previous volume is STABLE rather than a division error.

    Args:
        previous: Volume of the earlier window.
        current: Volume of the most recent window.
        threshold_pct: Change (in percent, exclusive) that counts as a trend.

    Returns:
        INCREASING above +threshold, DECREASING below -threshold, else STABLE.
    """
    change = percent_change(previous, current)
    if change is None:
        return VolumeTrend.STABLE
    if change > threshold_pct:
        return VolumeTrend.INCREASING
    if change < -threshold_pct:
        return VolumeTrend.DECREASING
    return VolumeTrend.STABLE
