"""Fixtures for fatigue signal tests."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

import pytest

from load_engine.models.enums import VolumeTrend
from load_engine.signals.base import SignalInput

_NEUTRAL = SignalInput(
    recent_volume_kg=5000.0,
    avg_volume_kg=5000.0,
    previous_week_volume_kg=5000.0,
    workouts_last_7_days=3,
    days_since_last_workout=2,
    volume_trend=VolumeTrend.STABLE,
)


@pytest.fixture
def signal_input() -> Callable[..., SignalInput]:
    """Factory: a neutral SignalInput (every signal scores 0) with overrides."""

    def _make(**overrides) -> SignalInput:
        return replace(_NEUTRAL, **overrides)

    return _make
