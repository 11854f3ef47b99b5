"""Display names, reasons and duration estimates for suggested workouts."""

from __future__ import annotations

from load_engine.models.enums import (
    BASE_MINUTES_PER_EXERCISE,
    DURATION_MULTIPLIER,
    NAME_LABELS,
    Recommendation,
)


def adapted_name(base_name: str, recommendation: Recommendation) -> str:
    """Prefix *base_name* with the recommendation's label."""
    return f"{NAME_LABELS[recommendation]} {base_name}"


def estimate_duration(exercise_count: int, recommendation: Recommendation) -> int:
    """Estimated minutes: 8 per exercise, scaled for rest-period length."""
    minutes = exercise_count * BASE_MINUTES_PER_EXERCISE * DURATION_MULTIPLIER[recommendation]
    return round(minutes)


def template_reason(analysis_reason: str, template_name: str) -> str:
    return f"{analysis_reason} • Based on your recent {template_name}"


def preset_reason(recommendation: Recommendation) -> str:
    return f"Adaptive {recommendation.name.lower()} workout based on fatigue analysis"
