"""Preset synthesizer — a generic workout for users without a usable template.

Presets are deliberately generic: uniform sets and reps, no weights, and
MEDIUM confidence so callers can tell them apart from template adaptations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from load_engine.models.enums import (
    PRESET_BASE_NAME,
    PRESET_CATEGORY,
    PRESET_EXERCISE_LIMIT,
    PRESET_MUSCLE_GROUPS,
    PRESET_REPS,
    PRESET_SETS,
    Confidence,
    Recommendation,
)
from load_engine.models.session import ExerciseRef
from load_engine.models.workout import ExercisePrescription, LauncherPrediction
from load_engine.workout_builder.naming import adapted_name, estimate_duration, preset_reason


@dataclass(frozen=True)
class CatalogQuery:
    """Exercise catalog filter for a preset."""

    muscle_groups: tuple[str, ...]
    category: str
    limit: int


def preset_query(recommendation: Recommendation) -> CatalogQuery:
    """Catalog filter: core/back for REST (max 3), chest/back/legs otherwise (max 5)."""
    return CatalogQuery(
        muscle_groups=PRESET_MUSCLE_GROUPS[recommendation],
        category=PRESET_CATEGORY,
        limit=PRESET_EXERCISE_LIMIT[recommendation],
    )


def synthesize_preset(
    recommendation: Recommendation, exercises: Sequence[ExerciseRef]
) -> LauncherPrediction:
    """Build a preset workout from catalog *exercises*.

    Exercises beyond the recommendation's limit are dropped. Every exercise
    gets the same prescription: 2/3/4 sets for REST/VOLUME/INTENSITY, 12 reps
    for REST and 10 otherwise, weight left for the user to fill in.
    """
    limit = PRESET_EXERCISE_LIMIT[recommendation]
    prescriptions = tuple(
        ExercisePrescription(
            exercise=exercise,
            target_sets=PRESET_SETS[recommendation],
            target_reps=PRESET_REPS[recommendation],
            target_weight_kg=None,
        )
        for exercise in list(exercises)[:limit]
    )
    return LauncherPrediction(
        template_id=None,
        template_name=adapted_name(PRESET_BASE_NAME, recommendation),
        exercises=prescriptions,
        estimated_duration_minutes=estimate_duration(len(prescriptions), recommendation),
        confidence=Confidence.MEDIUM,
        reason=preset_reason(recommendation),
    )
