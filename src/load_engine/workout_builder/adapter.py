"""Workout adapter — scales a template's prescriptions to a recommendation.

REST deloads (fewer sets, lighter weight), INTENSITY progresses (one more
set, one more rep), VOLUME passes the template's reference values through
unchanged. Exercise count and order are always preserved.
"""

from __future__ import annotations

import math
from typing import Sequence

from load_engine.models.enums import (
    DEFAULT_BASE_REPS,
    DEFAULT_BASE_SETS,
    DELOAD_SET_FACTOR,
    DELOAD_WEIGHT_FACTOR,
    INTENSITY_EXTRA_SETS,
    INTENSITY_REP_CEILING,
    MAX_ADAPTED_SETS,
    MIN_ADAPTED_SETS,
    Recommendation,
)
from load_engine.models.session import SetRecord, TemplateExercise
from load_engine.models.workout import ExercisePrescription


def reference_prescription(template_exercise: TemplateExercise) -> ExercisePrescription:
    """The unadapted prescription implied by an exercise's recorded sets.

    Set count is the number of recorded sets (3 when none are recorded);
    reps and weight come from the first recorded set, with reps defaulting
    to 10 when missing.
    """
    sets = template_exercise.sets
    first = sets[0] if sets else SetRecord()
    return ExercisePrescription(
        exercise=template_exercise.exercise,
        target_sets=len(sets) or DEFAULT_BASE_SETS,
        target_reps=first.reps or DEFAULT_BASE_REPS,
        target_weight_kg=first.weight_kg,
    )


def _clamp_sets(sets: int) -> int:
    return max(MIN_ADAPTED_SETS, min(MAX_ADAPTED_SETS, sets))


def deload(reference: ExercisePrescription) -> ExercisePrescription:
    """REST: -30% sets (at least 2), -30% weight rounded to 0.1 kg, same reps."""
    weight = reference.target_weight_kg
    return ExercisePrescription(
        exercise=reference.exercise,
        target_sets=_clamp_sets(math.floor(reference.target_sets * DELOAD_SET_FACTOR)),
        target_reps=reference.target_reps,
        target_weight_kg=round(weight * DELOAD_WEIGHT_FACTOR, 1) if weight is not None else None,
    )


def progress(reference: ExercisePrescription) -> ExercisePrescription:
    """INTENSITY: one extra set (capped at 6), one extra rep below 12 reps."""
    reps = reference.target_reps
    return ExercisePrescription(
        exercise=reference.exercise,
        target_sets=_clamp_sets(reference.target_sets + INTENSITY_EXTRA_SETS),
        target_reps=reps + 1 if reps < INTENSITY_REP_CEILING else reps,
        target_weight_kg=reference.target_weight_kg,
    )


def adapt_prescription(
    reference: ExercisePrescription, recommendation: Recommendation
) -> ExercisePrescription:
    """Apply *recommendation* to a single reference prescription."""
    if recommendation == Recommendation.REST:
        return deload(reference)
    if recommendation == Recommendation.INTENSITY:
        return progress(reference)
    return reference


def adapt_exercises(
    template_exercises: Sequence[TemplateExercise],
    recommendation: Recommendation,
) -> tuple[ExercisePrescription, ...]:
    """Adapt every exercise of a template, preserving length and order."""
    return tuple(
        adapt_prescription(reference_prescription(te), recommendation)
        for te in template_exercises
    )
