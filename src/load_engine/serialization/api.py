"""API serialization for engine results.

Converts AdaptedWorkout / LauncherPrediction / FatigueAnalysis into plain
JSON-compatible dicts that cross the API boundary unchanged.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from load_engine.models.fatigue import FatigueAnalysis, FatigueMetrics
from load_engine.models.session import ExerciseRef
from load_engine.models.workout import (
    AdaptedWorkout,
    ExercisePrescription,
    LauncherPrediction,
)


def to_api_dict(workout: AdaptedWorkout) -> dict:
    """Full adaptive shape: launcher fields plus the adaptation metadata."""
    result = to_launcher_dict(workout.as_launcher_prediction())
    result.update(
        {
            "fatigue_score": workout.fatigue_score,
            "adaptation_type": workout.adaptation_type.name,
            "adaptation_reason": workout.adaptation_reason,
            "volume_adjustment_pct": workout.volume_adjustment_pct,
            "personalization_limited": workout.degraded,
        }
    )
    return result


def to_launcher_dict(prediction: LauncherPrediction) -> dict:
    """Simple non-adaptive shape used by preview / launcher callers."""
    return {
        "template_id": prediction.template_id,
        "template_name": prediction.template_name,
        "exercises": [_convert_prescription(p) for p in prediction.exercises],
        "estimated_duration_minutes": prediction.estimated_duration_minutes,
        "confidence": prediction.confidence.name.lower(),
        "reason": prediction.reason,
    }


def fatigue_analysis_to_dict(analysis: FatigueAnalysis) -> dict:
    result = {
        "fatigue_score": analysis.fatigue_score,
        "recommendation": analysis.recommendation.name,
        "reason": analysis.reason,
        "metrics": _convert_metrics(analysis.metrics),
        "personalization_limited": analysis.degraded,
    }
    if analysis.trace is not None:
        result["signals"] = [
            {
                "signal_id": c.signal_id,
                "points": c.points,
                "explanation": c.explanation,
            }
            for c in analysis.trace.contributions
        ]
    return result


def to_json_string(workout: AdaptedWorkout, indent: int | None = 2) -> str:
    """Serialize an AdaptedWorkout to a JSON string (non-ASCII labels kept)."""
    return json.dumps(to_api_dict(workout), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_exercise(exercise: ExerciseRef) -> dict:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "muscle_group": exercise.muscle_group,
        "equipment": exercise.equipment,
    }


def _convert_prescription(prescription: ExercisePrescription) -> dict:
    return {
        "exercise": _convert_exercise(prescription.exercise),
        "target_sets": prescription.target_sets,
        "target_reps": prescription.target_reps,
        "target_weight_kg": prescription.target_weight_kg,
    }


def _convert_metrics(metrics: FatigueMetrics) -> dict:
    return {
        "recent_volume_kg": metrics.recent_volume_kg,
        "avg_volume_kg": metrics.avg_volume_kg,
        "workouts_last_7_days": metrics.workouts_last_7_days,
        "days_since_last_workout": metrics.days_since_last_workout,
        "volume_trend": metrics.volume_trend.name.lower(),
    }
