"""Workout suggestions — the final output of the load engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from load_engine.models.enums import Confidence, Recommendation
from load_engine.models.session import ExerciseRef


@dataclass(frozen=True)
class ExercisePrescription:
    """Sets/reps/weight target for one exercise of a suggested workout."""

    exercise: ExerciseRef
    target_sets: int
    target_reps: int
    target_weight_kg: float | None = None


@dataclass(frozen=True)
class LauncherPrediction:
    """Non-adaptive workout suggestion, as shown by the quick launcher."""

    template_id: str | None
    template_name: str
    exercises: tuple[ExercisePrescription, ...] = field(default_factory=tuple)
    estimated_duration_minutes: int = 0
    confidence: Confidence = Confidence.LOW
    reason: str = ""


@dataclass(frozen=True)
class AdaptedWorkout:
    """Workout adapted to the user's current fatigue.

    Built fresh on every engine call and never persisted by the engine.
    """

    template_id: str | None
    template_name: str
    exercises: tuple[ExercisePrescription, ...]
    estimated_duration_minutes: int
    confidence: Confidence
    reason: str
    fatigue_score: int
    adaptation_type: Recommendation
    adaptation_reason: str
    volume_adjustment_pct: int
    degraded: bool = False

    def as_launcher_prediction(self) -> LauncherPrediction:
        """Drop the adaptive-only fields."""
        return LauncherPrediction(
            template_id=self.template_id,
            template_name=self.template_name,
            exercises=self.exercises,
            estimated_duration_minutes=self.estimated_duration_minutes,
            confidence=self.confidence,
            reason=self.reason,
        )
