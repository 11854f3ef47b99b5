"""Historical training records and template data supplied by external providers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from load_engine.models.enums import SESSION_STATUS_COMPLETED


@dataclass(frozen=True)
class ExerciseRef:
    """Reference to a catalog exercise."""

    id: str
    name: str
    muscle_group: str
    equipment: str | None = None


@dataclass(frozen=True)
class SetRecord:
    """One recorded set of a template exercise. Either field may be unknown."""

    reps: int | None = None
    weight_kg: float | None = None

    def __post_init__(self) -> None:
        if self.reps is not None and self.reps < 0:
            raise ValueError(f"reps must be >= 0, got {self.reps}")
        if self.weight_kg is not None and self.weight_kg < 0:
            raise ValueError(f"weight_kg must be >= 0, got {self.weight_kg}")


@dataclass(frozen=True)
class TemplateExercise:
    """An exercise within a template with its most recently prescribed sets."""

    exercise: ExerciseRef
    sets: tuple[SetRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutTemplate:
    """A named workout template; exercises are in display order."""

    id: str
    name: str
    exercises: tuple[TemplateExercise, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CompletedSession:
    """Immutable record of a logged workout session.

    Created by the workout-logging flow; the engine never mutates it.
    ``started_at`` must be comparable with the ``now`` passed to the
    analyzer (both timezone-aware or both naive).
    """

    id: str
    started_at: datetime
    duration_seconds: int | None = None
    total_volume_kg: float | None = None
    status: str = SESSION_STATUS_COMPLETED
    template_id: str | None = None
    name: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == SESSION_STATUS_COMPLETED

    @property
    def volume_kg(self) -> float:
        """Session volume with unknown treated as zero."""
        return self.total_volume_kg or 0.0
