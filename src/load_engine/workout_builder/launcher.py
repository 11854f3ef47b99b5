"""Launcher — predicts the user's "usual" workout without fatigue adaptation.

Strategies, tried in order:
    1. Weekday habit: the template the user most often does on today's
       weekday (needs 2+ sessions that weekday and 2+ uses) → HIGH.
    2. Most recent template used on any day → MEDIUM.
    3. Generic full-body preset → LOW.

Candidate selection is pure; loading the candidate templates is the
engine's job, and a candidate whose template cannot be loaded is skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

import numpy as np

from load_engine.models.enums import (
    LAUNCHER_DEFAULT_DURATION_MIN,
    LAUNCHER_MIN_TEMPLATE_REPEATS,
    LAUNCHER_MIN_WEEKDAY_SESSIONS,
    LAUNCHER_PRESET_LIMIT,
    LAUNCHER_PRESET_REPS,
    LAUNCHER_PRESET_SETS,
    PRESET_BASE_NAME,
    Confidence,
)
from load_engine.models.session import CompletedSession, ExerciseRef, WorkoutTemplate
from load_engine.models.workout import ExercisePrescription, LauncherPrediction
from load_engine.workout_builder.adapter import reference_prescription
from load_engine.workout_builder.template_selection import most_common_template

_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


@dataclass(frozen=True)
class LauncherCandidate:
    """A template the launcher would suggest, pending a successful load."""

    template_id: str
    confidence: Confidence
    reason: str
    estimated_duration_minutes: int


def average_duration_minutes(sessions: Sequence[CompletedSession]) -> int:
    """Mean recorded duration in whole minutes; 45 when no duration is known."""
    known = [s.duration_seconds for s in sessions if s.duration_seconds]
    if not known:
        return LAUNCHER_DEFAULT_DURATION_MIN
    return round(float(np.mean(np.array(known, dtype=np.float64))) / 60.0)


def launcher_candidates(
    history: Sequence[CompletedSession], now: datetime
) -> list[LauncherCandidate]:
    """Ordered template candidates for the launcher.

    Args:
        history: Completed sessions from the launcher window, any order.
        now: Determines "today's" weekday.

    Returns:
        Zero, one or two candidates, best first.
    """
    ordered = sorted(
        (s for s in history if s.is_completed),
        key=lambda s: s.started_at,
        reverse=True,
    )
    candidates: list[LauncherCandidate] = []

    weekday = now.weekday()
    weekday_sessions = [s for s in ordered if s.started_at.weekday() == weekday]
    if len(weekday_sessions) >= LAUNCHER_MIN_WEEKDAY_SESSIONS:
        habit = most_common_template(weekday_sessions)
        if habit is not None and habit[1] >= LAUNCHER_MIN_TEMPLATE_REPEATS:
            candidates.append(
                LauncherCandidate(
                    template_id=habit[0],
                    confidence=Confidence.HIGH,
                    reason=f"You usually do this on {_WEEKDAY_NAMES[weekday]}s",
                    estimated_duration_minutes=average_duration_minutes(weekday_sessions),
                )
            )

    latest = next((s for s in ordered if s.template_id), None)
    if latest is not None and all(c.template_id != latest.template_id for c in candidates):
        candidates.append(
            LauncherCandidate(
                template_id=latest.template_id,  # type: ignore[arg-type]
                confidence=Confidence.MEDIUM,
                reason="Your most recent workout",
                estimated_duration_minutes=average_duration_minutes([latest]),
            )
        )

    return candidates


def prediction_from_template(
    candidate: LauncherCandidate, template: WorkoutTemplate
) -> LauncherPrediction:
    """The launcher prediction for a loaded candidate template, unadapted."""
    return LauncherPrediction(
        template_id=template.id,
        template_name=template.name,
        exercises=tuple(reference_prescription(te) for te in template.exercises),
        estimated_duration_minutes=candidate.estimated_duration_minutes,
        confidence=candidate.confidence,
        reason=candidate.reason,
    )


def launcher_preset(exercises: Sequence[ExerciseRef]) -> LauncherPrediction:
    """Fallback for users with no template history: 3x10 compound lifts."""
    return LauncherPrediction(
        template_id=None,
        template_name=PRESET_BASE_NAME,
        exercises=tuple(
            ExercisePrescription(
                exercise=exercise,
                target_sets=LAUNCHER_PRESET_SETS,
                target_reps=LAUNCHER_PRESET_REPS,
            )
            for exercise in list(exercises)[:LAUNCHER_PRESET_LIMIT]
        ),
        estimated_duration_minutes=LAUNCHER_DEFAULT_DURATION_MIN,
        confidence=Confidence.LOW,
        reason="Recommended for you",
    )
