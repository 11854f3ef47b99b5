"""Shared test fixtures: session histories, exercises, templates, providers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from load_engine.models.session import (
    CompletedSession,
    ExerciseRef,
    SetRecord,
    TemplateExercise,
    WorkoutTemplate,
)
from load_engine.providers import (
    InMemoryExerciseCatalog,
    InMemoryHistoryProvider,
    InMemoryTemplateProvider,
)

# Wednesday, midday UTC
NOW = datetime(2026, 3, 18, 12, 0, tzinfo=timezone.utc)

SessionFactory = Callable[..., CompletedSession]


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_session() -> SessionFactory:
    """Factory: make_session(days_ago, volume=..., template_id=...) relative to NOW."""
    counter = iter(range(1, 10_000))

    def _make(
        days_ago: float,
        volume: float | None = 5000.0,
        template_id: str | None = None,
        duration_seconds: int | None = 3600,
        status: str = "completed",
    ) -> CompletedSession:
        return CompletedSession(
            id=f"s{next(counter)}",
            started_at=NOW - timedelta(days=days_ago),
            duration_seconds=duration_seconds,
            total_volume_kg=volume,
            status=status,
            template_id=template_id,
        )

    return _make


# ---------------------------------------------------------------------------
# Exercises and templates
# ---------------------------------------------------------------------------


@pytest.fixture
def bench_press() -> ExerciseRef:
    return ExerciseRef(id="ex-bench", name="Bench Press", muscle_group="chest", equipment="barbell")


@pytest.fixture
def back_squat() -> ExerciseRef:
    return ExerciseRef(id="ex-squat", name="Back Squat", muscle_group="legs", equipment="barbell")


@pytest.fixture
def barbell_row() -> ExerciseRef:
    return ExerciseRef(id="ex-row", name="Barbell Row", muscle_group="back", equipment="barbell")


@pytest.fixture
def catalog_entries() -> list[tuple[ExerciseRef, str]]:
    """A small exercise catalog as (exercise, category) pairs, in catalog order."""
    return [
        (ExerciseRef("ex-bench", "Bench Press", "chest", "barbell"), "compound"),
        (ExerciseRef("ex-fly", "Cable Fly", "chest", "cable"), "isolation"),
        (ExerciseRef("ex-row", "Barbell Row", "back", "barbell"), "compound"),
        (ExerciseRef("ex-squat", "Back Squat", "legs", "barbell"), "compound"),
        (ExerciseRef("ex-plank", "Weighted Plank", "core", None), "compound"),
        (ExerciseRef("ex-pullup", "Pull-Up", "back", "bodyweight"), "compound"),
        (ExerciseRef("ex-deadlift", "Deadlift", "legs", "barbell"), "compound"),
        (ExerciseRef("ex-ohp", "Overhead Press", "shoulders", "barbell"), "compound"),
        (ExerciseRef("ex-dip", "Dip", "chest", "bodyweight"), "compound"),
        (ExerciseRef("ex-rollout", "Ab Rollout", "core", "wheel"), "compound"),
    ]


@pytest.fixture
def catalog(catalog_entries) -> InMemoryExerciseCatalog:
    return InMemoryExerciseCatalog(catalog_entries)


@pytest.fixture
def push_day(bench_press, back_squat, barbell_row) -> WorkoutTemplate:
    """Three exercises: 4x8 @100, 3x5 @140, 5x12 with no recorded weight."""
    return WorkoutTemplate(
        id="tpl-push",
        name="Push Day",
        exercises=(
            TemplateExercise(bench_press, tuple(SetRecord(reps=8, weight_kg=100.0) for _ in range(4))),
            TemplateExercise(back_squat, tuple(SetRecord(reps=5, weight_kg=140.0) for _ in range(3))),
            TemplateExercise(barbell_row, tuple(SetRecord(reps=12) for _ in range(5))),
        ),
    )


@pytest.fixture
def templates(push_day) -> InMemoryTemplateProvider:
    return InMemoryTemplateProvider([push_day])


# ---------------------------------------------------------------------------
# Histories
# ---------------------------------------------------------------------------


@pytest.fixture
def overloaded_history(make_session) -> list[CompletedSession]:
    """7 daily sessions (7000 kg this week) plus 5 heavy sessions 16-20 days ago.

    recent = 7000, average = 3500 (2x), last session today, no previous-week
    volume → 25 + 25 + 25 + 0 = 75.
    """
    recent = [make_session(days_ago=d + 1 / 24, volume=1000.0, template_id="tpl-push") for d in range(7)]
    older = [make_session(days_ago=16 + d, volume=7000.0) for d in range(5)]
    return recent + older


@pytest.fixture
def rested_history(make_session) -> list[CompletedSession]:
    """Two sessions 8 and 10 days ago; nothing this week → score clamps to 0."""
    return [
        make_session(days_ago=8, volume=4000.0),
        make_session(days_ago=10, volume=4000.0),
    ]


@pytest.fixture
def steady_history(make_session) -> list[CompletedSession]:
    """3 sessions/week for 4 weeks, equal volume, last one 2 days ago.

    recent = 15000 (3x the 5000 per-session average) → +25; frequency,
    recovery and trend contribute nothing → 25.
    """
    days = [2, 4, 6, 9, 11, 13, 16, 18, 20, 23, 25, 27]
    return [make_session(days_ago=d, volume=5000.0, template_id="tpl-push") for d in days]


@pytest.fixture
def history_provider_factory() -> Callable[[list[CompletedSession]], InMemoryHistoryProvider]:
    def _make(sessions: list[CompletedSession], user_id: str = "user-1") -> InMemoryHistoryProvider:
        return InMemoryHistoryProvider({user_id: sessions})

    return _make
