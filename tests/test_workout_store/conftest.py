"""Fixtures with realistic workout-store rows for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def session_row() -> dict:
    """A workout_sessions row as returned by the REST API."""
    return {
        "id": "5f0c1d2e-0000-4000-8000-000000000001",
        "started_at": "2026-03-17T18:30:00Z",
        "duration_seconds": 3720,
        "total_volume_kg": 8450.5,
        "status": "completed",
        "template_id": "tpl-push",
        "name": "Evening push",
    }


@pytest.fixture
def template_row() -> dict:
    """A workout_templates row with nested exercises and sets, deliberately unordered."""
    return {
        "id": "tpl-push",
        "name": "Push Day",
        "template_exercises": [
            {
                "sort_order": 2,
                "exercises": {
                    "id": "ex-ohp",
                    "name": "Overhead Press",
                    "muscle_group": "shoulders",
                    "equipment": "barbell",
                },
                "template_exercise_sets": [
                    {"set_number": 1, "reps": 6, "weight_kg": 50},
                ],
            },
            {
                "sort_order": 1,
                "exercises": [
                    {
                        "id": "ex-bench",
                        "name": "Bench Press",
                        "muscle_group": "chest",
                        "equipment": "barbell",
                    }
                ],
                "template_exercise_sets": [
                    {"set_number": 2, "reps": 8, "weight_kg": 100},
                    {"set_number": 1, "reps": 10, "weight_kg": 90.5},
                    {"set_number": 3, "reps": 6, "weight_kg": 105},
                ],
            },
        ],
    }


@pytest.fixture
def exercise_rows() -> list[dict]:
    return [
        {"id": "ex-row", "name": "Barbell Row", "muscle_group": "back", "equipment": "barbell"},
        {"id": "ex-plank", "name": "Weighted Plank", "muscle_group": "core", "equipment": None},
    ]
