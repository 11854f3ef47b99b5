"""Engine provider implementations backed by WorkoutStoreClient."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from load_engine.models.session import CompletedSession, ExerciseRef, WorkoutTemplate
from load_engine.providers import (
    ExerciseCatalogProvider,
    SessionHistoryProvider,
    TemplateProvider,
)
from workout_store.client import WorkoutStoreClient
from workout_store.mapper import map_exercise, map_sessions, map_template


class StoreHistoryProvider(SessionHistoryProvider):
    def __init__(self, client: WorkoutStoreClient) -> None:
        self._client = client

    def fetch(self, user_id: str, since: datetime) -> list[CompletedSession]:
        return map_sessions(self._client.fetch_completed_sessions(user_id, since))

    def fetch_recent(self, user_id: str, limit: int) -> list[CompletedSession]:
        return map_sessions(self._client.fetch_recent_sessions(user_id, limit))


class StoreTemplateProvider(TemplateProvider):
    def __init__(self, client: WorkoutStoreClient) -> None:
        self._client = client

    def fetch(self, template_id: str) -> WorkoutTemplate | None:
        row = self._client.fetch_template(template_id)
        return map_template(row) if row is not None else None


class StoreExerciseCatalog(ExerciseCatalogProvider):
    def __init__(self, client: WorkoutStoreClient) -> None:
        self._client = client

    def fetch(
        self, muscle_groups: Sequence[str], category: str, limit: int
    ) -> list[ExerciseRef]:
        return [
            map_exercise(row)
            for row in self._client.fetch_exercises(muscle_groups, category, limit)
        ]
