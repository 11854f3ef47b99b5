"""Workout data-store client — all storage network I/O lives here."""

from workout_store.client import WorkoutStoreClient
from workout_store.exceptions import (
    StoreAPIError,
    StoreRateLimitError,
    WorkoutStoreError,
)
from workout_store.mapper import map_exercise, map_session, map_sessions, map_template
from workout_store.providers import (
    StoreExerciseCatalog,
    StoreHistoryProvider,
    StoreTemplateProvider,
)

__all__ = [
    "StoreAPIError",
    "StoreExerciseCatalog",
    "StoreHistoryProvider",
    "StoreRateLimitError",
    "StoreTemplateProvider",
    "WorkoutStoreClient",
    "WorkoutStoreError",
    "map_exercise",
    "map_session",
    "map_sessions",
    "map_template",
]
