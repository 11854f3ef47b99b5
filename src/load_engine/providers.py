"""Provider interfaces the engine reads from, plus in-memory implementations.

Providers are the engine's only suspension points. Implementations raise
``ProviderError`` (or an ``OSError`` such as a timeout) when the backing
store is unavailable; the engine degrades instead of propagating it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Sequence

from load_engine.models.session import CompletedSession, ExerciseRef, WorkoutTemplate


class SessionHistoryProvider(ABC):
    """Supplies a user's completed workout sessions."""

    @abstractmethod
    def fetch(self, user_id: str, since: datetime) -> list[CompletedSession]:
        """Completed sessions started at or after *since*, most recent first."""
        ...

    @abstractmethod
    def fetch_recent(self, user_id: str, limit: int) -> list[CompletedSession]:
        """The *limit* most recent completed sessions, most recent first."""
        ...


class TemplateProvider(ABC):
    """Supplies a workout template with each exercise's latest sets."""

    @abstractmethod
    def fetch(self, template_id: str) -> WorkoutTemplate | None:
        """Return the template, or None if it no longer exists."""
        ...


class ExerciseCatalogProvider(ABC):
    """Supplies catalog exercises filtered by muscle group and category."""

    @abstractmethod
    def fetch(
        self, muscle_groups: Sequence[str], category: str, limit: int
    ) -> list[ExerciseRef]:
        ...


# ---------------------------------------------------------------------------
# In-memory implementations
# ---------------------------------------------------------------------------


class InMemoryHistoryProvider(SessionHistoryProvider):
    """History provider backed by a dict of user_id -> sessions."""

    def __init__(self, sessions: dict[str, Iterable[CompletedSession]] | None = None) -> None:
        self._sessions: dict[str, tuple[CompletedSession, ...]] = {
            user_id: tuple(items) for user_id, items in (sessions or {}).items()
        }

    def _completed(self, user_id: str) -> list[CompletedSession]:
        sessions = [s for s in self._sessions.get(user_id, ()) if s.is_completed]
        return sorted(sessions, key=lambda s: s.started_at, reverse=True)

    def fetch(self, user_id: str, since: datetime) -> list[CompletedSession]:
        return [s for s in self._completed(user_id) if s.started_at >= since]

    def fetch_recent(self, user_id: str, limit: int) -> list[CompletedSession]:
        return self._completed(user_id)[:limit]


class InMemoryTemplateProvider(TemplateProvider):
    """Template provider over a fixed set of templates, keyed by id."""

    def __init__(self, templates: Iterable[WorkoutTemplate] = ()) -> None:
        self._templates = {t.id: t for t in templates}

    def fetch(self, template_id: str) -> WorkoutTemplate | None:
        return self._templates.get(template_id)


class InMemoryExerciseCatalog(ExerciseCatalogProvider):
    """Catalog provider over a fixed list of (exercise, category) pairs.

    Catalog order is preserved, so the first matching exercises win the limit.
    """

    def __init__(self, entries: Iterable[tuple[ExerciseRef, str]] = ()) -> None:
        self._entries = tuple(entries)

    def fetch(
        self, muscle_groups: Sequence[str], category: str, limit: int
    ) -> list[ExerciseRef]:
        groups = set(muscle_groups)
        matches = [
            exercise
            for exercise, exercise_category in self._entries
            if exercise_category == category and exercise.muscle_group in groups
        ]
        return matches[:limit]
