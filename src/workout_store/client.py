"""High-level workout data-store client facade.

Talks to a PostgREST-style HTTP API (``/rest/v1/<table>``). All methods
return raw JSON rows; ``workout_store.mapper`` turns them into engine
models. Every request carries a timeout, and HTTP 429 is retried with
exponential backoff.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any, Callable, Sequence

import requests

from workout_store.exceptions import (
    StoreAPIError,
    StoreRateLimitError,
    WorkoutStoreError,
)

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_S = 5.0
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 1

_SESSION_COLUMNS = "id,started_at,duration_seconds,total_volume_kg,status,template_id,name"
_TEMPLATE_SELECT = (
    "id,name,"
    "template_exercises(sort_order,"
    "exercises(id,name,muscle_group,equipment),"
    "template_exercise_sets(set_number,reps,weight_kg))"
)
_EXERCISE_COLUMNS = "id,name,muscle_group,equipment"


class WorkoutStoreClient:
    """Facade for the workout-session, template and exercise tables."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout_s: float = _DEFAULT_TIMEOUT_S,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session = session or requests.Session()
        if api_key:
            self._session.headers.update(
                {"apikey": api_key, "Authorization": f"Bearer {api_key}"}
            )

    # ------------------------------------------------------------------
    # Session history
    # ------------------------------------------------------------------

    def fetch_completed_sessions(self, user_id: str, since: datetime) -> list[dict]:
        """Completed sessions started at or after *since*, most recent first."""
        return self._get_rows(
            "workout_sessions",
            {
                "select": _SESSION_COLUMNS,
                "user_id": f"eq.{user_id}",
                "status": "eq.completed",
                "started_at": f"gte.{since.isoformat()}",
                "order": "started_at.desc",
            },
        )

    def fetch_recent_sessions(self, user_id: str, limit: int) -> list[dict]:
        """The *limit* most recent completed sessions."""
        return self._get_rows(
            "workout_sessions",
            {
                "select": _SESSION_COLUMNS,
                "user_id": f"eq.{user_id}",
                "status": "eq.completed",
                "order": "started_at.desc",
                "limit": str(limit),
            },
        )

    # ------------------------------------------------------------------
    # Templates and catalog
    # ------------------------------------------------------------------

    def fetch_template(self, template_id: str) -> dict | None:
        """A template row with nested exercises and sets, or None if missing."""
        rows = self._get_rows(
            "workout_templates",
            {"select": _TEMPLATE_SELECT, "id": f"eq.{template_id}"},
        )
        return rows[0] if rows else None

    def fetch_exercises(
        self, muscle_groups: Sequence[str], category: str, limit: int
    ) -> list[dict]:
        """Catalog exercises in any of *muscle_groups* with the given category."""
        return self._get_rows(
            "exercises",
            {
                "select": _EXERCISE_COLUMNS,
                "muscle_group": f"in.({','.join(muscle_groups)})",
                "category": f"eq.{category}",
                "limit": str(limit),
            },
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_rows(self, table: str, params: dict[str, str]) -> list[dict]:
        url = f"{self._base_url}/rest/v1/{table}"
        response = self._safe_call(self._session.get, url, params=params, timeout=self._timeout_s)
        try:
            data = response.json()
        except ValueError as exc:
            raise StoreAPIError(
                f"Invalid JSON from {table}", status_code=response.status_code
            ) from exc
        if not isinstance(data, list):
            raise StoreAPIError(f"Unexpected response from {table}: {data!r}")
        logger.debug("Fetched %d row(s) from %s", len(data), table)
        return data

    def _safe_call(self, fn: Callable, *args: Any, **kwargs: Any) -> requests.Response:
        """Call *fn* with retry + exponential backoff on 429."""
        for attempt in range(_MAX_RETRIES):
            try:
                response = fn(*args, **kwargs)
            except requests.Timeout as exc:
                raise WorkoutStoreError(f"Workout store timed out: {exc}") from exc
            except requests.RequestException as exc:
                raise WorkoutStoreError(f"Workout store unreachable: {exc}") from exc

            if response.status_code == 429:
                wait = _BASE_BACKOFF_S * (2 ** attempt)
                logger.warning(
                    "Rate limited (attempt %d/%d), retrying in %ds",
                    attempt + 1,
                    _MAX_RETRIES,
                    wait,
                )
                time.sleep(wait)
                continue
            if response.status_code >= 400:
                raise StoreAPIError(
                    f"Workout store returned HTTP {response.status_code}: {response.text[:200]}",
                    status_code=response.status_code,
                )
            return response

        raise StoreRateLimitError(f"Rate limited after {_MAX_RETRIES} retries")
