"""Custom exception hierarchy for the workout data-store client."""

from __future__ import annotations

from load_engine.exceptions import ProviderUnavailableError


class WorkoutStoreError(ProviderUnavailableError):
    """Base exception for all workout_store errors."""


class StoreAPIError(WorkoutStoreError):
    """A data-store API call returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StoreRateLimitError(StoreAPIError):
    """HTTP 429 — too many requests."""

    def __init__(self, message: str = "Rate limited by the workout store") -> None:
        super().__init__(message, status_code=429)
