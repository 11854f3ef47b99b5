"""Environment-variable-based configuration for the workout-suggest CLI."""

from __future__ import annotations

import os

WORKOUT_STORE_URL: str = os.environ.get("WORKOUT_STORE_URL", "")
WORKOUT_STORE_API_KEY: str = os.environ.get("WORKOUT_STORE_API_KEY", "")
WORKOUT_STORE_TIMEOUT_S: float = float(os.environ.get("WORKOUT_STORE_TIMEOUT_S", "5"))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
