"""workout-suggest — print today's suggested workout for a user as JSON.

Usage:
    workout-suggest --user-id USER                    # fatigue-adapted workout
    workout-suggest --user-id USER --mode launcher    # usual workout, unadapted
    workout-suggest --user-id USER --mode fatigue     # fatigue analysis only
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone

from load_engine.engine import AdaptiveWorkoutEngine
from load_engine.serialization import (
    fatigue_analysis_to_dict,
    to_api_dict,
    to_launcher_dict,
)
from workout_store import (
    StoreExerciseCatalog,
    StoreHistoryProvider,
    StoreTemplateProvider,
    WorkoutStoreClient,
)
from workout_suggest.config import (
    LOG_LEVEL,
    WORKOUT_STORE_API_KEY,
    WORKOUT_STORE_TIMEOUT_S,
    WORKOUT_STORE_URL,
)

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def build_engine(
    base_url: str, api_key: str = "", timeout_s: float = WORKOUT_STORE_TIMEOUT_S
) -> AdaptiveWorkoutEngine:
    """Wire an engine to the workout store at *base_url*."""
    client = WorkoutStoreClient(base_url, api_key=api_key, timeout_s=timeout_s)
    return AdaptiveWorkoutEngine(
        history=StoreHistoryProvider(client),
        templates=StoreTemplateProvider(client),
        catalog=StoreExerciseCatalog(client),
    )


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def run(engine: AdaptiveWorkoutEngine, user_id: str, mode: str, now: datetime | None) -> dict:
    """Execute one request and return its JSON-compatible result."""
    if mode == "launcher":
        return to_launcher_dict(engine.launcher(user_id, now))
    if mode == "fatigue":
        return fatigue_analysis_to_dict(engine.analyze(user_id, now))
    return to_api_dict(engine.generate(user_id, now))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Suggest today's workout from training history")
    parser.add_argument("--user-id", required=True, help="User whose history to analyze")
    parser.add_argument(
        "--mode",
        choices=("adaptive", "launcher", "fatigue"),
        default="adaptive",
        help="Adaptive workout (default), unadapted launcher preview, or fatigue analysis only",
    )
    parser.add_argument("--now", help="ISO-8601 instant to analyze at (default: now, UTC)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not WORKOUT_STORE_URL:
        logger.error("WORKOUT_STORE_URL is not set")
        return EXIT_CONFIG_ERROR

    try:
        now = _parse_now(args.now)
    except ValueError:
        logger.error("Invalid --now timestamp: %s", args.now)
        return EXIT_CONFIG_ERROR

    engine = build_engine(WORKOUT_STORE_URL, WORKOUT_STORE_API_KEY)
    result = run(engine, args.user_id, args.mode, now)
    print(json.dumps(result, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
