"""Pure functions mapping raw data-store rows to load_engine models.

No I/O — takes rows from WorkoutStoreClient methods and returns validated
frozen dataclasses. Malformed records raise MalformedRecordError here, at
the edge, so optional or mistyped fields never reach the scoring logic.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from load_engine.exceptions import MalformedRecordError
from load_engine.models.enums import SESSION_STATUS_COMPLETED
from load_engine.models.session import (
    CompletedSession,
    ExerciseRef,
    SetRecord,
    TemplateExercise,
    WorkoutTemplate,
)

logger = logging.getLogger(__name__)

# Fractional seconds of any length; PostgREST drops trailing zeros
_FRACTION_RE = re.compile(r"\.(\d+)")


def map_session(row: Any) -> CompletedSession:
    """Map a ``workout_sessions`` row to a CompletedSession."""
    record = _require_mapping(row, "session")
    return CompletedSession(
        id=_require_id(record, "id"),
        started_at=_parse_timestamp(record.get("started_at"), record),
        duration_seconds=_optional_int(record, "duration_seconds"),
        total_volume_kg=_optional_number(record, "total_volume_kg"),
        status=_optional_str(record, "status") or SESSION_STATUS_COMPLETED,
        template_id=_optional_id(record, "template_id"),
        name=_optional_str(record, "name"),
    )


def map_sessions(rows: Iterable[Any]) -> list[CompletedSession]:
    """Map session rows, dropping (and logging) any malformed row."""
    sessions: list[CompletedSession] = []
    for row in rows:
        try:
            sessions.append(map_session(row))
        except MalformedRecordError as exc:
            logger.warning("Dropping malformed session record: %s", exc)
    return sessions


def map_exercise(row: Any) -> ExerciseRef:
    """Map an ``exercises`` row to an ExerciseRef."""
    record = _require_mapping(row, "exercise")
    name = _optional_str(record, "name")
    muscle_group = _optional_str(record, "muscle_group")
    if not name or not muscle_group:
        raise MalformedRecordError("exercise requires name and muscle_group", record)
    return ExerciseRef(
        id=_require_id(record, "id"),
        name=name,
        muscle_group=muscle_group,
        equipment=_optional_str(record, "equipment"),
    )


def map_template(row: Any) -> WorkoutTemplate:
    """Map a ``workout_templates`` row with nested exercises and sets.

    Exercises are ordered by ``sort_order`` and sets by ``set_number``;
    rows without those keys go last, in their original order.
    """
    record = _require_mapping(row, "template")
    raw_exercises = record.get("template_exercises") or []
    if not isinstance(raw_exercises, list):
        raise MalformedRecordError("template_exercises must be a list", record)

    ordered = sorted(raw_exercises, key=lambda te: _sort_key(te, "sort_order"))
    return WorkoutTemplate(
        id=_require_id(record, "id"),
        name=_optional_str(record, "name") or "Workout",
        exercises=tuple(_map_template_exercise(te) for te in ordered),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _map_template_exercise(row: Any) -> TemplateExercise:
    record = _require_mapping(row, "template exercise")
    exercise = record.get("exercises")
    # One-to-one embeds may come back as a single-element list
    if isinstance(exercise, list) and len(exercise) == 1:
        exercise = exercise[0]
    if exercise is None:
        raise MalformedRecordError("template exercise has no exercise", record)

    raw_sets = record.get("template_exercise_sets") or []
    if not isinstance(raw_sets, list):
        raise MalformedRecordError("template_exercise_sets must be a list", record)
    ordered_sets = sorted(raw_sets, key=lambda s: _sort_key(s, "set_number"))

    return TemplateExercise(
        exercise=map_exercise(exercise),
        sets=tuple(_map_set(s) for s in ordered_sets),
    )


def _map_set(row: Any) -> SetRecord:
    record = _require_mapping(row, "set")
    try:
        return SetRecord(
            reps=_optional_int(record, "reps"),
            weight_kg=_optional_number(record, "weight_kg"),
        )
    except ValueError as exc:
        raise MalformedRecordError(str(exc), record) from exc


def _require_mapping(row: Any, kind: str) -> dict:
    if not isinstance(row, dict):
        raise MalformedRecordError(f"{kind} record must be an object, got {type(row).__name__}", row)
    return row


def _require_id(record: dict, key: str) -> str:
    value = _optional_id(record, key)
    if value is None:
        raise MalformedRecordError(f"missing {key}", record)
    return value


def _optional_id(record: dict, key: str) -> Optional[str]:
    value = record.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise MalformedRecordError(f"{key} must be a string or integer", record)
    return str(value)


def _optional_str(record: dict, key: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedRecordError(f"{key} must be a string", record)
    return value


def _optional_number(record: dict, key: str) -> Optional[float]:
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise MalformedRecordError(f"{key} must be numeric", record)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedRecordError(f"{key} must be numeric", record) from exc
    if number != number or number < 0:  # NaN or negative
        raise MalformedRecordError(f"{key} must be a non-negative number", record)
    return number


def _optional_int(record: dict, key: str) -> Optional[int]:
    number = _optional_number(record, key)
    if number is None:
        return None
    if not number.is_integer():
        raise MalformedRecordError(f"{key} must be a whole number", record)
    return int(number)


def _parse_timestamp(value: Any, record: dict) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    A trailing 'Z' and a missing offset both mean UTC. Fractional seconds
    are normalized to microseconds, since ``fromisoformat`` before Python
    3.11 only accepts 3 or 6 digits.
    """
    if not isinstance(value, str) or not value:
        raise MalformedRecordError("started_at must be an ISO-8601 string", record)
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise MalformedRecordError(f"invalid started_at {value!r}", record) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(row: Any, key: str) -> float:
    if isinstance(row, dict):
        value = row.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    return float("inf")
