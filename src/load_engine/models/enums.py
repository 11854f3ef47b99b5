"""Enumerations and adaptation constants for the load engine.

Scoring weights live in ``models.policy``; the constants here shape how a
recommendation is turned into a concrete workout.
"""

from enum import IntEnum, auto


class Recommendation(IntEnum):
    """Categorical training-load guidance, ordered from least to most load."""

    REST = auto()
    VOLUME = auto()
    INTENSITY = auto()


class VolumeTrend(IntEnum):
    """Direction of training volume, last 7 days vs the 7 days before."""

    DECREASING = auto()
    STABLE = auto()
    INCREASING = auto()


class Confidence(IntEnum):
    """How personalized a suggested workout is."""

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


SESSION_STATUS_COMPLETED = "completed"

# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------
# Recent sessions inspected when choosing a base template
TEMPLATE_LOOKBACK_SESSIONS = 5

# Percentage change from baseline volume reported for each recommendation
VOLUME_ADJUSTMENT_PCT = {
    Recommendation.REST: -30,
    Recommendation.VOLUME: 0,
    Recommendation.INTENSITY: 15,
}

# ---------------------------------------------------------------------------
# Workout adapter
# ---------------------------------------------------------------------------
DEFAULT_BASE_SETS = 3  # When an exercise has no recorded sets
DEFAULT_BASE_REPS = 10  # When the reference set has no reps
MIN_ADAPTED_SETS = 2
MAX_ADAPTED_SETS = 6
DELOAD_SET_FACTOR = 0.7  # -30% sets on REST
DELOAD_WEIGHT_FACTOR = 0.7  # -30% weight on REST
INTENSITY_EXTRA_SETS = 1
INTENSITY_REP_CEILING = 12  # Reps below this get +1 on INTENSITY

# ---------------------------------------------------------------------------
# Naming and duration
# ---------------------------------------------------------------------------
NAME_LABELS = {
    Recommendation.REST: "🔋 Recovery",
    Recommendation.VOLUME: "⚖️",
    Recommendation.INTENSITY: "💪 Intensity",
}

BASE_MINUTES_PER_EXERCISE = 8
DURATION_MULTIPLIER = {
    Recommendation.REST: 0.7,  # Shorter rest periods
    Recommendation.VOLUME: 1.0,
    Recommendation.INTENSITY: 1.2,  # Longer rest periods
}

# ---------------------------------------------------------------------------
# Preset synthesizer
# ---------------------------------------------------------------------------
PRESET_BASE_NAME = "Full Body Workout"
PRESET_CATEGORY = "compound"
PRESET_MUSCLE_GROUPS = {
    Recommendation.REST: ("core", "back"),
    Recommendation.VOLUME: ("chest", "back", "legs"),
    Recommendation.INTENSITY: ("chest", "back", "legs"),
}
PRESET_EXERCISE_LIMIT = {
    Recommendation.REST: 3,
    Recommendation.VOLUME: 5,
    Recommendation.INTENSITY: 5,
}
PRESET_SETS = {
    Recommendation.REST: 2,
    Recommendation.VOLUME: 3,
    Recommendation.INTENSITY: 4,
}
PRESET_REPS = {
    Recommendation.REST: 12,
    Recommendation.VOLUME: 10,
    Recommendation.INTENSITY: 10,
}

# ---------------------------------------------------------------------------
# Launcher (non-adaptive "usual workout" prediction)
# ---------------------------------------------------------------------------
LAUNCHER_HISTORY_DAYS = 30
LAUNCHER_MIN_WEEKDAY_SESSIONS = 2  # Sessions on today's weekday for a pattern
LAUNCHER_MIN_TEMPLATE_REPEATS = 2
LAUNCHER_DEFAULT_DURATION_MIN = 45
LAUNCHER_PRESET_MUSCLE_GROUPS = ("chest", "back", "legs")
LAUNCHER_PRESET_LIMIT = 5
LAUNCHER_PRESET_SETS = 3
LAUNCHER_PRESET_REPS = 10
