"""Data models for the load engine."""

from load_engine.models.enums import Confidence, Recommendation, VolumeTrend
from load_engine.models.fatigue import (
    FatigueAnalysis,
    FatigueMetrics,
    FatigueStatus,
    ScoreTrace,
    SignalContribution,
)
from load_engine.models.policy import DEFAULT_POLICY, ScoringPolicy
from load_engine.models.session import (
    CompletedSession,
    ExerciseRef,
    SetRecord,
    TemplateExercise,
    WorkoutTemplate,
)
from load_engine.models.workout import (
    AdaptedWorkout,
    ExercisePrescription,
    LauncherPrediction,
)

__all__ = [
    "AdaptedWorkout",
    "CompletedSession",
    "Confidence",
    "DEFAULT_POLICY",
    "ExercisePrescription",
    "ExerciseRef",
    "FatigueAnalysis",
    "FatigueMetrics",
    "FatigueStatus",
    "LauncherPrediction",
    "Recommendation",
    "ScoreTrace",
    "ScoringPolicy",
    "SetRecord",
    "SignalContribution",
    "TemplateExercise",
    "VolumeTrend",
    "WorkoutTemplate",
]
