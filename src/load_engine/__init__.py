"""Adaptive training load engine: fatigue scoring and workout adaptation."""

from load_engine.analysis.fatigue import analyze_fatigue
from load_engine.engine import AdaptiveWorkoutEngine

__all__ = ["AdaptiveWorkoutEngine", "analyze_fatigue"]
