"""Fatigue analysis: signal scoring and the recommendation decision table."""

from load_engine.analysis.fatigue import (
    analyze_fatigue,
    cold_start_analysis,
    fatigue_status,
    score_signals,
)
from load_engine.analysis.recommendation import LadderRung, build_ladder, recommend

__all__ = [
    "LadderRung",
    "analyze_fatigue",
    "build_ladder",
    "cold_start_analysis",
    "fatigue_status",
    "recommend",
    "score_signals",
]
