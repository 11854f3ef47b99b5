"""Workout builder — turns a recommendation into concrete exercise prescriptions."""

from load_engine.workout_builder.adapter import adapt_exercises, reference_prescription
from load_engine.workout_builder.launcher import launcher_candidates, launcher_preset
from load_engine.workout_builder.preset import preset_query, synthesize_preset
from load_engine.workout_builder.template_selection import select_base_template

__all__ = [
    "adapt_exercises",
    "launcher_candidates",
    "launcher_preset",
    "preset_query",
    "reference_prescription",
    "select_base_template",
    "synthesize_preset",
]
