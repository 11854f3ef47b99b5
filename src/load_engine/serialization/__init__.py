"""Serialization module — export engine results to API-compatible dicts."""

from load_engine.serialization.api import (
    fatigue_analysis_to_dict,
    to_api_dict,
    to_json_string,
    to_launcher_dict,
)

__all__ = [
    "fatigue_analysis_to_dict",
    "to_api_dict",
    "to_json_string",
    "to_launcher_dict",
]
