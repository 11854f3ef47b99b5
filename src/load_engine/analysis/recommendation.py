"""Recommendation ladder — an ordered decision table over (score, recency).

Rungs are evaluated top to bottom and the first match wins. The only inputs
are the fatigue score and days since the last workout, so the policy can be
tested and audited without running the scoring arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from load_engine.models.enums import Recommendation
from load_engine.models.policy import DEFAULT_POLICY, ScoringPolicy

REASON_HIGH_FATIGUE = "High fatigue detected — deload recommended for recovery"
REASON_MODERATE_FATIGUE = "Moderate fatigue — lighter session recommended"
REASON_WELL_RECOVERED = "Well recovered — push for progressive overload"
REASON_FRESH = "Fresh and ready — increase volume or intensity"
REASON_NORMAL = "Normal training — maintain current volume"
REASON_BASELINE = "Building baseline — continue normal training"


@dataclass(frozen=True)
class LadderRung:
    """One row of the decision table.

    Attributes:
        name: Identifier used in logs and tests.
        predicate: ``(fatigue_score, days_since_last_workout) -> bool``.
        recommendation: Outcome when the predicate matches.
        reason: Human-readable explanation for the outcome.
    """

    name: str
    predicate: Callable[[int, int], bool]
    recommendation: Recommendation
    reason: str

    def matches(self, fatigue_score: int, days_since_last_workout: int) -> bool:
        return self.predicate(fatigue_score, days_since_last_workout)


def build_ladder(policy: ScoringPolicy = DEFAULT_POLICY) -> tuple[LadderRung, ...]:
    """Build the ordered decision table for *policy*.

    The final rung always matches, so every input yields a recommendation.
    """
    return (
        LadderRung(
            name="high_fatigue",
            predicate=lambda score, _days: score >= policy.rest_high_score,
            recommendation=Recommendation.REST,
            reason=REASON_HIGH_FATIGUE,
        ),
        LadderRung(
            name="moderate_fatigue",
            predicate=lambda score, _days: score >= policy.rest_moderate_score,
            recommendation=Recommendation.REST,
            reason=REASON_MODERATE_FATIGUE,
        ),
        LadderRung(
            name="well_recovered",
            predicate=lambda score, days: (
                score <= policy.well_recovered_score and days >= policy.well_recovered_days
            ),
            recommendation=Recommendation.INTENSITY,
            reason=REASON_WELL_RECOVERED,
        ),
        LadderRung(
            name="fresh",
            predicate=lambda score, _days: score <= policy.fresh_score,
            recommendation=Recommendation.INTENSITY,
            reason=REASON_FRESH,
        ),
        LadderRung(
            name="normal",
            predicate=lambda _score, _days: True,
            recommendation=Recommendation.VOLUME,
            reason=REASON_NORMAL,
        ),
    )


def recommend(
    fatigue_score: int,
    days_since_last_workout: int,
    ladder: tuple[LadderRung, ...] | None = None,
) -> LadderRung:
    """Return the first rung of *ladder* matching the inputs.

    Args:
        fatigue_score: Clamped fatigue score.
        days_since_last_workout: Whole days since the most recent session.
        ladder: Decision table; defaults to ``build_ladder()``.

    Raises:
        ValueError: If no rung matches (only possible with a custom ladder
            lacking a catch-all final rung).
    """
    for rung in ladder if ladder is not None else build_ladder():
        if rung.matches(fatigue_score, days_since_last_workout):
            return rung
    raise ValueError(
        f"No recommendation rung matched score={fatigue_score}, days={days_since_last_workout}"
    )
