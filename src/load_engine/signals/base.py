"""Abstract base class for all fatigue score signals."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from load_engine.models.enums import VolumeTrend
from load_engine.models.fatigue import SignalContribution
from load_engine.models.policy import ScoringPolicy


@dataclass(frozen=True)
class SignalInput:
    """Unrounded metrics every signal reads from.

    Built once per analysis by the fatigue analyzer; signals never see raw
    sessions.
    """

    recent_volume_kg: float
    avg_volume_kg: float
    previous_week_volume_kg: float
    workouts_last_7_days: int
    days_since_last_workout: int
    volume_trend: VolumeTrend


class FatigueSignal(ABC):
    """Base class for one additive component of the fatigue score.

    Each signal encapsulates one piece of load-management logic. Signals are
    collected in a SignalRegistry and summed by the fatigue analyzer; they
    are independent of one another.

    Subclasses must define:
        signal_id: unique identifier (e.g. "volume_overload")
        version: semantic version string
        order: position in the score trace (lowest first)
        evaluate(): the signal's scoring logic
    """

    signal_id: str
    version: str
    order: int

    @abstractmethod
    def evaluate(self, metrics: SignalInput, policy: ScoringPolicy) -> SignalContribution:
        """Score *metrics* under *policy*.

        Always returns a contribution; a signal with nothing to say returns
        0 points and explains why.
        """
        ...

    def _contribution(self, points: float, explanation: str) -> SignalContribution:
        return SignalContribution(
            signal_id=self.signal_id, points=points, explanation=explanation
        )
