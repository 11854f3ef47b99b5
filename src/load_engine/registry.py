"""The set of fatigue signals an analysis sums.

The built-in signals are listed explicitly in ``DEFAULT_SIGNAL_TYPES``, so
building the default registry costs four constructor calls and no imports.
"""

from __future__ import annotations

from typing import Iterable

from load_engine.signals.base import FatigueSignal
from load_engine.signals.recovery import RecoverySignal
from load_engine.signals.training_frequency import TrainingFrequencySignal
from load_engine.signals.trend_pressure import TrendPressureSignal
from load_engine.signals.volume_overload import VolumeOverloadSignal

DEFAULT_SIGNAL_TYPES: tuple[type[FatigueSignal], ...] = (
    VolumeOverloadSignal,
    TrainingFrequencySignal,
    RecoverySignal,
    TrendPressureSignal,
)


class SignalRegistry:
    """An ordered, duplicate-free collection of FatigueSignal instances.

    Each analysis reads the registry it is given; there is no process-wide
    registry, so callers can score with a subset or with extra signals.
    """

    def __init__(self, signals: Iterable[FatigueSignal] = ()) -> None:
        self._signals: dict[str, FatigueSignal] = {}
        for signal in signals:
            self.register(signal)

    @classmethod
    def default(cls) -> "SignalRegistry":
        """A registry of the four built-in signals."""
        return cls(signal_type() for signal_type in DEFAULT_SIGNAL_TYPES)

    def register(self, signal: FatigueSignal) -> None:
        """Add *signal*.

        Raises:
            ValueError: If a signal with the same signal_id is already present.
        """
        if signal.signal_id in self._signals:
            raise ValueError(f"Signal {signal.signal_id!r} is already registered")
        self._signals[signal.signal_id] = signal

    def ordered(self) -> list[FatigueSignal]:
        """Signals in score-trace order (by ``order``, then ``signal_id``)."""
        return sorted(self._signals.values(), key=lambda s: (s.order, s.signal_id))

    def __len__(self) -> int:
        return len(self._signals)
