from typing import Optional

import structlog

from swing_impact.config import settings
from swing_impact.schemas.timing import IDEAL_BACKSWING_DURATION_MS, Pressed, TimingEvent
from swing_impact.services.limits import clamp

logger = structlog.get_logger()

MIN_TEMPO = 0.3
MAX_TEMPO = 1.0


def normalize_tempo(tempo: float) -> float:
    """Clamp a swing tempo multiplier into its supported range."""
    clamped = clamp(tempo, MIN_TEMPO, MAX_TEMPO)
    if clamped != tempo:
        logger.warning("Tempo out of range, clamping", tempo=tempo, clamped=clamped)
    return clamped


class TimingDeviationCalculator:
    """Turns raw press timestamps into tempo and backswing scaled deviations"""

    def __init__(
        self,
        tempo: float = 1.0,
        backswing_duration: Optional[float] = None,
        penalty_ms: Optional[float] = None,
        ideal_backswing_ms: float = IDEAL_BACKSWING_DURATION_MS,
    ):
        self.tempo = normalize_tempo(tempo)
        self.ideal_backswing_for_tempo = ideal_backswing_ms / self.tempo
        if backswing_duration is None:
            backswing_duration = self.ideal_backswing_for_tempo
        self.backswing_duration = max(0.0, backswing_duration)
        self.penalty_ms = settings.missed_input_penalty_ms if penalty_ms is None else penalty_ms

    @classmethod
    def unscaled(cls, penalty_ms: Optional[float] = None) -> "TimingDeviationCalculator":
        """Calculator with fixed tempo and no backswing scaling (chip and putt)."""
        if penalty_ms is None:
            penalty_ms = settings.short_game_missed_input_penalty_ms
        return cls(tempo=1.0, penalty_ms=penalty_ms)

    @property
    def duration_ratio(self) -> float:
        return self.backswing_duration / self.ideal_backswing_for_tempo

    def scaled_ideal_offset(self, ideal_offset: float) -> float:
        # A longer backswing pushes every ideal window proportionally later
        return (ideal_offset / self.tempo) * self.duration_ratio

    def deviation(self, event: TimingEvent, reference: float, ideal_offset: float) -> float:
        """
        Deviation (ms) of ``event`` from its ideal offset after ``reference``.

        Positive means late, negative early. A missed press counts as a press
        ``penalty_ms`` after the reference.
        """
        if isinstance(event, Pressed):
            actual_offset = event.timestamp - reference
        else:
            actual_offset = self.penalty_ms
        return actual_offset - self.scaled_ideal_offset(ideal_offset)
