from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Pressed:
    """A key press that happened at ``timestamp`` (ms)"""
    timestamp: float


@dataclass(frozen=True)
class Missed:
    """A key press that never happened"""


MISSED = Missed()

TimingEvent = Union[Pressed, Missed]


def timing_event(timestamp: Optional[float]) -> TimingEvent:
    """Build a TimingEvent from an optional timestamp."""
    if timestamp is None:
        return MISSED
    return Pressed(float(timestamp))


def as_timing_event(value: Union[TimingEvent, float, None]) -> TimingEvent:
    """Accept an existing TimingEvent or a bare optional timestamp."""
    if isinstance(value, (Pressed, Missed)):
        return value
    return timing_event(value)


# Ideal press offsets (ms) at full tempo, before backswing-duration scaling
IDEAL_BACKSWING_DURATION_MS = 1000.0
IDEAL_TRANSITION_OFFSET_MS = -50.0  # relative to the backswing release
IDEAL_ROTATION_OFFSET_MS = 50.0  # relative to downswing start
IDEAL_ARMS_OFFSET_MS = 100.0
IDEAL_WRISTS_OFFSET_MS = 200.0


@dataclass(frozen=True)
class TimingInputs:
    """Raw full swing timestamps for one shot"""
    backswing_duration: float
    downswing_start: float
    backswing_release: float
    transition: TimingEvent = MISSED
    rotation: TimingEvent = MISSED
    arms: TimingEvent = MISSED
    wrists: TimingEvent = MISSED
    # Rotation pressed during the backswing; only used when ``rotation`` is missed
    early_rotation: TimingEvent = MISSED

    @property
    def effective_rotation(self) -> TimingEvent:
        if isinstance(self.rotation, Pressed):
            return self.rotation
        return self.early_rotation

    @classmethod
    def ideal(
        cls,
        tempo: float = 1.0,
        backswing_duration: Optional[float] = None,
        backswing_start: float = 0.0,
    ) -> "TimingInputs":
        """Perfectly timed inputs for the given tempo."""
        if backswing_duration is None:
            backswing_duration = IDEAL_BACKSWING_DURATION_MS / tempo
        # Every ideal offset scales by tempo and by the backswing length ratio
        scale = (backswing_duration / (IDEAL_BACKSWING_DURATION_MS / tempo)) / tempo

        release = backswing_start + backswing_duration
        transition = release + IDEAL_TRANSITION_OFFSET_MS * scale
        downswing_start = transition

        return cls(
            backswing_duration=backswing_duration,
            downswing_start=downswing_start,
            backswing_release=release,
            transition=Pressed(transition),
            rotation=Pressed(downswing_start + IDEAL_ROTATION_OFFSET_MS * scale),
            arms=Pressed(downswing_start + IDEAL_ARMS_OFFSET_MS * scale),
            wrists=Pressed(downswing_start + IDEAL_WRISTS_OFFSET_MS * scale),
        )
