import math
from dataclasses import dataclass
from typing import Tuple

Range = Tuple[float, float]


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into [low, high]; NaN is treated as 0."""
    if math.isnan(value):
        value = 0.0
    return max(low, min(high, value))


def clamp_to(value: float, bounds: Range) -> float:
    return clamp(value, bounds[0], bounds[1])


@dataclass(frozen=True)
class OutputLimits:
    """Physical range for every field of an impact result"""
    club_speed: Range = (0.0, 200.0)
    ball_speed: Range = (0.0, 250.0)
    launch_angle: Range = (-10.0, 70.0)
    horizontal_launch_angle: Range = (-20.0, 20.0)
    club_path: Range = (-20.0, 20.0)
    face_angle: Range = (-20.0, 20.0)
    attack_angle: Range = (-20.0, 20.0)
    dynamic_loft: Range = (0.0, 80.0)
    backspin: Range = (0.0, 12000.0)
    sidespin: Range = (-4000.0, 4000.0)
    spin_axis: Range = (-45.0, 45.0)


FULL_SWING_LIMITS = OutputLimits()

CHIP_LIMITS = OutputLimits(
    launch_angle=(1.0, 60.0),
    backspin=(0.0, 6000.0),
    sidespin=(-500.0, 500.0),
    spin_axis=(-50.0, 50.0),
)

PUTT_LIMITS = OutputLimits(
    ball_speed=(0.0, 40.0),
    launch_angle=(0.0, 0.0),
    horizontal_launch_angle=(-4.5, 4.5),
    backspin=(0.0, 500.0),
    sidespin=(0.0, 0.0),
    spin_axis=(0.0, 0.0),
)
