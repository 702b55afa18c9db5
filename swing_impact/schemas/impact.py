from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShotType(str, Enum):
    FULL_SWING = "full_swing"
    CHIP = "chip"
    PUTT = "putt"


class StrikeQuality(str, Enum):
    """Contact quality labels across all shot types"""
    CENTER = "Center"
    # Full swing
    FAT = "Fat"
    THIN = "Thin"
    EARLY_RELEASE = "EarlyRelease"
    LATE_RELEASE = "LateRelease"
    # Chip
    DUFF = "Duff"
    TOP = "Top"
    # Putt
    PUSH = "Push"
    PULL = "Pull"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class TimingDeviations(_Record):
    """Signed deviation (ms) per timing input; positive = late"""
    transition: Optional[float] = None
    rotation: Optional[float] = None
    arms: Optional[float] = None
    wrists: Optional[float] = None
    hit: Optional[float] = None


class SpeedMetrics(_Record):
    potential: float = Field(..., ge=0, description="Potential club head speed (mph)")
    actual: float = Field(..., ge=0, description="Actual club head speed (mph)")


class GeometryMetrics(_Record):
    club_path: float = 0.0  # degrees, negative = out-to-in
    face_to_path: float = 0.0  # degrees, positive = open to path
    face_angle: float = 0.0  # degrees relative to target line
    attack_angle: float = 0.0
    dynamic_loft: float = 0.0


class LaunchMetrics(_Record):
    ball_speed: float = Field(..., ge=0, description="Ball speed (mph)")
    launch_angle: float = 0.0  # vertical, degrees
    horizontal_launch_angle: float = 0.0  # degrees, positive = right
    spin_axis: float = 0.0  # degrees tilt, positive = slice
    backspin: float = Field(0.0, ge=0)  # rpm
    sidespin: float = 0.0  # rpm, positive = slice
    smash_factor: float = 1.0


class ShotAdjustments(_Record):
    """Multipliers applied on the way to the launch conditions"""
    speed_multiplier: float = 1.0
    spin_multiplier: float = 1.0
    launch_adjustment: float = 0.0
    quality_modifier: float = 1.0


class SurfaceEffect(_Record):
    requested_key: Optional[str] = None
    surface_key: str
    fallback: bool = False
    velocity_reduction: float = 0.0
    spin_reduction: float = 0.0
    launch_angle_change: float = 0.0


class ImpactResult(_Record):
    """Launch conditions for one struck ball"""
    shot_type: ShotType
    deviations: TimingDeviations
    speed: SpeedMetrics
    geometry: GeometryMetrics
    strike_quality: StrikeQuality
    strike_reason: str = "hit_timing"
    launch: LaunchMetrics
    adjustments: ShotAdjustments = ShotAdjustments()
    surface: SurfaceEffect
    message: str = ""
