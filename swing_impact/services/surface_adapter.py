from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
import structlog

from swing_impact.config import settings
from swing_impact.models.surface import Reduction, SurfaceResolution
from swing_impact.schemas.impact import SurfaceEffect

logger = structlog.get_logger()

# Draws one value from [low, high]
Sampler = Callable[[float, float], float]

_rng = np.random.default_rng(settings.random_seed)


def uniform_sampler(low: float, high: float) -> float:
    """Process-wide uniform draw, seeded from settings.random_seed."""
    return float(_rng.uniform(low, high))


@dataclass(frozen=True)
class LaunchConditions:
    ball_speed: float
    launch_angle: float
    backspin: float
    sidespin: float


@dataclass(frozen=True)
class SurfaceAdjustedLaunch:
    launch: LaunchConditions
    effect: SurfaceEffect


class SurfaceInteractionAdapter:
    """Applies a surface profile's flight modifications to base launch conditions"""

    def __init__(self, sampler: Optional[Sampler] = None):
        self.sampler = sampler or uniform_sampler

    def resolve_reduction(self, reduction: Reduction) -> float:
        """A fixed fraction, or one draw from a (min, max) range."""
        if isinstance(reduction, tuple):
            low, high = reduction
            return self.sampler(low, high)
        return float(reduction)

    def apply(self, launch: LaunchConditions, resolution: SurfaceResolution) -> SurfaceAdjustedLaunch:
        profile = resolution.profile

        velocity_reduction = self.resolve_reduction(profile.velocity_reduction)
        # One spin draw per shot, shared by backspin and sidespin
        spin_reduction = self.resolve_reduction(profile.spin_reduction)

        adjusted = LaunchConditions(
            ball_speed=launch.ball_speed * (1.0 - velocity_reduction),
            launch_angle=launch.launch_angle + profile.launch_angle_change,
            backspin=launch.backspin * (1.0 - spin_reduction),
            sidespin=launch.sidespin * (1.0 - spin_reduction),
        )

        logger.debug(
            "Surface modifications applied",
            surface=profile.key,
            fallback=resolution.fallback,
            velocity_reduction=round(velocity_reduction, 3),
            spin_reduction=round(spin_reduction, 3),
            launch_angle_change=profile.launch_angle_change,
        )

        effect = SurfaceEffect(
            requested_key=resolution.requested_key,
            surface_key=profile.key,
            fallback=resolution.fallback,
            velocity_reduction=velocity_reduction,
            spin_reduction=spin_reduction,
            launch_angle_change=profile.launch_angle_change,
        )
        return SurfaceAdjustedLaunch(launch=adjusted, effect=effect)
