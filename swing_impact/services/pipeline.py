from typing import Mapping, Optional

from swing_impact.models.surface import SURFACES, SurfaceProfile, SurfaceResolution, resolve_surface_profile
from swing_impact.schemas.impact import LaunchMetrics
from swing_impact.services.limits import OutputLimits, clamp_to
from swing_impact.services.spin import SpinModel
from swing_impact.services.strike import StrikeClassifier
from swing_impact.services.surface_adapter import (
    LaunchConditions,
    Sampler,
    SurfaceAdjustedLaunch,
    SurfaceInteractionAdapter,
)


class ImpactPipeline:
    """Shared wiring for the full swing, chip and putt pipelines"""

    limits: OutputLimits = OutputLimits()

    def __init__(
        self,
        surfaces: Mapping[str, SurfaceProfile] = SURFACES,
        sampler: Optional[Sampler] = None,
    ):
        self.surfaces = surfaces
        self.surface_adapter = SurfaceInteractionAdapter(sampler)
        self.strike_classifier = StrikeClassifier()
        self.spin_model = SpinModel()

    def resolve_surface(self, surface_key: Optional[str]) -> SurfaceResolution:
        return resolve_surface_profile(surface_key, self.surfaces)

    def apply_surface(self, launch: LaunchConditions, resolution: SurfaceResolution) -> SurfaceAdjustedLaunch:
        return self.surface_adapter.apply(launch, resolution)

    def launch_metrics(
        self,
        launch: LaunchConditions,
        horizontal_launch_angle: float,
        spin_axis: float,
        smash_factor: float,
    ) -> LaunchMetrics:
        """Clamp final launch conditions into the pipeline's output limits."""
        limits = self.limits
        return LaunchMetrics(
            ball_speed=clamp_to(launch.ball_speed, limits.ball_speed),
            launch_angle=clamp_to(launch.launch_angle, limits.launch_angle),
            horizontal_launch_angle=clamp_to(horizontal_launch_angle, limits.horizontal_launch_angle),
            spin_axis=clamp_to(spin_axis, limits.spin_axis),
            backspin=clamp_to(launch.backspin, limits.backspin),
            sidespin=clamp_to(launch.sidespin, limits.sidespin),
            smash_factor=smash_factor,
        )
