from typing import Mapping, Optional, Union

import structlog

from swing_impact.models.club import CLUBS, ClubProfile
from swing_impact.models.surface import NEUTRAL_SURFACE, SURFACES, SurfaceProfile, SurfaceResolution
from swing_impact.schemas.impact import (
    GeometryMetrics,
    ImpactResult,
    ShotType,
    SpeedMetrics,
    StrikeQuality,
    TimingDeviations,
)
from swing_impact.schemas.timing import TimingEvent, as_timing_event
from swing_impact.services.limits import PUTT_LIMITS, clamp, clamp_to
from swing_impact.services.pipeline import ImpactPipeline
from swing_impact.services.surface_adapter import LaunchConditions, Sampler
from swing_impact.services.timing import TimingDeviationCalculator

logger = structlog.get_logger()

STRIKE_MESSAGES = {
    StrikeQuality.CENTER: "Good Putt",
    StrikeQuality.PUSH: "Pushed",
    StrikeQuality.PULL: "Pulled",
}


class PuttPipeline(ImpactPipeline):
    """Putt: backswing length for pace, hit timing for direction"""

    limits = PUTT_LIMITS

    def __init__(
        self,
        surfaces: Mapping[str, SurfaceProfile] = SURFACES,
        sampler: Optional[Sampler] = None,
        penalty_ms: Optional[float] = None,
    ):
        super().__init__(surfaces, sampler)
        self.penalty_ms = penalty_ms

        self.MAX_PUTT_BACKSWING_MS = 1500.0
        self.MAX_PUTT_SPEED = 22.5  # mph
        self.MIN_PUTT_SPEED = 1.0
        self.IDEAL_HIT_RATIO = 0.825  # of the max backswing
        self.MAX_HORIZONTAL_DEVIATION_MS = 150.0
        self.HORIZONTAL_LAUNCH_PER_MS = 0.03  # degrees, early hit pushes right

    @property
    def ideal_hit_offset(self) -> float:
        return self.MAX_PUTT_BACKSWING_MS * self.IDEAL_HIT_RATIO

    def ball_speed(self, backswing_duration: float) -> float:
        progress = clamp(backswing_duration, 0.0, self.MAX_PUTT_BACKSWING_MS) / self.MAX_PUTT_BACKSWING_MS
        return max(self.MIN_PUTT_SPEED, self.MAX_PUTT_SPEED * progress ** 2)

    def horizontal_launch_angle(self, hit_dev: float) -> float:
        capped = clamp(hit_dev, -self.MAX_HORIZONTAL_DEVIATION_MS, self.MAX_HORIZONTAL_DEVIATION_MS)
        return -capped * self.HORIZONTAL_LAUNCH_PER_MS

    def resolve_surface(self, surface_key: Optional[str]) -> SurfaceResolution:
        # No lie given: a putt is struck from the green, nothing to warn about
        if surface_key is None:
            return SurfaceResolution(requested_key=None, profile=NEUTRAL_SURFACE, fallback=False)
        return super().resolve_surface(surface_key)

    def compute(
        self,
        backswing_duration: Optional[float],
        hit_offset: Union[TimingEvent, float, None],
        surface_key: Optional[str] = None,
        club: Optional[ClubProfile] = None,
    ) -> ImpactResult:
        club = club or CLUBS["PT"]
        backswing_duration = max(0.0, backswing_duration or 0.0)

        calculator = TimingDeviationCalculator.unscaled(self.penalty_ms)
        hit_dev = calculator.deviation(as_timing_event(hit_offset), 0.0, self.ideal_hit_offset)

        resolution = self.resolve_surface(surface_key)

        ball_speed = self.ball_speed(backswing_duration)
        strike_quality = self.strike_classifier.classify_putt(hit_dev)
        horizontal_launch_angle = self.horizontal_launch_angle(hit_dev)

        adjusted = self.apply_surface(
            LaunchConditions(
                ball_speed=ball_speed,
                launch_angle=0.0,
                backspin=self.spin_model.putt_backspin(ball_speed),
                sidespin=0.0,
            ),
            resolution,
        )

        limits = self.limits
        club_speed = clamp_to(ball_speed / club.base_smash, limits.club_speed)
        result = ImpactResult(
            shot_type=ShotType.PUTT,
            deviations=TimingDeviations(hit=hit_dev),
            speed=SpeedMetrics(potential=club_speed, actual=club_speed),
            geometry=GeometryMetrics(dynamic_loft=clamp_to(club.loft, limits.dynamic_loft)),
            strike_quality=strike_quality,
            launch=self.launch_metrics(
                adjusted.launch,
                horizontal_launch_angle=horizontal_launch_angle,
                spin_axis=0.0,
                smash_factor=club.base_smash,
            ),
            surface=adjusted.effect,
            message=STRIKE_MESSAGES[strike_quality],
        )

        logger.info(
            "Putt impact calculated",
            hit_deviation=round(hit_dev),
            strike_quality=strike_quality.value,
            ball_speed=round(result.launch.ball_speed, 1),
            horizontal_launch_angle=round(result.launch.horizontal_launch_angle, 2),
        )
        return result


def compute_putt_impact(
    backswing_duration: Optional[float],
    hit_offset: Union[TimingEvent, float, None],
    *,
    surface_key: Optional[str] = None,
    surfaces: Mapping[str, SurfaceProfile] = SURFACES,
    sampler: Optional[Sampler] = None,
) -> ImpactResult:
    """Compute launch conditions for a putt."""
    pipeline = PuttPipeline(surfaces=surfaces, sampler=sampler)
    return pipeline.compute(backswing_duration, hit_offset, surface_key)
