from typing import Mapping, Optional, Union

import structlog

from swing_impact.models.club import ClubProfile
from swing_impact.models.surface import SURFACES, SurfaceProfile
from swing_impact.schemas.impact import (
    GeometryMetrics,
    ImpactResult,
    ShotAdjustments,
    ShotType,
    SpeedMetrics,
    StrikeQuality,
    TimingDeviations,
)
from swing_impact.schemas.timing import TimingEvent, as_timing_event
from swing_impact.services.geometry import GeometryModel
from swing_impact.services.interpolation import PiecewiseLinearCurve
from swing_impact.services.limits import CHIP_LIMITS, clamp, clamp_to
from swing_impact.services.pipeline import ImpactPipeline
from swing_impact.services.surface_adapter import LaunchConditions, Sampler
from swing_impact.services.timing import TimingDeviationCalculator

logger = structlog.get_logger()

# Tables keyed by hit deviation (ms). Early hits are forgiven more than late ones;
# a slightly late hit blades the ball and it screams off low.
CHIP_SPEED_MULTIPLIER = PiecewiseLinearCurve.from_points([
    (-300, 0.45),
    (-150, 0.65),
    (-50, 0.90),
    (0, 1.00),
    (30, 1.05),
    (50, 1.95),
    (120, 1.60),
    (200, 0.55),
])

CHIP_LAUNCH_ADJUSTMENT = PiecewiseLinearCurve.from_points([
    (-300, 4.0),
    (-150, 2.5),
    (-50, 0.5),
    (0, 0.0),
    (30, -1.0),
    (50, -5.0),
    (120, -12.0),
    (200, -18.0),
])

STRIKE_MESSAGES = {
    StrikeQuality.CENTER: "Good Chip",
    StrikeQuality.DUFF: "Duffed it!",
    StrikeQuality.FAT: "Fatted it!",
    StrikeQuality.THIN: "Thinned it!",
    StrikeQuality.TOP: "Topped it!",
}

OptionalOffset = Union[TimingEvent, float, None]


class ChipPipeline(ImpactPipeline):
    """Chip: backswing length for power, rotation and hit timing for quality"""

    limits = CHIP_LIMITS

    def __init__(
        self,
        surfaces: Mapping[str, SurfaceProfile] = SURFACES,
        sampler: Optional[Sampler] = None,
        penalty_ms: Optional[float] = None,
    ):
        super().__init__(surfaces, sampler)
        self.penalty_ms = penalty_ms
        self.geometry_model = GeometryModel(ball_position_aoa_sensitivity=3.0, max_non_tee_aoa_bonus=1.0)

        # Power
        self.MAX_CHIP_BACKSWING_MS = 1000.0
        self.MIN_POWER_FACTOR = 0.15
        self.MAX_POWER_FACTOR = 1.0
        self.POWER_CURVE_EXPONENT = 2.2  # slow start, steep finish
        self.CHIP_SPEED_SHARE = 0.35  # of the club's full swing potential speed
        self.CHIP_SMASH_FACTOR = 1.25

        # Timing
        self.IDEAL_ROTATION_OFFSET_MS = 100.0
        self.TIMING_SENSITIVITY_MS = 200.0
        self.TIMING_QUALITY_FACTOR = 0.15
        self.MIN_SPEED = 5.0
        self.MIN_SPEED_AFTER_STRIKE = 2.0
        self.MIN_SPEED_THIN = 6.0
        self.MIN_SPEED_TOP = 8.0

        # Launch
        self.BASE_LAUNCH_ANGLE = 25.0
        self.LOFT_LAUNCH_FACTOR = 0.6
        self.LATE_HIT_LOFT_LOSS_MS = 35.0  # a late hit loses all loft effect over this many ms
        self.MIN_LOFT_MULTIPLIER = 0.05
        self.BALL_POSITION_LAUNCH = 5.0  # degrees per unit of ball position
        self.BASE_ATTACK_ANGLE = -2.0

    def power_factor(self, backswing_duration: float) -> float:
        progress = clamp(backswing_duration, 0.0, self.MAX_CHIP_BACKSWING_MS) / self.MAX_CHIP_BACKSWING_MS
        return self.MIN_POWER_FACTOR + (self.MAX_POWER_FACTOR - self.MIN_POWER_FACTOR) * (
            progress ** self.POWER_CURVE_EXPONENT
        )

    def quality_modifier(self, hit_dev: float) -> float:
        ratio = clamp(abs(hit_dev) / self.TIMING_SENSITIVITY_MS, 0.0, 1.0)
        return 1.0 - ratio * self.TIMING_QUALITY_FACTOR

    def minimum_speed(self, hit_dev: float) -> float:
        thin = self.strike_classifier.CHIP_THIN_THRESHOLD_MS
        top = self.strike_classifier.CHIP_TOP_THRESHOLD_MS
        if hit_dev > top:
            return self.MIN_SPEED_TOP
        if hit_dev > thin:
            return self.MIN_SPEED_THIN
        return self.MIN_SPEED_AFTER_STRIKE

    def loft_multiplier(self, hit_dev: float) -> float:
        # Thin and topped strikes catch the ball with the leading edge
        if hit_dev <= 0:
            return 1.0
        return max(self.MIN_LOFT_MULTIPLIER, 1.0 - hit_dev / self.LATE_HIT_LOFT_LOSS_MS)

    def compute(
        self,
        backswing_duration: Optional[float],
        rotation_offset: OptionalOffset,
        hit_offset: OptionalOffset,
        club: ClubProfile,
        ball_position_factor: float,
        surface_key: Optional[str],
    ) -> ImpactResult:
        backswing_duration = max(0.0, backswing_duration or 0.0)
        ball_position_factor = clamp(ball_position_factor, -1.0, 1.0)

        # Offsets are already relative to downswing start; the ideal hit lands
        # one backswing length after it
        calculator = TimingDeviationCalculator.unscaled(self.penalty_ms)
        rotation_dev = calculator.deviation(as_timing_event(rotation_offset), 0.0, self.IDEAL_ROTATION_OFFSET_MS)
        hit_dev = calculator.deviation(as_timing_event(hit_offset), 0.0, backswing_duration)

        resolution = self.resolve_surface(surface_key)
        surface = resolution.profile

        # Speed
        potential_ball_speed = club.base_potential_speed * self.CHIP_SPEED_SHARE * self.power_factor(backswing_duration)
        quality_modifier = self.quality_modifier(hit_dev)
        ball_speed = max(self.MIN_SPEED, potential_ball_speed * quality_modifier)

        # Strike quality, label only; numbers below come from hit deviation
        decision = self.strike_classifier.classify_chip(hit_dev, rotation_dev)

        speed_multiplier = CHIP_SPEED_MULTIPLIER(hit_dev)
        spin_multiplier = self.spin_model.chip_spin_multiplier(hit_dev)
        speed_multiplier, spin_multiplier = self.strike_classifier.bunker_fat_recovery(
            hit_dev, surface, speed_multiplier, spin_multiplier
        )

        ball_speed = max(self.minimum_speed(hit_dev), ball_speed * speed_multiplier)

        # Launch
        launch_adjustment = CHIP_LAUNCH_ADJUSTMENT(hit_dev)
        launch_angle = (
            self.BASE_LAUNCH_ANGLE
            + club.loft * self.LOFT_LAUNCH_FACTOR * self.loft_multiplier(hit_dev)
            - ball_position_factor * self.BALL_POSITION_LAUNCH  # ball back = lower launch
            + launch_adjustment
        )

        # Spin
        backspin = self.spin_model.chip_backspin(
            club.loft, potential_ball_speed, ball_position_factor, spin_multiplier, quality_modifier
        )
        sidespin = self.spin_model.chip_sidespin(rotation_dev, spin_multiplier, quality_modifier)

        adjusted = self.apply_surface(
            LaunchConditions(ball_speed=ball_speed, launch_angle=launch_angle, backspin=backspin, sidespin=sidespin),
            resolution,
        )

        limits = self.limits
        attack_angle = self.geometry_model.attack_angle(self.BASE_ATTACK_ANGLE, ball_position_factor, surface.is_tee)

        result = ImpactResult(
            shot_type=ShotType.CHIP,
            deviations=TimingDeviations(rotation=rotation_dev, hit=hit_dev),
            speed=SpeedMetrics(
                potential=clamp_to(potential_ball_speed / self.CHIP_SMASH_FACTOR, limits.club_speed),
                actual=clamp_to(ball_speed / self.CHIP_SMASH_FACTOR, limits.club_speed),
            ),
            geometry=GeometryMetrics(
                attack_angle=clamp_to(attack_angle, limits.attack_angle),
                dynamic_loft=clamp_to(club.loft, limits.dynamic_loft),
            ),
            strike_quality=decision.quality,
            strike_reason=decision.reason,
            launch=self.launch_metrics(
                adjusted.launch,
                horizontal_launch_angle=0.0,
                spin_axis=self.spin_model.chip_spin_axis(adjusted.launch.sidespin),
                smash_factor=self.CHIP_SMASH_FACTOR,
            ),
            adjustments=ShotAdjustments(
                speed_multiplier=speed_multiplier,
                spin_multiplier=spin_multiplier,
                launch_adjustment=launch_adjustment,
                quality_modifier=quality_modifier,
            ),
            surface=adjusted.effect,
            message=STRIKE_MESSAGES[decision.quality],
        )

        logger.info(
            "Chip impact calculated",
            club=club.club_id,
            surface=surface.key,
            hit_deviation=round(hit_dev),
            rotation_deviation=round(rotation_dev),
            strike_quality=decision.quality.value,
            strike_reason=decision.reason,
            ball_speed=round(result.launch.ball_speed, 1),
            launch_angle=round(result.launch.launch_angle, 1),
            backspin=round(result.launch.backspin),
        )
        return result


def compute_chip_impact(
    backswing_duration: Optional[float],
    rotation_offset: OptionalOffset,
    hit_offset: OptionalOffset,
    club: ClubProfile,
    ball_position_factor: float,
    surface_key: Optional[str],
    *,
    surfaces: Mapping[str, SurfaceProfile] = SURFACES,
    sampler: Optional[Sampler] = None,
) -> ImpactResult:
    """Compute launch conditions for a chip."""
    pipeline = ChipPipeline(surfaces=surfaces, sampler=sampler)
    return pipeline.compute(backswing_duration, rotation_offset, hit_offset, club, ball_position_factor, surface_key)
