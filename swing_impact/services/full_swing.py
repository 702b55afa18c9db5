from typing import Mapping, Optional

import structlog

from swing_impact.models.club import ClubProfile
from swing_impact.models.surface import SURFACES, SurfaceProfile
from swing_impact.schemas.impact import (
    GeometryMetrics,
    ImpactResult,
    ShotType,
    SpeedMetrics,
    StrikeQuality,
    TimingDeviations,
)
from swing_impact.schemas.timing import (
    IDEAL_ARMS_OFFSET_MS,
    IDEAL_ROTATION_OFFSET_MS,
    IDEAL_TRANSITION_OFFSET_MS,
    IDEAL_WRISTS_OFFSET_MS,
    TimingInputs,
)
from swing_impact.services.geometry import GeometryModel
from swing_impact.services.limits import FULL_SWING_LIMITS, clamp, clamp_to
from swing_impact.services.pipeline import ImpactPipeline
from swing_impact.services.speed import SpeedModel
from swing_impact.services.surface_adapter import LaunchConditions, Sampler
from swing_impact.services.timing import TimingDeviationCalculator, normalize_tempo

logger = structlog.get_logger()

LAUNCH_LOFT_FACTOR = 0.7  # share of dynamic loft that becomes launch angle

STRIKE_MESSAGES = {
    StrikeQuality.CENTER: "Flushed it!",
    StrikeQuality.FAT: "Fatted it!",
    StrikeQuality.THIN: "Thinned it!",
    StrikeQuality.EARLY_RELEASE: "Flipped it - early release",
    StrikeQuality.LATE_RELEASE: "Punched it - late release",
}


class FullSwingPipeline(ImpactPipeline):
    """Full swing: timing inputs + club + lie -> impact result"""

    limits = FULL_SWING_LIMITS

    def __init__(
        self,
        surfaces: Mapping[str, SurfaceProfile] = SURFACES,
        sampler: Optional[Sampler] = None,
        penalty_ms: Optional[float] = None,
    ):
        super().__init__(surfaces, sampler)
        self.penalty_ms = penalty_ms
        self.speed_model = SpeedModel()
        self.geometry_model = GeometryModel()

    def compute(
        self,
        timing_inputs: TimingInputs,
        club: ClubProfile,
        tempo: float,
        ball_position_factor: float,
        surface_key: Optional[str],
    ) -> ImpactResult:
        tempo = normalize_tempo(tempo)
        ball_position_factor = clamp(ball_position_factor, -1.0, 1.0)
        backswing_duration = max(0.0, timing_inputs.backswing_duration)

        # Deviations
        calculator = TimingDeviationCalculator(tempo, backswing_duration, self.penalty_ms)
        downswing_start = timing_inputs.downswing_start
        transition_dev = calculator.deviation(
            timing_inputs.transition, timing_inputs.backswing_release, IDEAL_TRANSITION_OFFSET_MS
        )
        rotation_dev = calculator.deviation(timing_inputs.effective_rotation, downswing_start, IDEAL_ROTATION_OFFSET_MS)
        arms_dev = calculator.deviation(timing_inputs.arms, downswing_start, IDEAL_ARMS_OFFSET_MS)
        wrists_dev = calculator.deviation(timing_inputs.wrists, downswing_start, IDEAL_WRISTS_OFFSET_MS)

        resolution = self.resolve_surface(surface_key)
        surface = resolution.profile

        # Speed
        potential_speed = self.speed_model.potential_speed(backswing_duration, tempo, club.base_potential_speed)
        actual_speed = self.speed_model.actual_speed(
            potential_speed, transition_dev, arms_dev, rotation_dev, backswing_duration, tempo
        )

        # Geometry
        geometry = self.geometry_model.compute(
            base_loft=club.loft,
            base_attack_angle=club.base_attack_angle,
            arms_dev=arms_dev,
            rotation_dev=rotation_dev,
            wrists_dev=wrists_dev,
            tempo=tempo,
            ball_position_factor=ball_position_factor,
            on_tee=surface.is_tee,
        )
        limits = self.limits
        club_path = clamp_to(geometry.club_path, limits.club_path)
        face_angle = clamp_to(geometry.face_angle, limits.face_angle)
        face_to_path = clamp_to(geometry.face_to_path, limits.face_angle)
        dynamic_loft = clamp_to(geometry.dynamic_loft, limits.dynamic_loft)
        attack_angle = clamp_to(geometry.attack_angle, limits.attack_angle)

        # Strike quality
        strike_quality = self.strike_classifier.classify_full_swing(
            wrists_dev, attack_angle, club.base_attack_angle, tempo, surface
        )

        # Base launch conditions
        smash_factor = self.speed_model.smash_factor(club.base_smash, strike_quality, surface.is_bunker)
        base_launch = LaunchConditions(
            ball_speed=actual_speed * smash_factor,
            launch_angle=dynamic_loft * LAUNCH_LOFT_FACTOR + attack_angle,
            backspin=self.spin_model.full_swing_backspin(
                dynamic_loft, actual_speed, attack_angle, strike_quality, surface.is_bunker
            ),
            sidespin=self.spin_model.full_swing_sidespin(face_to_path, actual_speed, dynamic_loft),
        )
        spin_axis = self.spin_model.spin_axis(face_to_path, dynamic_loft)

        adjusted = self.apply_surface(base_launch, resolution)

        result = ImpactResult(
            shot_type=ShotType.FULL_SWING,
            deviations=TimingDeviations(
                transition=transition_dev,
                rotation=rotation_dev,
                arms=arms_dev,
                wrists=wrists_dev,
            ),
            speed=SpeedMetrics(
                potential=clamp_to(potential_speed, limits.club_speed),
                actual=clamp_to(actual_speed, limits.club_speed),
            ),
            geometry=GeometryMetrics(
                club_path=club_path,
                face_to_path=face_to_path,
                face_angle=face_angle,
                attack_angle=attack_angle,
                dynamic_loft=dynamic_loft,
            ),
            strike_quality=strike_quality,
            launch=self.launch_metrics(
                adjusted.launch,
                horizontal_launch_angle=face_angle,
                spin_axis=spin_axis,
                smash_factor=smash_factor,
            ),
            surface=adjusted.effect,
            message=STRIKE_MESSAGES[strike_quality],
        )

        logger.info(
            "Full swing impact calculated",
            club=club.club_id,
            tempo=tempo,
            surface=surface.key,
            strike_quality=strike_quality.value,
            ball_speed=round(result.launch.ball_speed, 1),
            launch_angle=round(result.launch.launch_angle, 1),
            backspin=round(result.launch.backspin),
            sidespin=round(result.launch.sidespin),
        )
        return result


def compute_full_swing_impact(
    timing_inputs: TimingInputs,
    club: ClubProfile,
    tempo: float,
    ball_position_factor: float,
    surface_key: Optional[str],
    *,
    surfaces: Mapping[str, SurfaceProfile] = SURFACES,
    sampler: Optional[Sampler] = None,
) -> ImpactResult:
    """Compute launch conditions for a full swing."""
    pipeline = FullSwingPipeline(surfaces=surfaces, sampler=sampler)
    return pipeline.compute(timing_inputs, club, tempo, ball_position_factor, surface_key)
