import math
from dataclasses import dataclass

import structlog

from swing_impact.services.limits import clamp

logger = structlog.get_logger()


@dataclass(frozen=True)
class ClubGeometry:
    """Club delivery at impact (degrees)"""
    club_path: float
    face_angle: float
    face_to_path: float
    dynamic_loft: float
    attack_angle: float


class GeometryModel:
    """Timing deviations -> club path, face, loft and attack angle"""

    def __init__(
        self,
        ball_position_aoa_sensitivity: float = 10.0,
        max_non_tee_aoa_bonus: float = 1.0,
    ):
        # Sensitivities are degrees per ms at full tempo
        self.RELATIVE_PATH_SENSITIVITY = 0.5 / 10
        self.MAX_RELATIVE_PATH_CHANGE = 6.0
        self.ABSOLUTE_TIMING_SENSITIVITY_MS = 200.0
        self.MAX_ABSOLUTE_PATH_SHIFT = 6.0

        self.WRIST_FACE_SENSITIVITY = 0.15 / 10
        self.MAX_FACE_ANGLE_CHANGE = 8.0

        self.WRIST_LOFT_SENSITIVITY = 0.3 / 10
        self.MAX_DYNAMIC_LOFT_CHANGE = 15.0

        self.BALL_POSITION_AOA_SENSITIVITY = ball_position_aoa_sensitivity
        self.MAX_NON_TEE_AOA_BONUS = max_non_tee_aoa_bonus

    def club_path(self, arms_dev: float, rotation_dev: float, tempo: float) -> float:
        """
        Club path relative to the target line; negative = out-to-in.

        Arms arriving later than rotation swings the path out-to-in. Poor absolute
        timing exaggerates whichever direction the relative timing produced.
        """
        relative_dev = rotation_dev - arms_dev
        path_from_relative = clamp(
            relative_dev * self.RELATIVE_PATH_SENSITIVITY * tempo,
            -self.MAX_RELATIVE_PATH_CHANGE, self.MAX_RELATIVE_PATH_CHANGE,
        )

        absolute_avg_dev = (arms_dev + rotation_dev) / 2
        absolute_factor = clamp(absolute_avg_dev / (self.ABSOLUTE_TIMING_SENSITIVITY_MS / tempo), -1.0, 1.0)
        shift = clamp(
            absolute_factor * self.MAX_ABSOLUTE_PATH_SHIFT,
            -self.MAX_ABSOLUTE_PATH_SHIFT, self.MAX_ABSOLUTE_PATH_SHIFT,
        )

        if path_from_relative == 0:
            return 0.0
        return path_from_relative + math.copysign(1.0, path_from_relative) * shift

    def face_angle(self, wrists_dev: float, tempo: float) -> float:
        """Face angle relative to the target line; late release opens the face."""
        return clamp(
            wrists_dev * self.WRIST_FACE_SENSITIVITY * tempo,
            -self.MAX_FACE_ANGLE_CHANGE, self.MAX_FACE_ANGLE_CHANGE,
        )

    def dynamic_loft(self, base_loft: float, wrists_dev: float, tempo: float) -> float:
        # early release (negative deviation) adds loft
        loft_change = clamp(
            -wrists_dev * self.WRIST_LOFT_SENSITIVITY * tempo,
            -self.MAX_DYNAMIC_LOFT_CHANGE, self.MAX_DYNAMIC_LOFT_CHANGE,
        )
        return base_loft + loft_change

    def attack_angle(self, base_attack_angle: float, ball_position_factor: float, on_tee: bool) -> float:
        """
        Attack angle from the club's base value and ball position.

        ``ball_position_factor`` runs from -1 (forward) to +1 (back). Off the tee a
        positive bonus is capped because the ball cannot be struck as far on the upswing.
        """
        bonus = ball_position_factor * -self.BALL_POSITION_AOA_SENSITIVITY
        if not on_tee and bonus > 0:
            bonus = min(bonus, self.MAX_NON_TEE_AOA_BONUS)
        return base_attack_angle + bonus

    def compute(
        self,
        base_loft: float,
        base_attack_angle: float,
        arms_dev: float,
        rotation_dev: float,
        wrists_dev: float,
        tempo: float,
        ball_position_factor: float,
        on_tee: bool,
    ) -> ClubGeometry:
        club_path = self.club_path(arms_dev, rotation_dev, tempo)
        face_angle = self.face_angle(wrists_dev, tempo)
        geometry = ClubGeometry(
            club_path=club_path,
            face_angle=face_angle,
            face_to_path=face_angle - club_path,
            dynamic_loft=self.dynamic_loft(base_loft, wrists_dev, tempo),
            attack_angle=self.attack_angle(base_attack_angle, ball_position_factor, on_tee),
        )
        logger.debug(
            "Club geometry calculated",
            club_path=round(geometry.club_path, 2),
            face_angle=round(geometry.face_angle, 2),
            face_to_path=round(geometry.face_to_path, 2),
            dynamic_loft=round(geometry.dynamic_loft, 2),
            attack_angle=round(geometry.attack_angle, 2),
        )
        return geometry
