import math

import structlog

from swing_impact.schemas.impact import StrikeQuality
from swing_impact.services.interpolation import PiecewiseLinearCurve
from swing_impact.services.limits import clamp

logger = structlog.get_logger()

# Backspin generated per unit of speed, by loft. Long clubs spin far less than wedges.
LOFT_SPIN_MULTIPLIER = PiecewiseLinearCurve.from_points([
    (15.0, 0.35),
    (40.0, 1.00),
    (60.0, 1.15),
])

# Spin multiplier by |hit deviation| (ms) for chips; peaks at perfect contact
CHIP_SPIN_MULTIPLIER = PiecewiseLinearCurve.from_points([
    (0, 1.00),
    (30, 0.85),
    (50, 0.20),  # equator contact
    (100, 0.60),
    (200, 0.35),
])


class SpinModel:
    """Geometry, speed and strike quality -> backspin and sidespin"""

    def __init__(self):
        # Full swing backspin
        self.BACKSPIN_LOFT_FACTOR = 60.0  # rpm per degree of dynamic loft
        self.BACKSPIN_SPEED_FACTOR = 30.0  # rpm per mph of club speed
        self.BACKSPIN_AOA_FACTOR = -500.0  # rpm per degree of attack angle
        self.MIN_BACKSPIN = 500.0
        self.MAX_BACKSPIN = 12000.0
        self.STRIKE_SPIN_MODIFIERS = {
            StrikeQuality.CENTER: 1.0,
            StrikeQuality.FAT: 0.8,
            StrikeQuality.THIN: 0.5,
            StrikeQuality.EARLY_RELEASE: 1.2,
            StrikeQuality.LATE_RELEASE: 0.7,
        }
        self.BUNKER_FAT_SPIN_MODIFIER = 0.9

        # Full swing sidespin
        self.SIDESPIN_BASE_FACTOR = 250.0  # rpm per degree face-to-path
        self.SIDESPIN_SPEED_FACTOR = 2.0  # rpm per mph per degree face-to-path
        self.SIDESPIN_SPEED_THRESHOLD = 0.5  # degrees
        self.SIDESPIN_LOFT_DAMPING = 45.0  # degrees of loft that halve sidespin
        self.MAX_SIDESPIN = 4000.0

        self.SPIN_AXIS_SENSITIVITY = 6.0
        self.MAX_SPIN_AXIS = 45.0

        # Chip
        self.CHIP_BASE_BACKSPIN = 2500.0
        self.CHIP_BACKSPIN_LOFT_FACTOR = 50.0
        self.CHIP_BACKSPIN_SPEED_FACTOR = 20.0
        self.CHIP_BALL_POSITION_SPIN = 500.0  # rpm per unit of ball position
        self.CHIP_ROTATION_SIDESPIN_FACTOR = 1.2  # rpm per ms of rotation deviation
        self.CHIP_MIN_BACKSPIN = 100.0
        self.CHIP_MAX_BACKSPIN = 6000.0
        self.CHIP_MAX_SIDESPIN = 500.0
        self.CHIP_SPIN_AXIS_DIVISOR = 10.0

        # Putt
        self.PUTT_BASE_BACKSPIN = 50.0
        self.PUTT_BACKSPIN_SPEED_FACTOR = 5.0
        self.PUTT_MAX_BACKSPIN = 500.0

    def strike_modifier(self, strike_quality: StrikeQuality, bunker: bool = False) -> float:
        if strike_quality == StrikeQuality.FAT and bunker:
            return self.BUNKER_FAT_SPIN_MODIFIER
        return self.STRIKE_SPIN_MODIFIERS.get(strike_quality, 1.0)

    def full_swing_backspin(
        self,
        dynamic_loft: float,
        club_speed: float,
        attack_angle: float,
        strike_quality: StrikeQuality,
        bunker: bool = False,
    ) -> float:
        loft_multiplier = LOFT_SPIN_MULTIPLIER(dynamic_loft)
        base_spin = (
            dynamic_loft * self.BACKSPIN_LOFT_FACTOR
            + club_speed * self.BACKSPIN_SPEED_FACTOR * loft_multiplier
            + attack_angle * self.BACKSPIN_AOA_FACTOR  # steeper (negative) attack adds spin
        )
        modifier = self.strike_modifier(strike_quality, bunker)
        backspin = clamp(base_spin * modifier, self.MIN_BACKSPIN, self.MAX_BACKSPIN)

        logger.debug(
            "Backspin calculated",
            dynamic_loft=round(dynamic_loft, 1),
            loft_multiplier=round(loft_multiplier, 3),
            base_spin=round(base_spin),
            strike_quality=strike_quality.value,
            modifier=modifier,
            backspin=round(backspin),
        )
        return backspin

    def full_swing_sidespin(self, face_to_path: float, club_speed: float, dynamic_loft: float) -> float:
        """Sidespin (rpm, positive = slice) from face-to-path misalignment."""
        sidespin = face_to_path * self.SIDESPIN_BASE_FACTOR
        if abs(face_to_path) > self.SIDESPIN_SPEED_THRESHOLD:
            sidespin += club_speed * self.SIDESPIN_SPEED_FACTOR * face_to_path

        damping = 1.0 / (1.0 + max(0.0, dynamic_loft) / self.SIDESPIN_LOFT_DAMPING)
        return clamp(sidespin * damping, -self.MAX_SIDESPIN, self.MAX_SIDESPIN)

    def spin_axis(self, face_to_path: float, dynamic_loft: float) -> float:
        """Spin axis tilt in degrees; positive tilts toward a slice."""
        cos_loft = math.cos(math.radians(dynamic_loft))
        tilt = 0.0
        if abs(cos_loft) > 1e-6:
            tilt = math.degrees(math.atan(math.sin(math.radians(face_to_path)) / cos_loft))
        return clamp(tilt * self.SPIN_AXIS_SENSITIVITY, -self.MAX_SPIN_AXIS, self.MAX_SPIN_AXIS)

    def chip_spin_multiplier(self, hit_dev: float) -> float:
        return CHIP_SPIN_MULTIPLIER(abs(hit_dev))

    def chip_backspin(
        self,
        loft: float,
        potential_ball_speed: float,
        ball_position_factor: float,
        spin_multiplier: float,
        quality_modifier: float,
    ) -> float:
        # Spin keys off potential speed, before the strike penalty
        backspin = (
            self.CHIP_BASE_BACKSPIN
            + loft * self.CHIP_BACKSPIN_LOFT_FACTOR
            + potential_ball_speed * self.CHIP_BACKSPIN_SPEED_FACTOR
            + ball_position_factor * self.CHIP_BALL_POSITION_SPIN  # ball back = more spin
        )
        backspin *= spin_multiplier * quality_modifier
        return clamp(backspin, self.CHIP_MIN_BACKSPIN, self.CHIP_MAX_BACKSPIN)

    def chip_sidespin(self, rotation_dev: float, spin_multiplier: float, quality_modifier: float) -> float:
        # late rotation leaves the face open: slice spin
        sidespin = rotation_dev * self.CHIP_ROTATION_SIDESPIN_FACTOR * spin_multiplier * quality_modifier
        return clamp(sidespin, -self.CHIP_MAX_SIDESPIN, self.CHIP_MAX_SIDESPIN)

    def chip_spin_axis(self, sidespin: float) -> float:
        return sidespin / self.CHIP_SPIN_AXIS_DIVISOR

    def putt_backspin(self, ball_speed: float) -> float:
        backspin = self.PUTT_BASE_BACKSPIN + ball_speed * self.PUTT_BACKSPIN_SPEED_FACTOR
        return clamp(backspin, 0.0, self.PUTT_MAX_BACKSPIN)
