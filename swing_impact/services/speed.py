import math

import structlog

from swing_impact.schemas.impact import StrikeQuality
from swing_impact.schemas.timing import IDEAL_BACKSWING_DURATION_MS
from swing_impact.services.limits import clamp

logger = structlog.get_logger()


class SpeedModel:
    """Backswing length -> potential club head speed -> actual club head speed"""

    def __init__(self):
        # Backswing & potential speed
        self.IDEAL_BACKSWING_DURATION_MS = IDEAL_BACKSWING_DURATION_MS
        self.MAX_BACKSWING_DURATION_MS = 1500.0  # overswing starts past this
        self.MIN_POWER_FACTOR = 0.6
        self.MAX_POWER_FACTOR = 1.5
        self.OVER_IDEAL_MAX_GAIN = 0.2  # power gained past ideal, approached asymptotically
        self.BACKSWING_POWER_SENSITIVITY_MS = 500.0
        self.OVERSWING_WINDOW_MS = 500.0
        self.OVERSWING_BONUS_FACTOR = 0.1
        self.OVERSWING_DIFFICULTY_PENALTY = 0.15

        # Transition efficiency
        self.TRANSITION_TIMING_SENSITIVITY_MS = 350.0
        self.TRANSITION_WINDOW_RATIO_RANGE = (0.5, 1.5)
        self.MAX_TRANSITION_SPEED_LOSS = 0.3

        # Arms/rotation sequence efficiency
        self.SEQUENCE_TIMING_SENSITIVITY_MS = 200.0
        self.MAX_SEQUENCE_SPEED_LOSS = 0.4

        # Smash factor penalties by strike quality
        self.SMASH_PENALTIES = {
            StrikeQuality.FAT: 0.25,
            StrikeQuality.THIN: 0.20,
            StrikeQuality.EARLY_RELEASE: 0.10,
            StrikeQuality.LATE_RELEASE: 0.05,
        }
        self.BUNKER_FAT_SMASH_PENALTY = 0.10

    def _overswing_progress(self, backswing_duration: float, tempo: float) -> float:
        scaled_max = self.MAX_BACKSWING_DURATION_MS / tempo
        if backswing_duration <= scaled_max:
            return 0.0
        window = self.OVERSWING_WINDOW_MS / tempo
        return clamp((backswing_duration - scaled_max) / window, 0.0, 1.0)

    def power_factor(self, backswing_duration: float, tempo: float) -> float:
        """Power factor from backswing length, before the overswing bonus."""
        backswing_duration = max(0.0, backswing_duration)
        scaled_ideal = self.IDEAL_BACKSWING_DURATION_MS / tempo

        if backswing_duration <= scaled_ideal:
            factor = self.MIN_POWER_FACTOR + (1.0 - self.MIN_POWER_FACTOR) * (backswing_duration / scaled_ideal)
        else:
            over = backswing_duration - scaled_ideal
            sensitivity = self.BACKSWING_POWER_SENSITIVITY_MS / tempo
            factor = 1.0 + self.OVER_IDEAL_MAX_GAIN * (1.0 - math.exp(-over / sensitivity))

        return clamp(factor, self.MIN_POWER_FACTOR, self.MAX_POWER_FACTOR)

    def potential_speed(self, backswing_duration: float, tempo: float, club_base_speed: float) -> float:
        """Potential club head speed (mph) for a backswing of ``backswing_duration`` ms."""
        factor = self.power_factor(backswing_duration, tempo)

        progress = self._overswing_progress(backswing_duration, tempo)
        if progress > 0:
            bonus = 1.0 + progress * self.OVERSWING_BONUS_FACTOR
            factor *= bonus
            logger.debug("Overswing bonus applied", progress=round(progress, 2), multiplier=round(bonus, 3))

        potential = max(0.0, club_base_speed * factor * tempo)
        logger.debug(
            "Potential speed calculated",
            backswing_duration=backswing_duration,
            power_factor=round(factor, 3),
            potential_speed=round(potential, 1),
        )
        return potential

    def transition_efficiency(self, transition_dev: float, backswing_duration: float, tempo: float) -> float:
        ratio = clamp(
            backswing_duration / (self.IDEAL_BACKSWING_DURATION_MS / tempo),
            *self.TRANSITION_WINDOW_RATIO_RANGE
        )
        window = (self.TRANSITION_TIMING_SENSITIVITY_MS / tempo) * ratio
        loss = clamp(abs(transition_dev) / window, 0.0, 1.0) * self.MAX_TRANSITION_SPEED_LOSS
        return 1.0 - loss

    def sequence_efficiency(self, arms_dev: float, rotation_dev: float, tempo: float) -> float:
        mean_abs_dev = (abs(arms_dev) + abs(rotation_dev)) / 2
        window = self.SEQUENCE_TIMING_SENSITIVITY_MS / tempo
        loss = clamp(mean_abs_dev / window, 0.0, 1.0) * self.MAX_SEQUENCE_SPEED_LOSS
        return 1.0 - loss

    def overswing_penalty(self, backswing_duration: float, tempo: float) -> float:
        progress = self._overswing_progress(backswing_duration, tempo)
        return 1.0 - progress * self.OVERSWING_DIFFICULTY_PENALTY

    def actual_speed(
        self,
        potential_speed: float,
        transition_dev: float,
        arms_dev: float,
        rotation_dev: float,
        backswing_duration: float,
        tempo: float,
    ) -> float:
        """Apply timing efficiency losses to the potential speed."""
        transition_eff = self.transition_efficiency(transition_dev, backswing_duration, tempo)
        sequence_eff = self.sequence_efficiency(arms_dev, rotation_dev, tempo)
        overswing_eff = self.overswing_penalty(backswing_duration, tempo)

        actual = max(0.0, potential_speed * transition_eff * sequence_eff * overswing_eff)
        logger.debug(
            "Actual speed calculated",
            potential_speed=round(potential_speed, 1),
            transition_efficiency=round(transition_eff, 3),
            sequence_efficiency=round(sequence_eff, 3),
            overswing_penalty=round(overswing_eff, 3),
            actual_speed=round(actual, 1),
        )
        return actual

    def smash_factor(self, base_smash: float, strike_quality: StrikeQuality, bunker: bool = False) -> float:
        """Club's base smash factor reduced by the strike quality penalty."""
        if strike_quality == StrikeQuality.FAT and bunker:
            penalty = self.BUNKER_FAT_SMASH_PENALTY
        else:
            penalty = self.SMASH_PENALTIES.get(strike_quality, 0.0)
        return base_smash * (1.0 - penalty)
