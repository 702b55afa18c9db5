from dataclasses import dataclass
from typing import Tuple

import structlog

from swing_impact.models.surface import SurfaceProfile
from swing_impact.schemas.impact import StrikeQuality

logger = structlog.get_logger()


@dataclass(frozen=True)
class StrikeDecision:
    quality: StrikeQuality
    reason: str = "hit_timing"


class StrikeClassifier:
    """Deviations and angles -> strike quality; full swing thresholds scale with the lie"""

    def __init__(self):
        # Full swing
        self.WRIST_FAT_THIN_THRESHOLD_MS = 100.0
        self.AOA_FAT_THRESHOLD = -5.0  # degrees vs club base attack angle
        self.AOA_THIN_THRESHOLD = 7.0

        # Chip hit timing: early side is more forgiving than late
        self.CHIP_DUFF_THRESHOLD_MS = 300.0
        self.CHIP_FAT_THRESHOLD_MS = 150.0
        self.CHIP_THIN_THRESHOLD_MS = 50.0
        self.CHIP_TOP_THRESHOLD_MS = 120.0
        self.CHIP_ROTATION_DUFF_THRESHOLD_MS = 75.0  # late rotation
        self.CHIP_ROTATION_THIN_THRESHOLD_MS = 75.0  # early rotation

        # Putt
        self.PUTT_PUSH_THRESHOLD_MS = -50.0
        self.PUTT_PULL_THRESHOLD_MS = 50.0

        # Early (fat side) chips from sand recover part of the penalty
        self.BUNKER_FAT_CHIP_SPEED_RECOVERY = 0.3
        self.BUNKER_FAT_CHIP_SPIN_RECOVERY = 0.2

    def classify_full_swing(
        self,
        wrists_dev: float,
        attack_angle: float,
        base_attack_angle: float,
        tempo: float,
        surface: SurfaceProfile,
    ) -> StrikeQuality:
        threshold = self.WRIST_FAT_THIN_THRESHOLD_MS / tempo
        fat_threshold = threshold * surface.fat_forgiveness
        thin_threshold = threshold * surface.thin_forgiveness
        aoa_dev = attack_angle - base_attack_angle

        # Extreme wrist timing first
        if wrists_dev < -fat_threshold:
            return StrikeQuality.FAT
        if wrists_dev > thin_threshold:
            return StrikeQuality.THIN

        if aoa_dev < self.AOA_FAT_THRESHOLD:
            return StrikeQuality.FAT
        if aoa_dev > self.AOA_THIN_THRESHOLD:
            return StrikeQuality.THIN

        if wrists_dev < -fat_threshold / 2:
            return StrikeQuality.EARLY_RELEASE
        if wrists_dev > thin_threshold / 2:
            return StrikeQuality.LATE_RELEASE

        return StrikeQuality.CENTER

    def classify_chip(self, hit_dev: float, rotation_dev: float) -> StrikeDecision:
        """
        Chip strike label from hit timing, with a rotation timing override.

        The rotation override only renames a Center strike; speed and spin stay
        driven by the hit deviation.

        Thresholds are the same on every lie; sand is handled by bunker_fat_recovery.
        """
        if hit_dev < -self.CHIP_DUFF_THRESHOLD_MS:
            return StrikeDecision(StrikeQuality.DUFF)
        if hit_dev < -self.CHIP_FAT_THRESHOLD_MS:
            return StrikeDecision(StrikeQuality.FAT)
        if hit_dev > self.CHIP_TOP_THRESHOLD_MS:
            return StrikeDecision(StrikeQuality.TOP)
        if hit_dev > self.CHIP_THIN_THRESHOLD_MS:
            return StrikeDecision(StrikeQuality.THIN)

        if rotation_dev > self.CHIP_ROTATION_DUFF_THRESHOLD_MS:
            return StrikeDecision(StrikeQuality.DUFF, "rotation_late")
        if rotation_dev < -self.CHIP_ROTATION_THIN_THRESHOLD_MS:
            return StrikeDecision(StrikeQuality.THIN, "rotation_early")

        return StrikeDecision(StrikeQuality.CENTER)

    def classify_putt(self, hit_dev: float) -> StrikeQuality:
        if hit_dev < self.PUTT_PUSH_THRESHOLD_MS:
            return StrikeQuality.PUSH
        if hit_dev > self.PUTT_PULL_THRESHOLD_MS:
            return StrikeQuality.PULL
        return StrikeQuality.CENTER

    def bunker_fat_recovery(
        self,
        hit_dev: float,
        surface: SurfaceProfile,
        speed_multiplier: float,
        spin_multiplier: float,
    ) -> Tuple[float, float]:
        """
        Blend already computed chip multipliers toward 1.0 for heavy contact from sand.

        Covers the whole Fat band and the early side of a clean strike, so an
        early bunker chip never loses speed as its timing improves. Duffs get nothing.
        """
        if not surface.is_bunker or not -self.CHIP_DUFF_THRESHOLD_MS <= hit_dev < 0:
            return speed_multiplier, spin_multiplier

        recovered_speed = speed_multiplier + (1.0 - speed_multiplier) * self.BUNKER_FAT_CHIP_SPEED_RECOVERY
        recovered_spin = spin_multiplier + (1.0 - spin_multiplier) * self.BUNKER_FAT_CHIP_SPIN_RECOVERY
        logger.debug(
            "Bunker fat recovery applied",
            speed_multiplier=round(recovered_speed, 3),
            spin_multiplier=round(recovered_spin, 3),
        )
        return recovered_speed, recovered_spin
