import numpy as np
import pytest

from swing_impact.models.club import CLUBS
from swing_impact.schemas.impact import ShotType, StrikeQuality
from swing_impact.schemas.timing import MISSED, Pressed, TimingInputs
from swing_impact.services.full_swing import FullSwingPipeline, compute_full_swing_impact
from swing_impact.services.limits import FULL_SWING_LIMITS
from swing_impact.services.spin import SpinModel


@pytest.mark.parametrize("tempo", [0.3, 0.65, 1.0])
def test_zero_deviation_is_square_and_centered(seven_iron, low_sampler, tempo):
    """Perfect timing: square path, face square to path, center strike."""
    result = compute_full_swing_impact(
        TimingInputs.ideal(tempo), seven_iron, tempo, 0.0, "FAIRWAY", sampler=low_sampler
    )
    assert result.geometry.club_path == pytest.approx(0.0, abs=1e-9)
    assert result.geometry.face_to_path == pytest.approx(0.0, abs=1e-9)
    assert result.strike_quality == StrikeQuality.CENTER
    assert result.launch.sidespin == pytest.approx(0.0, abs=1e-6)


def test_seven_iron_off_the_tee(seven_iron, perfect_timing, low_sampler):
    """32 degree 7 iron, full tempo, no timing error."""
    result = compute_full_swing_impact(perfect_timing, seven_iron, 1.0, 0.0, "TEE", sampler=low_sampler)

    assert result.shot_type == ShotType.FULL_SWING
    assert result.speed.potential == pytest.approx(94.5)
    assert result.speed.actual == pytest.approx(94.5)
    assert result.geometry.dynamic_loft == pytest.approx(32.0)
    assert result.geometry.attack_angle == pytest.approx(-4.5)
    # 0.7 * dynamic loft + attack angle
    assert result.launch.launch_angle == pytest.approx(17.9)
    assert result.launch.smash_factor == pytest.approx(1.34)
    assert result.launch.ball_speed == pytest.approx(94.5 * 1.34)
    assert result.launch.backspin == pytest.approx(6415.32)
    assert result.launch.spin_axis == pytest.approx(0.0)
    assert result.message == "Flushed it!"
    assert result.surface.surface_key == "TEE"
    assert result.surface.fallback is False


def test_fairway_takes_velocity_off(seven_iron, perfect_timing, low_sampler):
    tee = compute_full_swing_impact(perfect_timing, seven_iron, 1.0, 0.0, "TEE", sampler=low_sampler)
    fairway = compute_full_swing_impact(perfect_timing, seven_iron, 1.0, 0.0, "FAIRWAY", sampler=low_sampler)
    assert fairway.launch.ball_speed == pytest.approx(tee.launch.ball_speed * 0.95)


def test_missed_transition_costs_speed(seven_iron, low_sampler):
    """A missed transition press is penalized like any other missed press."""
    ideal = TimingInputs.ideal(1.0)
    missed = TimingInputs(
        backswing_duration=ideal.backswing_duration,
        downswing_start=ideal.downswing_start,
        backswing_release=ideal.backswing_release,
        transition=MISSED,
        rotation=ideal.rotation,
        arms=ideal.arms,
        wrists=ideal.wrists,
    )
    result = compute_full_swing_impact(missed, seven_iron, 1.0, 0.0, "TEE", sampler=low_sampler)

    assert result.deviations.transition == pytest.approx(5050.0)
    assert result.speed.actual == pytest.approx(94.5 * 0.7)


def test_late_wrists_open_the_face(seven_iron, perfect_timing, low_sampler):
    late = TimingInputs(
        backswing_duration=perfect_timing.backswing_duration,
        downswing_start=perfect_timing.downswing_start,
        backswing_release=perfect_timing.backswing_release,
        transition=perfect_timing.transition,
        rotation=perfect_timing.rotation,
        arms=perfect_timing.arms,
        wrists=Pressed(perfect_timing.wrists.timestamp + 60.0),
    )
    result = compute_full_swing_impact(late, seven_iron, 1.0, 0.0, "TEE", sampler=low_sampler)

    assert result.strike_quality == StrikeQuality.LATE_RELEASE
    assert result.geometry.face_angle > 0
    assert result.launch.sidespin > 0
    assert result.launch.spin_axis > 0


def test_fat_from_bunker_keeps_more_smash_and_spin(seven_iron, perfect_timing, low_sampler):
    """Wrists 300ms early: fat from sand, with the softer sand smash and spin penalties."""
    early = TimingInputs(
        backswing_duration=perfect_timing.backswing_duration,
        downswing_start=perfect_timing.downswing_start,
        backswing_release=perfect_timing.backswing_release,
        transition=perfect_timing.transition,
        rotation=perfect_timing.rotation,
        arms=perfect_timing.arms,
        wrists=Pressed(perfect_timing.wrists.timestamp - 300.0),
    )
    result = compute_full_swing_impact(early, seven_iron, 1.0, 0.0, "BUNKER", sampler=low_sampler)

    assert result.strike_quality == StrikeQuality.FAT
    assert result.launch.smash_factor == pytest.approx(seven_iron.base_smash * 0.9)

    geometry = result.geometry
    base_backspin = SpinModel().full_swing_backspin(
        geometry.dynamic_loft, result.speed.actual, geometry.attack_angle, StrikeQuality.CENTER
    )
    # low sampler: bunker takes 50% of the spin
    assert result.launch.backspin == pytest.approx(base_backspin * 0.9 * 0.5)


def test_unknown_surface_reported_as_fallback(seven_iron, perfect_timing, low_sampler):
    result = compute_full_swing_impact(perfect_timing, seven_iron, 1.0, 0.0, "CART_PATH", sampler=low_sampler)
    assert result.surface.fallback is True
    assert result.surface.surface_key == "NEUTRAL"
    assert result.surface.requested_key == "CART_PATH"


def test_all_missed_inputs(driver, low_sampler, assert_within_limits):
    inputs = TimingInputs(backswing_duration=0.0, downswing_start=0.0, backswing_release=0.0)
    result = compute_full_swing_impact(inputs, driver, 1.0, 0.0, "FAIRWAY", sampler=low_sampler)
    assert_within_limits(result, FULL_SWING_LIMITS)


def _random_event(rng):
    if rng.random() < 0.2:
        return MISSED
    return Pressed(float(rng.uniform(-1e6, 1e6)))


def test_randomized_extreme_inputs_stay_in_range(midpoint_sampler, assert_within_limits):
    """Whatever the presses, every output stays inside its physical range."""
    rng = np.random.default_rng(2024)
    pipeline = FullSwingPipeline(sampler=midpoint_sampler)
    club_ids = list(CLUBS)
    surface_keys = ["TEE", "FAIRWAY", "BUNKER", "THICK_ROUGH", "WATER", "MOON", None]

    for _ in range(300):
        inputs = TimingInputs(
            backswing_duration=[0.0, float(rng.uniform(0, 5000)), float(rng.uniform(0, 1e7))][rng.integers(3)],
            downswing_start=float(rng.uniform(-1e6, 1e6)),
            backswing_release=float(rng.uniform(-1e6, 1e6)),
            transition=_random_event(rng),
            rotation=_random_event(rng),
            arms=_random_event(rng),
            wrists=_random_event(rng),
            early_rotation=_random_event(rng),
        )
        result = pipeline.compute(
            inputs,
            CLUBS[club_ids[rng.integers(len(club_ids))]],
            float(rng.uniform(-1.0, 3.0)),
            float(rng.uniform(-3.0, 3.0)),
            surface_keys[rng.integers(len(surface_keys))],
        )
        assert_within_limits(result, FULL_SWING_LIMITS)
