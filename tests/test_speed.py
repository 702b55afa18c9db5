import pytest

from swing_impact.schemas.impact import StrikeQuality
from swing_impact.services.speed import SpeedModel


@pytest.fixture
def speed_model():
    return SpeedModel()


@pytest.mark.parametrize("tempo", [0.3, 0.6, 1.0])
def test_potential_speed_monotonic_up_to_ideal(speed_model, tempo):
    """Longer backswings never lose potential speed up to the ideal duration."""
    ideal = 1000.0 / tempo
    durations = [ideal * step / 20 for step in range(21)]
    speeds = [speed_model.potential_speed(duration, tempo, 94.5) for duration in durations]
    assert all(earlier <= later for earlier, later in zip(speeds, speeds[1:]))


def test_potential_speed_at_ideal_duration(speed_model):
    """An ideal backswing at full tempo gives the club's base speed."""
    assert speed_model.potential_speed(1000.0, 1.0, 94.5) == pytest.approx(94.5)


def test_gain_past_ideal_is_bounded(speed_model):
    """Power keeps rising past the ideal backswing but stays under the cap."""
    at_ideal = speed_model.power_factor(1000.0, 1.0)
    past_ideal = speed_model.power_factor(1400.0, 1.0)
    assert at_ideal < past_ideal < 1.0 + speed_model.OVER_IDEAL_MAX_GAIN


def test_zero_backswing_keeps_minimum_power(speed_model):
    """Even no backswing yields the minimum power factor."""
    assert speed_model.power_factor(0.0, 1.0) == pytest.approx(speed_model.MIN_POWER_FACTOR)


def test_perfect_timing_keeps_full_speed(speed_model):
    """Zero deviations lose no speed."""
    assert speed_model.actual_speed(94.5, 0.0, 0.0, 0.0, 1000.0, 1.0) == pytest.approx(94.5)


def test_timing_errors_lose_speed(speed_model):
    """Transition and sequence errors both cost speed, up to their caps."""
    transition_only = speed_model.actual_speed(100.0, 5000.0, 0.0, 0.0, 1000.0, 1.0)
    assert transition_only == pytest.approx(100.0 * (1 - speed_model.MAX_TRANSITION_SPEED_LOSS))

    sequence_only = speed_model.actual_speed(100.0, 0.0, 5000.0, 5000.0, 1000.0, 1.0)
    assert sequence_only == pytest.approx(100.0 * (1 - speed_model.MAX_SEQUENCE_SPEED_LOSS))


def test_overswing_trades_bonus_for_penalty(speed_model):
    """A full overswing adds potential speed but costs efficiency."""
    assert speed_model.overswing_penalty(1000.0, 1.0) == 1.0
    assert speed_model.overswing_penalty(2500.0, 1.0) == pytest.approx(1 - speed_model.OVERSWING_DIFFICULTY_PENALTY)
    assert speed_model.potential_speed(2500.0, 1.0, 100.0) > speed_model.potential_speed(1500.0, 1.0, 100.0)


def test_smash_factor_penalties(speed_model):
    """Poor contact reduces smash factor; sand softens a fat strike."""
    assert speed_model.smash_factor(1.34, StrikeQuality.CENTER) == pytest.approx(1.34)
    assert speed_model.smash_factor(1.34, StrikeQuality.FAT) == pytest.approx(1.34 * 0.75)
    assert speed_model.smash_factor(1.34, StrikeQuality.FAT, bunker=True) == pytest.approx(1.34 * 0.9)
