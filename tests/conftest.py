import pytest

from swing_impact.models.club import get_club_profile
from swing_impact.schemas.timing import TimingInputs


class RecordingSampler:
    """Deterministic sampler that records every (low, high) range it is asked for"""

    def __init__(self, position: float = 0.0):
        self.position = position
        self.calls = []

    def __call__(self, low: float, high: float) -> float:
        self.calls.append((low, high))
        return low + (high - low) * self.position


@pytest.fixture
def seven_iron():
    return get_club_profile("I7")


@pytest.fixture
def driver():
    return get_club_profile("DR")


@pytest.fixture
def sand_wedge():
    return get_club_profile("SW58")


@pytest.fixture
def putter():
    return get_club_profile("PT")


@pytest.fixture
def low_sampler():
    return RecordingSampler(0.0)


@pytest.fixture
def midpoint_sampler():
    return RecordingSampler(0.5)


@pytest.fixture
def perfect_timing():
    return TimingInputs.ideal(tempo=1.0)


def _within(value, bounds):
    low, high = bounds
    return low <= value <= high


@pytest.fixture
def assert_within_limits():
    """Check every clamped field of an ImpactResult against an OutputLimits."""

    def check(result, limits):
        launch = result.launch
        geometry = result.geometry
        assert _within(result.speed.potential, limits.club_speed)
        assert _within(result.speed.actual, limits.club_speed)
        assert _within(launch.ball_speed, limits.ball_speed)
        assert _within(launch.launch_angle, limits.launch_angle)
        assert _within(launch.horizontal_launch_angle, limits.horizontal_launch_angle)
        assert _within(launch.backspin, limits.backspin)
        assert _within(launch.sidespin, limits.sidespin)
        assert _within(launch.spin_axis, limits.spin_axis)
        assert _within(geometry.club_path, limits.club_path)
        assert _within(geometry.face_angle, limits.face_angle)
        assert _within(geometry.attack_angle, limits.attack_angle)
        assert _within(geometry.dynamic_loft, limits.dynamic_loft)

    return check
