import pytest

from swing_impact.models.club import CLUBS, UnknownClubError
from swing_impact.services.club_comparison import ball_position_factor, compare_clubs


def test_default_bag_skips_the_putter(low_sampler):
    rows = compare_clubs(sampler=low_sampler)
    assert len(rows) == 13
    assert rows[0].club_id == "DR"
    assert all(row.club_id != "PT" for row in rows)


def test_perfect_timing_is_center_for_every_club(low_sampler):
    rows = compare_clubs(list(CLUBS)[:-1], tempo=0.6, sampler=low_sampler)
    assert {row.strike_quality for row in rows} == {"Center"}


def test_seven_iron_row(low_sampler):
    [row] = compare_clubs(["I7"], surface_key="TEE", sampler=low_sampler)
    assert row.name == "7 Iron"
    assert row.club_speed == pytest.approx(94.5)
    assert row.ball_speed == pytest.approx(94.5 * 1.34)
    assert row.launch_angle == pytest.approx(17.9)
    assert row.backspin == pytest.approx(6415.32)
    assert row.sidespin == pytest.approx(0.0)


def test_driver_ball_position(driver, low_sampler):
    """Driver sits forward in the stance; only a tee lets it hit up fully."""
    assert ball_position_factor(driver) == pytest.approx(-0.4)
    [tee] = compare_clubs(["DR"], surface_key="TEE", sampler=low_sampler)
    [fairway] = compare_clubs(["DR"], surface_key="FAIRWAY", sampler=low_sampler)
    assert tee.attack_angle == pytest.approx(6.0)
    assert fairway.attack_angle == pytest.approx(3.0)


def test_unknown_club_raises(low_sampler):
    with pytest.raises(UnknownClubError):
        compare_clubs(["I7", "X99"], sampler=low_sampler)
