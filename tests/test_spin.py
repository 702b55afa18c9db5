import pytest

from swing_impact.schemas.impact import StrikeQuality
from swing_impact.services.spin import LOFT_SPIN_MULTIPLIER, SpinModel


@pytest.fixture
def spin_model():
    return SpinModel()


def test_loft_spin_multiplier_curve():
    """Low lofts spin much less per mph than wedges."""
    assert LOFT_SPIN_MULTIPLIER(10.0) == pytest.approx(0.35)
    assert LOFT_SPIN_MULTIPLIER(32.0) == pytest.approx(0.792)
    assert LOFT_SPIN_MULTIPLIER(60.0) == pytest.approx(1.15)


def test_full_swing_backspin_seven_iron(spin_model):
    # 32 * 60 + 94.5 * 30 * 0.792 + (-4.5 * -500)
    backspin = spin_model.full_swing_backspin(32.0, 94.5, -4.5, StrikeQuality.CENTER)
    assert backspin == pytest.approx(6415.32)


def test_full_swing_backspin_floor_and_strike_modifier(spin_model):
    """Backspin never drops under its floor; thin contact halves it."""
    assert spin_model.full_swing_backspin(0.0, 0.0, 10.0, StrikeQuality.CENTER) == pytest.approx(500.0)
    center = spin_model.full_swing_backspin(32.0, 94.5, -4.5, StrikeQuality.CENTER)
    thin = spin_model.full_swing_backspin(32.0, 94.5, -4.5, StrikeQuality.THIN)
    assert thin == pytest.approx(center * 0.5)


def test_bunker_fat_backspin_is_softer(spin_model):
    """Fat from sand keeps more spin than fat from grass."""
    center = spin_model.full_swing_backspin(32.0, 94.5, -4.5, StrikeQuality.CENTER)
    sand = spin_model.full_swing_backspin(32.0, 94.5, -4.5, StrikeQuality.FAT, bunker=True)
    grass = spin_model.full_swing_backspin(32.0, 94.5, -4.5, StrikeQuality.FAT)
    assert sand == pytest.approx(center * 0.9)
    assert grass == pytest.approx(center * 0.8)
    assert sand > grass


def test_sidespin_follows_face_to_path(spin_model):
    """An open face to path is slice spin; loft damps it."""
    assert spin_model.full_swing_sidespin(0.0, 100.0, 10.0) == 0.0
    assert spin_model.full_swing_sidespin(2.0, 100.0, 0.0) == pytest.approx(900.0)
    assert spin_model.full_swing_sidespin(2.0, 100.0, 45.0) == pytest.approx(450.0)
    assert spin_model.full_swing_sidespin(-2.0, 100.0, 0.0) == pytest.approx(-900.0)


def test_sidespin_capped(spin_model):
    assert spin_model.full_swing_sidespin(50.0, 200.0, 0.0) == pytest.approx(4000.0)


def test_spin_axis(spin_model):
    assert spin_model.spin_axis(0.0, 32.0) == 0.0
    assert spin_model.spin_axis(3.0, 32.0) > 0
    assert spin_model.spin_axis(-3.0, 32.0) < 0
    assert spin_model.spin_axis(20.0, 10.0) == pytest.approx(45.0)


def test_chip_spin_multiplier_peaks_at_zero(spin_model):
    """Perfect chip contact gives the full spin multiplier; equator contact almost none."""
    assert spin_model.chip_spin_multiplier(0.0) == pytest.approx(1.0)
    assert spin_model.chip_spin_multiplier(50.0) == pytest.approx(0.2)
    assert spin_model.chip_spin_multiplier(-50.0) == pytest.approx(0.2)
    assert spin_model.chip_spin_multiplier(15.0) == pytest.approx(0.925)


def test_chip_spin(spin_model):
    assert spin_model.chip_backspin(58.0, 30.0, 0.0, 1.0, 1.0) == pytest.approx(6000.0)
    assert spin_model.chip_backspin(10.0, 0.0, 0.0, 0.0, 1.0) == pytest.approx(100.0)
    assert spin_model.chip_sidespin(100.0, 1.0, 1.0) == pytest.approx(120.0)
    assert spin_model.chip_sidespin(1000.0, 1.0, 1.0) == pytest.approx(500.0)
    assert spin_model.chip_spin_axis(120.0) == pytest.approx(12.0)


def test_putt_backspin(spin_model):
    assert spin_model.putt_backspin(10.0) == pytest.approx(100.0)
    assert spin_model.putt_backspin(100.0) == pytest.approx(500.0)
