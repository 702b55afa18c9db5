from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping


class UnknownClubError(KeyError):
    """Raised when a club id is not in the club table."""


@dataclass(frozen=True)
class ClubProfile:
    """Static per-club constants"""
    club_id: str
    name: str
    club_type: str
    loft: float  # degrees
    length_factor: float
    base_smash: float
    base_attack_angle: float  # degrees
    spin_rate_factor: float
    base_potential_speed: float  # mph
    optimal_spin: float  # rpm
    default_ball_position_index: int
    lift_factor: float
    backspin_lift_efficiency: float


def _club(club_id, name, club_type, loft, length_factor, base_smash, base_aoa,
          spin_rate_factor, base_speed, optimal_spin, ball_position_index,
          lift_factor, backspin_lift_efficiency) -> ClubProfile:
    return ClubProfile(
        club_id=club_id,
        name=name,
        club_type=club_type,
        loft=loft,
        length_factor=length_factor,
        base_smash=base_smash,
        base_attack_angle=base_aoa,
        spin_rate_factor=spin_rate_factor,
        base_potential_speed=base_speed,
        optimal_spin=optimal_spin,
        default_ball_position_index=ball_position_index,
        lift_factor=lift_factor,
        backspin_lift_efficiency=backspin_lift_efficiency,
    )


_CLUB_LIST: List[ClubProfile] = [
    # Drivers
    _club('DR', 'Driver', 'driver', 10.5, 1.0, 1.50, 2, 0.6, 125.0, 2500, 7, 20.0, 0.032),
    _club('MD', 'Mini Driver', 'driver', 13, 0.97, 1.49, 1, 0.65, 122.1, 2800, 7, 15.0, 0.027),
    # Woods
    _club('W3', '3 Wood', 'wood', 15, 0.95, 1.48, 0, 0.7, 116.8, 3200, 7, 12.0, 0.024),
    _club('W5', '5 Wood', 'wood', 18, 0.93, 1.47, -1, 0.75, 112.3, 3700, 7, 11.0, 0.023),
    _club('W7', '7 Wood', 'wood', 20, 0.91, 1.47, -1.5, 0.8, 109.7, 4200, 6, 9.0, 0.021),
    # Hybrids
    _club('H3', '3 Hybrid', 'hybrid', 20, 0.89, 1.46, -2, 0.85, 107.1, 4000, 6, 8.0, 0.021),
    _club('H4', '4 Hybrid', 'hybrid', 22, 0.87, 1.46, -2.5, 0.9, 106.6, 4500, 6, 8.0, 0.020),
    # Irons
    _club('I3', '3 Iron', 'iron', 20, 0.88, 1.46, -2.5, 0.88, 105.3, 4300, 6, 7.5, 0.019),
    _club('I4', '4 Iron', 'iron', 22, 0.86, 1.44, -3, 0.92, 103.3, 4800, 6, 6.0, 0.017),
    _club('I5', '5 Iron', 'iron', 25, 0.84, 1.41, -3.5, 0.96, 100.2, 5300, 6, 4.5, 0.016),
    _club('I6', '6 Iron', 'iron', 28, 0.82, 1.38, -4, 1.0, 97.1, 6000, 5, 2.0, 0.0155),
    _club('I7', '7 Iron', 'iron', 32, 0.8, 1.34, -4.5, 1.05, 94.5, 7000, 5, 1.0, 0.013),
    _club('I8', '8 Iron', 'iron', 36, 0.78, 1.30, -5, 1.1, 91.9, 7800, 5, 1.0, 0.012),
    _club('I9', '9 Iron', 'iron', 40, 0.76, 1.26, -5.5, 1.15, 89.3, 8600, 4, 1.0, 0.011),
    # Wedges
    _club('PW', 'Pitching Wedge', 'wedge', 45, 0.74, 1.23, -5.8, 1.2, 86.1, 9200, 4, 0.9, 0.009),
    _club('AW50', 'Gap Wedge (50)', 'wedge', 50, 0.73, 1.17, -6, 1.25, 80.5, 9600, 4, 0.8, 0.008),
    _club('GW54', 'Gap Wedge (54)', 'wedge', 54, 0.72, 1.12, -6.2, 1.3, 75.4, 10000, 4, 0.8, 0.008),
    _club('SW58', 'Sand Wedge (58)', 'wedge', 58, 0.71, 1.08, -6.5, 1.35, 73.3, 10500, 4, 0.7, 0.007),
    _club('LW60', 'Lob Wedge (60)', 'wedge', 60, 0.70, 1.05, -6.8, 1.4, 71.2, 10800, 4, 0.5, 0.005),
    # Putter
    _club('PT', 'Putter', 'putter', 3, 0.70, 1.0, 0, 0.1, 20.0, 100, 5, 0.0, 0.0),
]

CLUBS: Mapping[str, ClubProfile] = MappingProxyType(
    {club.club_id: club for club in _CLUB_LIST}
)

DEFAULT_BAG: List[str] = [
    'DR', 'W3', 'I3', 'I4', 'I5', 'I6', 'I7', 'I8', 'I9', 'PW', 'AW50', 'GW54', 'LW60', 'PT'
]


def get_club_profile(club_id: str, clubs: Mapping[str, ClubProfile] = CLUBS) -> ClubProfile:
    """Look up a club profile by id."""
    try:
        return clubs[club_id]
    except KeyError:
        raise UnknownClubError(club_id) from None
