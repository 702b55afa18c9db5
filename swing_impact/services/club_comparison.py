from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

import structlog

from swing_impact.models.club import CLUBS, DEFAULT_BAG, ClubProfile, get_club_profile
from swing_impact.models.surface import SURFACES, SurfaceProfile
from swing_impact.schemas.timing import TimingInputs
from swing_impact.services.full_swing import FullSwingPipeline
from swing_impact.services.surface_adapter import Sampler

logger = structlog.get_logger()


@dataclass
class ClubComparisonRow:
    club_id: str
    name: str
    club_speed: float
    ball_speed: float
    smash_factor: float
    launch_angle: float
    attack_angle: float
    backspin: float
    sidespin: float
    strike_quality: str


def ball_position_factor(club: ClubProfile, ball_position_levels: int = 10) -> float:
    """Club's default ball position index -> factor, positive = back in the stance"""
    center = ball_position_levels // 2
    if center == 0:
        return 0.0
    return (center - club.default_ball_position_index) / center


def compare_clubs(
    club_ids: Optional[Iterable[str]] = None,
    tempo: float = 1.0,
    surface_key: Optional[str] = "FAIRWAY",
    ball_position_levels: int = 10,
    clubs: Mapping[str, ClubProfile] = CLUBS,
    surfaces: Mapping[str, SurfaceProfile] = SURFACES,
    sampler: Optional[Sampler] = None,
) -> List[ClubComparisonRow]:
    """
    Hit one perfectly timed full swing with each club.

    With no ``club_ids`` the default bag is used, minus the putter.
    Raises UnknownClubError for an id not in ``clubs``.
    """
    if club_ids is None:
        club_ids = [club_id for club_id in DEFAULT_BAG if clubs[club_id].club_type != "putter"]
    profiles = [get_club_profile(club_id, clubs) for club_id in club_ids]

    pipeline = FullSwingPipeline(surfaces=surfaces, sampler=sampler)
    timing_inputs = TimingInputs.ideal(tempo)

    rows = []
    for club in profiles:
        result = pipeline.compute(
            timing_inputs,
            club,
            tempo,
            ball_position_factor(club, ball_position_levels),
            surface_key,
        )
        rows.append(ClubComparisonRow(
            club_id=club.club_id,
            name=club.name,
            club_speed=result.speed.actual,
            ball_speed=result.launch.ball_speed,
            smash_factor=result.launch.smash_factor,
            launch_angle=result.launch.launch_angle,
            attack_angle=result.geometry.attack_angle,
            backspin=result.launch.backspin,
            sidespin=result.launch.sidespin,
            strike_quality=result.strike_quality.value,
        ))

    logger.info("Club comparison complete", clubs=len(rows), tempo=tempo, surface=surface_key)
    return rows
