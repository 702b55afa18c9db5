from swing_impact.models.club import CLUBS, ClubProfile, UnknownClubError, get_club_profile
from swing_impact.models.surface import SURFACES, SurfaceProfile, resolve_surface_profile
from swing_impact.schemas.impact import ImpactResult, ShotType, StrikeQuality
from swing_impact.schemas.timing import MISSED, Missed, Pressed, TimingInputs, timing_event
from swing_impact.services.chip import compute_chip_impact
from swing_impact.services.club_comparison import compare_clubs
from swing_impact.services.full_swing import compute_full_swing_impact
from swing_impact.services.putt import compute_putt_impact

__version__ = "1.0.0"

__all__ = [
    "CLUBS",
    "ClubProfile",
    "ImpactResult",
    "MISSED",
    "Missed",
    "Pressed",
    "SURFACES",
    "ShotType",
    "StrikeQuality",
    "SurfaceProfile",
    "TimingInputs",
    "UnknownClubError",
    "compare_clubs",
    "compute_chip_impact",
    "compute_full_swing_impact",
    "compute_putt_impact",
    "get_club_profile",
    "resolve_surface_profile",
    "timing_event",
]
