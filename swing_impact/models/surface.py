from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

import structlog

from swing_impact.config import settings

logger = structlog.get_logger()

# A reduction is either a fixed fraction or a (min, max) range drawn once per shot
Reduction = Union[float, Tuple[float, float]]


@dataclass(frozen=True)
class SurfaceProfile:
    """Flight modification coefficients for one lie type"""
    key: str
    name: str
    velocity_reduction: Reduction = 0.0
    spin_reduction: Reduction = 0.0
    launch_angle_change: float = 0.0  # degrees

    # Strike forgiveness, 1.0 = fairway baseline
    fat_forgiveness: float = 1.0
    thin_forgiveness: float = 1.0

    is_penalty: bool = False

    @property
    def is_tee(self) -> bool:
        return self.key == "TEE"

    @property
    def is_bunker(self) -> bool:
        return self.key == "BUNKER"


@dataclass(frozen=True)
class SurfaceResolution:
    """Resolved surface plus whether the neutral fallback was used"""
    requested_key: Optional[str]
    profile: SurfaceProfile
    fallback: bool


NEUTRAL_SURFACE = SurfaceProfile(key="NEUTRAL", name="Neutral")

_SURFACE_LIST = [
    SurfaceProfile(
        key="TEE", name="Tee Box",
        velocity_reduction=0.0, spin_reduction=0.0, launch_angle_change=0.0,
    ),
    SurfaceProfile(
        key="GREEN", name="Green",
        velocity_reduction=0.02, spin_reduction=0.05, launch_angle_change=0.0,
        fat_forgiveness=0.6, thin_forgiveness=0.7,
    ),
    SurfaceProfile(
        key="FAIRWAY", name="Fairway",
        velocity_reduction=0.05, spin_reduction=0.0, launch_angle_change=0.0,
    ),
    SurfaceProfile(
        key="LIGHT_ROUGH", name="Light Rough",
        velocity_reduction=(0.05, 0.15), spin_reduction=(0.05, 0.1), launch_angle_change=0.5,
        fat_forgiveness=1.1, thin_forgiveness=1.1,
    ),
    SurfaceProfile(
        key="MEDIUM_ROUGH", name="Medium Rough",
        velocity_reduction=(0.10, 0.25), spin_reduction=(0.1, 0.25), launch_angle_change=1.0,
        fat_forgiveness=0.8, thin_forgiveness=1.3,
    ),
    SurfaceProfile(
        key="THICK_ROUGH", name="Thick Rough",
        velocity_reduction=(0.10, 0.40), spin_reduction=(0.20, 0.40), launch_angle_change=2.0,
        fat_forgiveness=0.6, thin_forgiveness=1.5,
    ),
    SurfaceProfile(
        key="BUNKER", name="Bunker",
        velocity_reduction=(0.25, 0.45), spin_reduction=(0.50, 0.75), launch_angle_change=1.5,
        # sand lets the club slide through on a fat strike
        fat_forgiveness=2.5, thin_forgiveness=0.8,
    ),
    SurfaceProfile(
        key="WATER", name="Water",
        velocity_reduction=1.0, spin_reduction=1.0, launch_angle_change=0.0,
        is_penalty=True,
    ),
    SurfaceProfile(
        key="OUT_OF_BOUNDS", name="Out of Bounds",
        velocity_reduction=0.9, spin_reduction=0.9, launch_angle_change=0.0,
        is_penalty=True,
    ),
]

SURFACES: Mapping[str, SurfaceProfile] = MappingProxyType(
    {surface.key: surface for surface in _SURFACE_LIST}
)


def normalize_surface_key(surface_key: Optional[str]) -> str:
    """'Light Rough' -> 'LIGHT_ROUGH'"""
    if not surface_key:
        return ""
    return surface_key.strip().upper().replace(" ", "_")


def resolve_surface_profile(
    surface_key: Optional[str],
    surfaces: Mapping[str, SurfaceProfile] = SURFACES,
) -> SurfaceResolution:
    """
    Resolve a surface key to its profile.

    Never raises: an unknown or empty key resolves to NEUTRAL_SURFACE with
    ``fallback`` set so the caller can see the shot was played off a neutral lie.
    """
    normalized = normalize_surface_key(surface_key)
    profile = surfaces.get(normalized)

    if profile is None:
        if settings.fallback_surface_warning:
            logger.warning(
                "Surface not found, using neutral profile",
                surface_key=surface_key,
                normalized_key=normalized,
            )
        return SurfaceResolution(requested_key=surface_key, profile=NEUTRAL_SURFACE, fallback=True)

    return SurfaceResolution(requested_key=surface_key, profile=profile, fallback=False)
