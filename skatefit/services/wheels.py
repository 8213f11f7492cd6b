"""Wheel selection: diameter, durometer and contact patch."""

from skatefit.core.enums import BoardFeel, ContactPatch, RidingStyle, Terrain
from skatefit.models.equipment import WheelSpec
from skatefit.models.rider import RiderProfile
from skatefit.utils.converters import clamp

# =============================================================================
# Constants
# =============================================================================

DEFAULT_DIAMETER_MM = 54
DEFAULT_DUROMETER = 99

DIAMETER_BY_STYLE: dict[RidingStyle, int] = {
    RidingStyle.STREET: 52,
    RidingStyle.PARK: 56,
    RidingStyle.CRUISING: 60,
    RidingStyle.LONGBOARD: 70,
    RidingStyle.MIXED: 55,
}

DIAMETER_ADJUSTMENT_BY_TERRAIN: dict[Terrain, int] = {
    Terrain.ROUGH: 4,
    Terrain.SMOOTH: -2,
    Terrain.MIXED: 0,
}

LIGHT_DIAMETER_ADJUSTMENT = -2
GRIPPY_DIAMETER_BONUS = 2
GRIPPY_DIAMETER_FLOOR = 56

DUROMETER_BY_STYLE: dict[RidingStyle, int] = {
    RidingStyle.STREET: 99,
    RidingStyle.PARK: 97,
    RidingStyle.CRUISING: 85,
    RidingStyle.LONGBOARD: 80,
    RidingStyle.MIXED: 92,
}

DUROMETER_ADJUSTMENT_BY_TERRAIN: dict[Terrain, int] = {
    Terrain.ROUGH: -5,
    Terrain.SMOOTH: 0,
    Terrain.MIXED: 0,
}

HEAVY_RIDER_KG = 80.0
LIGHT_RIDER_KG = 60.0
WEIGHT_DUROMETER_STEP = 2

DUROMETER_ADJUSTMENT_BY_BOARD_FEEL: dict[BoardFeel, int] = {
    BoardFeel.LIGHT: 2,
    BoardFeel.GRIPPY: -5,
}
DURABLE_DUROMETER_RANGE = (95, 99)

DUROMETER_MIN = 78
DUROMETER_MAX = 101

# (diameter upper bound exclusive, contact patch)
CONTACT_PATCH_BY_DIAMETER: list[tuple[int, ContactPatch]] = [
    (60, ContactPatch.NARROW),
    (65, ContactPatch.MEDIUM),
]


# =============================================================================
# Wheel Selector
# =============================================================================


def select_diameter(profile: RiderProfile) -> int:
    diameter = DIAMETER_BY_STYLE.get(profile.riding_style, DEFAULT_DIAMETER_MM)  # type: ignore[arg-type]
    diameter += DIAMETER_ADJUSTMENT_BY_TERRAIN.get(profile.terrain, 0)  # type: ignore[arg-type]

    if profile.board_feel == BoardFeel.LIGHT:
        diameter += LIGHT_DIAMETER_ADJUSTMENT
    elif profile.board_feel == BoardFeel.GRIPPY and diameter < GRIPPY_DIAMETER_FLOOR:
        diameter += GRIPPY_DIAMETER_BONUS

    return round(diameter)


def select_durometer(profile: RiderProfile) -> int:
    """Wheel hardness in A-scale units, always within [78, 101]."""
    hardness = DUROMETER_BY_STYLE.get(profile.riding_style, DEFAULT_DUROMETER)  # type: ignore[arg-type]
    hardness += DUROMETER_ADJUSTMENT_BY_TERRAIN.get(profile.terrain, 0)  # type: ignore[arg-type]

    # Heavier riders flatten soft urethane
    if profile.weight_kg > HEAVY_RIDER_KG:
        hardness += WEIGHT_DUROMETER_STEP
    elif profile.weight_kg < LIGHT_RIDER_KG:
        hardness -= WEIGHT_DUROMETER_STEP

    if profile.board_feel == BoardFeel.DURABLE:
        hardness = int(clamp(hardness, *DURABLE_DUROMETER_RANGE))
    else:
        hardness += DUROMETER_ADJUSTMENT_BY_BOARD_FEEL.get(profile.board_feel, 0)  # type: ignore[arg-type]

    return int(clamp(hardness, DUROMETER_MIN, DUROMETER_MAX))


def contact_patch_for(diameter_mm: int) -> ContactPatch:
    for upper, patch in CONTACT_PATCH_BY_DIAMETER:
        if diameter_mm < upper:
            return patch
    return ContactPatch.WIDE


def select_wheels(profile: RiderProfile) -> WheelSpec:
    """Derive wheel diameter, hardness and contact patch."""
    diameter = select_diameter(profile)
    return WheelSpec(
        diameter_mm=diameter,
        hardness=f"{select_durometer(profile)}A",
        contact_patch=contact_patch_for(diameter),
    )
