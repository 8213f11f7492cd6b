"""Truck selection.

Truck width always equals deck width so the axle sits flush with the deck
edge. Tightness comes from the stability slider (``11 - stability`` as a
response level), then an experience pass corrects it; responsiveness is
the inverse of tightness with flexibility and board-feel overrides.
"""

from skatefit.core.enums import (
    RESPONSIVENESS_SCALE,
    TIGHTNESS_SCALE,
    BoardFeel,
    Experience,
    Flexibility,
    Responsiveness,
    RidingStyle,
    Tightness,
    TruckHeight,
)
from skatefit.models.equipment import DeckSpec, TruckSpec
from skatefit.models.rider import RiderProfile

# =============================================================================
# Constants
# =============================================================================

TRUCK_HEIGHT_BY_STYLE: dict[RidingStyle, TruckHeight] = {
    RidingStyle.STREET: TruckHeight.LOW,
    RidingStyle.PARK: TruckHeight.MID,
    RidingStyle.CRUISING: TruckHeight.HIGH,
    RidingStyle.LONGBOARD: TruckHeight.HIGH,
    RidingStyle.MIXED: TruckHeight.MID,
}

# (max response level inclusive, tightness)
TIGHTNESS_BY_RESPONSE_LEVEL: list[tuple[int, Tightness]] = [
    (3, Tightness.LOOSE),
    (5, Tightness.MEDIUM_LOOSE),
    (7, Tightness.MEDIUM),
    (9, Tightness.MEDIUM_TIGHT),
]

# Advanced riders at or below this stability loosen Medium by one step
ADVANCED_LOOSEN_MAX_STABILITY = 5

RESPONSIVENESS_BY_TIGHTNESS: dict[Tightness, Responsiveness] = {
    Tightness.LOOSE: Responsiveness.HIGH,
    Tightness.MEDIUM_LOOSE: Responsiveness.QUICK,
    Tightness.MEDIUM: Responsiveness.STANDARD,
    Tightness.MEDIUM_TIGHT: Responsiveness.CONTROLLED,
    Tightness.TIGHT: Responsiveness.SMOOTH,
}

RESPONSIVENESS_BY_FLEXIBILITY: dict[Flexibility, Responsiveness] = {
    Flexibility.LOW: Responsiveness.SMOOTH,
    Flexibility.HIGH: Responsiveness.HIGH,
}


# =============================================================================
# Truck Selector
# =============================================================================


def response_level(stability_preference: int) -> int:
    return 11 - stability_preference


def select_tightness(profile: RiderProfile) -> Tightness:
    """Map the stability slider onto the 5-point tightness scale."""
    level = response_level(profile.stability_preference)
    tightness = Tightness.TIGHT
    for max_level, candidate in TIGHTNESS_BY_RESPONSE_LEVEL:
        if level <= max_level:
            tightness = candidate
            break

    index = TIGHTNESS_SCALE.index(tightness)
    if profile.experience == Experience.BEGINNER:
        index = max(index, TIGHTNESS_SCALE.index(Tightness.MEDIUM))
    elif (
        profile.experience == Experience.ADVANCED
        and tightness == Tightness.MEDIUM
        and profile.stability_preference <= ADVANCED_LOOSEN_MAX_STABILITY
    ):
        index -= 1

    return TIGHTNESS_SCALE[index]


def select_responsiveness(profile: RiderProfile, tightness: Tightness) -> Responsiveness:
    responsiveness = RESPONSIVENESS_BY_TIGHTNESS[tightness]
    responsiveness = RESPONSIVENESS_BY_FLEXIBILITY.get(profile.flexibility, responsiveness)  # type: ignore[arg-type]

    # Durable builds and longboards cap at Standard
    if profile.board_feel == BoardFeel.DURABLE or profile.riding_style == RidingStyle.LONGBOARD:
        floor = RESPONSIVENESS_SCALE.index(Responsiveness.STANDARD)
        index = max(RESPONSIVENESS_SCALE.index(responsiveness), floor)
        responsiveness = RESPONSIVENESS_SCALE[index]

    return responsiveness


def select_trucks(profile: RiderProfile, deck: DeckSpec) -> TruckSpec:
    """Derive truck width, height, tightness and responsiveness."""
    tightness = select_tightness(profile)
    return TruckSpec(
        width=deck.width,
        height=TRUCK_HEIGHT_BY_STYLE.get(profile.riding_style, TruckHeight.MID),  # type: ignore[arg-type]
        tightness=tightness,
        responsiveness=select_responsiveness(profile, tightness),
    )
