"""Hardware selection: bearings, risers, bolts, bushings and setup weight.

Riser/bolt priority chain (first match wins):
  - wheels over 56mm → standard risers + longer bolts (wheel-bite clearance)
  - reinforced deck (durable feel or rider over 100kg) → hard risers
  - grippy feel → soft risers
  - otherwise → no risers, shortest bolts
"""

from skatefit.core.enums import (
    BearingRating,
    BoardFeel,
    Construction,
    Experience,
    RidingStyle,
)
from skatefit.models.equipment import DeckSpec, HardwareSpec, WheelSpec
from skatefit.models.rider import RiderProfile

# =============================================================================
# Constants
# =============================================================================

ABEC_7_STYLES = frozenset({RidingStyle.LONGBOARD, RidingStyle.CRUISING})
ABEC_7_EXPERIENCE = frozenset({Experience.COMFORTABLE, Experience.ADVANCED})

RISER_WHEEL_DIAMETER_MM = 56

STANDARD_RISERS = ('1/8" Standard Risers', '1.25"')
HARD_RISERS = ('1/8" Hard Risers', '1.25"')
SOFT_RISERS = ('1/16" Soft Risers', '1.125"')
NO_RISERS = ("None", '1"')

HEAVY_RIDER_KG = 80.0
LIGHT_RIDER_KG = 60.0
LOW_STABILITY_MAX = 3
HIGH_STABILITY_MIN = 7

BUSHING_SOFT = "87A"
BUSHING_MEDIUM = "91A"
BUSHING_HARD = "94A"

SETUP_WEIGHT_BY_BOARD_FEEL: dict[BoardFeel, str] = {
    BoardFeel.LIGHT: "Light (7-8 lbs)",
    BoardFeel.DURABLE: "Heavy (9-10 lbs)",
}
DEFAULT_SETUP_WEIGHT = "Medium (8-9 lbs)"


# =============================================================================
# Hardware Selector
# =============================================================================


def select_bearing_rating(profile: RiderProfile) -> BearingRating:
    if (
        profile.riding_style in ABEC_7_STYLES
        or profile.experience in ABEC_7_EXPERIENCE
        or profile.board_feel == BoardFeel.LIGHT
    ):
        return BearingRating.ABEC_7
    return BearingRating.ABEC_5


def select_risers(
    profile: RiderProfile, deck: DeckSpec, wheels: WheelSpec
) -> tuple[str, str]:
    """Return ``(risers, hardware_length)``."""
    if wheels.diameter_mm > RISER_WHEEL_DIAMETER_MM:
        return STANDARD_RISERS
    if deck.construction == Construction.REINFORCED:
        return HARD_RISERS
    if profile.board_feel == BoardFeel.GRIPPY:
        return SOFT_RISERS
    return NO_RISERS


def select_bushing_durometer(profile: RiderProfile) -> str:
    if profile.weight_kg > HEAVY_RIDER_KG or profile.stability_preference <= LOW_STABILITY_MAX:
        return BUSHING_HARD
    if profile.weight_kg < LIGHT_RIDER_KG and profile.stability_preference >= HIGH_STABILITY_MIN:
        return BUSHING_SOFT
    return BUSHING_MEDIUM


def select_hardware(
    profile: RiderProfile, deck: DeckSpec, wheels: WheelSpec
) -> HardwareSpec:
    """Derive bearings, risers, bolt length, bushings and setup weight."""
    risers, hardware_length = select_risers(profile, deck, wheels)
    return HardwareSpec(
        bearing_rating=select_bearing_rating(profile),
        hardware_length=hardware_length,
        risers=risers,
        bushing_durometer=select_bushing_durometer(profile),
        setup_weight=SETUP_WEIGHT_BY_BOARD_FEEL.get(profile.board_feel, DEFAULT_SETUP_WEIGHT),  # type: ignore[arg-type]
    )
