"""Deck sizing.

Two sizing algorithms exist and are never mixed within one computation:

- CONTINUOUS (default): width from an EU shoe-size table plus style and
  experience adjustments; length from rider height; wheelbase from length
  shifted by stability preference. Rounded to 0.1".
- BANDED: width from US men's shoe-size bands plus height bands and the
  same style adjustment, clamped to [7.75, 10.0] and rounded to 1/8";
  wheelbase and length come from fixed per-style bands.

Concave and construction are shared by both algorithms.
"""

import math

from skatefit.core.enums import (
    CONCAVE_SCALE,
    BoardFeel,
    Concave,
    Construction,
    DeckSizing,
    Experience,
    Flexibility,
    RidingStyle,
)
from skatefit.models.equipment import DeckSpec
from skatefit.models.rider import RiderProfile
from skatefit.services.units import eu_to_us_men
from skatefit.utils.converters import clamp

# =============================================================================
# Constants
# =============================================================================

DEFAULT_DECK_WIDTH = 8.0

# Deck width (inches) by EU shoe size
DECK_WIDTH_BY_EU_SHOE: dict[int, float] = {
    35: 7.5,
    36: 7.6,
    37: 7.7,
    38: 7.8,
    39: 7.9,
    40: 8.0,
    41: 8.1,
    42: 8.2,
    43: 8.3,
    44: 8.4,
    45: 8.5,
    46: 8.6,
    47: 8.7,
    48: 8.8,
    49: 8.9,
    50: 9.0,
}

# Street goes narrower for flip tricks, cruising/longboard wider for comfort
WIDTH_ADJUSTMENT_BY_STYLE: dict[RidingStyle, float] = {
    RidingStyle.STREET: -0.1,
    RidingStyle.PARK: 0.1,
    RidingStyle.CRUISING: 0.2,
    RidingStyle.LONGBOARD: 0.5,
    RidingStyle.MIXED: 0.0,
}

WIDTH_ADJUSTMENT_BY_EXPERIENCE: dict[Experience, float] = {
    Experience.BEGINNER: 0.2,
    Experience.INTERMEDIATE: 0.0,
    Experience.COMFORTABLE: 0.05,
    Experience.ADVANCED: -0.1,
}

LENGTH_PER_CM_HEIGHT = 0.18
BASE_LENGTH_INCHES = 10.0

LENGTH_ADJUSTMENT_BY_STYLE: dict[RidingStyle, float] = {
    RidingStyle.STREET: -2.0,
    RidingStyle.PARK: 0.0,
    RidingStyle.CRUISING: 3.0,
    RidingStyle.LONGBOARD: 15.0,
    RidingStyle.MIXED: 1.0,
}

WHEELBASE_RATIO = 0.65
WHEELBASE_PER_STABILITY_STEP = 0.5
NEUTRAL_STABILITY = 5

# Banded chart: (upper US men's size bound exclusive, width)
BANDED_WIDTH_BY_US_SHOE: list[tuple[float, float]] = [
    (8.0, 7.875),
    (10.0, 8.25),
]
BANDED_WIDTH_LARGE_FEET = 9.0
BANDED_HEIGHT_MID_CM = (163.0, 180.0)
BANDED_HEIGHT_MID_BONUS = 0.25
BANDED_HEIGHT_TALL_BONUS = 0.5
BANDED_WIDTH_MIN = 7.75
BANDED_WIDTH_MAX = 10.0

# (wheelbase, length offset) per style
BANDED_WHEELBASE_BY_STYLE: dict[RidingStyle, tuple[float, float]] = {
    RidingStyle.STREET: (13.5, 18.0),
    RidingStyle.PARK: (14.25, 18.0),
    RidingStyle.MIXED: (14.25, 18.0),
    RidingStyle.CRUISING: (15.0, 20.0),
    RidingStyle.LONGBOARD: (15.0, 20.0),
}
BANDED_DEFAULT_WHEELBASE = (14.25, 18.0)

CONCAVE_BY_FLEXIBILITY: dict[Flexibility, Concave] = {
    Flexibility.LOW: Concave.MELLOW,
    Flexibility.MEDIUM: Concave.MEDIUM,
    Flexibility.HIGH: Concave.DEEP,
}

CONSTRUCTION_BY_BOARD_FEEL: dict[BoardFeel, Construction] = {
    BoardFeel.LIGHT: Construction.LIGHTWEIGHT,
    BoardFeel.DURABLE: Construction.REINFORCED,
    BoardFeel.GRIPPY: Construction.GRIP,
}

# Above this rider weight the deck is always reinforced
REINFORCED_WEIGHT_KG = 100.0


# =============================================================================
# Helpers
# =============================================================================


def _round_tenth(value: float) -> float:
    """Round half up to 0.1", e.g. 7.85 → 7.9."""
    scaled = value * 10
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 10


def _round_eighth(value: float) -> float:
    """Round half up to the nearest 1/8"."""
    return math.floor(value * 8 + 0.5) / 8


# =============================================================================
# Width / length / wheelbase
# =============================================================================


def base_width_for_shoe(shoe_size_eu: float) -> float:
    """Deck width for an EU shoe size, before any adjustment."""
    return DECK_WIDTH_BY_EU_SHOE.get(math.floor(shoe_size_eu + 0.5), DEFAULT_DECK_WIDTH)


def _continuous_dimensions(profile: RiderProfile) -> tuple[float, float, float]:
    width = base_width_for_shoe(profile.shoe_size_eu)
    width += WIDTH_ADJUSTMENT_BY_STYLE.get(profile.riding_style, 0.0)  # type: ignore[arg-type]
    width += WIDTH_ADJUSTMENT_BY_EXPERIENCE.get(profile.experience, 0.0)  # type: ignore[arg-type]

    length = profile.height_cm * LENGTH_PER_CM_HEIGHT + BASE_LENGTH_INCHES
    length += LENGTH_ADJUSTMENT_BY_STYLE.get(profile.riding_style, 0.0)  # type: ignore[arg-type]

    wheelbase = length * WHEELBASE_RATIO
    wheelbase += (profile.stability_preference - NEUTRAL_STABILITY) * WHEELBASE_PER_STABILITY_STEP

    return _round_tenth(width), _round_tenth(length), _round_tenth(wheelbase)


def _banded_dimensions(profile: RiderProfile) -> tuple[float, float, float]:
    us_size = eu_to_us_men(profile.shoe_size_eu)
    width = BANDED_WIDTH_LARGE_FEET
    for upper, band_width in BANDED_WIDTH_BY_US_SHOE:
        if us_size < upper:
            width = band_width
            break

    low_cm, high_cm = BANDED_HEIGHT_MID_CM
    if profile.height_cm > high_cm:
        width += BANDED_HEIGHT_TALL_BONUS
    elif profile.height_cm >= low_cm:
        width += BANDED_HEIGHT_MID_BONUS

    width += WIDTH_ADJUSTMENT_BY_STYLE.get(profile.riding_style, 0.0)  # type: ignore[arg-type]
    width = clamp(width, BANDED_WIDTH_MIN, BANDED_WIDTH_MAX)

    wheelbase, length_offset = BANDED_WHEELBASE_BY_STYLE.get(
        profile.riding_style, BANDED_DEFAULT_WHEELBASE  # type: ignore[arg-type]
    )
    return _round_eighth(width), _round_eighth(wheelbase + length_offset), _round_tenth(wheelbase)


# =============================================================================
# Concave / construction
# =============================================================================


def select_concave(profile: RiderProfile) -> Concave:
    """Concave from flexibility, with street and cruising overrides.

    Street never goes below Medium (foot lock for flip tricks); cruising
    backs off one step toward Mellow.
    """
    concave = CONCAVE_BY_FLEXIBILITY.get(profile.flexibility, Concave.MEDIUM)  # type: ignore[arg-type]
    index = CONCAVE_SCALE.index(concave)

    if profile.riding_style == RidingStyle.STREET:
        index = max(index, CONCAVE_SCALE.index(Concave.MEDIUM))
    elif profile.riding_style == RidingStyle.CRUISING:
        index = max(index - 1, 0)

    return CONCAVE_SCALE[index]


def select_construction(profile: RiderProfile) -> Construction:
    if profile.weight_kg > REINFORCED_WEIGHT_KG:
        return Construction.REINFORCED
    return CONSTRUCTION_BY_BOARD_FEEL.get(profile.board_feel, Construction.STANDARD)  # type: ignore[arg-type]


# =============================================================================
# Deck Sizer
# =============================================================================


def size_deck(
    profile: RiderProfile,
    strategy: DeckSizing = DeckSizing.CONTINUOUS,
) -> DeckSpec:
    """Derive deck dimensions, concave and construction for a rider."""
    if strategy == DeckSizing.BANDED:
        width, length, wheelbase = _banded_dimensions(profile)
    else:
        width, length, wheelbase = _continuous_dimensions(profile)

    return DeckSpec(
        width=width,
        length=length,
        wheelbase=wheelbase,
        concave=select_concave(profile),
        construction=select_construction(profile),
    )
