"""Unit normalization for rider measurements.

Converts regional height, weight and shoe-size inputs into the canonical
units the engine works in: centimeters, kilograms and EU shoe sizes.
Nothing is rounded here; precision is carried forward to the sizers.

## Conversions
    cm = feet × 30.48 + inches × 2.54
    kg = lbs × 0.453592
    EU = size + offset(region, gender)
"""

import logging

from skatefit.core.enums import HeightUnit, ShoeGender, ShoeRegion, WeightUnit
from skatefit.models.rider import NormalizedMeasurements

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

CM_PER_FOOT = 30.48
CM_PER_INCH = 2.54
KG_PER_LB = 0.453592
INCHES_PER_FOOT = 12

# Additive offset that converts a regional shoe size to EU
SHOE_TO_EU_OFFSET: dict[tuple[ShoeRegion, ShoeGender], float] = {
    (ShoeRegion.US, ShoeGender.MEN): 32.5,
    (ShoeRegion.US, ShoeGender.WOMEN): 30.5,
    (ShoeRegion.UK, ShoeGender.MEN): 33.0,
    (ShoeRegion.UK, ShoeGender.WOMEN): 33.0,
    (ShoeRegion.EU, ShoeGender.MEN): 0.0,
    (ShoeRegion.EU, ShoeGender.WOMEN): 0.0,
    (ShoeRegion.CN, ShoeGender.MEN): -18.0,
    (ShoeRegion.CN, ShoeGender.WOMEN): -18.0,
    (ShoeRegion.JP, ShoeGender.MEN): -18.0,
    (ShoeRegion.JP, ShoeGender.WOMEN): -18.0,
    (ShoeRegion.BR, ShoeGender.MEN): 4.0,
    (ShoeRegion.BR, ShoeGender.WOMEN): 2.0,
}

# US men's sizing is what the banded deck chart is written in
EU_TO_US_MEN_OFFSET = SHOE_TO_EU_OFFSET[(ShoeRegion.US, ShoeGender.MEN)]


# =============================================================================
# Canonical conversions
# =============================================================================


def height_to_cm(
    raw_height: float | tuple[float, float],
    unit: HeightUnit | str | None = HeightUnit.CM,
) -> float:
    """Convert a height to centimeters.

    For feet+inches pass ``(feet, inches)``; a bare number is taken as feet.
    Unknown units pass the value through unchanged.
    """
    height_unit = HeightUnit.from_string(unit)
    if height_unit == HeightUnit.FT_IN:
        if isinstance(raw_height, tuple):
            feet, inches = raw_height
        else:
            feet, inches = raw_height, 0.0
        return feet * CM_PER_FOOT + inches * CM_PER_INCH

    if isinstance(raw_height, tuple):
        return raw_height[0]
    return raw_height


def weight_to_kg(raw_weight: float, unit: WeightUnit | str | None = WeightUnit.KG) -> float:
    """Convert a weight to kilograms. Unknown units pass through."""
    if WeightUnit.from_string(unit) == WeightUnit.LBS:
        return raw_weight * KG_PER_LB
    return raw_weight


def shoe_to_eu(
    raw_shoe: float,
    region: ShoeRegion | str | None = ShoeRegion.EU,
    gender: ShoeGender | str | None = ShoeGender.MEN,
) -> float:
    """Convert a regional shoe size to EU.

    An unknown region/gender pair returns the input unchanged.
    """
    key = (ShoeRegion.from_string(region), ShoeGender.from_string(gender))
    offset = SHOE_TO_EU_OFFSET.get(key)  # type: ignore[arg-type]
    if offset is None:
        logger.debug("No shoe conversion for %s/%s, passing through", region, gender)
        return raw_shoe
    return raw_shoe + offset


def normalize(
    raw_height: float | tuple[float, float],
    height_unit: HeightUnit | str | None,
    raw_weight: float,
    weight_unit: WeightUnit | str | None,
    raw_shoe: float,
    shoe_region: ShoeRegion | str | None,
    shoe_gender: ShoeGender | str | None,
) -> NormalizedMeasurements:
    """Convert raw user-entered measurements into canonical units."""
    return NormalizedMeasurements(
        height_cm=height_to_cm(raw_height, height_unit),
        weight_kg=weight_to_kg(raw_weight, weight_unit),
        shoe_size_eu=shoe_to_eu(raw_shoe, shoe_region, shoe_gender),
    )


# =============================================================================
# Display conversions
# =============================================================================


def eu_to_us_men(shoe_size_eu: float) -> float:
    return shoe_size_eu - EU_TO_US_MEN_OFFSET


def kg_to_lbs(weight_kg: float) -> float:
    return weight_kg / KG_PER_LB


def cm_to_feet_inches(height_cm: float) -> tuple[int, int]:
    """Convert centimeters to whole feet and rounded inches, e.g. 177.8 → (5, 10)."""
    total_inches = round(height_cm / CM_PER_INCH)
    return total_inches // INCHES_PER_FOOT, total_inches % INCHES_PER_FOOT
