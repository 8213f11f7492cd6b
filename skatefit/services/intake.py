"""Form intake: raw form values → RiderProfile.

This is the only place raw user input enters the engine. Numbers are
parsed with ``safe_float``/``safe_int`` so malformed entries become zero
(and therefore "missing") instead of NaN, and unknown category strings
are treated as not provided.
"""

import logging
from typing import Any, Mapping

from skatefit.core.enums import (
    BoardFeel,
    Experience,
    Flexibility,
    HeightUnit,
    RidingStyle,
    Terrain,
)
from skatefit.models.rider import Incomplete, RiderProfile
from skatefit.services.units import normalize
from skatefit.utils.converters import clamp, safe_float, safe_int

logger = logging.getLogger(__name__)

DEFAULT_STABILITY = 5
STABILITY_RANGE = (1, 10)


def _raw_height(form: Mapping[str, Any]) -> float | tuple[float, float]:
    if HeightUnit.from_string(form.get("height_unit")) == HeightUnit.FT_IN:
        feet = safe_float(form.get("height_feet", form.get("height")))
        inches = safe_float(form.get("height_inches"))
        return (feet, inches)
    return safe_float(form.get("height"))


def parse_stability(value: Any) -> int:
    """Parse the stability slider; missing or zero falls back to 5."""
    stability = safe_int(value) or DEFAULT_STABILITY
    return int(clamp(stability, *STABILITY_RANGE))


def build_profile(form: Mapping[str, Any]) -> RiderProfile:
    """Build a profile from raw form values without checking completeness."""
    measurements = normalize(
        _raw_height(form),
        form.get("height_unit") or HeightUnit.CM,
        safe_float(form.get("weight")),
        form.get("weight_unit") or "kg",
        safe_float(form.get("shoe_size")),
        form.get("shoe_region") or "eu",
        form.get("shoe_gender") or "men",
    )

    return RiderProfile(
        # Negative sizes (e.g. after a CN/JP offset) and values that overflow
        # during conversion count as not provided
        height_cm=max(safe_float(measurements.height_cm), 0.0),
        weight_kg=max(safe_float(measurements.weight_kg), 0.0),
        shoe_size_eu=max(safe_float(measurements.shoe_size_eu), 0.0),
        experience=Experience.from_string(form.get("experience")),
        riding_style=RidingStyle.from_string(form.get("riding_style")),
        terrain=Terrain.from_string(form.get("terrain")),
        stability_preference=parse_stability(form.get("stability_preference")),
        flexibility=Flexibility.from_string(form.get("flexibility")),
        board_feel=BoardFeel.from_string(form.get("board_feel")),
    )


def profile_from_form(form: Mapping[str, Any]) -> RiderProfile | Incomplete:
    """Return a complete RiderProfile, or Incomplete listing what is missing."""
    profile = build_profile(form)
    if not profile.is_complete:
        logger.debug("Form incomplete: %s", ", ".join(profile.missing_fields))
        return Incomplete(missing=profile.missing_fields)
    return profile
