"""Recommendation engine.

Runs the full pipeline for one rider:

    deck → trucks (needs deck width) → wheels → hardware (needs deck
    construction and wheel diameter) → explanations

Every stage is a pure function of its inputs. Nothing is cached between
calls; identical profiles always produce identical specs.
"""

import logging
from typing import Any, Mapping

from skatefit.core.config import Settings, get_settings
from skatefit.core.logging import log_incomplete, log_recommendation
from skatefit.models.equipment import EquipmentSpec
from skatefit.models.rider import Incomplete, RiderProfile
from skatefit.services.deck import size_deck
from skatefit.services.explain import describe_components, explain
from skatefit.services.hardware import select_hardware
from skatefit.services.intake import profile_from_form
from skatefit.services.trucks import select_trucks
from skatefit.services.wheels import select_wheels

logger = logging.getLogger(__name__)


def compute(
    profile: RiderProfile, settings: Settings | None = None
) -> EquipmentSpec | Incomplete:
    """Compute a full equipment spec, or Incomplete if required input is missing."""
    if not profile.is_complete:
        log_incomplete(profile.missing_fields)
        return Incomplete(missing=profile.missing_fields)

    if settings is None:
        settings = get_settings()

    deck = size_deck(profile, settings.deck_sizing)
    trucks = select_trucks(profile, deck)
    wheels = select_wheels(profile)
    hardware = select_hardware(profile, deck, wheels)

    spec = EquipmentSpec(
        deck=deck,
        trucks=trucks,
        wheels=wheels,
        hardware=hardware,
        explanations=explain(profile, deck, trucks, wheels, hardware, settings.display_units),
        notes=describe_components(
            profile, deck, trucks, wheels, hardware, settings.display_units
        ),
    )

    log_recommendation(
        profile.riding_style.value,  # type: ignore[union-attr]
        deck.width,
        wheels=f"{wheels.diameter_mm}mm/{wheels.hardness}",
        trucks=trucks.tightness.value,
        strategy=settings.deck_sizing.value,
    )
    return spec


def recommend_from_form(
    form: Mapping[str, Any], settings: Settings | None = None
) -> EquipmentSpec | Incomplete:
    """Parse raw form values and compute a spec in one call."""
    profile = profile_from_form(form)
    if isinstance(profile, Incomplete):
        return profile
    return compute(profile, settings)
