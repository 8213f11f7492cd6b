"""Narrative explanations for a computed setup.

Pure templating: computed values and categorical labels are substituted
into fixed sentence templates. The only arithmetic is unit redisplay
(kg → lbs, cm → ft/in) when imperial output is requested.
"""

from skatefit.core.enums import (
    BoardFeel,
    Concave,
    Experience,
    Flexibility,
    Responsiveness,
    RidingStyle,
    UnitSystem,
)
from skatefit.models.equipment import (
    ComponentNotes,
    DeckSpec,
    Explanation,
    HardwareSpec,
    TruckSpec,
    WheelSpec,
)
from skatefit.models.rider import RiderProfile
from skatefit.services.units import cm_to_feet_inches, kg_to_lbs

# Riders above this weight get a load-distribution note
LOAD_NOTE_WEIGHT_KG = 80.0

# =============================================================================
# Templates
# =============================================================================

CONCAVE_TEMPLATES: dict[Concave, str] = {
    Concave.MELLOW: "A mellow concave keeps the standing platform flat and relaxed for long pushes.",
    Concave.MEDIUM: "A medium concave gives your feet a secure pocket without locking them in.",
    Concave.DEEP: "A deep concave locks your feet in and sharpens edge feedback for flicks and carves.",
}

RESPONSIVENESS_TEMPLATES: dict[Responsiveness, str] = {
    Responsiveness.HIGH: "Trucks will react to the slightest lean, so expect sharp, quick turns.",
    Responsiveness.QUICK: "Trucks turn readily with a light lean while keeping some return force.",
    Responsiveness.STANDARD: "Trucks balance turning ease and straight-line composure.",
    Responsiveness.CONTROLLED: "Trucks resist casual lean, keeping you steady as speed builds.",
    Responsiveness.SMOOTH: "Trucks turn in slow, predictable arcs and damp out speed wobbles.",
}

EXPERIENCE_TEMPLATES: dict[Experience, str] = {
    Experience.BEGINNER: (
        "As a beginner you get a slightly wider deck and trucks no looser than Medium, "
        "trading some agility for a forgiving, stable platform while you learn."
    ),
    Experience.INTERMEDIATE: (
        "At an intermediate level the setup stays neutral, so it will not fight you "
        "as you start to progress into new tricks or lines."
    ),
    Experience.COMFORTABLE: (
        "Being comfortable on a board, you get faster bearings and only a touch of "
        "extra width for confidence at speed."
    ),
    Experience.ADVANCED: (
        "As an advanced rider you get a narrower deck and precision bearings, "
        "favouring quick response over built-in stability."
    ),
}

FLEXIBILITY_TEMPLATES: dict[Flexibility, str] = {
    Flexibility.LOW: (
        "With limited flexibility, a mellow board shape and smoother truck response "
        "reduce strain on ankles and knees."
    ),
    Flexibility.MEDIUM: (
        "Average flexibility suits a standard concave and neutral truck feel."
    ),
    Flexibility.HIGH: (
        "High flexibility lets you use a deeper concave and livelier trucks "
        "to get the most out of every movement."
    ),
}

BOARD_FEEL_TEMPLATES: dict[BoardFeel, str] = {
    BoardFeel.LIGHT: (
        "You asked for a light feel: lighter construction, slightly smaller and harder "
        "wheels, and precision bearings keep the setup nimble."
    ),
    BoardFeel.DURABLE: (
        "You asked for durability: a reinforced deck, hard risers and mid-range "
        "wheel hardness stand up to heavy use."
    ),
    BoardFeel.GRIPPY: (
        "You asked for grip: a grip-enhanced deck and softer wheels keep you "
        "planted, with soft risers to absorb vibration."
    ),
}


# =============================================================================
# Unit redisplay
# =============================================================================


def format_weight(weight_kg: float, units: UnitSystem = UnitSystem.METRIC) -> str:
    if units == UnitSystem.IMPERIAL:
        return f"{kg_to_lbs(weight_kg):.0f}lbs"
    return f"{weight_kg:g}kg"


def format_height(height_cm: float, units: UnitSystem = UnitSystem.METRIC) -> str:
    if units == UnitSystem.IMPERIAL:
        feet, inches = cm_to_feet_inches(height_cm)
        return f"{feet}'{inches}\""
    return f"{height_cm:g}cm"


# =============================================================================
# Explanation Generator
# =============================================================================


def explain(
    profile: RiderProfile,
    deck: DeckSpec,
    trucks: TruckSpec,
    wheels: WheelSpec,
    hardware: HardwareSpec,
    units: UnitSystem = UnitSystem.METRIC,
) -> tuple[Explanation, ...]:
    """Build the ordered, labelled explanation fragments for a setup."""
    fragments = [
        Explanation(
            label="Center of Gravity",
            text=(
                f"Your {deck.width}\" deck width lowers your center of gravity relative to "
                f"your shoe size, improving balance and control. {CONCAVE_TEMPLATES[deck.concave]}"
            ),
        ),
        Explanation(
            label="Rotational Physics",
            text=(
                f"The {deck.wheelbase}\" wheelbase creates optimal moment of inertia - longer "
                f"for stability, shorter for quick turns. "
                f"{RESPONSIVENESS_TEMPLATES[trucks.responsiveness]}"
            ),
        ),
        Explanation(
            label="Rolling Dynamics",
            text=(
                f"{wheels.diameter_mm}mm wheels with {wheels.hardness} hardness minimize "
                f"rolling resistance while maximizing grip for your terrain."
            ),
        ),
    ]

    if profile.weight_kg > LOAD_NOTE_WEIGHT_KG:
        fragments.append(
            Explanation(
                label="Load Distribution",
                text=(
                    f"Your weight ({format_weight(profile.weight_kg, units)}) requires "
                    f"{trucks.tightness.value.lower()} trucks and {hardware.bushing_durometer} "
                    f"bushings to maintain proper load distribution and prevent speed wobbles."
                ),
            )
        )

    fragments.append(
        Explanation(
            label="Biomechanics",
            text=(
                f"Setup optimized for your height ({format_height(profile.height_cm, units)}) "
                f"ensures natural stance width and efficient power transfer."
            ),
        )
    )

    if profile.experience is not None:
        fragments.append(
            Explanation(label="Experience", text=EXPERIENCE_TEMPLATES[profile.experience])
        )
    if profile.flexibility is not None:
        fragments.append(
            Explanation(label="Flexibility", text=FLEXIBILITY_TEMPLATES[profile.flexibility])
        )
    if profile.board_feel is not None:
        fragments.append(
            Explanation(label="Board Feel", text=BOARD_FEEL_TEMPLATES[profile.board_feel])
        )

    return tuple(fragments)


def describe_components(
    profile: RiderProfile,
    deck: DeckSpec,
    trucks: TruckSpec,
    wheels: WheelSpec,
    hardware: HardwareSpec,
    units: UnitSystem = UnitSystem.METRIC,
) -> ComponentNotes:
    """Short per-component summaries, one for each result card."""
    deck_note = f"Width {deck.width}\" matches your shoe size for optimal foot placement. "
    if profile.riding_style == RidingStyle.STREET:
        deck_note += "Narrower deck chosen for easier flip tricks and technical maneuvers."
    elif profile.riding_style == RidingStyle.CRUISING:
        deck_note += "Wider deck provides more stability and comfort for cruising."
    else:
        deck_note += (
            f"Length {deck.length}\" provides good balance for your height and riding style."
        )

    style = profile.riding_style.value if profile.riding_style else "your riding"
    terrain = profile.terrain.value if profile.terrain else "your"

    return ComponentNotes(
        deck=deck_note,
        trucks=(
            f"{trucks.height.value} trucks chosen for your riding style. "
            f"{trucks.tightness.value} tightness recommended based on your weight "
            f"({format_weight(profile.weight_kg, units)}) and stability preference."
        ),
        wheels=(
            f"{wheels.diameter_mm}mm wheels balance speed and maneuverability for {style}. "
            f"{wheels.hardness} hardness provides optimal grip for {terrain} terrain."
        ),
        hardware=(
            f"{hardware.bearing_rating.value} bearings provide good performance for your "
            f"riding style. {hardware.hardware_length} hardware ensures proper assembly."
        ),
    )
