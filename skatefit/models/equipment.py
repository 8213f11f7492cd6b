from typing import Optional

from pydantic import BaseModel, ConfigDict

from skatefit.core.enums import (
    BearingRating,
    Concave,
    Construction,
    ContactPatch,
    Responsiveness,
    Tightness,
    TruckHeight,
)


class DeckSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float  # inches
    length: float  # inches
    wheelbase: float  # inches
    concave: Concave
    construction: Construction


class TruckSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float  # inches, always the deck width
    height: TruckHeight
    tightness: Tightness
    responsiveness: Responsiveness


class WheelSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    diameter_mm: int
    hardness: str  # e.g. "99A"
    contact_patch: ContactPatch

    @property
    def durometer(self) -> int:
        return int(self.hardness.rstrip("A"))


class HardwareSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    bearing_rating: BearingRating
    hardware_length: str  # e.g. '1.25"'
    risers: str  # e.g. '1/8" Standard Risers' or "None"
    bushing_durometer: str  # e.g. "91A"
    setup_weight: str  # e.g. "Medium (8-9 lbs)"


class Explanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str  # e.g. "Center of Gravity"
    text: str


class ComponentNotes(BaseModel):
    """One short paragraph per component card."""

    model_config = ConfigDict(frozen=True)

    deck: str
    trucks: str
    wheels: str
    hardware: str


class EquipmentSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    deck: DeckSpec
    trucks: TruckSpec
    wheels: WheelSpec
    hardware: HardwareSpec
    explanations: tuple[Explanation, ...] = ()
    notes: Optional[ComponentNotes] = None
