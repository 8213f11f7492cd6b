from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from skatefit.core.enums import (
    BoardFeel,
    Experience,
    Flexibility,
    RidingStyle,
    Terrain,
)


class NormalizedMeasurements(BaseModel):
    """Body measurements in canonical units (cm, kg, EU shoe size)."""

    model_config = ConfigDict(frozen=True)

    height_cm: float
    weight_kg: float
    shoe_size_eu: float


class RiderProfile(BaseModel):
    """Rider inputs in canonical units.

    Zero measurements and missing categories are allowed here so that a
    half-filled form can still be represented; the engine checks
    ``is_complete`` before computing anything.
    """

    model_config = ConfigDict(frozen=True)

    height_cm: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    weight_kg: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    shoe_size_eu: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    experience: Optional[Experience] = None
    riding_style: Optional[RidingStyle] = None
    terrain: Optional[Terrain] = None
    stability_preference: int = Field(default=5, ge=1, le=10)  # 1 maneuverable, 10 stable
    flexibility: Optional[Flexibility] = None
    board_feel: Optional[BoardFeel] = None

    @property
    def missing_fields(self) -> tuple[str, ...]:
        missing = []
        for name in ("height_cm", "weight_kg", "shoe_size_eu"):
            if getattr(self, name) <= 0:
                missing.append(name)
        for name in ("experience", "riding_style", "terrain"):
            if getattr(self, name) is None:
                missing.append(name)
        return tuple(missing)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields


class Incomplete(BaseModel):
    """Result returned instead of a spec when the profile lacks required input."""

    model_config = ConfigDict(frozen=True)

    missing: tuple[str, ...] = ()
