"""skatefit - skateboard setup recommendations from rider measurements and preferences."""

from skatefit.core.config import get_settings
from skatefit.core.enums import (
    BoardFeel,
    DeckSizing,
    Experience,
    Flexibility,
    RidingStyle,
    Terrain,
    UnitSystem,
)
from skatefit.core.logging import setup_logging
from skatefit.models.equipment import (
    DeckSpec,
    EquipmentSpec,
    Explanation,
    HardwareSpec,
    TruckSpec,
    WheelSpec,
)
from skatefit.models.rider import Incomplete, RiderProfile
from skatefit.services.engine import compute, recommend_from_form
from skatefit.services.intake import profile_from_form
from skatefit.services.units import normalize

setup_logging(get_settings().log_level)

__all__ = [
    "compute",
    "recommend_from_form",
    "profile_from_form",
    "normalize",
    "RiderProfile",
    "Incomplete",
    "EquipmentSpec",
    "DeckSpec",
    "TruckSpec",
    "WheelSpec",
    "HardwareSpec",
    "Explanation",
    "Experience",
    "RidingStyle",
    "Terrain",
    "Flexibility",
    "BoardFeel",
    "DeckSizing",
    "UnitSystem",
]
