"""Enums for rider inputs and equipment categories."""

from enum import Enum


class _LookupEnum(str, Enum):
    """String enum with tolerant parsing of form values."""

    @classmethod
    def from_string(cls, value: str | None):
        """Convert string to enum, returning None if invalid."""
        if not value:
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


# =============================================================================
# Rider inputs
# =============================================================================


class Experience(_LookupEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    COMFORTABLE = "comfortable"
    ADVANCED = "advanced"


class RidingStyle(_LookupEnum):
    STREET = "street"
    PARK = "park"
    CRUISING = "cruising"
    LONGBOARD = "longboard"
    MIXED = "mixed"


class Terrain(_LookupEnum):
    SMOOTH = "smooth"
    ROUGH = "rough"
    MIXED = "mixed"


class Flexibility(_LookupEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class BoardFeel(_LookupEnum):
    LIGHT = "light"
    DURABLE = "durable"
    GRIPPY = "grippy"


# =============================================================================
# Units
# =============================================================================


class HeightUnit(_LookupEnum):
    CM = "cm"
    FT_IN = "ft_in"

    @classmethod
    def from_string(cls, value: str | None) -> "HeightUnit | None":
        """Convert string to enum, handling common variations."""
        if not value:
            return None
        if isinstance(value, cls):
            return value
        mappings = {
            "cm": cls.CM,
            "centimeters": cls.CM,
            "ft_in": cls.FT_IN,
            "ft-in": cls.FT_IN,
            "ft": cls.FT_IN,
            "feet": cls.FT_IN,
            "imperial": cls.FT_IN,
        }
        return mappings.get(str(value).strip().lower())


class WeightUnit(_LookupEnum):
    KG = "kg"
    LBS = "lbs"

    @classmethod
    def from_string(cls, value: str | None) -> "WeightUnit | None":
        """Convert string to enum, handling common variations."""
        if not value:
            return None
        if isinstance(value, cls):
            return value
        mappings = {
            "kg": cls.KG,
            "kgs": cls.KG,
            "kilograms": cls.KG,
            "lb": cls.LBS,
            "lbs": cls.LBS,
            "pounds": cls.LBS,
        }
        return mappings.get(str(value).strip().lower())


class ShoeRegion(_LookupEnum):
    US = "us"
    UK = "uk"
    EU = "eu"
    CN = "cn"
    JP = "jp"
    BR = "br"


class ShoeGender(_LookupEnum):
    MEN = "men"
    WOMEN = "women"

    @classmethod
    def from_string(cls, value: str | None) -> "ShoeGender | None":
        if not value:
            return None
        if isinstance(value, cls):
            return value
        mappings = {
            "men": cls.MEN,
            "mens": cls.MEN,
            "male": cls.MEN,
            "m": cls.MEN,
            "women": cls.WOMEN,
            "womens": cls.WOMEN,
            "female": cls.WOMEN,
            "w": cls.WOMEN,
        }
        return mappings.get(str(value).strip().lower())


class UnitSystem(_LookupEnum):
    """Units used when numbers are redisplayed in explanations."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class DeckSizing(_LookupEnum):
    """Deck sizing algorithm. Only one is applied per computation."""

    CONTINUOUS = "continuous"
    BANDED = "banded"


# =============================================================================
# Equipment categories
# =============================================================================


class Concave(str, Enum):
    MELLOW = "Mellow"
    MEDIUM = "Medium"
    DEEP = "Deep"


class Construction(str, Enum):
    STANDARD = "7-ply Maple"
    LIGHTWEIGHT = "7-ply Lightweight Maple"
    REINFORCED = "8-ply Maple + Fiberglass Laminate"
    GRIP = "7-ply Maple + Grip Enhancement"


class TruckHeight(str, Enum):
    LOW = "Low"
    MID = "Mid"
    HIGH = "High"


class Tightness(str, Enum):
    """Ordered loosest to tightest."""

    LOOSE = "Loose"
    MEDIUM_LOOSE = "Medium-Loose"
    MEDIUM = "Medium"
    MEDIUM_TIGHT = "Medium-Tight"
    TIGHT = "Tight"


class Responsiveness(str, Enum):
    """Ordered most to least responsive."""

    HIGH = "High"
    QUICK = "Quick"
    STANDARD = "Standard"
    CONTROLLED = "Controlled"
    SMOOTH = "Smooth"


class ContactPatch(str, Enum):
    NARROW = "Narrow"
    MEDIUM = "Medium"
    WIDE = "Wide"


class BearingRating(str, Enum):
    ABEC_5 = "ABEC 5"
    ABEC_7 = "ABEC 7"


TIGHTNESS_SCALE: list[Tightness] = list(Tightness)
RESPONSIVENESS_SCALE: list[Responsiveness] = list(Responsiveness)
CONCAVE_SCALE: list[Concave] = list(Concave)
