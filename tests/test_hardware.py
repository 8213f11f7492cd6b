"""Tests for bearings, risers, bushings and setup weight."""

import pytest

from skatefit.core.enums import (
    BearingRating,
    BoardFeel,
    Experience,
    RidingStyle,
    Terrain,
)
from skatefit.models.equipment import HardwareSpec
from skatefit.models.rider import RiderProfile
from skatefit.services.deck import size_deck
from skatefit.services.hardware import (
    select_bearing_rating,
    select_bushing_durometer,
    select_hardware,
)
from skatefit.services.wheels import select_wheels


def _profile(**overrides) -> RiderProfile:
    defaults = {
        "height_cm": 175.0,
        "weight_kg": 70.0,
        "shoe_size_eu": 43,
        "experience": Experience.INTERMEDIATE,
        "riding_style": RidingStyle.STREET,
        "terrain": Terrain.SMOOTH,
        "stability_preference": 5,
    }
    defaults.update(overrides)
    return RiderProfile(**defaults)


def _hardware(**overrides) -> HardwareSpec:
    profile = _profile(**overrides)
    return select_hardware(profile, size_deck(profile), select_wheels(profile))


# ---------------------------------------------------------------------------
# Bearings
# ---------------------------------------------------------------------------


class TestBearings:
    def test_baseline_is_abec_5(self):
        assert select_bearing_rating(_profile()) == BearingRating.ABEC_5

    @pytest.mark.parametrize("experience", list(Experience))
    def test_longboard_always_abec_7(self, experience):
        profile = _profile(riding_style=RidingStyle.LONGBOARD, experience=experience)
        assert select_bearing_rating(profile) == BearingRating.ABEC_7

    def test_cruising_upgrades(self):
        assert select_bearing_rating(_profile(riding_style=RidingStyle.CRUISING)) == BearingRating.ABEC_7

    @pytest.mark.parametrize(
        "experience, expected",
        [
            (Experience.BEGINNER, BearingRating.ABEC_5),
            (Experience.INTERMEDIATE, BearingRating.ABEC_5),
            (Experience.COMFORTABLE, BearingRating.ABEC_7),
            (Experience.ADVANCED, BearingRating.ABEC_7),
        ],
    )
    def test_experience_upgrades(self, experience, expected):
        assert select_bearing_rating(_profile(experience=experience)) == expected

    def test_light_feel_upgrades(self):
        assert select_bearing_rating(_profile(board_feel=BoardFeel.LIGHT)) == BearingRating.ABEC_7


# ---------------------------------------------------------------------------
# Risers and bolts
# ---------------------------------------------------------------------------


class TestRisers:
    def test_big_wheels_get_standard_risers(self):
        hardware = _hardware(riding_style=RidingStyle.LONGBOARD, board_feel=BoardFeel.GRIPPY)
        assert hardware.risers == '1/8" Standard Risers'
        assert hardware.hardware_length == '1.25"'

    def test_56mm_wheels_do_not_trigger_risers(self):
        hardware = _hardware(riding_style=RidingStyle.PARK, terrain=Terrain.MIXED)
        assert hardware.risers == "None"
        assert hardware.hardware_length == '1"'

    def test_durable_gets_hard_risers(self):
        hardware = _hardware(board_feel=BoardFeel.DURABLE)
        assert hardware.risers == '1/8" Hard Risers'

    def test_heavy_rider_gets_hard_risers(self):
        hardware = _hardware(weight_kg=110)
        assert hardware.risers == '1/8" Hard Risers'

    def test_grippy_gets_soft_risers(self):
        hardware = _hardware(board_feel=BoardFeel.GRIPPY)
        assert hardware.risers == '1/16" Soft Risers'
        assert hardware.hardware_length == '1.125"'

    def test_default_no_risers(self):
        hardware = _hardware()
        assert hardware.risers == "None"
        assert hardware.hardware_length == '1"'


# ---------------------------------------------------------------------------
# Bushings
# ---------------------------------------------------------------------------


class TestBushings:
    @pytest.mark.parametrize("stability", range(1, 11))
    def test_heavy_rider_always_hard(self, stability):
        assert select_bushing_durometer(
            _profile(weight_kg=110, stability_preference=stability)
        ) == "94A"

    def test_low_stability_is_hard(self):
        assert select_bushing_durometer(_profile(stability_preference=2)) == "94A"

    def test_light_rider_high_stability_is_soft(self):
        assert select_bushing_durometer(_profile(weight_kg=55, stability_preference=8)) == "87A"

    def test_light_rider_neutral_stability_is_medium(self):
        assert select_bushing_durometer(_profile(weight_kg=55, stability_preference=5)) == "91A"

    def test_mid_weight_is_medium(self):
        assert select_bushing_durometer(_profile()) == "91A"


# ---------------------------------------------------------------------------
# Setup weight
# ---------------------------------------------------------------------------


class TestSetupWeight:
    @pytest.mark.parametrize(
        "feel, expected",
        [
            (BoardFeel.LIGHT, "Light (7-8 lbs)"),
            (BoardFeel.DURABLE, "Heavy (9-10 lbs)"),
            (BoardFeel.GRIPPY, "Medium (8-9 lbs)"),
            (None, "Medium (8-9 lbs)"),
        ],
    )
    def test_by_board_feel(self, feel, expected):
        assert _hardware(board_feel=feel).setup_weight == expected
