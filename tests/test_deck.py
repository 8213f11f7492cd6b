"""Tests for deck sizing, concave and construction."""

import pytest

from skatefit.core.enums import (
    BoardFeel,
    Concave,
    Construction,
    DeckSizing,
    Experience,
    Flexibility,
    RidingStyle,
    Terrain,
)
from skatefit.models.rider import RiderProfile
from skatefit.services.deck import (
    DECK_WIDTH_BY_EU_SHOE,
    _round_eighth,
    _round_tenth,
    base_width_for_shoe,
    select_concave,
    select_construction,
    size_deck,
)


def _profile(**overrides) -> RiderProfile:
    defaults = {
        "height_cm": 177.8,
        "weight_kg": 79.8,
        "shoe_size_eu": 42,
        "experience": Experience.INTERMEDIATE,
        "riding_style": RidingStyle.STREET,
        "terrain": Terrain.SMOOTH,
        "stability_preference": 5,
    }
    defaults.update(overrides)
    return RiderProfile(**defaults)


# ---------------------------------------------------------------------------
# Shoe-size width table
# ---------------------------------------------------------------------------


class TestShoeWidthTable:
    def test_monotonic_over_table(self):
        widths = [base_width_for_shoe(size) for size in range(35, 51)]
        assert widths == sorted(widths)

    def test_table_endpoints(self):
        assert base_width_for_shoe(35) == 7.5
        assert base_width_for_shoe(50) == 9.0
        assert len(DECK_WIDTH_BY_EU_SHOE) == 16

    def test_half_sizes_round_up(self):
        assert base_width_for_shoe(41.5) == 8.2

    def test_outside_table_defaults(self):
        assert base_width_for_shoe(30) == 8.0
        assert base_width_for_shoe(55) == 8.0


# ---------------------------------------------------------------------------
# Continuous sizing
# ---------------------------------------------------------------------------


class TestContinuousSizing:
    def test_street_intermediate_scenario(self):
        deck = size_deck(_profile())
        assert deck.width == 8.1
        assert deck.length == pytest.approx(40.0)
        assert deck.wheelbase == pytest.approx(26.0)

    def test_beginner_longboard_is_wider(self):
        deck = size_deck(
            _profile(
                shoe_size_eu=44,
                riding_style=RidingStyle.LONGBOARD,
                experience=Experience.BEGINNER,
            )
        )
        assert deck.width == pytest.approx(9.1)

    def test_advanced_rider_goes_narrower(self):
        intermediate = size_deck(_profile(riding_style=RidingStyle.MIXED))
        advanced = size_deck(
            _profile(riding_style=RidingStyle.MIXED, experience=Experience.ADVANCED)
        )
        assert advanced.width == pytest.approx(intermediate.width - 0.1)

    def test_longboard_is_much_longer(self):
        street = size_deck(_profile())
        longboard = size_deck(_profile(riding_style=RidingStyle.LONGBOARD))
        assert longboard.length - street.length == pytest.approx(17.0, abs=0.11)

    def test_stability_stretches_wheelbase(self):
        neutral = size_deck(_profile(stability_preference=5))
        stable = size_deck(_profile(stability_preference=10))
        nimble = size_deck(_profile(stability_preference=1))
        assert stable.wheelbase - neutral.wheelbase == pytest.approx(2.5, abs=0.11)
        assert neutral.wheelbase - nimble.wheelbase == pytest.approx(2.0, abs=0.11)

    def test_values_rounded_to_tenth(self):
        deck = size_deck(_profile(height_cm=171.3))
        for value in (deck.width, deck.length, deck.wheelbase):
            assert round(value, 1) == value

    @pytest.mark.parametrize(
        "shoe, style, expected",
        [
            (38, RidingStyle.MIXED, 7.9),
            (42, RidingStyle.MIXED, 8.3),
            (36, RidingStyle.MIXED, 7.7),
        ],
    )
    def test_comfortable_half_step_rounds_up(self, shoe, style, expected):
        deck = size_deck(
            _profile(shoe_size_eu=shoe, riding_style=style, experience=Experience.COMFORTABLE)
        )
        assert deck.width == expected

    def test_huge_height_does_not_overflow(self):
        deck = size_deck(_profile(height_cm=1e308))
        assert deck.width == 8.1
        assert deck.length > 0


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (7.25, 7.3),
            (7.85, 7.9),
            (7.24, 7.2),
            (8.2 - 0.1, 8.1),
            (40.004, 40.0),
        ],
    )
    def test_tenth_rounds_half_up(self, value, expected):
        assert _round_tenth(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (8.4375, 8.5),
            (8.4, 8.375),
            (7.775, 7.75),
        ],
    )
    def test_eighth_rounds_half_up(self, value, expected):
        assert _round_eighth(value) == expected


# ---------------------------------------------------------------------------
# Banded sizing
# ---------------------------------------------------------------------------


class TestBandedSizing:
    def test_street_mid_height(self):
        deck = size_deck(_profile(), DeckSizing.BANDED)
        # US 9.5 → 8.25, +0.25 height band, -0.1 street → 8.4 → 8.375
        assert deck.width == 8.375
        assert deck.wheelbase == 13.5
        assert deck.length == 31.5

    def test_cruising_bands(self):
        deck = size_deck(_profile(riding_style=RidingStyle.CRUISING), DeckSizing.BANDED)
        assert deck.wheelbase == 15.0
        assert deck.length == 35.0

    def test_clamped_at_maximum(self):
        deck = size_deck(
            _profile(shoe_size_eu=50, height_cm=195, riding_style=RidingStyle.LONGBOARD),
            DeckSizing.BANDED,
        )
        assert deck.width == 10.0

    def test_clamped_at_minimum(self):
        deck = size_deck(_profile(shoe_size_eu=35, height_cm=150), DeckSizing.BANDED)
        assert deck.width == 7.75

    @pytest.mark.parametrize("style", list(RidingStyle))
    @pytest.mark.parametrize("shoe", [30, 38, 42, 46, 52])
    @pytest.mark.parametrize("height", [140, 170, 200])
    def test_width_always_in_range(self, style, shoe, height):
        deck = size_deck(
            _profile(riding_style=style, shoe_size_eu=shoe, height_cm=height),
            DeckSizing.BANDED,
        )
        assert 7.75 <= deck.width <= 10.0
        assert (deck.width * 8) == int(deck.width * 8)


# ---------------------------------------------------------------------------
# Concave
# ---------------------------------------------------------------------------


class TestConcave:
    def test_follows_flexibility(self):
        park = RidingStyle.PARK
        assert select_concave(_profile(riding_style=park, flexibility=Flexibility.LOW)) == Concave.MELLOW
        assert select_concave(_profile(riding_style=park, flexibility=Flexibility.MEDIUM)) == Concave.MEDIUM
        assert select_concave(_profile(riding_style=park, flexibility=Flexibility.HIGH)) == Concave.DEEP

    def test_missing_flexibility_is_medium(self):
        assert select_concave(_profile(riding_style=RidingStyle.PARK)) == Concave.MEDIUM

    def test_street_floors_at_medium(self):
        assert select_concave(_profile(flexibility=Flexibility.LOW)) == Concave.MEDIUM
        assert select_concave(_profile(flexibility=Flexibility.HIGH)) == Concave.DEEP

    def test_cruising_backs_off(self):
        cruising = RidingStyle.CRUISING
        assert select_concave(_profile(riding_style=cruising, flexibility=Flexibility.HIGH)) == Concave.MEDIUM
        assert select_concave(_profile(riding_style=cruising, flexibility=Flexibility.LOW)) == Concave.MELLOW


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_board_feel_mapping(self):
        assert select_construction(_profile(board_feel=BoardFeel.LIGHT)) == Construction.LIGHTWEIGHT
        assert select_construction(_profile(board_feel=BoardFeel.DURABLE)) == Construction.REINFORCED
        assert select_construction(_profile(board_feel=BoardFeel.GRIPPY)) == Construction.GRIP

    def test_default_is_standard(self):
        assert select_construction(_profile()) == Construction.STANDARD

    def test_heavy_rider_forces_reinforced(self):
        assert select_construction(_profile(weight_kg=110, board_feel=BoardFeel.LIGHT)) == Construction.REINFORCED

    def test_threshold_is_exclusive(self):
        assert select_construction(_profile(weight_kg=100)) == Construction.STANDARD
