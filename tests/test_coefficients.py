"""Tests para coeficientes de escorrentía y ajustes LID."""

from itertools import combinations

import pytest

from lotepluvial.config import LIDOption
from lotepluvial.core.coefficients import (
    C_MAX,
    C_MIN,
    LandCoverAreas,
    clamp_c,
    composite_runoff_coefficient,
    default_pavement_fraction,
    get_zoning_entry,
    land_cover_areas,
    land_cover_from_areas,
    lid_effects,
    weighted_c,
    zoning_impervious_deviation,
)


ALL_LID_SUBSETS = [
    frozenset(combo)
    for r in range(len(LIDOption) + 1)
    for combo in combinations(LIDOption, r)
]


class TestWeightedC:
    """Tests para ponderación de C."""

    def test_single_cover(self):
        assert weighted_c([100], [0.5]) == pytest.approx(0.5)

    def test_area_weighting(self):
        assert weighted_c([50, 50], [0.9, 0.3]) == pytest.approx(0.6)

    def test_divides_by_total_area(self):
        """Con total explícito el remanente sin cobertura no aporta."""
        assert weighted_c([50], [0.8], total_area=100) == pytest.approx(0.4)

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            weighted_c([10, 20], [0.5])

    def test_clamp(self):
        assert clamp_c(0.01) == C_MIN
        assert clamp_c(1.2) == C_MAX
        assert clamp_c(0.5) == 0.5


class TestLandCover:
    """Tests para el reparto de coberturas."""

    def test_sample_lot(self):
        areas = land_cover_areas(450, 180, 0.15)
        assert areas.building_m2 == pytest.approx(180)
        assert areas.pavement_m2 == pytest.approx(67.5)
        assert areas.pervious_m2 == pytest.approx(202.5)
        assert areas.impervious_fraction == pytest.approx(0.55)

    def test_building_clamped_to_85_percent(self):
        areas = land_cover_from_areas(100, 120, 0)
        assert areas.building_m2 == pytest.approx(85)
        assert areas.pervious_m2 == pytest.approx(15)

    def test_pervious_never_negative(self):
        areas = land_cover_from_areas(100, 85, 50)
        assert areas.pervious_m2 == 0.0

    def test_impervious_fraction_capped(self):
        areas = LandCoverAreas(lot_m2=100, building_m2=85, pavement_m2=50, pervious_m2=0)
        assert areas.impervious_fraction == pytest.approx(0.95)

    def test_zero_lot(self):
        areas = LandCoverAreas(lot_m2=0, building_m2=0, pavement_m2=0, pervious_m2=0)
        assert areas.impervious_fraction == 0.0


class TestZoning:
    """Tests para coberturas por zonificación."""

    def test_exact_match(self):
        assert get_zoning_entry("RF1").pavement_fraction == pytest.approx(0.12)

    def test_prefix_match(self):
        assert get_zoning_entry("RF1(a)").code == "RF1"

    def test_case_and_spaces(self):
        assert get_zoning_entry(" cb 2 ").code == "CB2"

    def test_unknown(self):
        assert get_zoning_entry("XYZ") is None
        assert default_pavement_fraction("XYZ") == pytest.approx(0.15)

    def test_missing(self):
        assert default_pavement_fraction(None) == pytest.approx(0.15)

    def test_impervious_deviation(self):
        assert get_zoning_entry("RF1").impervious == pytest.approx(0.45)
        assert zoning_impervious_deviation("RF1", 0.75) == pytest.approx(0.30)
        assert zoning_impervious_deviation("CB1", 0.75) == pytest.approx(-0.10)

    def test_impervious_deviation_unknown_zone(self):
        assert zoning_impervious_deviation("XYZ", 0.5) is None
        assert zoning_impervious_deviation(None, 0.5) is None


class TestCompositeRunoffCoefficient:
    """Tests para C compuesto con y sin LID."""

    def test_sample_lot_without_lid(self):
        c = composite_runoff_coefficient(180, 67.5, 450)
        assert c == pytest.approx(0.6275)
        assert 0.5 <= c <= 0.65

    def test_green_roof(self):
        c = composite_runoff_coefficient(180, 67.5, 450, [LIDOption.GREEN_ROOF])
        assert c == pytest.approx(0.5175)

    def test_permeable_pavement(self):
        c = composite_runoff_coefficient(180, 67.5, 450, ["permeable_pavement"])
        assert c == pytest.approx((0.95 * 180 + 0.30 * 67.5 + 0.25 * 202.5) / 450)

    def test_rain_garden_scales_composite(self):
        c = composite_runoff_coefficient(180, 67.5, 450, [LIDOption.RAIN_GARDEN])
        assert c == pytest.approx(0.6275 * 0.85)

    def test_bioswale_does_not_change_c(self):
        c = composite_runoff_coefficient(180, 67.5, 450, [LIDOption.BIOSWALE])
        assert c == pytest.approx(0.6275)

    def test_oversized_building_is_clamped(self):
        """Un edificio mayor al lote se trata como 85% del lote."""
        clamped = composite_runoff_coefficient(500, 0, 450)
        expected = composite_runoff_coefficient(0.85 * 450, 0, 450)
        assert clamped == pytest.approx(expected)

    def test_zero_lot_returns_minimum(self):
        assert composite_runoff_coefficient(0, 0, 0) == C_MIN

    def test_unknown_lid(self):
        with pytest.raises(ValueError, match="LID"):
            composite_runoff_coefficient(180, 67.5, 450, ["swimming_pool"])

    @pytest.mark.parametrize("lid", ALL_LID_SUBSETS)
    def test_bounds_over_grid(self, lid):
        for lot in [50, 450, 2000]:
            for building_ratio in [0.0, 0.3, 0.85, 1.5]:
                for pavement_ratio in [0.0, 0.15, 0.5, 1.0]:
                    c = composite_runoff_coefficient(
                        lot * building_ratio, lot * pavement_ratio, lot, lid,
                    )
                    assert C_MIN <= c <= C_MAX

    @pytest.mark.parametrize("lid", ALL_LID_SUBSETS)
    def test_lid_never_raises_c(self, lid):
        base = composite_runoff_coefficient(180, 67.5, 450)
        assert composite_runoff_coefficient(180, 67.5, 450, lid) <= base + 1e-12


class TestLidEffects:
    """Tests para el valor combinado de efectos LID."""

    def test_no_lid(self):
        effects = lid_effects(land_cover_areas(450, 180, 0.15))
        assert effects.composite_factor == 1.0
        assert effects.result_attenuation == 1.0
        assert effects.impervious_fraction == pytest.approx(0.55)

    def test_green_roof_halves_connected_roof(self):
        effects = lid_effects(land_cover_areas(450, 180, 0.15), [LIDOption.GREEN_ROOF])
        assert effects.impervious_fraction == pytest.approx((90 + 67.5) / 450)

    def test_permeable_pavement_removes_pavement(self):
        effects = lid_effects(land_cover_areas(450, 180, 0.15), [LIDOption.PERMEABLE_PAVEMENT])
        assert effects.impervious_fraction == pytest.approx(180 / 450)
        assert effects.pervious_fraction == pytest.approx(1 - 180 / 450)

    def test_bioswale_attenuates_results_only(self):
        effects = lid_effects(land_cover_areas(450, 180, 0.15), [LIDOption.BIOSWALE])
        assert effects.result_attenuation == pytest.approx(0.80)
        assert effects.attenuate(10.0) == pytest.approx(8.0)
        assert effects.composite_c == pytest.approx(0.6275)

    def test_accepts_text_flags(self):
        effects = lid_effects(land_cover_areas(450, 180, 0.15), ["rain_garden"])
        assert effects.lid == frozenset({LIDOption.RAIN_GARDEN})
