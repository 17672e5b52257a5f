"""Tests para la simulación de infiltración Green-Ampt."""

import pytest
from pydantic import ValidationError

from lotepluvial.config import SoilType
from lotepluvial.core.infiltration import (
    INITIAL_CUMULATIVE_INFILTRATION,
    SOIL_PROFILES,
    SoilProfile,
    get_soil_profile,
    green_ampt_capacity,
    run_infiltration_simulation,
    simulation_time_step,
    summarize_simulation,
)


class TestSoilProfiles:
    """Tests para parámetros de suelo."""

    def test_all_soil_types_present(self):
        assert set(SOIL_PROFILES) == set(SoilType)

    def test_lookup_by_key_and_enum(self):
        assert get_soil_profile("clay") is get_soil_profile(SoilType.CLAY)

    def test_profile_passthrough(self, clay_soil):
        assert get_soil_profile(clay_soil) is clay_soil

    def test_unknown_soil(self):
        with pytest.raises(ValueError, match="suelo"):
            get_soil_profile("peat")

    def test_moisture_deficit(self, clay_soil):
        assert clay_soil.moisture_deficit == pytest.approx(0.475 - 0.30)

    def test_sand_more_permeable_than_clay(self, sandy_soil, clay_soil):
        assert sandy_soil.ks_mmhr > clay_soil.ks_mmhr

    def test_steady_rates_decrease_with_texture(self, sandy_soil, clay_soil):
        assert sandy_soil.steady_rate_mmhr == pytest.approx(120.0)
        assert clay_soil.steady_rate_mmhr == pytest.approx(2.0)
        assert get_soil_profile(SoilType.CLAY_LOAM).steady_rate_mmhr == pytest.approx(6.0)

    def test_invalid_moisture(self):
        with pytest.raises(ValidationError):
            SoilProfile(
                key="x", label="X", ks_mmhr=1, psi_mm=10, theta_e=0.3, theta_i=0.4,
                steady_rate_mmhr=1,
            )


class TestGreenAmptCapacity:
    """Tests para capacidad de infiltración."""

    def test_formula(self, clay_soil):
        f = 10.0
        expected = 0.3 * (1 + 316.3 * (0.475 - 0.30) / f)
        assert green_ampt_capacity(clay_soil, f) == pytest.approx(expected)

    def test_decreases_towards_ks(self, clay_soil):
        values = [green_ampt_capacity(clay_soil, f) for f in [0.1, 1, 10, 100, 1e5]]
        assert values == sorted(values, reverse=True)
        assert values[-1] == pytest.approx(clay_soil.ks_mmhr, rel=1e-2)


class TestSimulationTimeStep:
    """Tests para el paso de cálculo."""

    @pytest.mark.parametrize("duration, expected", [
        (0.5, 2.0), (1, 2.0), (3, 5.0), (6, 5.0), (12, 10.0), (24, 10.0),
    ])
    def test_step(self, duration, expected):
        assert simulation_time_step(duration) == expected


class TestRunInfiltrationSimulation:
    """Tests para la simulación completa."""

    def test_step_count(self, clay_soil):
        steps = run_infiltration_simulation(79.2, 6.0, clay_soil, 0.55)
        assert len(steps) == 72
        assert steps[0].time_min == pytest.approx(5.0)
        assert steps[-1].time_min == pytest.approx(360.0)

    def test_mass_balance_per_step(self, clay_soil):
        for step in run_infiltration_simulation(79.2, 6.0, clay_soil, 0.55):
            assert step.rainfall_mm == pytest.approx(step.infiltration_mm + step.runoff_mm, abs=1e-9)
            assert step.residual_mm == pytest.approx(0.0, abs=1e-9)

    def test_overall_mass_balance(self, clay_soil):
        steps = run_infiltration_simulation(79.2, 6.0, clay_soil, 0.55)
        summary = summarize_simulation(steps)
        assert summary.total_rainfall_mm == pytest.approx(79.2)
        assert summary.total_infiltration_mm + summary.total_runoff_mm == pytest.approx(79.2)

    def test_cumulative_non_decreasing(self, clay_soil):
        steps = run_infiltration_simulation(79.2, 6.0, clay_soil, 0.55)
        for prev, curr in zip(steps, steps[1:]):
            assert curr.cum_rainfall_mm >= prev.cum_rainfall_mm
            assert curr.cum_infiltration_mm >= prev.cum_infiltration_mm
            assert curr.cum_runoff_mm >= prev.cum_runoff_mm

    @pytest.mark.parametrize("soil", list(SoilType))
    def test_ponding_is_irreversible(self, soil):
        steps = run_infiltration_simulation(79.2, 6.0, soil, 0.3)
        flags = [s.ponded for s in steps]
        if True in flags:
            first = flags.index(True)
            assert all(flags[first:])

    def test_clay_ponds(self, clay_soil):
        summary = summarize_simulation(run_infiltration_simulation(79.2, 6.0, clay_soil, 0.55))
        assert summary.ponding_time_min is not None

    def test_impervious_runoff_before_ponding(self, sandy_soil):
        """Antes de encharcarse solo escurre la fracción impermeable."""
        steps = run_infiltration_simulation(10.0, 6.0, sandy_soil, 0.4)
        for step in steps:
            if not step.ponded:
                assert step.runoff_mm == pytest.approx(0.4 * step.rainfall_mm)

    def test_fully_pervious_sand_small_storm(self, sandy_soil):
        steps = run_infiltration_simulation(5.0, 6.0, sandy_soil, 0.0)
        summary = summarize_simulation(steps)
        assert summary.ponding_time_min is None
        assert summary.total_runoff_mm == pytest.approx(0.0)
        assert summary.total_infiltration_mm == pytest.approx(5.0)

    def test_more_impervious_more_runoff(self, clay_soil):
        low = summarize_simulation(run_infiltration_simulation(79.2, 6.0, clay_soil, 0.2))
        high = summarize_simulation(run_infiltration_simulation(79.2, 6.0, clay_soil, 0.8))
        assert high.total_runoff_mm > low.total_runoff_mm

    def test_capacity_uses_initial_infiltration(self, clay_soil):
        steps = run_infiltration_simulation(79.2, 6.0, clay_soil, 0.55)
        assert steps[0].infiltration_capacity_mmhr == pytest.approx(
            green_ampt_capacity(clay_soil, INITIAL_CUMULATIVE_INFILTRATION)
        )

    def test_accepts_soil_key(self):
        steps = run_infiltration_simulation(20.0, 1.0, "loam", 0.5)
        assert len(steps) == 30


class TestSummarizeSimulation:
    """Tests para el balance total."""

    def test_empty(self):
        summary = summarize_simulation([])
        assert summary.n_steps == 0
        assert summary.runoff_ratio == 0.0
        assert summary.ponding_time_min is None

    def test_volumes(self, clay_soil):
        summary = summarize_simulation(run_infiltration_simulation(79.2, 6.0, clay_soil, 0.55))
        assert summary.runoff_volume_m3(450) == pytest.approx(summary.total_runoff_mm * 0.45)
        assert summary.infiltration_volume_m3(450) == pytest.approx(summary.total_infiltration_mm * 0.45)
        assert 0 < summary.runoff_ratio < 1
