"""Tests para módulo IDF."""

import math

import numpy as np
import pytest

from lotepluvial.config import RETURN_PERIODS
from lotepluvial.core.idf import (
    IDF_DURATIONS_MIN,
    IDF_INTENSITIES_MMHR,
    IDF_TABLE,
    IDF_TABLE_VERSION,
    design_storm_depth,
    idf_table,
    interpolate_intensity,
)


class TestIdfTable:
    """Tests para la tabla de referencia."""

    def test_version_label(self):
        assert IDF_TABLE_VERSION == "edmonton-eccc-3012216"

    def test_all_return_periods_present(self):
        assert set(IDF_TABLE) == set(RETURN_PERIODS)

    def test_anchors_sorted_by_duration(self):
        for anchors in IDF_TABLE.values():
            durations = [d for d, _ in anchors]
            assert durations == sorted(durations)

    def test_intensities_increase_with_return_period(self):
        """Para cada duración, mayor período da mayor intensidad."""
        for j in range(len(IDF_DURATIONS_MIN)):
            column = [IDF_INTENSITIES_MMHR[tr][j] for tr in sorted(IDF_INTENSITIES_MMHR)]
            assert column == sorted(column)


class TestInterpolateIntensity:
    """Tests para interpolación log-log."""

    def test_exact_anchor_5_min(self):
        assert interpolate_intensity(100, 5) == pytest.approx(187.5)
        assert interpolate_intensity(2, 5) == pytest.approx(65.5)

    def test_exact_anchor_1440_min(self):
        assert interpolate_intensity(100, 1440) == pytest.approx(5.29)
        assert interpolate_intensity(2, 1440) == pytest.approx(2.00)

    def test_every_anchor_is_exact(self):
        for tr, anchors in IDF_TABLE.items():
            for duration, intensity in anchors:
                assert interpolate_intensity(tr, duration) == pytest.approx(intensity)

    def test_clamps_below_first_anchor(self):
        """Duraciones menores a 5 min usan el primer ancla."""
        assert interpolate_intensity(100, 1) == pytest.approx(187.5)
        assert interpolate_intensity(100, 0) == pytest.approx(187.5)

    def test_clamps_above_last_anchor(self):
        """Duraciones mayores a 24 h usan el último ancla."""
        assert interpolate_intensity(100, 2880) == pytest.approx(5.29)
        assert interpolate_intensity(10, 1e6) == pytest.approx(3.48)

    def test_log_log_geometric_midpoint(self):
        """En el punto medio geométrico la intensidad es la media geométrica."""
        d = math.sqrt(5 * 10)
        expected = math.sqrt(187.5 * 128.7)
        assert interpolate_intensity(100, d) == pytest.approx(expected, rel=1e-9)

    def test_between_neighbouring_anchors(self):
        i = interpolate_intensity(25, 45)
        assert 33.5 < i < 52.1

    @pytest.mark.parametrize("return_period", RETURN_PERIODS)
    def test_monotone_decreasing_in_duration(self, return_period):
        durations = np.geomspace(1, 2000, 200)
        values = [interpolate_intensity(return_period, d) for d in durations]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_unknown_return_period_is_zero(self):
        assert interpolate_intensity(3, 60) == 0.0
        assert interpolate_intensity(200, 5) == 0.0

    def test_returns_float(self):
        assert isinstance(interpolate_intensity(10, 37), float)


class TestDesignStormDepth:
    """Tests para profundidad de tormenta."""

    def test_six_hour_hundred_year(self):
        """6 h es ancla: 13.2 mm/hr × 6 h."""
        assert design_storm_depth(100, 6) == pytest.approx(79.2)

    def test_unknown_period(self):
        assert design_storm_depth(7, 6) == 0.0

    def test_depth_grows_with_duration(self):
        assert design_storm_depth(10, 1) < design_storm_depth(10, 6) < design_storm_depth(10, 24)


class TestGenerateIdfTable:
    """Tests para la tabla IDF completa."""

    def test_shape(self):
        table = idf_table()
        assert table["intensities"].shape == (len(RETURN_PERIODS), len(IDF_DURATIONS_MIN))
        assert table["depths"].shape == table["intensities"].shape

    def test_custom_durations(self):
        table = idf_table(return_periods=(2, 100), durations_min=(5, 7.5, 1440))
        assert table["intensities"][1, 0] == pytest.approx(187.5)
        assert table["intensities"][0, 2] == pytest.approx(2.0)

    def test_depths_consistent(self):
        table = idf_table()
        expected = table["intensities"] * table["durations"] / 60.0
        np.testing.assert_allclose(table["depths"], expected)
