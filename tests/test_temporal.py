"""Tests para distribución temporal SCS Tipo II."""

import numpy as np
import pytest

from lotepluvial.core.temporal import (
    SCS_TYPE_II,
    SCS_TYPE_II_SOURCE,
    scs_type_ii_fraction,
    scs_type_ii_hyetograph,
)


class TestScsTypeIIFraction:
    """Tests para la curva acumulada adimensional."""

    def test_endpoints(self):
        assert scs_type_ii_fraction(0.0) == 0.0
        assert scs_type_ii_fraction(1.0) == 1.0

    def test_anchor_values(self):
        for t, p in SCS_TYPE_II:
            assert scs_type_ii_fraction(t) == pytest.approx(p)

    def test_linear_between_anchors(self):
        """Punto medio entre 0.5 (0.663) y 0.521 (0.735)."""
        assert scs_type_ii_fraction(0.5105) == pytest.approx((0.663 + 0.735) / 2)

    def test_clamped_outside_range(self):
        assert scs_type_ii_fraction(-0.5) == 0.0
        assert scs_type_ii_fraction(1.5) == 1.0

    def test_non_decreasing(self):
        values = [scs_type_ii_fraction(t) for t in np.linspace(0, 1, 500)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_source_label(self):
        assert "TR-55" in SCS_TYPE_II_SOURCE


class TestScsTypeIIHyetograph:
    """Tests para hietograma SCS Tipo II."""

    def test_total_depth_conserved(self):
        hyeto = scs_type_ii_hyetograph(79.2, 6.0, 5.0)
        assert hyeto.total_depth_mm == pytest.approx(79.2)
        assert sum(hyeto.depth_mm) == pytest.approx(79.2)

    def test_number_of_intervals(self):
        assert scs_type_ii_hyetograph(50, 6.0, 5.0).n_intervals == 72
        assert scs_type_ii_hyetograph(50, 1.0, 2.0).n_intervals == 30

    def test_partial_last_interval(self):
        """ceil(50/15) = 4 intervalos; el último acota la fracción a 1."""
        hyeto = scs_type_ii_hyetograph(20, 50 / 60, 15.0)
        assert hyeto.n_intervals == 4
        assert hyeto.time_min[-1] == pytest.approx(60.0)
        assert hyeto.total_depth_mm == pytest.approx(20.0)

    def test_peak_near_middle(self):
        hyeto = scs_type_ii_hyetograph(79.2, 6.0, 5.0)
        peak_index = int(np.argmax(hyeto.depth_mm))
        assert abs(hyeto.time_min[peak_index] - 180) <= 10

    def test_intensity_consistent_with_depth(self):
        hyeto = scs_type_ii_hyetograph(40, 2.0, 5.0)
        for depth, intensity in zip(hyeto.depth_mm, hyeto.intensity_mmhr):
            assert intensity == pytest.approx(depth * 60 / 5)
        assert hyeto.peak_intensity_mmhr == pytest.approx(max(hyeto.intensity_mmhr))

    def test_cumulative_non_decreasing(self):
        hyeto = scs_type_ii_hyetograph(40, 24.0, 10.0)
        assert all(d >= 0 for d in hyeto.depth_mm)
        assert hyeto.cumulative_mm == sorted(hyeto.cumulative_mm)
        assert hyeto.cumulative_mm[-1] == pytest.approx(40.0)

    def test_zero_depth(self):
        hyeto = scs_type_ii_hyetograph(0.0, 6.0, 5.0)
        assert hyeto.total_depth_mm == 0.0
        assert hyeto.peak_intensity_mmhr == 0.0
