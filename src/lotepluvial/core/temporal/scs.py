"""
Distribución temporal SCS Tipo II.

El Soil Conservation Service (ahora NRCS) definió distribuciones
adimensionales de lluvia acumulada para tormentas de diseño. La Tipo II
corresponde a climas continentales y concentra la lluvia en torno a la
mitad del evento. Aquí se usa escalada a cualquier duración.
"""

import math

import numpy as np

from lotepluvial.models import HyetographResult


SCS_TYPE_II_SOURCE = "USDA NRCS TR-55 (1986)"

# (fracción de tiempo, fracción de lluvia acumulada)
SCS_TYPE_II: tuple[tuple[float, float], ...] = (
    (0.000, 0.000), (0.042, 0.010), (0.083, 0.022), (0.125, 0.035),
    (0.167, 0.048), (0.208, 0.063), (0.250, 0.080), (0.292, 0.098),
    (0.333, 0.120), (0.375, 0.147), (0.417, 0.181), (0.438, 0.204),
    (0.458, 0.235), (0.479, 0.283), (0.489, 0.357), (0.500, 0.663),
    (0.521, 0.735), (0.542, 0.772), (0.563, 0.799), (0.583, 0.820),
    (0.625, 0.850), (0.667, 0.880), (0.708, 0.916), (0.750, 0.936),
    (0.833, 0.952), (0.917, 0.976), (1.000, 1.000),
)

_TIME_FRACTIONS = np.array([t for t, _ in SCS_TYPE_II])
_DEPTH_FRACTIONS = np.array([p for _, p in SCS_TYPE_II])


def scs_type_ii_fraction(time_fraction: float) -> float:
    """
    Fracción de lluvia acumulada en una fracción del tiempo de tormenta.

    Interpolación lineal entre anclas; fuera de [0, 1] se acota al
    extremo más cercano.
    """
    return float(np.interp(time_fraction, _TIME_FRACTIONS, _DEPTH_FRACTIONS))


def scs_type_ii_hyetograph(
    total_depth_mm: float,
    duration_hr: float,
    dt_min: float,
) -> HyetographResult:
    """
    Genera hietograma usando la distribución SCS Tipo II.

    Se generan ceil(duración / dt) intervalos; si el último intervalo
    excede la duración, su fracción final se acota a 1.

    Args:
        total_depth_mm: Profundidad total en mm
        duration_hr: Duración de la tormenta en horas
        dt_min: Intervalo de tiempo en minutos

    Returns:
        HyetographResult con tiempos al final de cada intervalo
    """
    duration_min = duration_hr * 60.0
    n_intervals = math.ceil(duration_min / dt_min) if duration_min > 0 else 0

    time_end = np.arange(1, n_intervals + 1) * dt_min
    time_start = time_end - dt_min

    if n_intervals:
        frac_start = np.interp(time_start / duration_min, _TIME_FRACTIONS, _DEPTH_FRACTIONS)
        frac_end = np.interp(time_end / duration_min, _TIME_FRACTIONS, _DEPTH_FRACTIONS)
    else:
        frac_start = frac_end = np.zeros(0)

    depths = (frac_end - frac_start) * total_depth_mm
    intensities = depths * 60.0 / dt_min
    cumulative = np.cumsum(depths)

    return HyetographResult(
        method="scs_type_ii",
        dt_min=dt_min,
        duration_hr=duration_hr,
        time_min=time_end.tolist(),
        depth_mm=depths.tolist(),
        intensity_mmhr=intensities.tolist(),
        cumulative_mm=cumulative.tolist(),
        total_depth_mm=float(np.sum(depths)),
        peak_intensity_mmhr=float(np.max(intensities)) if n_intervals else 0.0,
    )
