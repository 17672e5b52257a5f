"""
Interpolación log-log sobre la tabla IDF.

Las curvas IDF se comportan como leyes de potencia en la duración, por lo
que la interpolación se hace sobre ln(duración) y ln(intensidad).
"""

import numpy as np
from numpy.typing import NDArray

from lotepluvial.config import RETURN_PERIODS

from .tables import IDF_DURATIONS_MIN, IDF_TABLE


def interpolate_intensity(return_period: int, duration_min: float) -> float:
    """
    Obtiene la intensidad de lluvia para un período de retorno y duración.

    - Período de retorno fuera de la tabla: retorna 0.0 (sin datos).
    - Duración menor o igual al primer ancla: intensidad del primer ancla.
    - Duración mayor o igual al último ancla: intensidad del último ancla.
    - En otro caso: interpolación lineal en espacio log-log.

    Args:
        return_period: Período de retorno en años
        duration_min: Duración en minutos

    Returns:
        Intensidad en mm/hr
    """
    anchors = IDF_TABLE.get(return_period)
    if not anchors:
        return 0.0

    durations = [d for d, _ in anchors]
    intensities = [i for _, i in anchors]

    if duration_min <= durations[0]:
        return float(intensities[0])
    if duration_min >= durations[-1]:
        return float(intensities[-1])

    log_i = np.interp(np.log(duration_min), np.log(durations), np.log(intensities))
    return float(np.exp(log_i))


def design_storm_depth(return_period: int, duration_hr: float) -> float:
    """
    Profundidad total de la tormenta de diseño.

    P = i_media(Tr, d) × d

    Args:
        return_period: Período de retorno en años
        duration_hr: Duración del evento en horas

    Returns:
        Profundidad en mm (0.0 si el período no está tabulado)
    """
    return interpolate_intensity(return_period, duration_hr * 60.0) * duration_hr


def idf_table(
    return_periods: tuple[int, ...] = RETURN_PERIODS,
    durations_min: tuple[float, ...] = IDF_DURATIONS_MIN,
) -> dict[str, NDArray[np.floating]]:
    """
    Genera la tabla IDF interpolada.

    Returns:
        Diccionario con:
            - 'durations': array de duraciones (min)
            - 'return_periods': array de períodos
            - 'intensities': matriz [n_periods x n_durations] (mm/hr)
            - 'depths': matriz [n_periods x n_durations] (mm)
    """
    durations = np.array(durations_min, dtype=float)
    periods = np.array(return_periods)

    intensities = np.zeros((len(periods), len(durations)))
    for i, tr in enumerate(periods):
        intensities[i, :] = [interpolate_intensity(int(tr), float(d)) for d in durations]
    depths = intensities * durations / 60.0

    return {
        "durations": durations,
        "return_periods": periods,
        "intensities": intensities,
        "depths": depths,
    }
