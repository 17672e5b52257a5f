"""
Método Kirpich (1940) para tiempo de concentración.

Desarrollado para pequeñas cuencas agrícolas en Tennessee; aquí se aplica
a la longitud de flujo equivalente de un lote.
"""

import logging
import math

from .constants import (
    FLOW_LENGTH_FACTOR,
    REPRESENTATIVE_SLOPE,
    TC_MAX_MINUTES,
    TC_MIN_MINUTES,
)

logger = logging.getLogger(__name__)


def kirpich(length_m: float, slope: float) -> float:
    """
    Calcula Tc usando fórmula Kirpich (1940).

    tc = 0.0195 × L^0.77 × S^(-0.385)  [tc: min, L: m, S: m/m]

    Args:
        length_m: Longitud de flujo en metros
        slope: Pendiente media (m/m)

    Returns:
        Tiempo de concentración en minutos
    """
    if length_m <= 0:
        raise ValueError("Longitud debe ser > 0")
    if slope <= 0:
        raise ValueError("Pendiente debe ser > 0")

    return 0.0195 * (length_m ** 0.77) * (slope ** -0.385)


def flow_length(lot_area_m2: float) -> float:
    """Longitud de flujo equivalente del lote: sqrt(A) × 1.4 (m)."""
    return math.sqrt(lot_area_m2) * FLOW_LENGTH_FACTOR


def time_of_concentration(lot_area_m2: float) -> float:
    """
    Tiempo de concentración de un lote urbano.

    Aplica Kirpich con pendiente fija del 2% y acota el resultado a
    [5, 30] min: por debajo de 5 min no es realista para un lote urbano y
    por encima de 30 min excede la escala de un único lote.

    Args:
        lot_area_m2: Área del lote en m²

    Returns:
        Tc en minutos, usado como duración del Método Racional
    """
    if lot_area_m2 <= 0:
        return TC_MIN_MINUTES

    tc_raw = kirpich(flow_length(lot_area_m2), REPRESENTATIVE_SLOPE)
    tc = max(TC_MIN_MINUTES, min(tc_raw, TC_MAX_MINUTES))
    if tc != tc_raw:
        logger.debug("Tc Kirpich %.2f min acotado a %.1f min", tc_raw, tc)
    return tc
