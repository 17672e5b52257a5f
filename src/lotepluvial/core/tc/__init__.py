"""
Módulo de tiempo de concentración (Tc).

Implementa Kirpich (1940) sobre la longitud de flujo equivalente del lote.
"""

from .constants import (
    FLOW_LENGTH_FACTOR,
    REPRESENTATIVE_SLOPE,
    TC_MIN_MINUTES,
    TC_MAX_MINUTES,
)

from .kirpich import kirpich, flow_length, time_of_concentration

__all__ = [
    # Constantes
    "FLOW_LENGTH_FACTOR",
    "REPRESENTATIVE_SLOPE",
    "TC_MIN_MINUTES",
    "TC_MAX_MINUTES",
    # Kirpich
    "kirpich",
    "flow_length",
    "time_of_concentration",
]
