"""
Módulo de curvas Intensidad-Duración-Frecuencia (IDF).

La intensidad se obtiene por interpolación log-log sobre una tabla fija
de anclas (duración, intensidad) por período de retorno:

    ln i = ln i₁ + f × (ln i₂ − ln i₁),   f = (ln d − ln d₁) / (ln d₂ − ln d₁)

Fuera del rango tabulado la intensidad se mantiene en el ancla extremo.
"""

# Tabla de referencia
from .tables import (
    IDF_TABLE_VERSION,
    IDF_DURATIONS_MIN,
    IDF_INTENSITIES_MMHR,
    IDF_TABLE,
)

# Interpolación
from .interpolation import (
    interpolate_intensity,
    design_storm_depth,
    idf_table,
)

__all__ = [
    # Tabla
    "IDF_TABLE_VERSION",
    "IDF_DURATIONS_MIN",
    "IDF_INTENSITIES_MMHR",
    "IDF_TABLE",
    # Interpolación
    "interpolate_intensity",
    "design_storm_depth",
    "idf_table",
]
