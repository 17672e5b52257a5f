"""
Módulo de escorrentía y dimensionamiento de tuberías.

Implementa:
- Método Racional (caudal pico y volumen)
- Ecuación de Manning invertida (diámetro de tubería)
- Tabla de tormentas de diseño por período de retorno
"""

# Método Racional
from .rational import (
    rational_peak_flow,
    rational_volume,
)

# Manning
from .pipes import (
    MANNING_N,
    PIPE_SLOPE,
    PIPE_CATALOGUE_NAME,
    STANDARD_PIPE_DIAMETERS_MM,
    required_pipe_diameter,
    select_pipe_diameter,
    size_pipe,
)

# Tormentas de diseño
from .design import (
    GOVERNING_RETURN_PERIOD,
    design_storm_rows,
    peak_flow_and_pipe,
    design_row,
)

__all__ = [
    # Racional
    "rational_peak_flow",
    "rational_volume",
    # Manning
    "MANNING_N",
    "PIPE_SLOPE",
    "PIPE_CATALOGUE_NAME",
    "STANDARD_PIPE_DIAMETERS_MM",
    "required_pipe_diameter",
    "select_pipe_diameter",
    "size_pipe",
    # Diseño
    "GOVERNING_RETURN_PERIOD",
    "design_storm_rows",
    "peak_flow_and_pipe",
    "design_row",
]
