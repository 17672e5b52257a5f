"""
Dimensionamiento de tuberías por la ecuación de Manning.

Tubería circular a sección llena:

    Q = (1/n) × A × R^(2/3) × S^(1/2),  A = πD²/4,  R = D/4

Despejando el diámetro:

    D = (Q × n × 4^(5/3) / (π × √S))^(3/8)
"""

import logging
import math

from lotepluvial.models import PipeSizingResult

logger = logging.getLogger(__name__)


# Rugosidad de Manning (PVC)
MANNING_N = 0.013

# Pendiente de diseño de la tubería (m/m)
PIPE_SLOPE = 0.005

PIPE_CATALOGUE_NAME = "canadian-storm-sewer"

# Diámetros comerciales de tuberías pluviales (mm)
STANDARD_PIPE_DIAMETERS_MM: tuple[int, ...] = (
    75, 100, 125, 150, 200, 250, 300, 375, 450, 525, 600, 750, 900,
)


def required_pipe_diameter(
    flow_m3s: float,
    n: float = MANNING_N,
    slope: float = PIPE_SLOPE,
) -> float:
    """
    Diámetro mínimo para conducir el caudal a sección llena.

    Args:
        flow_m3s: Caudal de diseño en m³/s
        n: Coeficiente de Manning
        slope: Pendiente de la tubería (m/m)

    Returns:
        Diámetro en mm (0 si el caudal no es positivo)
    """
    if flow_m3s <= 0:
        return 0.0

    d_m = (flow_m3s * n * 4 ** (5 / 3) / (math.pi * math.sqrt(slope))) ** (3 / 8)
    return d_m * 1000.0


def select_pipe_diameter(diameter_mm: float) -> int:
    """
    Redondea al diámetro comercial inmediato superior.

    Si el diámetro excede el catálogo devuelve el máximo (900 mm).
    """
    for size in STANDARD_PIPE_DIAMETERS_MM:
        if size >= diameter_mm:
            return size

    logger.debug(
        "Diámetro requerido %.0f mm excede el catálogo, se usa %d mm",
        diameter_mm, STANDARD_PIPE_DIAMETERS_MM[-1],
    )
    return STANDARD_PIPE_DIAMETERS_MM[-1]


def size_pipe(flow_m3s: float) -> PipeSizingResult:
    """Dimensiona la tubería para un caudal de diseño."""
    required = required_pipe_diameter(flow_m3s)
    return PipeSizingResult(
        peak_flow_m3s=flow_m3s,
        required_diameter_mm=required,
        selected_diameter_mm=select_pipe_diameter(required),
    )
