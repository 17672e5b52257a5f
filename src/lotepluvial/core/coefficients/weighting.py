"""
Ponderación de coeficientes por área y reparto de coberturas del lote.
"""

import logging

from .constants import C_MAX, C_MIN, MAX_BUILDING_RATIO
from .types import LandCoverAreas

logger = logging.getLogger(__name__)


def weighted_c(
    areas: list[float],
    coefficients: list[float],
    total_area: float | None = None,
) -> float:
    """
    Calcula coeficiente C ponderado por área.

    C = Σ(Cᵢ × Aᵢ) / A_total

    Args:
        areas: Lista de áreas en cualquier unidad (m2, ha, etc.)
        coefficients: Lista de coeficientes C correspondientes
        total_area: Área de referencia; por defecto la suma de áreas

    Returns:
        Coeficiente C ponderado
    """
    if len(areas) != len(coefficients):
        raise ValueError("Las listas de areas y coeficientes deben tener igual longitud")

    if total_area is None:
        total_area = sum(areas)
    if total_area <= 0:
        raise ValueError("El area total debe ser > 0")

    weighted_sum = sum(a * c for a, c in zip(areas, coefficients))
    return weighted_sum / total_area


def clamp_c(c: float) -> float:
    """Acota el C compuesto al rango [0.10, 0.95]."""
    return max(C_MIN, min(c, C_MAX))


def land_cover_from_areas(
    lot_area_m2: float,
    building_area_m2: float,
    pavement_area_m2: float,
) -> LandCoverAreas:
    """
    Reparte el lote en edificio, pavimento y superficie permeable.

    El edificio se acota al 85% del lote antes de cualquier otra
    operación; la superficie permeable es el remanente (mínimo 0).
    """
    building = min(max(building_area_m2, 0.0), lot_area_m2 * MAX_BUILDING_RATIO)
    if building < building_area_m2:
        logger.debug(
            "Área edificada %.1f m² acotada a %.1f m² (85%% del lote)",
            building_area_m2, building,
        )
    pavement = max(pavement_area_m2, 0.0)
    pervious = max(0.0, lot_area_m2 - building - pavement)

    return LandCoverAreas(
        lot_m2=lot_area_m2,
        building_m2=building,
        pavement_m2=pavement,
        pervious_m2=pervious,
    )


def land_cover_areas(
    lot_area_m2: float,
    building_area_m2: float,
    pavement_fraction: float,
) -> LandCoverAreas:
    """Coberturas del lote a partir de la fracción pavimentada."""
    return land_cover_from_areas(
        lot_area_m2, building_area_m2, lot_area_m2 * pavement_fraction
    )
