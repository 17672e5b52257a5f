"""
Capa de ajuste por medidas de desarrollo de bajo impacto (LID).

Las medidas LID influyen por dos canales distintos:

- Método Racional: coeficientes por superficie ajustados, factor sobre el
  C compuesto (jardín de lluvia) y atenuación posterior del caudal y del
  volumen (biozanja). La biozanja no modifica C.
- Simulación de infiltración: solo recibe la fracción impermeable
  ajustada; no conoce qué medidas están activas.

Ambos canales se agrupan en un único valor LidEffects.
"""

import logging
from dataclasses import dataclass

from lotepluvial.config import LIDOption, parse_lid_flags

from .constants import (
    BIOSWALE_FACTOR,
    C_GREEN_ROOF,
    C_LAWN,
    C_PAVEMENT,
    C_PERMEABLE_PAVEMENT,
    C_ROOF,
    GREEN_ROOF_COVERAGE,
    MAX_IMPERVIOUS_FRACTION,
    RAIN_GARDEN_FACTOR,
)
from .types import LandCoverAreas
from .weighting import clamp_c, land_cover_from_areas, weighted_c

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LidEffects:
    """Efecto combinado de las medidas LID sobre un lote."""
    areas: LandCoverAreas
    lid: frozenset[LIDOption]
    roof_c: float
    pavement_c: float
    pervious_c: float
    composite_factor: float      # Se aplica al C compuesto (jardín de lluvia)
    result_attenuation: float    # Se aplica a Q y volumen (biozanja)
    impervious_fraction: float   # Fracción impermeable para Green-Ampt

    @property
    def composite_c_raw(self) -> float:
        """C compuesto antes de acotar."""
        a = self.areas
        c = weighted_c(
            [a.building_m2, a.pavement_m2, a.pervious_m2],
            [self.roof_c, self.pavement_c, self.pervious_c],
            total_area=a.lot_m2,
        )
        return c * self.composite_factor

    @property
    def composite_c(self) -> float:
        """C compuesto acotado a [0.10, 0.95]."""
        if self.areas.lot_m2 <= 0:
            logger.debug("Área de lote no positiva, se usa C mínimo")
            return clamp_c(0.0)
        return clamp_c(self.composite_c_raw)

    @property
    def pervious_fraction(self) -> float:
        return 1.0 - self.impervious_fraction

    def attenuate(self, value: float) -> float:
        """Aplica la atenuación posterior (biozanja) a un caudal o volumen."""
        return value * self.result_attenuation


def lid_effects(areas: LandCoverAreas, lid_flags=None) -> LidEffects:
    """
    Calcula los ajustes LID para un lote.

    - Techo verde: C de techo = promedio de 0.95 y 0.40 sobre el área
      edificada (50% de cobertura); la mitad de la huella deja de ser
      impermeable conectada.
    - Pavimento permeable: C de pavimento = 0.30; el pavimento pasa al
      camino permeable de la simulación.
    - Jardín de lluvia: C compuesto × 0.85.
    - Biozanja: caudal pico y volumen × 0.80 (no modifica C).

    Args:
        areas: Coberturas del lote
        lid_flags: Medidas activas (LIDOption o texto)

    Returns:
        LidEffects con los coeficientes y fracciones ajustadas
    """
    flags = parse_lid_flags(lid_flags)

    roof_c = C_ROOF
    pavement_c = C_PAVEMENT
    connected_building = areas.building_m2
    connected_pavement = areas.pavement_m2

    if LIDOption.GREEN_ROOF in flags:
        roof_c = GREEN_ROOF_COVERAGE * C_GREEN_ROOF + (1 - GREEN_ROOF_COVERAGE) * C_ROOF
        connected_building *= 1 - GREEN_ROOF_COVERAGE
    if LIDOption.PERMEABLE_PAVEMENT in flags:
        pavement_c = C_PERMEABLE_PAVEMENT
        connected_pavement = 0.0

    if areas.lot_m2 > 0:
        impervious = min(
            (connected_building + connected_pavement) / areas.lot_m2,
            MAX_IMPERVIOUS_FRACTION,
        )
    else:
        impervious = 0.0

    return LidEffects(
        areas=areas,
        lid=flags,
        roof_c=roof_c,
        pavement_c=pavement_c,
        pervious_c=C_LAWN,
        composite_factor=RAIN_GARDEN_FACTOR if LIDOption.RAIN_GARDEN in flags else 1.0,
        result_attenuation=BIOSWALE_FACTOR if LIDOption.BIOSWALE in flags else 1.0,
        impervious_fraction=impervious,
    )


def composite_runoff_coefficient(
    building_area: float,
    pavement_area: float,
    lot_area: float,
    lid_flags=None,
) -> float:
    """
    Coeficiente de escorrentía compuesto de un lote.

    C = (C_techo × A_edif + C_pav × A_pav + C_césped × A_perm) / A_lote

    con ajustes LID aplicados antes de ponderar (techo verde, pavimento
    permeable) y después (jardín de lluvia), acotado a [0.10, 0.95].

    Args:
        building_area: Huella edificada (m²), se acota al 85% del lote
        pavement_area: Área pavimentada (m²)
        lot_area: Área del lote (m²)
        lid_flags: Medidas LID activas

    Returns:
        Coeficiente C compuesto
    """
    areas = land_cover_from_areas(lot_area, building_area, pavement_area)
    return lid_effects(areas, lid_flags).composite_c
