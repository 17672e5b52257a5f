"""
Tabla de tormentas de diseño para un lote.

Para cada período de retorno: intensidad a Tc, caudal racional, tubería
requerida y volumen escurrido.
"""

import logging
from typing import Iterable, Optional

from lotepluvial.config import RETURN_PERIODS, SiteParameters
from lotepluvial.core.coefficients import LidEffects, land_cover_areas, lid_effects
from lotepluvial.core.idf import interpolate_intensity
from lotepluvial.core.tc import time_of_concentration
from lotepluvial.models import DesignStormRow

from .pipes import size_pipe
from .rational import rational_peak_flow, rational_volume

logger = logging.getLogger(__name__)


# Período de retorno que gobierna el diseño por convención
GOVERNING_RETURN_PERIOD = 100


def design_storm_rows(
    effects: LidEffects,
    tc_min: float,
    return_periods: Iterable[int] = RETURN_PERIODS,
) -> list[DesignStormRow]:
    """
    Aplica el Método Racional y Manning para cada período de retorno.

    La atenuación de la biozanja se aplica al caudal y al volumen
    después del cálculo, nunca al coeficiente C.

    Args:
        effects: Coeficientes del lote con ajustes LID
        tc_min: Tiempo de concentración (duración de la lluvia) en minutos
        return_periods: Períodos de retorno a evaluar

    Returns:
        Lista de filas, una por período, en el orden recibido
    """
    c = effects.composite_c
    lot_m2 = effects.areas.lot_m2
    area_ha = lot_m2 / 10000.0

    rows = []
    for tr in return_periods:
        intensity = interpolate_intensity(tr, tc_min)
        if intensity == 0:
            logger.debug("Período de retorno %s sin datos IDF", tr)

        q = effects.attenuate(rational_peak_flow(c, intensity, area_ha))
        volume = effects.attenuate(rational_volume(c, intensity, tc_min, lot_m2))
        pipe = size_pipe(q)

        rows.append(DesignStormRow(
            return_period=tr,
            duration_min=tc_min,
            intensity_mmhr=intensity,
            peak_flow_m3s=q,
            required_pipe_mm=pipe.required_diameter_mm,
            selected_pipe_mm=pipe.selected_diameter_mm,
            volume_m3=volume,
        ))
    return rows


def peak_flow_and_pipe(
    site_params: SiteParameters,
    design_storm_set: Iterable[int] = RETURN_PERIODS,
    lid_flags: Optional[Iterable] = None,
) -> list[DesignStormRow]:
    """
    Caudal pico, tubería y volumen por período de retorno para un lote.

    La duración de la lluvia es el Tc del lote (Kirpich acotado).

    Args:
        site_params: Parámetros del lote
        design_storm_set: Períodos de retorno (por defecto 2-100 años)
        lid_flags: Medidas LID; si es None se usan las del lote

    Returns:
        Lista de DesignStormRow
    """
    areas = land_cover_areas(
        site_params.lot_area_m2,
        site_params.building_area_m2,
        site_params.pavement_fraction,
    )
    flags = site_params.lid if lid_flags is None else lid_flags
    effects = lid_effects(areas, flags)
    tc = time_of_concentration(site_params.lot_area_m2)

    return design_storm_rows(effects, tc, design_storm_set)


def design_row(rows: list[DesignStormRow]) -> Optional[DesignStormRow]:
    """Fila que gobierna el diseño: 100 años, o la última disponible."""
    if not rows:
        return None
    for row in rows:
        if row.return_period == GOVERNING_RETURN_PERIOD:
            return row
    return rows[-1]
