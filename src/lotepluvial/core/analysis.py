"""
Análisis completo de drenaje de un lote.

Encadena los cálculos a partir de un único conjunto de parámetros:

1. Coberturas del lote y ajustes LID (escenario base y con LID)
2. Tc por Kirpich
3. Tabla de tormentas de diseño (Racional + Manning) base y con LID
4. Simulación Green-Ampt del evento de diseño

El tiempo de concentración (duración del Método Racional) y la duración
del evento simulado son parámetros distintos y no se mezclan.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from lotepluvial.config import RETURN_PERIODS, DesignStorm, SiteParameters
from lotepluvial.core.coefficients import (
    LandCoverAreas,
    LidEffects,
    land_cover_areas,
    lid_effects,
)
from lotepluvial.core.idf import design_storm_depth
from lotepluvial.core.infiltration import (
    SoilProfile,
    get_soil_profile,
    run_infiltration_simulation,
    summarize_simulation,
)
from lotepluvial.core.runoff import design_row, design_storm_rows
from lotepluvial.core.tc import time_of_concentration
from lotepluvial.models import DesignStormRow, SimulationStep, SimulationSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteAnalysis:
    """Resultado de analizar un lote; se descarta entero al recalcular."""
    site: SiteParameters
    storm: DesignStorm
    tc_min: float
    areas: LandCoverAreas
    baseline: LidEffects
    effects: LidEffects
    baseline_rows: list[DesignStormRow]
    lid_rows: list[DesignStormRow]
    soil: SoilProfile
    total_depth_mm: float
    simulation: list[SimulationStep]
    summary: SimulationSummary
    potential_infiltration_m3: float

    @property
    def has_lid(self) -> bool:
        return bool(self.effects.lid)

    @property
    def baseline_c(self) -> float:
        return self.baseline.composite_c

    @property
    def lid_c(self) -> float:
        return self.effects.composite_c

    @property
    def design_baseline(self) -> Optional[DesignStormRow]:
        return design_row(self.baseline_rows)

    @property
    def design_lid(self) -> Optional[DesignStormRow]:
        return design_row(self.lid_rows)

    @property
    def peak_flow_reduction_pct(self) -> float:
        """Reducción del caudal pico de diseño por las medidas LID (%)."""
        return _reduction_pct(
            self.design_baseline.peak_flow_m3s if self.design_baseline else 0.0,
            self.design_lid.peak_flow_m3s if self.design_lid else 0.0,
        )

    @property
    def volume_reduction_pct(self) -> float:
        """Reducción del volumen de diseño por las medidas LID (%)."""
        return _reduction_pct(
            self.design_baseline.volume_m3 if self.design_baseline else 0.0,
            self.design_lid.volume_m3 if self.design_lid else 0.0,
        )


def _reduction_pct(base: float, value: float) -> float:
    if base <= 0:
        return 0.0
    return (1.0 - value / base) * 100.0


def potential_infiltration(soil: SoilProfile, tc_min: float, pervious_m2: float) -> float:
    """
    Volumen que la superficie permeable puede infiltrar durante Tc.

    Usa la tasa de régimen permanente del suelo, no la Ks de Green-Ampt.

    Returns:
        Volumen en m³
    """
    return soil.steady_rate_mmhr * (tc_min / 60.0) * pervious_m2 / 1000.0


def analyze_site(
    site: SiteParameters,
    storm: Optional[DesignStorm] = None,
    return_periods: Iterable[int] = RETURN_PERIODS,
) -> SiteAnalysis:
    """
    Ejecuta el análisis completo de un lote.

    Args:
        site: Parámetros del lote (incluye suelo y medidas LID)
        storm: Evento a simular (por defecto 100 años, 6 horas)
        return_periods: Períodos de la tabla de tormentas de diseño

    Returns:
        SiteAnalysis con todos los resultados
    """
    storm = storm or DesignStorm()
    return_periods = tuple(return_periods)

    areas = land_cover_areas(site.lot_area_m2, site.building_area_m2, site.pavement_fraction)
    baseline = lid_effects(areas)
    effects = lid_effects(areas, site.lid)
    tc = time_of_concentration(site.lot_area_m2)

    baseline_rows = design_storm_rows(baseline, tc, return_periods)
    lid_rows = design_storm_rows(effects, tc, return_periods)

    soil = get_soil_profile(site.soil)
    total_depth = design_storm_depth(storm.return_period_yr, storm.duration_hr)

    if total_depth > 0 and site.lot_area_m2 > 0:
        simulation = run_infiltration_simulation(
            total_depth, storm.duration_hr, soil, effects.impervious_fraction,
        )
    else:
        logger.warning(
            "Simulación omitida: profundidad %.2f mm, área %.1f m²",
            total_depth, site.lot_area_m2,
        )
        simulation = []

    logger.debug(
        "Lote %.0f m²: Tc=%.1f min, C base=%.3f, C LID=%.3f, P=%.1f mm",
        site.lot_area_m2, tc, baseline.composite_c, effects.composite_c, total_depth,
    )

    return SiteAnalysis(
        site=site,
        storm=storm,
        tc_min=tc,
        areas=areas,
        baseline=baseline,
        effects=effects,
        baseline_rows=baseline_rows,
        lid_rows=lid_rows,
        soil=soil,
        total_depth_mm=total_depth,
        simulation=simulation,
        summary=summarize_simulation(simulation),
        potential_infiltration_m3=potential_infiltration(soil, tc, areas.pervious_m2),
    )
