"""
LotePluvial - Drenaje pluvial de un lote urbano.

Curvas IDF, tiempo de concentración, coeficiente de escorrentía con
medidas LID, Método Racional con dimensionado de tubería por Manning y
simulación de infiltración Green-Ampt sobre una tormenta SCS Tipo II.
"""

__version__ = "0.1.0"

from lotepluvial.config import (
    RETURN_PERIODS,
    STORM_DURATIONS_HR,
    SoilType,
    LIDOption,
    SiteParameters,
    DesignStorm,
)

from lotepluvial.core import (
    interpolate_intensity,
    time_of_concentration,
    composite_runoff_coefficient,
    peak_flow_and_pipe,
    run_infiltration_simulation,
    analyze_site,
)

__all__ = [
    "__version__",
    # config
    "RETURN_PERIODS",
    "STORM_DURATIONS_HR",
    "SoilType",
    "LIDOption",
    "SiteParameters",
    "DesignStorm",
    # core
    "interpolate_intensity",
    "time_of_concentration",
    "composite_runoff_coefficient",
    "peak_flow_and_pipe",
    "run_infiltration_simulation",
    "analyze_site",
]
