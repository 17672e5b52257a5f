"""Módulos de cálculo hidrológico del lote."""

from lotepluvial.core.idf import (
    IDF_TABLE_VERSION,
    interpolate_intensity,
    design_storm_depth,
    idf_table,
)

from lotepluvial.core.tc import (
    kirpich,
    time_of_concentration,
)

from lotepluvial.core.coefficients import (
    LandCoverAreas,
    LidEffects,
    land_cover_areas,
    lid_effects,
    composite_runoff_coefficient,
)

from lotepluvial.core.runoff import (
    rational_peak_flow,
    rational_volume,
    required_pipe_diameter,
    select_pipe_diameter,
    size_pipe,
    peak_flow_and_pipe,
    design_row,
)

from lotepluvial.core.temporal import (
    scs_type_ii_fraction,
    scs_type_ii_hyetograph,
)

from lotepluvial.core.infiltration import (
    SoilProfile,
    SOIL_PROFILES,
    get_soil_profile,
    green_ampt_capacity,
    run_infiltration_simulation,
    summarize_simulation,
)

from lotepluvial.core.analysis import (
    SiteAnalysis,
    analyze_site,
)

__all__ = [
    # IDF
    "IDF_TABLE_VERSION",
    "interpolate_intensity",
    "design_storm_depth",
    "idf_table",
    # Tc
    "kirpich",
    "time_of_concentration",
    # Coeficientes y LID
    "LandCoverAreas",
    "LidEffects",
    "land_cover_areas",
    "lid_effects",
    "composite_runoff_coefficient",
    # Escorrentía y tuberías
    "rational_peak_flow",
    "rational_volume",
    "required_pipe_diameter",
    "select_pipe_diameter",
    "size_pipe",
    "peak_flow_and_pipe",
    "design_row",
    # Temporal
    "scs_type_ii_fraction",
    "scs_type_ii_hyetograph",
    # Infiltración
    "SoilProfile",
    "SOIL_PROFILES",
    "get_soil_profile",
    "green_ampt_capacity",
    "run_infiltration_simulation",
    "summarize_simulation",
    # Análisis
    "SiteAnalysis",
    "analyze_site",
]
