"""
Coeficientes de escorrentía del lote y ajustes LID.

Coeficientes por superficie: techo 0.95, pavimento 0.90, césped 0.25.
El C compuesto se pondera por área sobre el lote y se acota a [0.10, 0.95].
"""

# Constantes
from .constants import (
    C_ROOF,
    C_PAVEMENT,
    C_LAWN,
    C_GREEN_ROOF,
    C_PERMEABLE_PAVEMENT,
    GREEN_ROOF_COVERAGE,
    RAIN_GARDEN_FACTOR,
    BIOSWALE_FACTOR,
    C_MIN,
    C_MAX,
    MAX_BUILDING_RATIO,
    MAX_IMPERVIOUS_FRACTION,
)

# Tipos
from .types import ZoningEntry, LandCoverAreas

# Zonificación
from .tables import (
    ZONING_LAND_COVER,
    ZONING_IMPERVIOUS_TOLERANCE,
    get_zoning_entry,
    default_pavement_fraction,
    zoning_impervious_deviation,
)

# Ponderación
from .weighting import (
    weighted_c,
    clamp_c,
    land_cover_from_areas,
    land_cover_areas,
)

# LID
from .lid import (
    LidEffects,
    lid_effects,
    composite_runoff_coefficient,
)

__all__ = [
    # Constantes
    "C_ROOF",
    "C_PAVEMENT",
    "C_LAWN",
    "C_GREEN_ROOF",
    "C_PERMEABLE_PAVEMENT",
    "GREEN_ROOF_COVERAGE",
    "RAIN_GARDEN_FACTOR",
    "BIOSWALE_FACTOR",
    "C_MIN",
    "C_MAX",
    "MAX_BUILDING_RATIO",
    "MAX_IMPERVIOUS_FRACTION",
    # Tipos
    "ZoningEntry",
    "LandCoverAreas",
    # Zonificación
    "ZONING_LAND_COVER",
    "ZONING_IMPERVIOUS_TOLERANCE",
    "get_zoning_entry",
    "default_pavement_fraction",
    "zoning_impervious_deviation",
    # Ponderación
    "weighted_c",
    "clamp_c",
    "land_cover_from_areas",
    "land_cover_areas",
    # LID
    "LidEffects",
    "lid_effects",
    "composite_runoff_coefficient",
]
