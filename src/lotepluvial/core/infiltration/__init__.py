"""
Módulo de infiltración.

Implementa el modelo Green-Ampt conducido por un hietograma SCS Tipo II,
con parámetros de suelo de Rawls, Brakensiek & Miller (1983).
"""

# Suelos
from .soils import (
    SOIL_PROFILES_SOURCE,
    SoilProfile,
    SOIL_PROFILES,
    get_soil_profile,
)

# Green-Ampt
from .green_ampt import (
    INITIAL_CUMULATIVE_INFILTRATION,
    simulation_time_step,
    green_ampt_capacity,
    run_infiltration_simulation,
    summarize_simulation,
)

__all__ = [
    # Suelos
    "SOIL_PROFILES_SOURCE",
    "SoilProfile",
    "SOIL_PROFILES",
    "get_soil_profile",
    # Green-Ampt
    "INITIAL_CUMULATIVE_INFILTRATION",
    "simulation_time_step",
    "green_ampt_capacity",
    "run_infiltration_simulation",
    "summarize_simulation",
]
