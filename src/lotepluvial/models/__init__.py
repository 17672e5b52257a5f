"""
Modelos de resultados de lotepluvial.

Todos los modelos son inmutables: cada recálculo produce objetos nuevos.
"""

from lotepluvial.models.pipe import PipeSizingResult, DesignStormRow
from lotepluvial.models.storm import HyetographResult
from lotepluvial.models.simulation import SimulationStep, SimulationSummary

__all__ = [
    # Tuberías
    "PipeSizingResult",
    "DesignStormRow",
    # Tormenta
    "HyetographResult",
    # Simulación
    "SimulationStep",
    "SimulationSummary",
]
