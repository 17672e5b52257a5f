"""
Módulo de distribuciones temporales de lluvia.

Implementa la distribución SCS Tipo II (TR-55) para repartir una
profundidad total en un hietograma de diseño.
"""

from .scs import (
    SCS_TYPE_II_SOURCE,
    SCS_TYPE_II,
    scs_type_ii_fraction,
    scs_type_ii_hyetograph,
)

__all__ = [
    "SCS_TYPE_II_SOURCE",
    "SCS_TYPE_II",
    "scs_type_ii_fraction",
    "scs_type_ii_hyetograph",
]
