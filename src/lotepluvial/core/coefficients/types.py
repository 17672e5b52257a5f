"""
Tipos de datos para coberturas del lote.
"""

from dataclasses import dataclass

from .constants import MAX_IMPERVIOUS_FRACTION


@dataclass(frozen=True)
class ZoningEntry:
    """Cobertura típica de una zona (estimada, verificar en campo)."""
    code: str
    label: str
    impervious: float        # Fracción impermeable típica
    pavement_fraction: float  # Fracción pavimentada típica


@dataclass(frozen=True)
class LandCoverAreas:
    """
    Áreas de cobertura de un lote (m²).

    El área edificada ya está acotada al 85% del lote.
    """
    lot_m2: float
    building_m2: float
    pavement_m2: float
    pervious_m2: float

    @property
    def impervious_m2(self) -> float:
        return self.building_m2 + self.pavement_m2

    @property
    def impervious_fraction(self) -> float:
        """Fracción impermeable sin medidas LID (máximo 0.95)."""
        if self.lot_m2 <= 0:
            return 0.0
        return min(self.impervious_m2 / self.lot_m2, MAX_IMPERVIOUS_FRACTION)

    @property
    def pervious_fraction(self) -> float:
        return 1.0 - self.impervious_fraction
