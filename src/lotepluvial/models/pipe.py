"""
Modelos para resultados de dimensionamiento de tuberías.
"""

from pydantic import BaseModel, ConfigDict, Field


class PipeSizingResult(BaseModel):
    """
    Resultado de dimensionamiento por Manning.

    El diámetro seleccionado pertenece siempre al catálogo estándar. Si el
    diámetro requerido excede el máximo del catálogo se devuelve el máximo
    (techo blando) y exceeds_catalogue queda en True.
    """
    model_config = ConfigDict(frozen=True)

    peak_flow_m3s: float = Field(..., description="Caudal de diseño (m³/s)")
    required_diameter_mm: float = Field(..., ge=0, description="Diámetro calculado (mm)")
    selected_diameter_mm: int = Field(..., gt=0, description="Diámetro comercial (mm)")

    @property
    def exceeds_catalogue(self) -> bool:
        return self.selected_diameter_mm < self.required_diameter_mm


class DesignStormRow(BaseModel):
    """Fila de la tabla de tormentas de diseño (un período de retorno)."""
    model_config = ConfigDict(frozen=True)

    return_period: int
    duration_min: float
    intensity_mmhr: float
    peak_flow_m3s: float
    required_pipe_mm: float
    selected_pipe_mm: int
    volume_m3: float

    @property
    def peak_flow_ls(self) -> float:
        return self.peak_flow_m3s * 1000.0
