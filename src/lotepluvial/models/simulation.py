"""
Modelos para la simulación de infiltración Green-Ampt.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SimulationStep(BaseModel):
    """
    Un intervalo de la simulación.

    Las láminas incrementales y acumuladas están en mm sobre el lote
    completo (camino permeable ponderado + camino impermeable).
    """
    model_config = ConfigDict(frozen=True)

    time_min: float = Field(..., description="Tiempo al final del intervalo (min)")
    rainfall_mm: float
    intensity_mmhr: float
    infiltration_mm: float
    infiltration_capacity_mmhr: float = Field(..., description="Capacidad Green-Ampt fp (mm/hr)")
    runoff_mm: float
    cum_rainfall_mm: float
    cum_infiltration_mm: float
    cum_runoff_mm: float
    ponded: bool = Field(..., description="Régimen encharcado")

    @property
    def residual_mm(self) -> float:
        """Lámina no asignada (evapotranspiración despreciada, ~0)."""
        return self.cum_rainfall_mm - self.cum_infiltration_mm - self.cum_runoff_mm

    @property
    def time_label(self) -> str:
        """Tiempo como H:MM."""
        minutes = int(round(self.time_min))
        return f"{minutes // 60}:{minutes % 60:02d}"


class SimulationSummary(BaseModel):
    """Balance hídrico de un evento simulado."""
    model_config = ConfigDict(frozen=True)

    n_steps: int
    duration_min: float
    total_rainfall_mm: float
    total_infiltration_mm: float
    total_runoff_mm: float
    peak_intensity_mmhr: float
    ponding_time_min: Optional[float] = None
    residual_mm: float = 0.0

    @property
    def runoff_ratio(self) -> float:
        if self.total_rainfall_mm <= 0:
            return 0.0
        return self.total_runoff_mm / self.total_rainfall_mm

    def runoff_volume_m3(self, lot_area_m2: float) -> float:
        """Volumen escurrido sobre el lote (m³)."""
        return self.total_runoff_mm * lot_area_m2 / 1000.0

    def infiltration_volume_m3(self, lot_area_m2: float) -> float:
        """Volumen infiltrado sobre el lote (m³)."""
        return self.total_infiltration_mm * lot_area_m2 / 1000.0
