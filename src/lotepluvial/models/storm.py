"""
Modelo para hietogramas de diseño.
"""

from pydantic import BaseModel, ConfigDict, Field


class HyetographResult(BaseModel):
    """Hietograma discretizado en intervalos de dt_min."""
    model_config = ConfigDict(frozen=True)

    method: str
    dt_min: float
    duration_hr: float
    # Tiempo al final de cada intervalo
    time_min: list[float] = Field(default_factory=list)
    depth_mm: list[float] = Field(default_factory=list)
    intensity_mmhr: list[float] = Field(default_factory=list)
    cumulative_mm: list[float] = Field(default_factory=list)
    total_depth_mm: float
    peak_intensity_mmhr: float

    @property
    def n_intervals(self) -> int:
        return len(self.time_min)
