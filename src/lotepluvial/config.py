"""Modelos Pydantic para configuración y validación de datos."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Períodos de retorno disponibles en la tabla IDF (años)
RETURN_PERIODS: tuple[int, ...] = (2, 5, 10, 25, 50, 100)

# Duraciones de evento ofrecidas para la simulación (horas)
STORM_DURATIONS_HR: tuple[int, ...] = (1, 6, 12, 24)

# Fracción de pavimento cuando no hay zonificación conocida
DEFAULT_PAVEMENT_FRACTION = 0.15


class SoilType(str, Enum):
    """Texturas de suelo (Rawls, Brakensiek & Miller 1983)."""
    SAND = "sand"
    LOAMY_SAND = "loamy_sand"
    SANDY_LOAM = "sandy_loam"
    LOAM = "loam"
    SILT_LOAM = "silt_loam"
    SANDY_CLAY_LOAM = "sandy_clay_loam"
    CLAY_LOAM = "clay_loam"
    SILTY_CLAY_LOAM = "silty_clay_loam"
    CLAY = "clay"


class LIDOption(str, Enum):
    """Medidas de desarrollo de bajo impacto (LID)."""
    GREEN_ROOF = "green_roof"
    RAIN_GARDEN = "rain_garden"
    PERMEABLE_PAVEMENT = "permeable_pavement"
    BIOSWALE = "bioswale"


def parse_lid_flags(flags) -> frozenset[LIDOption]:
    """
    Normaliza un conjunto de medidas LID.

    Acepta None, instancias de LIDOption o sus valores en texto.

    Raises:
        ValueError: Si alguna medida no es reconocida
    """
    if not flags:
        return frozenset()
    if isinstance(flags, (str, LIDOption)):
        flags = [flags]
    result = set()
    for flag in flags:
        try:
            result.add(LIDOption(flag))
        except ValueError:
            valid = ", ".join(o.value for o in LIDOption)
            raise ValueError(f"Medida LID desconocida: {flag} (opciones: {valid})") from None
    return frozenset(result)


# ============================================================================
# Parámetros del sitio
# ============================================================================

class SiteParameters(BaseModel):
    """
    Parámetros de un lote para el cálculo de drenaje.

    El área edificada puede exceder el área del lote (datos catastrales con
    ruido); se recorta al 85% del lote antes de cualquier cálculo de áreas.
    Si no se indica la fracción de pavimento se deriva de la zonificación.
    """
    model_config = ConfigDict(frozen=True)

    lot_area_m2: float = Field(..., gt=0, description="Área del lote (m²)")
    building_area_m2: float = Field(default=0.0, ge=0, description="Huella edificada (m²)")
    pavement_fraction: float = Field(
        default=DEFAULT_PAVEMENT_FRACTION, ge=0, le=1,
        description="Fracción pavimentada del lote (0-1)",
    )
    soil: SoilType = Field(default=SoilType.CLAY_LOAM, description="Textura del suelo")
    lid: frozenset[LIDOption] = Field(default_factory=frozenset, description="Medidas LID activas")
    zoning: Optional[str] = Field(None, description="Código de zonificación")
    address: str = Field(default="", description="Dirección o identificador")

    @model_validator(mode="before")
    @classmethod
    def pavement_from_zoning(cls, data):
        if isinstance(data, dict) and data.get("pavement_fraction") is None:
            # Import diferido: las tablas viven en core
            from lotepluvial.core.coefficients import default_pavement_fraction

            data = dict(data)
            data["pavement_fraction"] = default_pavement_fraction(data.get("zoning"))
        return data

    @field_validator("lid", mode="before")
    @classmethod
    def validate_lid(cls, v):
        return parse_lid_flags(v)

    @property
    def area_ha(self) -> float:
        return self.lot_area_m2 / 10000.0

    @property
    def pavement_area_m2(self) -> float:
        return self.lot_area_m2 * self.pavement_fraction


# ============================================================================
# Tormenta de diseño
# ============================================================================

class DesignStorm(BaseModel):
    """Evento de diseño: período de retorno y duración total."""
    model_config = ConfigDict(frozen=True)

    return_period_yr: int = Field(default=100, description="Período de retorno (años)")
    duration_hr: float = Field(default=6.0, gt=0, le=24, description="Duración total (hr)")

    @field_validator("return_period_yr")
    @classmethod
    def validate_return_period(cls, v: int) -> int:
        if v not in RETURN_PERIODS:
            raise ValueError(f"Período de retorno debe ser uno de {list(RETURN_PERIODS)}")
        return v

    @property
    def duration_min(self) -> float:
        return self.duration_hr * 60.0

    @property
    def average_intensity_mmhr(self) -> float:
        from lotepluvial.core.idf import interpolate_intensity

        return interpolate_intensity(self.return_period_yr, self.duration_min)

    @property
    def total_depth_mm(self) -> float:
        return self.average_intensity_mmhr * self.duration_hr
