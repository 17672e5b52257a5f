"""
Parámetros Green-Ampt por textura de suelo.

Referencia: Rawls, Brakensiek & Miller (1983) "Green-Ampt Infiltration
Parameters from Soils Data", J. Hydraulic Engineering, 109(1), 62-70.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lotepluvial.config import SoilType


SOIL_PROFILES_SOURCE = "Rawls, Brakensiek & Miller (1983)"


class SoilProfile(BaseModel):
    """Parámetros Green-Ampt de un suelo."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Identificador")
    label: str = Field(..., description="Nombre para mostrar")
    ks_mmhr: float = Field(..., gt=0, description="Conductividad saturada Ks (mm/hr)")
    psi_mm: float = Field(..., ge=0, description="Succión capilar del frente ψ (mm)")
    theta_e: float = Field(..., gt=0, lt=1, description="Porosidad efectiva θe")
    theta_i: float = Field(..., ge=0, lt=1, description="Humedad inicial θi")
    steady_rate_mmhr: float = Field(
        ..., gt=0, description="Tasa de infiltración de régimen permanente (mm/hr)"
    )

    @model_validator(mode="after")
    def check_moisture(self):
        if self.theta_i > self.theta_e:
            raise ValueError("La humedad inicial no puede superar la porosidad efectiva")
        return self

    @property
    def moisture_deficit(self) -> float:
        """Déficit de humedad Md = θe − θi."""
        return self.theta_e - self.theta_i


SOIL_PROFILES: dict[SoilType, SoilProfile] = {
    SoilType.SAND: SoilProfile(
        key="sand", label="Sand", ks_mmhr=117.8, psi_mm=49.5, theta_e=0.437, theta_i=0.10,
        steady_rate_mmhr=120.0),
    SoilType.LOAMY_SAND: SoilProfile(
        key="loamy_sand", label="Loamy Sand", ks_mmhr=29.9, psi_mm=61.3, theta_e=0.437, theta_i=0.12,
        steady_rate_mmhr=60.0),
    SoilType.SANDY_LOAM: SoilProfile(
        key="sandy_loam", label="Sandy Loam", ks_mmhr=10.9, psi_mm=110.1, theta_e=0.453, theta_i=0.15,
        steady_rate_mmhr=30.0),
    SoilType.LOAM: SoilProfile(
        key="loam", label="Loam", ks_mmhr=3.4, psi_mm=88.9, theta_e=0.463, theta_i=0.20,
        steady_rate_mmhr=15.0),
    SoilType.SILT_LOAM: SoilProfile(
        key="silt_loam", label="Silt Loam", ks_mmhr=6.5, psi_mm=166.8, theta_e=0.501, theta_i=0.22,
        steady_rate_mmhr=12.0),
    SoilType.SANDY_CLAY_LOAM: SoilProfile(
        key="sandy_clay_loam", label="Sandy Clay Loam", ks_mmhr=1.5, psi_mm=218.5, theta_e=0.398, theta_i=0.20,
        steady_rate_mmhr=8.0),
    SoilType.CLAY_LOAM: SoilProfile(
        key="clay_loam", label="Clay Loam", ks_mmhr=1.0, psi_mm=208.8, theta_e=0.464, theta_i=0.25,
        steady_rate_mmhr=6.0),
    SoilType.SILTY_CLAY_LOAM: SoilProfile(
        key="silty_clay_loam", label="Silty Clay Loam", ks_mmhr=1.0, psi_mm=273.0, theta_e=0.471, theta_i=0.25,
        steady_rate_mmhr=4.0),
    SoilType.CLAY: SoilProfile(
        key="clay", label="Clay (Glacial Till)", ks_mmhr=0.3, psi_mm=316.3, theta_e=0.475, theta_i=0.30,
        steady_rate_mmhr=2.0),
}


def get_soil_profile(soil: SoilProfile | SoilType | str) -> SoilProfile:
    """
    Obtiene los parámetros de un suelo.

    Args:
        soil: SoilProfile, SoilType o su valor en texto (ej: "clay_loam")

    Returns:
        SoilProfile correspondiente
    """
    if isinstance(soil, SoilProfile):
        return soil
    try:
        return SOIL_PROFILES[SoilType(soil)]
    except ValueError:
        raise ValueError(f"Tipo de suelo desconocido: {soil}") from None
