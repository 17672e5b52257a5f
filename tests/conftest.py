"""Configuración de pytest para tests de lotepluvial."""

import pytest

from lotepluvial.config import DesignStorm, LIDOption, SiteParameters, SoilType
from lotepluvial.core.infiltration import get_soil_profile


@pytest.fixture
def sample_site():
    """Lote residencial típico: 450 m², 180 m² edificados, 15% pavimento, arcilla."""
    return SiteParameters(
        lot_area_m2=450.0,
        building_area_m2=180.0,
        pavement_fraction=0.15,
        soil=SoilType.CLAY,
    )


@pytest.fixture
def green_roof_site(sample_site):
    """El mismo lote con techo verde."""
    return sample_site.model_copy(update={"lid": frozenset({LIDOption.GREEN_ROOF})})


@pytest.fixture
def design_storm():
    """Tormenta de diseño de 100 años y 6 horas."""
    return DesignStorm(return_period_yr=100, duration_hr=6.0)


@pytest.fixture
def clay_soil():
    """Perfil de suelo arcilloso (till glaciar)."""
    return get_soil_profile(SoilType.CLAY)


@pytest.fixture
def sandy_soil():
    """Perfil de suelo arenoso."""
    return get_soil_profile(SoilType.SAND)
