"""
Validadores centralizados para entradas CLI.

Cada validador imprime un error con el tema de la consola y, por defecto,
termina el comando con código 1 antes de imprimir cualquier resultado.
"""

from typing import Optional

import typer
from pydantic import ValidationError

from lotepluvial.cli.theme import print_error, print_warning
from lotepluvial.config import (
    RETURN_PERIODS, LIDOption, SiteParameters, SoilType, parse_lid_flags,
)
from lotepluvial.core.coefficients import MAX_BUILDING_RATIO


# =============================================================================
# VALIDADORES DE RANGO
# =============================================================================

def validate_lot_area(value: Optional[float], exit_on_error: bool = True) -> bool:
    """
    Valida que el área del lote exista y sea positiva.

    Args:
        value: Área del lote en m²
        exit_on_error: Si True, termina el programa con error

    Returns:
        True si es válido, False si no
    """
    if value is None or value <= 0:
        print_error("Se requiere el área del lote")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_building_area(value: float, lot_area: float, exit_on_error: bool = True) -> bool:
    """
    Valida el área edificada.

    Un área mayor al 85% del lote se acepta con advertencia: el cálculo la
    recorta.
    """
    if value < 0:
        print_error(f"El área edificada no puede ser negativa (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    limit = MAX_BUILDING_RATIO * lot_area
    if value > limit:
        print_warning(
            f"Área edificada {value:.1f} m² supera el 85% del lote; se recorta a {limit:.1f} m²"
        )
    return True


def validate_fraction(value: float, name: str = "La fracción", exit_on_error: bool = True) -> bool:
    """Valida que una fracción esté en [0, 1]."""
    if not 0 <= value <= 1:
        print_error(f"{name} debe estar entre 0 y 1 (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_return_period(value: int, exit_on_error: bool = True) -> bool:
    """
    Valida que el período de retorno esté en la tabla IDF.

    Args:
        value: Período de retorno en años
        exit_on_error: Si True, termina el programa con error

    Returns:
        True si es válido, False si no
    """
    valid_periods = list(RETURN_PERIODS)
    if value not in valid_periods:
        print_error(f"Período de retorno debe ser uno de {valid_periods} (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_duration(value: float, max_value: float = None, exit_on_error: bool = True) -> bool:
    """
    Valida que la duración sea positiva y, si se indica, no supere un máximo.

    Args:
        value: Duración
        max_value: Máximo admitido (misma unidad)
        exit_on_error: Si True, termina el programa con error
    """
    if value <= 0:
        print_error(f"La duración debe ser positiva (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    if max_value is not None and value > max_value:
        print_error(f"La duración no puede superar {max_value:g} (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


# =============================================================================
# VALIDADORES DE OPCIONES
# =============================================================================

def parse_soil(value: str) -> SoilType:
    """Convierte la clave de suelo o termina con error."""
    try:
        return SoilType(value.strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in SoilType)
        print_error(f"Tipo de suelo desconocido: {value} (opciones: {valid})")
        raise typer.Exit(1)


def parse_lid(values: Optional[list[str]]) -> frozenset[LIDOption]:
    """Convierte las medidas LID indicadas o termina con error."""
    try:
        return parse_lid_flags([v.strip().lower() for v in values or []])
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)


# =============================================================================
# PARÁMETROS DEL LOTE
# =============================================================================

def build_site(
    lot_area: Optional[float],
    building_area: float = 0.0,
    pavement_fraction: Optional[float] = None,
    zoning: Optional[str] = None,
    soil: str = SoilType.CLAY_LOAM.value,
    lid: Optional[list[str]] = None,
) -> SiteParameters:
    """
    Valida las opciones de un comando y construye los parámetros del lote.

    Sin fracción de pavimento explícita se usa la de la zonificación.
    """
    validate_lot_area(lot_area)
    validate_building_area(building_area, lot_area)
    if pavement_fraction is not None:
        validate_fraction(pavement_fraction, "La fracción de pavimento")

    try:
        return SiteParameters(
            lot_area_m2=lot_area,
            building_area_m2=building_area,
            pavement_fraction=pavement_fraction,
            zoning=zoning,
            soil=parse_soil(soil),
            lid=parse_lid(lid),
        )
    except ValidationError as e:
        for error in e.errors():
            print_error(error["msg"])
        raise typer.Exit(1)
