"""
Comandos CLI para consultas a la curva IDF.
"""

import json
from typing import Annotated, Optional

import typer

from lotepluvial.config import RETURN_PERIODS
from lotepluvial.core import IDF_TABLE_VERSION, idf_table, interpolate_intensity
from lotepluvial.cli.theme import (
    print_header, print_field, print_separator, print_warning, print_idf_table, print_success,
)
from lotepluvial.cli.validators import validate_duration

# Crear sub-aplicación
idf_app = typer.Typer(help="Consultas a la curva IDF (Edmonton)")


@idf_app.command("intensidad")
def idf_intensidad(
    return_period: Annotated[int, typer.Argument(help="Período de retorno (años)")],
    duration: Annotated[float, typer.Argument(help="Duración en minutos")],
):
    """
    Intensidad de lluvia interpolada en escala log-log.

    Duraciones fuera de 5-1440 min se acotan a los extremos de la tabla.

    Ejemplo:
        lotepluvial idf intensidad 100 15
        lotepluvial idf intensidad 5 90
    """
    validate_duration(duration)

    intensity = interpolate_intensity(return_period, duration)

    print_header("CURVA IDF", IDF_TABLE_VERSION)
    print_field("Periodo retorno", return_period, "años")
    print_field("Duracion", f"{duration:g}", "min")
    print_separator("-", 50)
    print_field("INTENSIDAD", f"{intensity:.2f}", "mm/hr")
    print_field("PRECIPITACION", f"{intensity * duration / 60.0:.2f}", "mm")

    if return_period not in RETURN_PERIODS:
        print_warning(f"Período de retorno sin datos en la tabla (disponibles: {list(RETURN_PERIODS)})")


@idf_app.command("tabla")
def idf_tabla(
    depths: Annotated[bool, typer.Option("--laminas", help="Mostrar láminas (mm) en vez de intensidades")] = False,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Archivo JSON")] = None,
):
    """
    Tabla IDF completa para todos los períodos de retorno.

    Ejemplo:
        lotepluvial idf tabla
        lotepluvial idf tabla --laminas
        lotepluvial idf tabla -o idf.json
    """
    result = idf_table()

    if output:
        data = {
            "version": IDF_TABLE_VERSION,
            "durations_min": result["durations"].tolist(),
            "return_periods_yr": result["return_periods"].tolist(),
            "intensities_mmhr": result["intensities"].tolist(),
            "depths_mm": result["depths"].tolist(),
        }
        with open(output, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        print_success(f"Tabla guardada en {output}")
        return

    unit = "mm" if depths else "mm/hr"
    print_idf_table(result, title=f"Curva IDF {IDF_TABLE_VERSION} ({unit})", show_depths=depths)
