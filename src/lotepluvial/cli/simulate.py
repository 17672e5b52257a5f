"""
Comandos CLI para la simulación de infiltración Green-Ampt.
"""

from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from lotepluvial.config import STORM_DURATIONS_HR, DesignStorm
from lotepluvial.core import SOIL_PROFILES, analyze_site
from lotepluvial.core.infiltration import SOIL_PROFILES_SOURCE, simulation_time_step
from lotepluvial.cli.theme import (
    print_header, print_field, print_separator, print_error, print_warning, print_note,
    print_simulation_table, print_soils_table, print_summary_box,
)
from lotepluvial.cli.validators import build_site, validate_duration, validate_return_period


# Filas máximas de la serie temporal antes de submuestrear
MAX_TABLE_ROWS = 48


def simular_command(
    area: Annotated[float, typer.Argument(help="Área del lote en m²")],
    building: Annotated[float, typer.Option("--edificio", "-e", help="Huella edificada en m²")] = 0.0,
    pavement: Annotated[Optional[float], typer.Option("--pavimento", "-p", help="Fracción pavimentada (0-1)")] = None,
    soil: Annotated[str, typer.Option("--suelo", "-s", help="Textura de suelo (ver 'suelos')")] = "clay_loam",
    return_period: Annotated[int, typer.Option("--tr", "-t", help="Período de retorno (años)")] = 100,
    duration: Annotated[float, typer.Option("--duracion", "-d", help="Duración del evento en horas")] = 6.0,
    lid: Annotated[Optional[list[str]], typer.Option(
        "--lid", "-l", help="Medida LID: green_roof, rain_garden, permeable_pavement, bioswale",
    )] = None,
    full: Annotated[bool, typer.Option("--completa", help="Mostrar todos los pasos")] = False,
):
    """
    Balance de agua del lote bajo una tormenta SCS Tipo II.

    La fracción impermeable escurre toda la lluvia; la permeable infiltra
    según Green-Ampt hasta encharcarse.

    Ejemplo:
        lotepluvial simular 450 --edificio 180 --suelo clay
        lotepluvial simular 450 -e 180 -t 10 -d 24 --lid permeable_pavement
    """
    validate_return_period(return_period)
    validate_duration(duration, max_value=24)
    site = build_site(area, building, pavement, soil=soil, lid=lid)

    try:
        storm = DesignStorm(return_period_yr=return_period, duration_hr=duration)
    except ValidationError as e:
        for error in e.errors():
            print_error(error["msg"])
        raise typer.Exit(1)

    analysis = analyze_site(site, storm)
    summary = analysis.summary

    print_header("SIMULACION GREEN-AMPT", f"SCS Tipo II, Tr {return_period} años, {duration:g} hr")
    print_field("Suelo", analysis.soil.label)
    print_field("Ks", f"{analysis.soil.ks_mmhr:.1f}", "mm/hr")
    print_field("Fraccion impermeable", f"{analysis.effects.impervious_fraction:.3f}")
    print_field("Paso de calculo", f"{simulation_time_step(duration):g}", "min")
    print_field("Precipitacion total", f"{analysis.total_depth_mm:.2f}", "mm")

    if duration not in STORM_DURATIONS_HR:
        print_note(f"Duraciones habituales: {', '.join(str(d) for d in STORM_DURATIONS_HR)} hr")

    if not analysis.simulation:
        print_warning("Sin precipitación para simular")
        return

    every = 1 if full else max(1, -(-len(analysis.simulation) // MAX_TABLE_ROWS))
    print_simulation_table(analysis.simulation, every=every)

    print_summary_box("BALANCE", [
        ("Lluvia", f"{summary.total_rainfall_mm:.2f}", "mm"),
        ("Infiltracion", f"{summary.total_infiltration_mm:.2f}", "mm"),
        ("Escorrentia", f"{summary.total_runoff_mm:.2f}", "mm"),
        ("Coef. escorrentia", f"{summary.runoff_ratio:.3f}", ""),
        ("Volumen escurrido", f"{summary.runoff_volume_m3(site.lot_area_m2):.2f}", "m³"),
        ("Volumen infiltrado", f"{summary.infiltration_volume_m3(site.lot_area_m2):.2f}", "m³"),
    ])

    if summary.ponding_time_min is not None:
        print_field("Encharcamiento desde", f"{summary.ponding_time_min:g}", "min")
    else:
        print_field("Encharcamiento", "no ocurre")
    print_separator("-", 50)


def suelos_command():
    """
    Parámetros Green-Ampt por textura de suelo.

    Ejemplo:
        lotepluvial suelos
    """
    print_soils_table(list(SOIL_PROFILES.values()))
    print_note(f"Fuente: {SOIL_PROFILES_SOURCE}")
