"""
Comando CLI para el drenaje del lote: Método Racional y tubería.
"""

from typing import Annotated, Optional

import typer

from lotepluvial.core import analyze_site
from lotepluvial.core.coefficients import ZONING_IMPERVIOUS_TOLERANCE, zoning_impervious_deviation
from lotepluvial.core.runoff import GOVERNING_RETURN_PERIOD, PIPE_CATALOGUE_NAME, STANDARD_PIPE_DIAMETERS_MM
from lotepluvial.cli.theme import (
    print_header, print_field, print_separator, print_note, print_warning,
    print_design_storm_table, print_summary_box,
)
from lotepluvial.cli.validators import build_site


def _lid_label(lid) -> str:
    return ", ".join(sorted(o.value for o in lid)) or "ninguna"


def drenaje_command(
    area: Annotated[float, typer.Argument(help="Área del lote en m²")],
    building: Annotated[float, typer.Option("--edificio", "-e", help="Huella edificada en m²")] = 0.0,
    pavement: Annotated[Optional[float], typer.Option("--pavimento", "-p", help="Fracción pavimentada (0-1)")] = None,
    zoning: Annotated[Optional[str], typer.Option("--zonificacion", "-z", help="Código de zonificación")] = None,
    lid: Annotated[Optional[list[str]], typer.Option(
        "--lid", "-l", help="Medida LID: green_roof, rain_garden, permeable_pavement, bioswale",
    )] = None,
):
    """
    Caudal de diseño y tubería del lote por período de retorno.

    La duración de la lluvia es el Tc de Kirpich. Con medidas LID se
    muestra la tabla base y la tabla con LID.

    Ejemplo:
        lotepluvial drenaje 450 --edificio 180
        lotepluvial drenaje 450 -e 180 -z RS --lid green_roof --lid bioswale
    """
    site = build_site(area, building, pavement, zoning, lid=lid)
    analysis = analyze_site(site)
    areas = analysis.areas

    print_header("DRENAJE DEL LOTE", "Método Racional + Manning")
    print_field("Area lote", f"{areas.lot_m2:.1f}", "m²")
    print_field("Area edificada", f"{areas.building_m2:.1f}", "m²")
    print_field("Area pavimentada", f"{areas.pavement_m2:.1f}", "m²")
    print_field("Area permeable", f"{areas.pervious_m2:.1f}", "m²")
    if site.zoning:
        print_field("Zonificacion", site.zoning)
        deviation = zoning_impervious_deviation(site.zoning, areas.impervious_fraction)
        if deviation is not None and abs(deviation) > ZONING_IMPERVIOUS_TOLERANCE:
            print_warning(
                f"Fracción impermeable {areas.impervious_fraction:.2f} lejos de la típica de "
                f"{site.zoning} ({areas.impervious_fraction - deviation:.2f})"
            )
    print_field("Medidas LID", _lid_label(site.lid))
    print_separator("-", 50)
    print_field("Tc", f"{analysis.tc_min:.2f}", "min")
    print_field("C base", f"{analysis.baseline_c:.4f}")
    if analysis.has_lid:
        print_field("C con LID", f"{analysis.lid_c:.4f}")

    print_design_storm_table(
        analysis.baseline_rows,
        title="Tormentas de diseño - base",
        highlight_period=GOVERNING_RETURN_PERIOD,
    )
    if analysis.has_lid:
        print_design_storm_table(
            analysis.lid_rows,
            title="Tormentas de diseño - con LID",
            highlight_period=GOVERNING_RETURN_PERIOD,
        )

    design = analysis.design_lid
    print_summary_box(f"DISEÑO (Tr {design.return_period} años)", [
        ("Caudal pico", f"{design.peak_flow_ls:.2f}", "L/s"),
        ("Tubería", f"{design.selected_pipe_mm}", "mm"),
        ("Volumen", f"{design.volume_m3:.2f}", "m³"),
    ])

    if analysis.has_lid:
        print_field("Reduccion caudal", f"{analysis.peak_flow_reduction_pct:.1f}", "%")
        print_field("Reduccion volumen", f"{analysis.volume_reduction_pct:.1f}", "%")

    if design.required_pipe_mm > STANDARD_PIPE_DIAMETERS_MM[-1]:
        print_warning(
            f"Diámetro requerido {design.required_pipe_mm:.0f} mm excede el catálogo "
            f"{PIPE_CATALOGUE_NAME}; se indica el máximo"
        )
    print_field("Infiltracion suelo", f"{analysis.soil.steady_rate_mmhr:.0f}", "mm/hr")
    print_note(
        f"Infiltración potencial del área permeable durante Tc: "
        f"{analysis.potential_infiltration_m3:.3f} m³"
    )
