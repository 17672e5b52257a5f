"""
Comando CLI para el tiempo de concentración del lote.
"""

from typing import Annotated

import typer

from lotepluvial.core.tc import (
    REPRESENTATIVE_SLOPE, TC_MAX_MINUTES, TC_MIN_MINUTES,
    flow_length, kirpich, time_of_concentration,
)
from lotepluvial.cli.theme import print_header, print_field, print_separator, print_note
from lotepluvial.cli.validators import validate_lot_area


def tc_command(
    area: Annotated[float, typer.Argument(help="Área del lote en m²")],
):
    """
    Tiempo de concentración por Kirpich.

    Longitud de flujo = 1.4 × √área, pendiente 2%, resultado acotado a 5-30 min.

    Ejemplo:
        lotepluvial tc 450
    """
    validate_lot_area(area)

    length = flow_length(area)
    raw = kirpich(length, REPRESENTATIVE_SLOPE)
    tc = time_of_concentration(area)

    print_header("TIEMPO DE CONCENTRACION", "Kirpich")
    print_field("Area lote", f"{area:.1f}", "m²")
    print_field("Longitud flujo", f"{length:.1f}", "m")
    print_field("Pendiente", f"{REPRESENTATIVE_SLOPE * 100:.1f}", "%")
    print_separator("-", 50)
    print_field("Tc Kirpich", f"{raw:.2f}", "min")
    print_field("Tc", f"{tc:.2f}", "min")

    if tc != raw:
        print_note(f"Tc acotado al rango {TC_MIN_MINUTES:g}-{TC_MAX_MINUTES:g} min")
