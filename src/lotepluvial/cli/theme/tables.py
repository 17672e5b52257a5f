"""
Funciones para crear e imprimir tablas Rich.
"""

from typing import TYPE_CHECKING, Optional

from rich.table import Table
from rich import box

from lotepluvial.cli.theme.palette import get_console, get_palette

if TYPE_CHECKING:
    from lotepluvial.core.infiltration import SoilProfile
    from lotepluvial.models import DesignStormRow, SimulationStep


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada para resultados."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_idf_table(table: dict, title: str = "Curvas IDF", show_depths: bool = False) -> None:
    """
    Imprime la tabla IDF con una columna por período de retorno.

    Args:
        table: Resultado de idf_table()
        title: Título de la tabla
        show_depths: Si True muestra láminas (mm) en vez de intensidades
    """
    console = get_console()
    values = table["depths"] if show_depths else table["intensities"]

    columns = [("Dur (min)", "right")]
    columns.extend((f"T={int(tr)}", "right") for tr in table["return_periods"])
    rich_table = create_results_table(title, columns)

    for j, duration in enumerate(table["durations"]):
        row = [f"{duration:g}"]
        row.extend(f"{values[i, j]:.1f}" for i in range(len(table["return_periods"])))
        rich_table.add_row(*row)

    console.print(rich_table)


def print_design_storm_table(
    rows: list["DesignStormRow"],
    title: str = "Tormentas de diseño",
    highlight_period: Optional[int] = None,
) -> None:
    """
    Imprime la tabla de tormentas de diseño (Racional + Manning).

    Args:
        rows: Filas por período de retorno
        title: Título de la tabla
        highlight_period: Período de retorno a resaltar (fila de diseño)
    """
    console = get_console()
    p = get_palette()

    rich_table = create_results_table(title, [
        ("Tr", "center"),
        ("i (mm/hr)", "right"),
        ("Q (L/s)", "right"),
        ("D req (mm)", "right"),
        ("D tubo (mm)", "right"),
        ("Vol (m³)", "right"),
    ])

    for row in rows:
        style = f"bold {p.accent}" if row.return_period == highlight_period else None
        rich_table.add_row(
            str(row.return_period),
            f"{row.intensity_mmhr:.1f}",
            f"{row.peak_flow_ls:.2f}",
            f"{row.required_pipe_mm:.1f}",
            str(row.selected_pipe_mm),
            f"{row.volume_m3:.2f}",
            style=style,
        )

    console.print(rich_table)


def print_simulation_table(
    steps: list["SimulationStep"],
    title: str = "Simulación Green-Ampt",
    every: int = 1,
) -> None:
    """
    Imprime la serie temporal de la simulación.

    Args:
        steps: Pasos de la simulación
        title: Título de la tabla
        every: Muestra uno de cada `every` pasos (el último siempre se muestra)
    """
    console = get_console()
    p = get_palette()

    rich_table = create_results_table(title, [
        ("Tiempo", "right"),
        ("Lluvia", "right"),
        ("i (mm/hr)", "right"),
        ("Infil.", "right"),
        ("Escorr.", "right"),
        ("Esc. acum", "right"),
        ("Enc.", "center"),
    ])

    last = len(steps) - 1
    for k, step in enumerate(steps):
        if k % every and k != last:
            continue
        rich_table.add_row(
            step.time_label,
            f"{step.rainfall_mm:.2f}",
            f"{step.intensity_mmhr:.1f}",
            f"{step.infiltration_mm:.2f}",
            f"{step.runoff_mm:.2f}",
            f"{step.cum_runoff_mm:.2f}",
            "si" if step.ponded else "-",
            style=p.warning if step.ponded and step.runoff_mm > 0 else None,
        )

    console.print(rich_table)


def print_soils_table(profiles: list["SoilProfile"], title: str = "Suelos (Green-Ampt)") -> None:
    """Imprime los parámetros Green-Ampt por textura de suelo."""
    console = get_console()
    p = get_palette()

    rich_table = create_results_table(title, [
        ("Clave", "left"),
        ("Suelo", "left"),
        ("Ks (mm/hr)", "right"),
        ("ψ (mm)", "right"),
        ("θe", "right"),
        ("θi", "right"),
    ])

    for profile in profiles:
        rich_table.add_row(
            f"[{p.accent}]{profile.key}[/]",
            profile.label,
            f"{profile.ks_mmhr:.1f}",
            f"{profile.psi_mm:.1f}",
            f"{profile.theta_e:.3f}",
            f"{profile.theta_i:.2f}",
        )

    console.print(rich_table)
