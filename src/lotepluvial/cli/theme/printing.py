"""
Funciones que imprimen directamente a la consola.
"""

from lotepluvial.cli.theme.palette import get_console, get_palette
from lotepluvial.cli.theme.styled import (
    styled_header, styled_label, styled_success, styled_warning,
    styled_error, styled_note, styled_summary_panel,
)


def print_separator(char: str = "-", width: int = 60) -> None:
    console = get_console()
    p = get_palette()
    console.print(char * width, style=p.border)


def print_header(text: str, subtitle: str = None) -> None:
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Imprime un campo con valor."""
    console = get_console()
    prefix = " " * indent
    console.print(prefix, styled_label(label, value, unit))


def print_success(text: str) -> None:
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    get_console().print(styled_warning(text))


def print_error(text: str) -> None:
    get_console().print(styled_error(text))


def print_note(text: str) -> None:
    get_console().print(styled_note(text))


def print_summary_box(title: str, fields: list[tuple[str, str, str]]) -> None:
    """
    Imprime un panel de resumen.

    Args:
        title: Título del panel
        fields: Tuplas (etiqueta, valor, unidad); unidad puede ser ""
    """
    lines = [styled_label(label, value, unit or None) for label, value, unit in fields]
    get_console().print(styled_summary_panel(title, lines))
