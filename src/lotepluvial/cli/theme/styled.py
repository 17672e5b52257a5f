"""
Objetos Text y Panel estilizados (no imprimen directamente).
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from lotepluvial.cli.theme.palette import get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Encabezado en panel con subtítulo opcional."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_label(label: str, value, unit: str = None) -> Text:
    """Etiqueta con valor y unidad."""
    p = get_palette()
    text = Text()
    text.append(f"{label}: ", style=p.label)
    text.append(str(value), style=f"bold {p.number}")
    if unit:
        text.append(f" {unit}", style=p.unit)
    return text


def styled_success(text: str) -> Text:
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_warning(text: str) -> Text:
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_note(text: str) -> Text:
    """Nota informativa con prefijo distintivo."""
    p = get_palette()
    result = Text()
    result.append("NOTA: ", style=f"bold {p.note}")
    result.append(text, style=p.note)
    return result


def styled_summary_panel(title: str, lines: list[Text]) -> Panel:
    """Panel de resumen con una línea por campo."""
    p = get_palette()
    content = Text()
    for i, line in enumerate(lines):
        if i > 0:
            content.append("\n")
        content.append(line)

    return Panel(
        content,
        title=f"[bold {p.primary}]{title}[/]",
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    )
