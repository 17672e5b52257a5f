"""
Paletas de colores y gestión del tema de la consola.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from rich.console import Console
from rich.theme import Theme


class ThemeName(str, Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    MINIMAL = "minimal"


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    primary: str      # Títulos
    secondary: str    # Encabezados de tabla
    accent: str       # Valores de diseño destacados

    # Semánticos
    success: str
    warning: str
    error: str
    info: str
    muted: str
    note: str

    # Datos
    number: str
    unit: str
    label: str

    border: str


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",
    muted="#808080",
    note="#5fd7d7",         # Cyan brillante
    number="#d7af5f",
    unit="#87af87",
    label="#afafaf",
    border="#5f5f5f",
)

# Tema mínimo - grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",       # Único acento
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    note="#5fafff",
    number="#ffffff",
    unit="#909090",
    label="#909090",
    border="#404040",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Se recrea con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "note": p.note,
                "number": p.number,
                "unit": p.unit,
                "label": p.label,
                "title": f"bold {p.primary}",
                "value": f"bold {p.number}",
                "table.header": f"bold {p.secondary}",
                "table.highlight": f"bold {p.accent}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
