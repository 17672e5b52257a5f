"""
Tema de la consola Rich para la CLI.

Módulos:
- palette: paletas de colores y consola con tema
- styled: objetos Text/Panel estilizados
- printing: impresión directa de campos y mensajes
- tables: tablas de resultados
"""

# Desde palette
from lotepluvial.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

# Desde styled
from lotepluvial.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_success,
    styled_warning,
    styled_error,
    styled_note,
    styled_summary_panel,
)

# Desde printing
from lotepluvial.cli.theme.printing import (
    print_separator,
    print_header,
    print_field,
    print_success,
    print_warning,
    print_error,
    print_note,
    print_summary_box,
)

# Desde tables
from lotepluvial.cli.theme.tables import (
    create_results_table,
    print_idf_table,
    print_design_storm_table,
    print_simulation_table,
    print_soils_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_header",
    "styled_label",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_note",
    "styled_summary_panel",
    # printing
    "print_separator",
    "print_header",
    "print_field",
    "print_success",
    "print_warning",
    "print_error",
    "print_note",
    "print_summary_box",
    # tables
    "create_results_table",
    "print_idf_table",
    "print_design_storm_table",
    "print_simulation_table",
    "print_soils_table",
]
