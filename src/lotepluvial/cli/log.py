"""
Configuración de logging para la CLI.

Los módulos de cálculo solo emiten registros; el handler lo instala la CLI.
"""

import logging

from rich.logging import RichHandler

from lotepluvial.cli.theme import get_console

LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """
    Instala un RichHandler en el logger raíz.

    Args:
        verbose: Si True registra a nivel DEBUG, si no WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=get_console(), show_path=False, markup=False)],
        force=True,
    )
