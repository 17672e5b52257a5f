"""
CLI de LotePluvial - Drenaje pluvial de un lote urbano.

Comandos:
- idf: consultas a la curva IDF (intensidad, tabla)
- tc: tiempo de concentración del lote
- drenaje: caudal de diseño y tubería, base y con LID
- simular: balance de agua Green-Ampt de un evento
- suelos: parámetros de suelo disponibles
"""

from typing import Annotated

import typer

from lotepluvial import __version__
from lotepluvial.cli.drainage import drenaje_command
from lotepluvial.cli.idf import idf_app
from lotepluvial.cli.log import setup_logging
from lotepluvial.cli.theme import CLITheme, ThemeName
from lotepluvial.cli.simulate import simular_command, suelos_command
from lotepluvial.cli.tc import tc_command

# Crear aplicación principal
app = typer.Typer(
    name="lotepluvial",
    help="Drenaje pluvial de lotes urbanos: IDF, Método Racional, LID y Green-Ampt.",
    no_args_is_help=True,
)

app.add_typer(idf_app, name="idf")
app.command("tc")(tc_command)
app.command("drenaje")(drenaje_command)
app.command("simular")(simular_command)
app.command("suelos")(suelos_command)


def _version_callback(value: bool):
    if value:
        typer.echo(f"lotepluvial {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Registro detallado (DEBUG)")] = False,
    theme: Annotated[ThemeName, typer.Option("--tema", help="Tema de colores de la consola")] = ThemeName.DEFAULT,
    version: Annotated[bool, typer.Option(
        "--version", callback=_version_callback, is_eager=True, help="Muestra la versión",
    )] = False,
):
    """
    LotePluvial - Drenaje pluvial de un lote.

    Curvas IDF de Edmonton, Kirpich, Método Racional con Manning y
    simulación Green-Ampt con medidas de desarrollo de bajo impacto.
    """
    CLITheme.set_theme(theme)
    setup_logging(verbose)


__all__ = [
    "app",
]
