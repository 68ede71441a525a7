"""Application CLI principale amortex."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

import amortex

app = typer.Typer(
    name="amx",
    help="amortex - Tableau d'amortissement par exercice (avril-mars)",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"amortex version {amortex.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Afficher les messages de journalisation",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Afficher la version d'amortex",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """amortex - Amortissement lineaire (SLM) ou degressif (WDV) d'un actif."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import et enregistrement des sous-commandes
from amortex.cli.commandes import exporter, tableau, valeur  # noqa: E402

app.command(name="tableau", help="Afficher le tableau d'amortissement")(tableau)
app.command(name="valeur", help="Evaluer l'actif a une date d'analyse")(valeur)
app.command(name="exporter", help="Exporter le tableau en CSV et PDF")(exporter)
