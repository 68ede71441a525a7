"""Sous-commandes amortex (tableau, valeur, exporter)."""

from __future__ import annotations

import datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from amortex.evaluation import valeur_a_date
from amortex.modeles import DonneesAmortissement
from amortex.rapports.formatage import formater_montant_inr
from amortex.saisie import charger_donnees, construire_donnees, date_analyse_par_defaut
from amortex.session import SessionAmortissement

console = Console()


def _erreur(message: str) -> typer.Exit:
    console.print(f"[red]Erreur:[/red] {escape(message)}")
    return typer.Exit(1)


def _obtenir_donnees(
    actif: Optional[Path],
    cout: Optional[str],
    date_acquisition: Optional[str],
    duree: Optional[str],
    methode: str,
    residuelle: str,
    type_residuelle: str,
    nom: Optional[str],
) -> DonneesAmortissement:
    """Lit les parametres depuis un fichier YAML ou depuis les options."""
    try:
        if actif is not None:
            return charger_donnees(actif)
        if cout is None or date_acquisition is None or duree is None:
            msg = "Fournir --actif, ou --cout, --date et --duree"
            raise ValueError(msg)
        return construire_donnees(
            cout=cout,
            date_acquisition=date_acquisition,
            duree_vie=duree,
            methode=methode,
            valeur_residuelle=residuelle,
            type_residuelle=type_residuelle,
            nom_actif=nom,
        )
    except (ValueError, FileNotFoundError) as e:
        raise _erreur(str(e)) from None


def _date_analyse(valeur_brute: Optional[str]) -> datetime.date:
    if valeur_brute is None:
        return date_analyse_par_defaut()
    try:
        return datetime.date.fromisoformat(valeur_brute)
    except ValueError:
        raise _erreur(f"Date d'analyse invalide: {valeur_brute}") from None


def _inr(montant: Decimal) -> str:
    return f"₹ {formater_montant_inr(montant)}"


def _afficher_evaluation(donnees: DonneesAmortissement, date_analyse: datetime.date) -> None:
    if date_analyse < donnees.date_acquisition:
        raise _erreur("La date d'analyse ne peut pas preceder la date d'acquisition.")
    evaluation = valeur_a_date(donnees, date_analyse)
    console.print(f"Au [bold]{date_analyse:%d/%m/%Y}[/bold]:")
    console.print(f"  Amortissement cumule: [bold]{_inr(evaluation.amortissement_cumule)}[/bold]")
    console.print(f"  Valeur nette:         [bold]{_inr(evaluation.valeur_nette)}[/bold]")


def tableau(
    actif: Optional[Path] = typer.Option(None, "--actif", "-a", help="Fichier YAML de l'actif"),
    cout: Optional[str] = typer.Option(None, "--cout", help="Cout de l'actif"),
    date_acquisition: Optional[str] = typer.Option(
        None, "--date", help="Date d'acquisition (AAAA-MM-JJ)"
    ),
    duree: Optional[str] = typer.Option(None, "--duree", help="Duree de vie (annees)"),
    methode: str = typer.Option("SLM", "--methode", "-m", help="SLM ou WDV"),
    residuelle: str = typer.Option("0", "--residuelle", help="Valeur residuelle"),
    type_residuelle: str = typer.Option(
        "absolute", "--type-residuelle", help="absolute ou percentage"
    ),
    nom: Optional[str] = typer.Option(None, "--nom", help="Nom de l'actif"),
    date_analyse: Optional[str] = typer.Option(
        None, "--date-analyse", help="Evaluer aussi l'actif a cette date (AAAA-MM-JJ)"
    ),
) -> None:
    """Afficher le tableau d'amortissement par exercice avec les trimestres."""
    donnees = _obtenir_donnees(
        actif, cout, date_acquisition, duree, methode, residuelle, type_residuelle, nom
    )
    resultat = SessionAmortissement().recalculer(donnees)

    if not resultat.lignes:
        console.print("[yellow]Aucun amortissement a constater.[/yellow]")
        return

    table = Table(
        title=f"Tableau d'amortissement - {escape(donnees.nom_actif)}", show_header=True
    )
    table.add_column("Exercice", style="cyan")
    table.add_column("Valeur ouverture", justify="right")
    table.add_column("T1 (Avr-Juin)", justify="right")
    table.add_column("T2 (Juil-Sept)", justify="right")
    table.add_column("T3 (Oct-Dec)", justify="right")
    table.add_column("T4 (Janv-Mars)", justify="right")
    table.add_column("Amortissement", justify="right", style="green")
    table.add_column("Valeur cloture", justify="right")

    for ligne in resultat.lignes:
        table.add_row(
            ligne.exercice,
            formater_montant_inr(ligne.valeur_ouverture),
            *(formater_montant_inr(t) for t in ligne.trimestres),
            formater_montant_inr(ligne.amortissement_annuel),
            formater_montant_inr(ligne.valeur_cloture),
        )

    console.print(table)

    if date_analyse is not None:
        _afficher_evaluation(donnees, _date_analyse(date_analyse))


def valeur(
    actif: Optional[Path] = typer.Option(None, "--actif", "-a", help="Fichier YAML de l'actif"),
    cout: Optional[str] = typer.Option(None, "--cout", help="Cout de l'actif"),
    date_acquisition: Optional[str] = typer.Option(
        None, "--date", help="Date d'acquisition (AAAA-MM-JJ)"
    ),
    duree: Optional[str] = typer.Option(None, "--duree", help="Duree de vie (annees)"),
    methode: str = typer.Option("SLM", "--methode", "-m", help="SLM ou WDV"),
    residuelle: str = typer.Option("0", "--residuelle", help="Valeur residuelle"),
    type_residuelle: str = typer.Option(
        "absolute", "--type-residuelle", help="absolute ou percentage"
    ),
    nom: Optional[str] = typer.Option(None, "--nom", help="Nom de l'actif"),
    date_analyse: Optional[str] = typer.Option(
        None,
        "--date-analyse",
        help="Date d'analyse (defaut: 31 mars de l'exercice en cours)",
    ),
) -> None:
    """Afficher l'amortissement cumule et la valeur nette a une date."""
    donnees = _obtenir_donnees(
        actif, cout, date_acquisition, duree, methode, residuelle, type_residuelle, nom
    )
    _afficher_evaluation(donnees, _date_analyse(date_analyse))


def exporter(
    actif: Optional[Path] = typer.Option(None, "--actif", "-a", help="Fichier YAML de l'actif"),
    cout: Optional[str] = typer.Option(None, "--cout", help="Cout de l'actif"),
    date_acquisition: Optional[str] = typer.Option(
        None, "--date", help="Date d'acquisition (AAAA-MM-JJ)"
    ),
    duree: Optional[str] = typer.Option(None, "--duree", help="Duree de vie (annees)"),
    methode: str = typer.Option("SLM", "--methode", "-m", help="SLM ou WDV"),
    residuelle: str = typer.Option("0", "--residuelle", help="Valeur residuelle"),
    type_residuelle: str = typer.Option(
        "absolute", "--type-residuelle", help="absolute ou percentage"
    ),
    nom: Optional[str] = typer.Option(None, "--nom", help="Nom de l'actif"),
    sortie: Path = typer.Option(Path("rapports"), "--sortie", "-o", help="Repertoire de sortie"),
    sans_pdf: bool = typer.Option(False, "--sans-pdf", help="Generer seulement le CSV"),
) -> None:
    """Exporter le tableau d'amortissement (CSV et PDF)."""
    from amortex.rapports.tableau_amortissement import RapportTableau

    donnees = _obtenir_donnees(
        actif, cout, date_acquisition, duree, methode, residuelle, type_residuelle, nom
    )
    rapport = RapportTableau(donnees)

    if sans_pdf:
        chemin_csv = rapport.to_csv(sortie / f"{rapport.report_name}.csv")
        console.print(f"[green]CSV genere:[/green] {chemin_csv}")
        return

    fichiers = rapport.generate(sortie)
    for fmt, chemin in fichiers.items():
        console.print(f"[green]{fmt.upper()} genere:[/green] {chemin}")
