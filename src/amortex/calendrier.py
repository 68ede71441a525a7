"""Calendrier des exercices financiers (1er avril - 31 mars).

Toutes les dates sont des dates civiles pures (datetime.date): aucun
fuseau horaire n'intervient dans le decompte des jours.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from dateutil.relativedelta import relativedelta

MOIS_DEBUT_EXERCICE = 4  # Avril


@dataclass(frozen=True)
class FenetreExercice:
    """Un exercice financier: du 1er avril de Y au 31 mars de Y+1, inclusivement."""

    debut: datetime.date
    fin: datetime.date
    libelle: str  # "FY 2023-24"


def est_bissextile(annee: int) -> bool:
    """Regle gregorienne: divisible par 4 et (pas par 100, ou par 400)."""
    return annee % 4 == 0 and (annee % 100 != 0 or annee % 400 == 0)


def jours_annee_standard(fenetre: FenetreExercice) -> int:
    """Nombre de jours de l'annee standard d'un exercice.

    366 si l'annee de la date de FIN de l'exercice est bissextile, sinon 365.
    """
    return 366 if est_bissextile(fenetre.fin.year) else 365


def annee_de_base(date_acquisition: datetime.date) -> int:
    """Annee civile du 1er avril qui ouvre l'exercice contenant la date."""
    if date_acquisition.month < MOIS_DEBUT_EXERCICE:
        return date_acquisition.year - 1
    return date_acquisition.year


def fenetre_exercice(date_acquisition: datetime.date, indice: int) -> FenetreExercice:
    """Retourne le `indice`-ieme exercice (base 1) a partir de l'acquisition.

    Args:
        date_acquisition: Date d'acquisition de l'actif.
        indice: 1 pour l'exercice contenant l'acquisition, 2 pour le suivant, etc.

    Returns:
        La fenetre d'exercice correspondante.
    """
    annee_debut = annee_de_base(date_acquisition) + indice - 1
    debut = datetime.date(annee_debut, MOIS_DEBUT_EXERCICE, 1)
    fin = datetime.date(annee_debut + 1, 3, 31)
    libelle = f"FY {annee_debut}-{str(annee_debut + 1)[-2:]}"
    return FenetreExercice(debut=debut, fin=fin, libelle=libelle)


def ajouter_annees(d: datetime.date, annees: int) -> datetime.date:
    """Ajoute un nombre d'annees civiles a une date.

    Un 29 fevrier tombant dans une annee non bissextile devient le 1er mars.
    """
    resultat = d + relativedelta(years=annees)
    if (d.month, d.day) == (2, 29) and resultat.day == 28:
        return resultat + datetime.timedelta(days=1)
    return resultat


def jours_inclusifs(debut: datetime.date, fin: datetime.date) -> int:
    """Nombre de jours entre deux dates, bornes incluses (peut etre <= 0)."""
    return (fin - debut).days + 1
