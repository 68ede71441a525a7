"""Repartition trimestrielle de l'amortissement annuel.

Les trimestres suivent l'exercice avril-mars:
T1 = avril-juin, T2 = juillet-septembre, T3 = octobre-decembre,
T4 = janvier-mars (dans la deuxieme annee civile de l'exercice).

Le montant annuel est reparti au prorata des jours eligibles de chaque
trimestre. Aucun arrondi par trimestre: la somme des quatre montants
egale le montant annuel.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal

from amortex.calendrier import jours_inclusifs

ZERO = Decimal("0")


@dataclass(frozen=True)
class RepartitionTrimestrielle:
    """Amortissement d'un exercice reparti sur ses quatre trimestres."""

    t1: Decimal
    t2: Decimal
    t3: Decimal
    t4: Decimal

    @property
    def total(self) -> Decimal:
        return self.t1 + self.t2 + self.t3 + self.t4


REPARTITION_NULLE = RepartitionTrimestrielle(ZERO, ZERO, ZERO, ZERO)


def bornes_trimestres(
    debut_exercice: datetime.date,
) -> list[tuple[datetime.date, datetime.date]]:
    """Retourne les bornes inclusives (debut, fin) des quatre trimestres."""
    annee = debut_exercice.year
    return [
        (datetime.date(annee, 4, 1), datetime.date(annee, 6, 30)),
        (datetime.date(annee, 7, 1), datetime.date(annee, 9, 30)),
        (datetime.date(annee, 10, 1), datetime.date(annee, 12, 31)),
        (datetime.date(annee + 1, 1, 1), datetime.date(annee + 1, 3, 31)),
    ]


def _jours_chevauchement(
    debut: datetime.date,
    fin: datetime.date,
    debut_trimestre: datetime.date,
    fin_trimestre: datetime.date,
) -> int:
    """Jours communs (inclusifs) entre [debut, fin] et un trimestre."""
    return max(0, jours_inclusifs(max(debut, debut_trimestre), min(fin, fin_trimestre)))


def repartir(
    montant_annuel: Decimal,
    debut_eligible: datetime.date,
    fin_eligible: datetime.date,
    debut_exercice: datetime.date,
) -> RepartitionTrimestrielle:
    """Repartit l'amortissement d'un exercice entre ses quatre trimestres.

    Args:
        montant_annuel: Amortissement total de l'exercice.
        debut_eligible: Premier jour amortissable dans l'exercice.
        fin_eligible: Dernier jour amortissable dans l'exercice.
        debut_exercice: 1er avril de l'exercice.

    Returns:
        Montants T1..T4. Tous nuls si le montant ou la periode est vide.
    """
    if montant_annuel <= 0:
        return REPARTITION_NULLE

    jours_total = max(0, jours_inclusifs(debut_eligible, fin_eligible))
    if jours_total <= 0:
        return REPARTITION_NULLE

    par_jour = montant_annuel / jours_total
    montants = [
        par_jour * _jours_chevauchement(debut_eligible, fin_eligible, debut_t, fin_t)
        for debut_t, fin_t in bornes_trimestres(debut_exercice)
    ]
    return RepartitionTrimestrielle(*montants)
