"""Evaluation de l'actif a une date donnee.

Rejoue l'accumulation de l'amortissement depuis l'acquisition jusqu'a la
date demandee, independamment de tout tableau deja construit.

Les periodes suivent les anniversaires d'acquisition (acquisition + i ans
a acquisition + i+1 ans), et non les exercices avril-mars du tableau.
Le total sur la vie complete concorde avec le tableau; la repartition par
periode peut differer legerement.
"""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal

from amortex.calendrier import ajouter_annees, est_bissextile, jours_inclusifs
from amortex.modeles import DonneesAmortissement, EvaluationADate
from amortex.tableau import amortissement_nominal

logger = logging.getLogger(__name__)


def valeur_a_date(
    donnees: DonneesAmortissement,
    date_evaluation: datetime.date,
) -> EvaluationADate:
    """Calcule l'amortissement cumule et la valeur nette a une date.

    Une date anterieure a l'acquisition donne un amortissement nul et une
    valeur nette egale au cout; c'est a l'appelant de signaler ce cas.

    Args:
        donnees: Parametres de l'actif (deja valides).
        date_evaluation: Date d'analyse.

    Returns:
        EvaluationADate a la date demandee.
    """
    if date_evaluation < donnees.date_acquisition:
        return EvaluationADate(
            date_evaluation=date_evaluation,
            amortissement_cumule=Decimal("0"),
            valeur_nette=donnees.cout,
        )

    residuelle = donnees.valeur_residuelle
    cumule = Decimal("0")
    valeur = donnees.cout

    for i in range(donnees.duree_vie):
        debut_annee = ajouter_annees(donnees.date_acquisition, i)
        fin_annee = ajouter_annees(donnees.date_acquisition, i + 1)
        if debut_annee > date_evaluation:
            break

        jours_annee = 366 if est_bissextile(fin_annee.year) else 365
        par_jour = amortissement_nominal(donnees, valeur) / jours_annee

        debut_periode = donnees.date_acquisition if i == 0 else debut_annee
        fin_periode = min(date_evaluation, fin_annee)
        jours = jours_inclusifs(debut_periode, fin_periode)

        if jours > 0:
            montant = par_jour * jours
            cumule += montant
            valeur -= montant

        if valeur < residuelle:
            logger.debug(
                "Valeur nette plafonnee a la valeur residuelle au %s", date_evaluation
            )
            cumule -= residuelle - valeur
            valeur = residuelle
            break

    return EvaluationADate(
        date_evaluation=date_evaluation,
        amortissement_cumule=cumule,
        valeur_nette=valeur,
    )
