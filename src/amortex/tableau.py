"""Construction du tableau d'amortissement par exercice financier.

Implements:
- Methode lineaire (SLM): (cout - residuelle) / duree, constant chaque annee
- Methode degressive (WDV): valeur d'ouverture * taux constant
- Prorata jours / annee standard (365 ou 366) pour les exercices partiels
- Plafonnement a la valeur residuelle a la derniere annee (ou avant si depassement)
- Repartition trimestrielle de chaque exercice
"""

from __future__ import annotations

import logging
from decimal import Decimal

from amortex.calendrier import (
    ajouter_annees,
    fenetre_exercice,
    jours_annee_standard,
    jours_inclusifs,
)
from amortex.modeles import DonneesAmortissement, LigneTableau, MethodeAmortissement
from amortex.trimestres import repartir

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
TOLERANCE = Decimal("0.01")


def amortissement_nominal(donnees: DonneesAmortissement, valeur_ouverture: Decimal) -> Decimal:
    """Amortissement d'une annee complete, avant prorata.

    Lineaire: base amortissable / duree. Degressif: valeur d'ouverture * taux.
    """
    if donnees.methode == MethodeAmortissement.LINEAIRE:
        return donnees.base_amortissable / donnees.duree_vie
    return valeur_ouverture * donnees.taux_degressif


def construire_tableau(donnees: DonneesAmortissement) -> list[LigneTableau]:
    """Construit le tableau d'amortissement complet, un exercice par ligne.

    Les donnees doivent deja etre valides (voir DonneesAmortissement).

    Args:
        donnees: Parametres de l'actif.

    Returns:
        Lignes ordonnees du premier exercice jusqu'a l'atteinte de la
        valeur residuelle ou de la fin de vie utile.
    """
    residuelle = donnees.valeur_residuelle
    date_fin_actif = ajouter_annees(donnees.date_acquisition, donnees.duree_vie)

    lignes: list[LigneTableau] = []
    valeur = donnees.cout
    indice = 0

    while valeur > residuelle and abs(valeur - residuelle) > TOLERANCE:
        indice += 1
        fenetre = fenetre_exercice(donnees.date_acquisition, indice)
        derniere_annee = date_fin_actif <= fenetre.fin

        fin_eligible = date_fin_actif if derniere_annee else fenetre.fin
        debut_eligible = donnees.date_acquisition if indice == 1 else fenetre.debut
        if debut_eligible > fin_eligible:
            logger.debug("Aucun jour amortissable pour %s, arret", fenetre.libelle)
            break

        ouverture = valeur
        jours_prorata = max(0, jours_inclusifs(debut_eligible, fin_eligible))
        annuel = amortissement_nominal(donnees, ouverture)
        amortissement = max(ZERO, annuel / jours_annee_standard(fenetre) * jours_prorata)

        if derniere_annee or ouverture - amortissement < residuelle:
            logger.debug(
                "Plafonnement a la valeur residuelle pour %s (%s -> %s)",
                fenetre.libelle,
                amortissement,
                ouverture - residuelle,
            )
            amortissement = ouverture - residuelle

        cloture = ouverture - amortissement
        repartition = repartir(amortissement, debut_eligible, fin_eligible, fenetre.debut)

        lignes.append(
            LigneTableau(
                exercice=fenetre.libelle,
                valeur_ouverture=ouverture,
                t1=repartition.t1,
                t2=repartition.t2,
                t3=repartition.t3,
                t4=repartition.t4,
                amortissement_annuel=amortissement,
                valeur_cloture=cloture,
            )
        )
        valeur = cloture
        if derniere_annee:
            break

    logger.info(
        "Tableau d'amortissement '%s' (%s): %d exercices",
        donnees.nom_actif,
        donnees.methode.value,
        len(lignes),
    )
    return lignes
