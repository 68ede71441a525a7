"""Saisie et validation des parametres d'amortissement.

Transforme des valeurs brutes (formulaire, options CLI, fichier YAML) en
DonneesAmortissement valides. C'est ici, et non dans le moteur, que les
donnees invalides sont rejetees.
"""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path

import yaml

from amortex.modeles import DonneesAmortissement, MethodeAmortissement

logger = logging.getLogger(__name__)

NOM_PAR_DEFAUT = "Actif sans nom"
POURCENTAGE_RESIDUEL_PAR_DEFAUT = Decimal("5")


class TypeResiduelle(str, Enum):
    """Maniere dont la valeur residuelle est saisie."""

    ABSOLUE = "absolute"  # Montant
    POURCENTAGE = "percentage"  # % du cout


def _en_decimal(valeur: object, champ: str) -> Decimal:
    """Convertit une valeur brute (str, int, Decimal) en Decimal."""
    if isinstance(valeur, Decimal):
        return valeur
    try:
        resultat = Decimal(str(valeur).strip())
    except InvalidOperation:
        resultat = None
    if resultat is None or not resultat.is_finite():
        msg = f"Valeur numerique invalide pour '{champ}': {valeur!r}"
        raise ValueError(msg)
    return resultat


def _en_date(valeur: object) -> datetime.date:
    if isinstance(valeur, datetime.date):
        return valeur
    try:
        return datetime.date.fromisoformat(str(valeur).strip())
    except ValueError:
        msg = f"Date invalide (format AAAA-MM-JJ attendu): {valeur!r}"
        raise ValueError(msg) from None


def _en_entier(valeur: object, champ: str) -> int:
    try:
        return int(str(valeur).strip())
    except ValueError:
        msg = f"Nombre entier invalide pour '{champ}': {valeur!r}"
        raise ValueError(msg) from None


def calculer_valeur_residuelle(
    type_residuelle: TypeResiduelle,
    valeur: Decimal,
    cout: Decimal,
) -> Decimal:
    """Retourne la valeur residuelle en montant.

    En pourcentage: cout * valeur / 100.
    """
    if type_residuelle == TypeResiduelle.POURCENTAGE:
        return cout * valeur / Decimal("100")
    return valeur


def valeur_residuelle_par_defaut(type_residuelle: TypeResiduelle, cout: Decimal) -> Decimal:
    """Valeur proposee quand on change le type de saisie.

    Pourcentage: 5. Montant: 5% du cout, arrondi a l'unite.
    """
    if type_residuelle == TypeResiduelle.POURCENTAGE:
        return POURCENTAGE_RESIDUEL_PAR_DEFAUT
    return (cout * POURCENTAGE_RESIDUEL_PAR_DEFAUT / Decimal("100")).quantize(Decimal("1"))


def construire_donnees(
    cout: object,
    date_acquisition: object,
    duree_vie: object,
    methode: object,
    valeur_residuelle: object,
    type_residuelle: TypeResiduelle | str = TypeResiduelle.ABSOLUE,
    nom_actif: str | None = None,
) -> DonneesAmortissement:
    """Construit des DonneesAmortissement validees a partir de valeurs brutes.

    Raises:
        ValueError: champ illisible, methode inconnue, ou contrainte violee
            (pydantic.ValidationError est une sous-classe de ValueError).
    """
    try:
        type_residuelle = TypeResiduelle(type_residuelle)
    except ValueError:
        msg = f"Type de valeur residuelle inconnu: {type_residuelle!r}"
        raise ValueError(msg) from None

    try:
        methode = MethodeAmortissement(str(methode).strip().upper())
    except ValueError:
        msg = f"Methode d'amortissement inconnue: {methode!r} (SLM ou WDV)"
        raise ValueError(msg) from None

    cout_dec = _en_decimal(cout, "cout")
    residuelle = calculer_valeur_residuelle(
        type_residuelle, _en_decimal(valeur_residuelle, "valeur_residuelle"), cout_dec
    )

    return DonneesAmortissement(
        cout=cout_dec,
        date_acquisition=_en_date(date_acquisition),
        duree_vie=_en_entier(duree_vie, "duree_vie"),
        methode=methode,
        valeur_residuelle=residuelle,
        nom_actif=(nom_actif or "").strip() or NOM_PAR_DEFAUT,
    )


def date_analyse_par_defaut(aujourd_hui: datetime.date | None = None) -> datetime.date:
    """31 mars qui termine l'exercice en cours."""
    if aujourd_hui is None:
        aujourd_hui = datetime.date.today()
    annee = aujourd_hui.year + 1 if aujourd_hui.month >= 4 else aujourd_hui.year
    return datetime.date(annee, 3, 31)


def charger_donnees(chemin: str | Path) -> DonneesAmortissement:
    """Charge les parametres d'un actif depuis un fichier YAML.

    Format attendu::

        actif:
          nom: "Machine CNC"
          cout: "100000"
          date_acquisition: 2023-04-01
          duree_vie: 5
          methode: SLM
          valeur_residuelle: "5000"
          type_residuelle: absolute   # ou percentage
    """
    chemin = Path(chemin)
    if not chemin.exists():
        msg = f"Fichier d'actif introuvable: {chemin}"
        raise FileNotFoundError(msg)

    with chemin.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("actif"), dict):
        msg = f"Section 'actif' manquante dans {chemin}"
        raise ValueError(msg)

    item = data["actif"]
    manquants = [
        champ
        for champ in ("cout", "date_acquisition", "duree_vie", "methode")
        if item.get(champ) is None
    ]
    if manquants:
        msg = f"Champs manquants dans {chemin}: {', '.join(manquants)}"
        raise ValueError(msg)

    donnees = construire_donnees(
        cout=item["cout"],
        date_acquisition=item["date_acquisition"],
        duree_vie=item["duree_vie"],
        methode=item["methode"],
        valeur_residuelle=item.get("valeur_residuelle", 0),
        type_residuelle=item.get("type_residuelle", TypeResiduelle.ABSOLUE),
        nom_actif=item.get("nom"),
    )
    logger.info("Actif '%s' charge depuis %s", donnees.nom_actif, chemin)
    return donnees
