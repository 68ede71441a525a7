"""Modeles de donnees du moteur d'amortissement.

Les montants sont toujours en Decimal -- jamais de float.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, field_validator, model_validator


class MethodeAmortissement(str, Enum):
    """Methodes d'amortissement supportees."""

    LINEAIRE = "SLM"  # Straight-Line Method
    DEGRESSIF = "WDV"  # Written-Down Value (solde degressif)


class DonneesAmortissement(BaseModel):
    """Parametres d'un calcul d'amortissement pour un actif.

    La validation se fait ici, a la construction. Le moteur de calcul
    suppose des donnees deja valides et ne les reverifie pas.
    """

    cout: Decimal  # Cout d'acquisition
    date_acquisition: datetime.date
    duree_vie: int  # Duree de vie utile, en annees
    methode: MethodeAmortissement
    valeur_residuelle: Decimal = Decimal("0")  # Valeur de rebut (plancher)
    nom_actif: str = "Actif sans nom"

    model_config = {"frozen": True}

    @field_validator("cout", "valeur_residuelle", mode="before")
    @classmethod
    def rejeter_float(cls, v: object) -> object:
        if isinstance(v, float):
            msg = "Utiliser Decimal, pas float, pour les montants monetaires"
            raise ValueError(msg)
        return v

    @field_validator("cout")
    @classmethod
    def cout_positif(cls, v: Decimal) -> Decimal:
        if v <= 0:
            msg = "Le cout de l'actif doit etre positif"
            raise ValueError(msg)
        return v

    @field_validator("duree_vie")
    @classmethod
    def duree_au_moins_un_an(cls, v: int) -> int:
        if v < 1:
            msg = "La duree de vie doit etre d'au moins 1 an"
            raise ValueError(msg)
        return v

    @field_validator("valeur_residuelle")
    @classmethod
    def residuelle_non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            msg = "La valeur residuelle ne peut pas etre negative"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def residuelle_inferieure_au_cout(self) -> DonneesAmortissement:
        if self.valeur_residuelle >= self.cout:
            msg = "La valeur residuelle doit etre inferieure au cout de l'actif"
            raise ValueError(msg)
        return self

    @property
    def base_amortissable(self) -> Decimal:
        """Base amortissable = cout - valeur residuelle."""
        return self.cout - self.valeur_residuelle

    @property
    def taux_degressif(self) -> Decimal:
        """Taux constant qui amene le cout a la valeur residuelle en `duree_vie` ans.

        taux = 1 - (residuelle / cout) ^ (1 / duree_vie)
        """
        ratio = self.valeur_residuelle / self.cout
        if ratio == 0:
            return Decimal("1")
        return Decimal("1") - ratio ** (Decimal("1") / Decimal(self.duree_vie))


@dataclass(frozen=True)
class LigneTableau:
    """Une ligne du tableau d'amortissement (un exercice financier)."""

    exercice: str  # "FY 2023-24"
    valeur_ouverture: Decimal
    t1: Decimal  # Avr-Juin
    t2: Decimal  # Juil-Sept
    t3: Decimal  # Oct-Dec
    t4: Decimal  # Janv-Mars
    amortissement_annuel: Decimal
    valeur_cloture: Decimal

    @property
    def trimestres(self) -> tuple[Decimal, Decimal, Decimal, Decimal]:
        return (self.t1, self.t2, self.t3, self.t4)


@dataclass(frozen=True)
class EvaluationADate:
    """Amortissement cumule et valeur nette d'un actif a une date donnee."""

    date_evaluation: datetime.date
    amortissement_cumule: Decimal
    valeur_nette: Decimal
