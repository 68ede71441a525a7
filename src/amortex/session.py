"""Session de calcul: derniers parametres et dernier tableau calcules.

Remplace l'etat global d'un formulaire par un objet explicite detenu par
l'appelant. Chaque recalcul remplace entierement le tableau precedent.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from amortex.evaluation import valeur_a_date
from amortex.modeles import DonneesAmortissement, EvaluationADate, LigneTableau
from amortex.tableau import construire_tableau


@dataclass(frozen=True)
class ResultatCalcul:
    """Resultat d'un recalcul: tableau complet et evaluation optionnelle."""

    donnees: DonneesAmortissement
    lignes: tuple[LigneTableau, ...]
    evaluation: EvaluationADate | None = None


class SessionAmortissement:
    """Garde les derniers parametres pour les requetes dependantes.

    Le recalcul automatique (a chaque modification de champ) n'est arme
    qu'apres un premier calcul explicite: voir `calcul_effectue`.
    """

    def __init__(self, date_analyse: datetime.date | None = None) -> None:
        self.date_analyse = date_analyse
        self._resultat: ResultatCalcul | None = None

    @property
    def calcul_effectue(self) -> bool:
        return self._resultat is not None

    @property
    def resultat(self) -> ResultatCalcul | None:
        return self._resultat

    def recalculer(self, donnees: DonneesAmortissement) -> ResultatCalcul:
        """Reconstruit le tableau (et l'evaluation si une date est fixee)."""
        evaluation = None
        if self.date_analyse is not None:
            evaluation = valeur_a_date(donnees, self.date_analyse)
        self._resultat = ResultatCalcul(
            donnees=donnees,
            lignes=tuple(construire_tableau(donnees)),
            evaluation=evaluation,
        )
        return self._resultat

    def sur_modification(self, donnees: DonneesAmortissement) -> ResultatCalcul | None:
        """A appeler quand un champ change: recalcule seulement si deja calcule."""
        if not self.calcul_effectue:
            return None
        return self.recalculer(donnees)

    def evaluer(self, date_analyse: datetime.date) -> EvaluationADate:
        """Evalue l'actif du dernier calcul a une nouvelle date d'analyse."""
        if self._resultat is None:
            msg = "Aucun tableau calcule: lancer un calcul d'abord"
            raise ValueError(msg)
        self.date_analyse = date_analyse
        evaluation = valeur_a_date(self._resultat.donnees, date_analyse)
        self._resultat = ResultatCalcul(
            donnees=self._resultat.donnees,
            lignes=self._resultat.lignes,
            evaluation=evaluation,
        )
        return evaluation

    def reinitialiser(self) -> None:
        """Efface le dernier calcul; le recalcul automatique est desarme."""
        self._resultat = None
        self.date_analyse = None
