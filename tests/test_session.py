"""Tests pour la session de calcul (recalcul explicite, requetes dependantes)."""

from __future__ import annotations

import datetime
from decimal import Decimal

import pytest

from amortex.modeles import DonneesAmortissement, MethodeAmortissement
from amortex.session import SessionAmortissement


@pytest.fixture
def donnees() -> DonneesAmortissement:
    return DonneesAmortissement(
        cout=Decimal("100000"),
        date_acquisition=datetime.date(2023, 4, 1),
        duree_vie=5,
        methode=MethodeAmortissement.LINEAIRE,
        valeur_residuelle=Decimal("5000"),
        nom_actif="Machine CNC",
    )


class TestSessionAmortissement:
    def test_evaluer_sans_calcul(self) -> None:
        """Aucune evaluation possible avant un premier calcul."""
        session = SessionAmortissement()
        with pytest.raises(ValueError, match="Aucun tableau calcule"):
            session.evaluer(datetime.date(2024, 3, 31))

    def test_recalculer(self, donnees) -> None:
        session = SessionAmortissement()
        resultat = session.recalculer(donnees)

        assert session.calcul_effectue
        assert session.resultat is resultat
        assert len(resultat.lignes) == 5
        assert resultat.evaluation is None

    def test_recalculer_avec_date_analyse(self, donnees) -> None:
        session = SessionAmortissement(date_analyse=datetime.date(2024, 3, 31))
        resultat = session.recalculer(donnees)

        assert resultat.evaluation is not None
        assert abs(resultat.evaluation.valeur_nette - Decimal("81000")) < Decimal("0.01")

    def test_evaluer_reutilise_derniers_parametres(self, donnees) -> None:
        session = SessionAmortissement()
        session.recalculer(donnees)

        evaluation = session.evaluer(datetime.date(2028, 4, 1))

        assert evaluation.valeur_nette == Decimal("5000")
        assert session.resultat.evaluation == evaluation
        assert session.date_analyse == datetime.date(2028, 4, 1)

    def test_recalcul_automatique_arme_apres_premier_calcul(self, donnees) -> None:
        session = SessionAmortissement()
        assert session.sur_modification(donnees) is None

        session.recalculer(donnees)
        modifiees = donnees.model_copy(update={"duree_vie": 10})
        resultat = session.sur_modification(modifiees)

        assert resultat is not None
        assert resultat.donnees.duree_vie == 10
        assert len(resultat.lignes) == 10

    def test_nouveau_calcul_remplace_le_tableau(self, donnees) -> None:
        session = SessionAmortissement()
        premier = session.recalculer(donnees)
        second = session.recalculer(donnees.model_copy(update={"duree_vie": 2}))

        assert session.resultat is second
        assert len(premier.lignes) == 5
        assert len(second.lignes) == 2

    def test_reinitialiser(self, donnees) -> None:
        session = SessionAmortissement(date_analyse=datetime.date(2024, 3, 31))
        session.recalculer(donnees)

        session.reinitialiser()

        assert not session.calcul_effectue
        assert session.date_analyse is None
        assert session.sur_modification(donnees) is None
