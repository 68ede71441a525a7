"""Tests pour l'evaluation de l'actif a une date (valeur_a_date)."""

from __future__ import annotations

import datetime
from decimal import Decimal

from amortex.evaluation import valeur_a_date
from amortex.modeles import DonneesAmortissement, MethodeAmortissement
from amortex.tableau import construire_tableau

TOLERANCE = Decimal("0.01")


def _donnees(methode: MethodeAmortissement = MethodeAmortissement.LINEAIRE) -> DonneesAmortissement:
    return DonneesAmortissement(
        cout=Decimal("100000"),
        date_acquisition=datetime.date(2023, 4, 1),
        duree_vie=5,
        methode=methode,
        valeur_residuelle=Decimal("5000"),
    )


class TestValeurADate:
    """Tests pour valeur_a_date()."""

    def test_avant_acquisition(self) -> None:
        """Date anterieure: aucun amortissement, valeur nette = cout."""
        evaluation = valeur_a_date(_donnees(), datetime.date(2023, 3, 31))

        assert evaluation.date_evaluation == datetime.date(2023, 3, 31)
        assert evaluation.amortissement_cumule == Decimal("0")
        assert evaluation.valeur_nette == Decimal("100000")

    def test_jour_d_acquisition(self) -> None:
        """Le jour meme: une seule journee d'amortissement (19 000 / 366)."""
        evaluation = valeur_a_date(_donnees(), datetime.date(2023, 4, 1))

        assert evaluation.amortissement_cumule == Decimal("19000") / 366
        assert abs(evaluation.valeur_nette - Decimal("100000")) < Decimal("60")

    def test_fin_premier_exercice(self) -> None:
        """Au 31 mars 2024: 366 jours / 366 = 19 000, comme le tableau."""
        evaluation = valeur_a_date(_donnees(), datetime.date(2024, 3, 31))

        assert abs(evaluation.amortissement_cumule - Decimal("19000")) < TOLERANCE
        assert abs(evaluation.valeur_nette - Decimal("81000")) < TOLERANCE

    def test_fin_de_vie(self) -> None:
        """Acquisition + 5 ans: amortissement complet, valeur nette = residuelle."""
        evaluation = valeur_a_date(_donnees(), datetime.date(2028, 4, 1))

        assert abs(evaluation.amortissement_cumule - Decimal("95000")) < TOLERANCE
        assert evaluation.valeur_nette == Decimal("5000")

    def test_bien_apres_fin_de_vie(self) -> None:
        evaluation = valeur_a_date(_donnees(), datetime.date(2040, 1, 1))
        assert evaluation.valeur_nette == Decimal("5000")

    def test_degressif_premiere_annee(self) -> None:
        donnees = _donnees(MethodeAmortissement.DEGRESSIF)
        evaluation = valeur_a_date(donnees, datetime.date(2024, 3, 31))

        attendu = donnees.cout * donnees.taux_degressif
        assert abs(evaluation.amortissement_cumule - attendu) < TOLERANCE

    def test_degressif_fin_de_vie(self) -> None:
        evaluation = valeur_a_date(
            _donnees(MethodeAmortissement.DEGRESSIF), datetime.date(2028, 4, 1)
        )
        assert abs(evaluation.valeur_nette - Decimal("5000")) < TOLERANCE

    def test_independant_du_tableau(self) -> None:
        """Meme total sur la vie complete que le tableau par exercice."""
        donnees = _donnees()
        lignes = construire_tableau(donnees)
        evaluation = valeur_a_date(donnees, datetime.date(2030, 3, 31))

        total_tableau = sum((ligne.amortissement_annuel for ligne in lignes), Decimal("0"))
        assert abs(evaluation.amortissement_cumule - total_tableau) < TOLERANCE

    def test_cumule_plus_valeur_nette_egal_cout(self) -> None:
        for jour in (datetime.date(2023, 9, 30), datetime.date(2025, 12, 31)):
            evaluation = valeur_a_date(_donnees(MethodeAmortissement.DEGRESSIF), jour)
            total = evaluation.amortissement_cumule + evaluation.valeur_nette
            assert abs(total - Decimal("100000")) < Decimal("1e-10")
