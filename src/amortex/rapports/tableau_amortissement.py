"""Rapport du tableau d'amortissement (resume de l'actif + tableau par exercice).

Le tableau affiche, pour chaque exercice: valeur d'ouverture, amortissement
des quatre trimestres (T1 avr-juin .. T4 janv-mars), total annuel et valeur
de cloture.
"""

from __future__ import annotations

from decimal import Decimal

from amortex.modeles import DonneesAmortissement, LigneTableau
from amortex.rapports.base import BaseReport
from amortex.tableau import construire_tableau


class RapportTableau(BaseReport):
    """Rapport CSV/PDF d'un tableau d'amortissement.

    Reconstruit le tableau a partir des donnees si aucune ligne n'est fournie.
    """

    template_name = "tableau_amortissement.html"

    def __init__(
        self,
        donnees: DonneesAmortissement,
        lignes: list[LigneTableau] | tuple[LigneTableau, ...] | None = None,
    ) -> None:
        super().__init__()
        self.donnees = donnees
        self.lignes = list(lignes) if lignes is not None else construire_tableau(donnees)
        self.report_name = "Depreciation_Schedule_" + donnees.nom_actif.replace(" ", "_")

    def extract_data(self) -> dict:
        """Resume des parametres et lignes quantizees a 2 decimales."""
        d = self.donnees
        lignes_data = [
            {
                "exercice": ligne.exercice,
                "valeur_ouverture": self._q(ligne.valeur_ouverture),
                "t1": self._q(ligne.t1),
                "t2": self._q(ligne.t2),
                "t3": self._q(ligne.t3),
                "t4": self._q(ligne.t4),
                "amortissement_annuel": self._q(ligne.amortissement_annuel),
                "valeur_cloture": self._q(ligne.valeur_cloture),
            }
            for ligne in self.lignes
        ]
        total = sum((ligne.amortissement_annuel for ligne in self.lignes), Decimal("0"))

        return {
            "nom_actif": d.nom_actif,
            "resume": [
                ("Cout de l'actif", self._q(d.cout)),
                ("Date d'acquisition", d.date_acquisition.strftime("%d/%m/%Y")),
                ("Duree de vie", f"{d.duree_vie} ans"),
                ("Valeur residuelle", self._q(d.valeur_residuelle)),
                ("Methode", d.methode.value),
            ],
            "lignes": lignes_data,
            "total_amortissement": self._q(total),
        }

    def csv_headers(self) -> list[str]:
        return [
            "Exercice",
            "Valeur ouverture",
            "T1 (Avr-Juin)",
            "T2 (Juil-Sept)",
            "T3 (Oct-Dec)",
            "T4 (Janv-Mars)",
            "Amortissement annuel",
            "Valeur cloture",
        ]

    def csv_rows(self) -> list[list]:
        d = self.data
        rows = []
        for ligne in d["lignes"]:
            rows.append([
                ligne["exercice"],
                str(ligne["valeur_ouverture"]),
                str(ligne["t1"]),
                str(ligne["t2"]),
                str(ligne["t3"]),
                str(ligne["t4"]),
                str(ligne["amortissement_annuel"]),
                str(ligne["valeur_cloture"]),
            ])
        rows.append(["TOTAL", "", "", "", "", "", str(d["total_amortissement"]), ""])
        return rows
