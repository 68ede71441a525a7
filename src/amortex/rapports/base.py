"""Classe de base pour la generation de rapports (CSV + PDF).

Fournit l'infrastructure Jinja2 + WeasyPrint pour produire des rapports
en double format (CSV machine-readable et PDF).
"""

from __future__ import annotations

import csv
import datetime
import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, PackageLoader

from amortex.rapports.formatage import formater_montant_inr

logger = logging.getLogger(__name__)


class BaseReport(ABC):
    """Classe de base abstraite pour les rapports.

    Les sous-classes doivent implementer:
        - extract_data() -> dict : donnees du rapport
        - csv_headers() -> list[str] : en-tetes CSV
        - csv_rows() -> list[list] : lignes de donnees CSV
    """

    report_name: str = "rapport"
    template_name: str = "tableau_amortissement.html"

    def __init__(self) -> None:
        self._data: dict | None = None
        self._env = Environment(
            loader=PackageLoader("amortex.rapports", "templates"),
            autoescape=True,
        )
        self._env.filters["inr"] = formater_montant_inr

    @property
    def data(self) -> dict:
        """Donnees du rapport (cache apres premier appel)."""
        if self._data is None:
            self._data = self.extract_data()
        return self._data

    @abstractmethod
    def extract_data(self) -> dict:
        """Extrait les donnees du rapport."""

    @abstractmethod
    def csv_headers(self) -> list[str]:
        """Retourne les en-tetes CSV."""

    @abstractmethod
    def csv_rows(self) -> list[list]:
        """Retourne les lignes de donnees CSV."""

    @staticmethod
    def _q(montant: Decimal) -> Decimal:
        """Quantize un montant a 2 decimales."""
        return montant.quantize(Decimal("0.01"))

    def to_csv(self, output_path: Path) -> Path:
        """Genere le rapport en format CSV.

        Args:
            output_path: Chemin du fichier CSV de sortie.

        Returns:
            Chemin du fichier CSV cree.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self.csv_headers())
            for row in self.csv_rows():
                writer.writerow(row)
        logger.info("Rapport CSV ecrit: %s", output_path)
        return output_path

    def to_html(self) -> str:
        """Rend le gabarit HTML du rapport."""
        template = self._env.get_template(self.template_name)
        context = {
            "date_generation": datetime.date.today(),
            "report_name": self.report_name,
            **self.data,
        }
        return template.render(**context)

    def to_pdf(self, output_path: Path) -> Path:
        """Genere le rapport en format PDF via WeasyPrint.

        Args:
            output_path: Chemin du fichier PDF de sortie.

        Returns:
            Chemin du fichier PDF cree.
        """
        from weasyprint import HTML

        output_path.parent.mkdir(parents=True, exist_ok=True)
        css_path = Path(__file__).parent / "templates" / "css" / "report.css"
        HTML(string=self.to_html()).write_pdf(str(output_path), stylesheets=[str(css_path)])
        logger.info("Rapport PDF ecrit: %s", output_path)
        return output_path

    def generate(self, output_dir: Path) -> dict[str, Path]:
        """Genere les deux formats (CSV + PDF) dans le repertoire specifie.

        Returns:
            Dictionnaire {"csv": Path, "pdf": Path}.
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        csv_path = self.to_csv(output_dir / f"{self.report_name}.csv")
        pdf_path = self.to_pdf(output_dir / f"{self.report_name}.pdf")
        return {"csv": csv_path, "pdf": pdf_path}
