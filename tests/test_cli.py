"""Tests CLI pour amortex (commandes amx)."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import amortex
from amortex.cli.app import app

runner = CliRunner()

# Largeur suffisante pour que Rich n'abrege pas les colonnes du tableau
ENV = {"COLUMNS": "200"}

OPTIONS_SLM = [
    "--cout", "100000",
    "--date", "2023-04-01",
    "--duree", "5",
    "--residuelle", "5000",
    "--nom", "Machine CNC",
]


@pytest.fixture
def fichier_actif(tmp_path):
    chemin = tmp_path / "actif.yaml"
    chemin.write_text(
        "actif:\n"
        "  nom: Presse\n"
        '  cout: "100000"\n'
        "  date_acquisition: 2023-04-01\n"
        "  duree_vie: 5\n"
        "  methode: WDV\n"
        '  valeur_residuelle: "5000"\n',
        encoding="utf-8",
    )
    return chemin


# =============================================================================
# Tests aide et version
# =============================================================================


class TestAideEtVersion:
    def test_aide(self) -> None:
        result = runner.invoke(app, ["--help"], env=ENV)
        assert result.exit_code == 0
        assert "tableau" in result.output
        assert "valeur" in result.output
        assert "exporter" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert amortex.__version__ in result.output


# =============================================================================
# Tests tableau
# =============================================================================


class TestTableau:
    def test_tableau_options(self) -> None:
        result = runner.invoke(app, ["tableau", *OPTIONS_SLM], env=ENV)

        assert result.exit_code == 0, result.output
        assert "FY 2023-24" in result.output
        assert "FY 2027-28" in result.output
        assert "19,000.00" in result.output
        assert "81,000.00" in result.output

    def test_tableau_fichier_yaml(self, fichier_actif) -> None:
        result = runner.invoke(app, ["tableau", "--actif", str(fichier_actif)], env=ENV)

        assert result.exit_code == 0, result.output
        assert "Presse" in result.output
        assert "FY 2023-24" in result.output

    def test_tableau_avec_date_analyse(self) -> None:
        result = runner.invoke(
            app, ["tableau", *OPTIONS_SLM, "--date-analyse", "2024-03-31"], env=ENV
        )

        assert result.exit_code == 0, result.output
        assert "Amortissement cumule" in result.output

    def test_parametres_manquants(self) -> None:
        result = runner.invoke(app, ["tableau", "--cout", "100000"], env=ENV)

        assert result.exit_code == 1
        assert "Erreur" in result.output

    def test_residuelle_superieure_au_cout(self) -> None:
        result = runner.invoke(
            app,
            ["tableau", "--cout", "1000", "--date", "2023-04-01", "--duree", "3",
             "--residuelle", "2000"],
            env=ENV,
        )

        assert result.exit_code == 1
        assert "inferieure" in result.output

    def test_fichier_introuvable(self, tmp_path) -> None:
        result = runner.invoke(
            app, ["tableau", "--actif", str(tmp_path / "absent.yaml")], env=ENV
        )
        assert result.exit_code == 1


# =============================================================================
# Tests valeur
# =============================================================================


class TestValeur:
    def test_valeur_fin_premier_exercice(self) -> None:
        result = runner.invoke(
            app, ["valeur", *OPTIONS_SLM, "--date-analyse", "2024-03-31"], env=ENV
        )

        assert result.exit_code == 0, result.output
        assert "31/03/2024" in result.output
        assert "19,000.00" in result.output
        assert "81,000.00" in result.output

    def test_valeur_pourcentage(self) -> None:
        """Residuelle 5% de 100 000: fin de vie -> 5 000."""
        result = runner.invoke(
            app,
            ["valeur", "--cout", "100000", "--date", "2023-04-01", "--duree", "5",
             "--residuelle", "5", "--type-residuelle", "percentage",
             "--date-analyse", "2028-04-01"],
            env=ENV,
        )

        assert result.exit_code == 0, result.output
        assert "5,000.00" in result.output

    def test_date_avant_acquisition(self) -> None:
        result = runner.invoke(
            app, ["valeur", *OPTIONS_SLM, "--date-analyse", "2023-01-01"], env=ENV
        )

        assert result.exit_code == 1
        assert "preceder la date d'acquisition" in result.output

    def test_date_analyse_invalide(self) -> None:
        result = runner.invoke(
            app, ["valeur", *OPTIONS_SLM, "--date-analyse", "demain"], env=ENV
        )
        assert result.exit_code == 1


# =============================================================================
# Tests exporter
# =============================================================================


class TestExporter:
    def test_exporter_csv(self, tmp_path) -> None:
        result = runner.invoke(
            app,
            ["exporter", *OPTIONS_SLM, "--sortie", str(tmp_path), "--sans-pdf"],
            env=ENV,
        )

        assert result.exit_code == 0, result.output
        chemin = tmp_path / "Depreciation_Schedule_Machine_CNC.csv"
        assert chemin.exists()
        assert "FY 2023-24" in chemin.read_text(encoding="utf-8")
