# amortex - Tableau d'amortissement par exercice financier (avril-mars)
#
# Modules:
#   calendrier.py  - Fenetres d'exercice, annees bissextiles, decompte des jours
#   trimestres.py  - Repartition trimestrielle d'un amortissement annuel
#   tableau.py     - Construction du tableau (SLM / WDV, prorata, plancher residuel)
#   evaluation.py  - Amortissement cumule et valeur nette a une date
#   saisie.py      - Validation des valeurs brutes, chargement YAML
#   session.py     - Dernier calcul et recalcul explicite

__version__ = "0.1.0"

from amortex.evaluation import valeur_a_date
from amortex.modeles import (
    DonneesAmortissement,
    EvaluationADate,
    LigneTableau,
    MethodeAmortissement,
)
from amortex.session import ResultatCalcul, SessionAmortissement
from amortex.tableau import construire_tableau

__all__ = [
    "DonneesAmortissement",
    "EvaluationADate",
    "LigneTableau",
    "MethodeAmortissement",
    "ResultatCalcul",
    "SessionAmortissement",
    "construire_tableau",
    "valeur_a_date",
]
