# amortex.rapports - Formatage et rapports CSV/PDF du tableau d'amortissement

from amortex.rapports.formatage import formater_montant_inr
from amortex.rapports.tableau_amortissement import RapportTableau

__all__ = ["RapportTableau", "formater_montant_inr"]
