"""Formatage des montants pour l'affichage (groupement indien, 2 decimales)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def _grouper_indien(entier: str) -> str:
    """12345678 -> 1,23,45,678 (trois derniers chiffres, puis par paires)."""
    if len(entier) <= 3:
        return entier
    tete, fin = entier[:-3], entier[-3:]
    paires = []
    while len(tete) > 2:
        paires.insert(0, tete[-2:])
        tete = tete[:-2]
    if tete:
        paires.insert(0, tete)
    return ",".join(paires) + "," + fin


def formater_montant_inr(montant: Decimal | None) -> str:
    """Formate un montant avec le groupement indien et 2 decimales.

    Un montant nul (ou absent) s'affiche '-'.
    """
    if montant is None:
        return "-"
    arrondi = montant.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    if arrondi == 0:
        return "-"
    signe = "-" if arrondi < 0 else ""
    entier, decimales = f"{abs(arrondi):.2f}".split(".")
    return f"{signe}{_grouper_indien(entier)}.{decimales}"
