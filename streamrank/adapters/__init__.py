"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- parsing/ : Parsing des noms de releases (guessit)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from streamrank.adapters.parsing.guessit_parser import GuessitReleaseParser

__all__ = [
    "GuessitReleaseParser",
]
