"""
StreamRank - Classement et regroupement des releases Usenet pour le streaming.

Ce package ordonne les resultats des indexeurs pour presenter la meilleure
release en premier : filtrage par retention et par qualite, regroupement
par langue, puis tri multi-criteres a l'interieur de chaque groupe.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, objets valeur)
- services/ : Couche application (classement, pipeline)
- adapters/ : Couche infrastructure (parsing guessit, CLI)
"""

__version__ = "0.1.0"
