"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports définissent ce dont le domaine a besoin du monde extérieur
sans spécifier comment ces besoins sont satisfaits.

- IReleaseParser : Extraction des informations d'un nom de release
- IPipelineObserver : Points d'observation des décisions du pipeline
"""

from streamrank.core.ports.observer import IPipelineObserver
from streamrank.core.ports.parser import IReleaseParser

__all__ = [
    "IPipelineObserver",
    "IReleaseParser",
]
