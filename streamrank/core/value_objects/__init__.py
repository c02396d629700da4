"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- RawResult : Resultat brut d'un indexeur
- ReleaseDescriptor : Informations extraites du nom de release
- Edition : Drapeaux REMUX / HDR / Dolby Vision
- ScoredItem : Paire resultat + descripteur
- Tier : Groupe de priorite par langue
- RetentionStatus : Etat de sante selon l'age
- RetentionThresholds : Seuils de retention
- SortMethod : Critere de tri principal
- GroupInfo : Resume du regroupement par langue
- PipelineResult : Sortie du pipeline
"""

from streamrank.core.value_objects.release import (
    Edition,
    RawResult,
    ReleaseDescriptor,
    ScoredItem,
)
from streamrank.core.value_objects.ranking import (
    GroupInfo,
    PipelineResult,
    RetentionStatus,
    RetentionThresholds,
    SortMethod,
    Tier,
)

__all__ = [
    "Edition",
    "RawResult",
    "ReleaseDescriptor",
    "ScoredItem",
    "GroupInfo",
    "PipelineResult",
    "RetentionStatus",
    "RetentionThresholds",
    "SortMethod",
    "Tier",
]
