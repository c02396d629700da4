"""
Interface port pour l'observation du pipeline de classement.

Le pipeline reste pur : ses decisions intermediaires (exclusions,
classification, tri) sont transmises a un observateur injecte plutot
qu'ecrites directement dans les logs.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from streamrank.core.value_objects.ranking import (
    PipelineResult,
    RetentionThresholds,
    SortMethod,
    Tier,
)
from streamrank.core.value_objects.release import ScoredItem


class IPipelineObserver(ABC):
    """
    Interface des points d'observation du pipeline.

    Chaque methode est appelee une fois par execution, au point
    correspondant. Les sequences recues ne doivent pas etre modifiees.
    """

    @abstractmethod
    def on_parsed(self, items: Sequence[ScoredItem]) -> None:
        """Appele apres le parsing de tous les titres."""
        ...

    @abstractmethod
    def on_age_filtered(
        self,
        kept: Sequence[ScoredItem],
        dropped: Sequence[ScoredItem],
        thresholds: Optional[RetentionThresholds],
    ) -> None:
        """Appele apres le filtre de retention (thresholds None = desactive)."""
        ...

    @abstractmethod
    def on_quality_filtered(
        self,
        kept: Sequence[ScoredItem],
        dropped: Sequence[ScoredItem],
        quality_filter: Optional[str],
    ) -> None:
        """Appele apres le filtre de qualite."""
        ...

    @abstractmethod
    def on_classified(
        self, buckets: dict[Tier, list[ScoredItem]], preferred_language: str
    ) -> None:
        """Appele apres la repartition en groupes de langue."""
        ...

    @abstractmethod
    def on_sorted(
        self,
        tier: Optional[Tier],
        items: Sequence[ScoredItem],
        sort_method: SortMethod,
    ) -> None:
        """Appele apres le tri d'un groupe (tier None en mode groupe unique)."""
        ...

    @abstractmethod
    def on_complete(self, result: PipelineResult) -> None:
        """Appele une fois le resultat final construit."""
        ...
