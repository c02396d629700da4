"""
Observateurs du pipeline de classement.

- NullPipelineObserver : ignore tous les evenements (appels purs, tests)
- LoguruPipelineObserver : journalise les decisions via loguru
  (exclusions en DEBUG, resumes en INFO, tete de chaque groupe en DEBUG)
"""

from typing import Optional, Sequence

from loguru import logger

from streamrank.core.ports.observer import IPipelineObserver
from streamrank.core.value_objects.ranking import (
    PipelineResult,
    RetentionThresholds,
    SortMethod,
    Tier,
)
from streamrank.core.value_objects.release import ScoredItem
from streamrank.services.rank import extract_quality, rank_audio_quality
from streamrank.utils.constants import BYTES_PER_GIB


_TIER_LABELS: dict[Tier, str] = {
    Tier.PREFERRED: "Langue preferee",
    Tier.FALLBACK: "Repli (anglais/neutre)",
    Tier.OTHER: "Autres langues",
}


class NullPipelineObserver(IPipelineObserver):
    """Observateur silencieux."""

    def on_parsed(self, items: Sequence[ScoredItem]) -> None:
        pass

    def on_age_filtered(
        self,
        kept: Sequence[ScoredItem],
        dropped: Sequence[ScoredItem],
        thresholds: Optional[RetentionThresholds],
    ) -> None:
        pass

    def on_quality_filtered(
        self,
        kept: Sequence[ScoredItem],
        dropped: Sequence[ScoredItem],
        quality_filter: Optional[str],
    ) -> None:
        pass

    def on_classified(
        self, buckets: dict[Tier, list[ScoredItem]], preferred_language: str
    ) -> None:
        pass

    def on_sorted(
        self,
        tier: Optional[Tier],
        items: Sequence[ScoredItem],
        sort_method: SortMethod,
    ) -> None:
        pass

    def on_complete(self, result: PipelineResult) -> None:
        pass


def _describe_item(item: ScoredItem) -> str:
    """Resume d'une release pour les logs : qualite | rang audio | taille | titre."""
    quality = extract_quality(item.descriptor) or "inconnue"
    audio_rank = rank_audio_quality(item.descriptor.audio_codec)
    if item.raw.size:
        size = f"{item.raw.size / BYTES_PER_GIB:.2f} GB"
    else:
        size = "inconnue"
    return f"{quality} | Rang audio: {audio_rank} | Taille: {size} | {item.raw.title}"


class LoguruPipelineObserver(IPipelineObserver):
    """
    Observateur journalisant les decisions du pipeline avec loguru.

    Args:
        top_n: Nombre de releases affichees en tete de chaque groupe trie.
    """

    def __init__(self, top_n: int = 5) -> None:
        self._top_n = top_n

    def on_parsed(self, items: Sequence[ScoredItem]) -> None:
        unparsed = sum(1 for item in items if item.descriptor.is_empty)
        logger.info(f"{len(items)} releases analysees ({unparsed} sans information)")

    def on_age_filtered(
        self,
        kept: Sequence[ScoredItem],
        dropped: Sequence[ScoredItem],
        thresholds: Optional[RetentionThresholds],
    ) -> None:
        if thresholds is None:
            logger.debug("Filtrage par age desactive (aucune retention configuree)")
            return
        for item in dropped:
            logger.debug(
                f"Exclue (age {item.raw.age} j > {thresholds.filter_days} j) : "
                f"{item.raw.title}"
            )
        logger.info(
            f"Filtre de retention : {len(kept)} conservees, {len(dropped)} exclues",
            retention_days=thresholds.retention_days,
            filter_days=thresholds.filter_days,
        )

    def on_quality_filtered(
        self,
        kept: Sequence[ScoredItem],
        dropped: Sequence[ScoredItem],
        quality_filter: Optional[str],
    ) -> None:
        for item in dropped:
            quality = extract_quality(item.descriptor) or "inconnue"
            logger.debug(f"Exclue (qualite {quality}) : {item.raw.title}")
        logger.info(
            f"Filtre de qualite {quality_filter or 'All'} : "
            f"{len(kept)} conservees, {len(dropped)} exclues"
        )

    def on_classified(
        self, buckets: dict[Tier, list[ScoredItem]], preferred_language: str
    ) -> None:
        for tier, items in buckets.items():
            for item in items:
                languages = ", ".join(sorted(item.descriptor.languages)) or "aucune"
                logger.debug(f"{_TIER_LABELS[tier]} [{languages}] {item.raw.title}")
        logger.info(
            f"Groupes (langue preferee : {preferred_language}) : "
            f"preferee={len(buckets[Tier.PREFERRED])}, "
            f"repli={len(buckets[Tier.FALLBACK])}, "
            f"autres={len(buckets[Tier.OTHER])}"
        )

    def on_sorted(
        self,
        tier: Optional[Tier],
        items: Sequence[ScoredItem],
        sort_method: SortMethod,
    ) -> None:
        if not items:
            return
        label = _TIER_LABELS[tier] if tier else "Groupe unique"
        logger.debug(f"{label} : {len(items)} releases triees ({sort_method.value})")
        for position, item in enumerate(items[: self._top_n], start=1):
            logger.debug(f"  {position}. {_describe_item(item)}")
        if len(items) > self._top_n:
            logger.debug(f"  ... et {len(items) - self._top_n} autres")

    def on_complete(self, result: PipelineResult) -> None:
        info = result.group_info
        if info is None:
            logger.info(f"Classement termine : {len(result.sorted_results)} releases")
            return
        logger.info(
            f"Classement termine : {len(result.sorted_results)} releases "
            f"({info.preferred_count} preferees -> {info.fallback_count} repli "
            f"-> {info.other_count} autres)"
        )
