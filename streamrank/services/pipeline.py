"""
Pipeline de filtrage, regroupement et tri des releases.

Etapes :
1. Parsing de chaque titre (echec = descripteur vide, release conservee)
2. Exclusion par retention (si des seuils sont configures)
3. Exclusion par qualite (si un filtre precis est demande)
4. Sans langue preferee : tri global, group_info = None
5. Sinon : repartition PREFERRED / FALLBACK / OTHER, tri de chaque
   groupe, concatenation dans cet ordre et calcul des bornes

Le pipeline est synchrone et sans etat : chaque appel cree ses propres
collections et ne modifie aucune entree.
"""

from typing import Iterable, Optional, Union

from loguru import logger

from streamrank.core.ports.observer import IPipelineObserver
from streamrank.core.ports.parser import IReleaseParser
from streamrank.core.value_objects.ranking import (
    GroupInfo,
    PipelineResult,
    RetentionThresholds,
    SortMethod,
    Tier,
)
from streamrank.core.value_objects.release import RawResult, ScoredItem
from streamrank.services.descriptor import extract_descriptor
from streamrank.services.group_sorter import sort_group
from streamrank.services.language_tier import classify_language_tier, has_preference
from streamrank.services.pipeline_observer import NullPipelineObserver
from streamrank.services.rank import (
    extract_quality,
    is_known_quality_filter,
    matches_quality_filter,
)
from streamrank.services.retention import is_past_retention


# Ordre de concatenation des groupes
TIER_ORDER: tuple[Tier, ...] = (Tier.PREFERRED, Tier.FALLBACK, Tier.OTHER)


def parse_results(
    raw_results: Iterable[RawResult], parser: IReleaseParser
) -> list[ScoredItem]:
    """Associe chaque resultat brut a son descripteur."""
    return [
        ScoredItem(raw=raw, descriptor=extract_descriptor(raw.title, parser))
        for raw in raw_results
    ]


def _partition(items, predicate) -> tuple[list[ScoredItem], list[ScoredItem]]:
    """Separe les releases en (conservees, exclues) en preservant l'ordre."""
    kept: list[ScoredItem] = []
    dropped: list[ScoredItem] = []
    for item in items:
        (kept if predicate(item) else dropped).append(item)
    return kept, dropped


def classify_items(
    items: Iterable[ScoredItem], preferred_language: str
) -> dict[Tier, list[ScoredItem]]:
    """
    Repartit les releases dans les trois groupes de langue.

    Returns:
        Dictionnaire Tier -> releases, ordre d'entree preserve dans chaque groupe.
    """
    buckets: dict[Tier, list[ScoredItem]] = {tier: [] for tier in TIER_ORDER}
    for item in items:
        tier = classify_language_tier(item.descriptor, preferred_language, item.raw.title)
        buckets[tier].append(item)
    return buckets


def run_pipeline(
    raw_results: Iterable[RawResult],
    parser: IReleaseParser,
    sort_method: Optional[Union[str, SortMethod]] = None,
    preferred_language: Optional[str] = None,
    quality_filter: Optional[str] = None,
    thresholds: Optional[RetentionThresholds] = None,
    observer: Optional[IPipelineObserver] = None,
) -> PipelineResult:
    """
    Filtre, regroupe et trie les releases d'une recherche.

    Args:
        raw_results: Resultats bruts des indexeurs.
        parser: Parser de noms de releases.
        sort_method: Methode de tri (defaut "Quality First").
        preferred_language: Langue preferee (None ou "No Preference" = groupe unique).
        quality_filter: Filtre de qualite (None ou "All" = aucun).
        thresholds: Seuils de retention (None = pas de filtrage par age).
        observer: Observateur des decisions (defaut silencieux).

    Returns:
        PipelineResult avec les releases ordonnees et les bornes de groupes.
    """
    observer = observer or NullPipelineObserver()
    method = SortMethod.parse(sort_method)

    items = parse_results(raw_results, parser)
    observer.on_parsed(items)

    items, dropped = _partition(
        items, lambda item: not is_past_retention(item.raw.age, thresholds)
    )
    observer.on_age_filtered(items, dropped, thresholds)

    if not is_known_quality_filter(quality_filter):
        logger.warning(f"Filtre de qualite inconnu ignore : {quality_filter}")

    items, dropped = _partition(
        items,
        lambda item: matches_quality_filter(extract_quality(item.descriptor), quality_filter),
    )
    observer.on_quality_filtered(items, dropped, quality_filter)

    if not has_preference(preferred_language):
        sorted_items = sort_group(items, method)
        observer.on_sorted(None, sorted_items, method)
        result = PipelineResult(sorted_results=tuple(sorted_items), group_info=None)
        observer.on_complete(result)
        return result

    buckets = classify_items(items, preferred_language)
    observer.on_classified(buckets, preferred_language)

    sorted_buckets: dict[Tier, list[ScoredItem]] = {}
    for tier in TIER_ORDER:
        sorted_buckets[tier] = sort_group(buckets[tier], method)
        observer.on_sorted(tier, sorted_buckets[tier], method)

    preferred_count = len(sorted_buckets[Tier.PREFERRED])
    fallback_count = len(sorted_buckets[Tier.FALLBACK])
    group_info = GroupInfo(
        preferred_language=preferred_language,
        preferred_count=preferred_count,
        fallback_count=fallback_count,
        other_count=len(sorted_buckets[Tier.OTHER]),
        group1_end=preferred_count,
        group2_end=preferred_count + fallback_count,
    )
    result = PipelineResult(
        sorted_results=tuple(item for tier in TIER_ORDER for item in sorted_buckets[tier]),
        group_info=group_info,
    )
    observer.on_complete(result)
    return result


class StreamPipelineService:
    """
    Service de classement des releases.

    Lie un parser et un observateur aux operations du pipeline.
    Ce service est sans etat et peut etre utilise comme singleton.
    """

    def __init__(
        self,
        parser: IReleaseParser,
        observer: Optional[IPipelineObserver] = None,
    ) -> None:
        self._parser = parser
        self._observer = observer or NullPipelineObserver()

    def run(
        self,
        raw_results: Iterable[RawResult],
        sort_method: Optional[Union[str, SortMethod]] = None,
        preferred_language: Optional[str] = None,
        quality_filter: Optional[str] = None,
        thresholds: Optional[RetentionThresholds] = None,
    ) -> PipelineResult:
        """
        Execute le pipeline complet.

        Voir run_pipeline() pour les details.
        """
        return run_pipeline(
            raw_results,
            self._parser,
            sort_method=sort_method,
            preferred_language=preferred_language,
            quality_filter=quality_filter,
            thresholds=thresholds,
            observer=self._observer,
        )

    def parse(self, raw_results: Iterable[RawResult]) -> list[ScoredItem]:
        """
        Analyse les titres sans filtrer ni trier.

        Voir parse_results() pour les details.
        """
        return parse_results(raw_results, self._parser)
