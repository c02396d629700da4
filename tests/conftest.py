"""
Fixtures pytest partagees pour les tests StreamRank.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de l'interface IReleaseParser pilote par une table titre -> descripteur
- Observateur enregistrant les points de controle du pipeline
- Resultats bruts et seuils de retention types
"""

from typing import Callable, Optional, Sequence
from unittest.mock import MagicMock

import pytest

from streamrank.core.ports.observer import IPipelineObserver
from streamrank.core.ports.parser import IReleaseParser
from streamrank.core.value_objects import (
    PipelineResult,
    RawResult,
    ReleaseDescriptor,
    RetentionThresholds,
    ScoredItem,
    SortMethod,
    Tier,
)


class RecordingObserver(IPipelineObserver):
    """Observateur qui enregistre chaque appel (nom, arguments)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, tuple]] = []

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def on_parsed(self, items: Sequence[ScoredItem]) -> None:
        self.events.append(("on_parsed", (list(items),)))

    def on_age_filtered(self, kept, dropped, thresholds) -> None:
        self.events.append(("on_age_filtered", (list(kept), list(dropped), thresholds)))

    def on_quality_filtered(self, kept, dropped, quality_filter) -> None:
        self.events.append(
            ("on_quality_filtered", (list(kept), list(dropped), quality_filter))
        )

    def on_classified(self, buckets, preferred_language) -> None:
        self.events.append(("on_classified", (dict(buckets), preferred_language)))

    def on_sorted(self, tier: Optional[Tier], items, sort_method: SortMethod) -> None:
        self.events.append(("on_sorted", (tier, list(items), sort_method)))

    def on_complete(self, result: PipelineResult) -> None:
        self.events.append(("on_complete", (result,)))


@pytest.fixture
def descriptors() -> dict[str, ReleaseDescriptor]:
    """
    Table titre -> descripteur utilisee par le mock du parser.

    Chaque test la complete avant d'appeler le pipeline.
    """
    return {}


@pytest.fixture
def mock_release_parser(descriptors: dict[str, ReleaseDescriptor]) -> MagicMock:
    """
    Mock de IReleaseParser pour les tests.

    Retourne le descripteur enregistre pour le titre, ou un descripteur
    vide si le titre est inconnu.
    """
    mock = MagicMock(spec=IReleaseParser)
    mock.parse.side_effect = lambda title: descriptors.get(title, ReleaseDescriptor())
    return mock


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Observateur enregistrant les points de controle du pipeline."""
    return RecordingObserver()


@pytest.fixture
def make_item() -> Callable[..., ScoredItem]:
    """Fabrique de ScoredItem a partir de champs bruts et de descripteur."""

    def factory(
        title: str = "Release",
        size: Optional[int] = None,
        age: Optional[int] = None,
        **descriptor_fields,
    ) -> ScoredItem:
        return ScoredItem(
            raw=RawResult(title=title, size=size, age=age, indexer="NZBgeek"),
            descriptor=ReleaseDescriptor(**descriptor_fields),
        )

    return factory


@pytest.fixture
def thresholds() -> RetentionThresholds:
    """Seuils de retention types (fresh 7, aging 30, warning 60, filter 90)."""
    return RetentionThresholds(fresh_days=7, aging_days=30, warning_days=60, filter_days=90)


@pytest.fixture
def sample_results() -> list[RawResult]:
    """Resultats bruts du scenario de reference (allemand, neutre, MULTi)."""
    return [
        RawResult(
            title="Movie.2020.GERMAN.1080p.BluRay.DTS-HD.MA",
            size=8_000_000_000,
            age=2,
            indexer="NZBgeek",
        ),
        RawResult(
            title="Movie.2020.1080p.WEB-DL.AC3",
            size=4_000_000_000,
            age=10,
            indexer="DrunkenSlug",
        ),
        RawResult(
            title="Movie.2020.MULTi.720p.BluRay.AC3",
            size=3_000_000_000,
            age=1,
            indexer="NZBgeek",
        ),
    ]


@pytest.fixture
def sample_descriptors(descriptors: dict[str, ReleaseDescriptor]) -> dict[str, ReleaseDescriptor]:
    """Enregistre les descripteurs du scenario de reference dans le mock du parser."""
    descriptors.update(
        {
            "Movie.2020.GERMAN.1080p.BluRay.DTS-HD.MA": ReleaseDescriptor(
                resolution="1080p",
                audio_codec="DTS-HD MA",
                languages=frozenset({"german"}),
                sources=("BLURAY",),
            ),
            "Movie.2020.1080p.WEB-DL.AC3": ReleaseDescriptor(
                resolution="1080p",
                audio_codec="AC3",
                sources=("WEBDL",),
            ),
            "Movie.2020.MULTi.720p.BluRay.AC3": ReleaseDescriptor(
                resolution="720p",
                audio_codec="AC3",
                multi=True,
                sources=("BLURAY",),
            ),
        }
    )
    return descriptors
