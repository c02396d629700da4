"""
Tests unitaires pour les observateurs du pipeline.

Les logs loguru sont captures avec un sink temporaire.
"""

import pytest
from loguru import logger

from streamrank.core.value_objects import RawResult, ReleaseDescriptor
from streamrank.services.pipeline import run_pipeline
from streamrank.services.pipeline_observer import (
    LoguruPipelineObserver,
    NullPipelineObserver,
)


@pytest.fixture
def log_messages():
    """Capture les messages loguru emis pendant le test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


class TestLoguruPipelineObserver:
    """Tests pour la journalisation des decisions."""

    def test_logs_drops_and_groups(
        self, descriptors, mock_release_parser, thresholds, log_messages
    ) -> None:
        descriptors["Film.German.1080p"] = ReleaseDescriptor(
            resolution="1080p", languages=frozenset({"german"})
        )
        results = [
            RawResult(title="Film.German.1080p", size=2 * 1073741824, age=1),
            RawResult(title="Film.Old", age=365),
            RawResult(title="Film.NoQuality", age=3),
        ]

        run_pipeline(
            results,
            mock_release_parser,
            preferred_language="German",
            quality_filter="1080p",
            thresholds=thresholds,
            observer=LoguruPipelineObserver(top_n=1),
        )

        joined = "\n".join(log_messages)
        assert "3 releases analysees" in joined
        assert "Exclue (age 365 j > 90 j) : Film.Old" in joined
        assert "Exclue (qualite inconnue) : Film.NoQuality" in joined
        assert "preferee=1, repli=0, autres=0" in joined
        assert "1080p | Rang audio: 0 | Taille: 2.00 GB | Film.German.1080p" in joined
        assert "Classement termine : 1 releases" in joined

    def test_single_group_summary(self, mock_release_parser, log_messages) -> None:
        run_pipeline(
            [RawResult(title="A"), RawResult(title="B")],
            mock_release_parser,
            observer=LoguruPipelineObserver(top_n=1),
        )

        joined = "\n".join(log_messages)
        assert "Filtrage par age desactive" in joined
        assert "Groupe unique : 2 releases triees (Quality First)" in joined
        assert "... et 1 autres" in joined


class TestNullPipelineObserver:
    """L'observateur par defaut ne journalise rien."""

    def test_silent(self, mock_release_parser, log_messages) -> None:
        run_pipeline([RawResult(title="A")], mock_release_parser, observer=NullPipelineObserver())

        assert log_messages == []
