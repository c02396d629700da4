"""
Tests unitaires pour la commande CLI rank et les commandes info/version.

Le Container est patche pour injecter le mock du parser : les tests
ne dependent pas de guessit.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from streamrank.adapters.cli.commands import load_results
from streamrank.config import Settings
from streamrank.main import _console_level, app
from streamrank.services.pipeline import StreamPipelineService
from streamrank.services.pipeline_observer import NullPipelineObserver

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Parametres par defaut, sans fichier .env."""
    return Settings(_env_file=None)


@pytest.fixture
def mock_container(settings, mock_release_parser, sample_descriptors):
    """Mock le Container instancie par la commande rank."""
    with patch("streamrank.adapters.cli.commands.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.config.return_value = settings
        container_instance.pipeline_service.side_effect = lambda: StreamPipelineService(
            parser=mock_release_parser, observer=NullPipelineObserver()
        )
        yield container_instance


@pytest.fixture
def results_file(tmp_path: Path, sample_results) -> Path:
    """Fichier JSON contenant les resultats du scenario de reference."""
    path = tmp_path / "results.json"
    payload = [
        {
            "title": raw.title,
            "downloadUrl": f"https://indexer/nzb/{index}",
            "size": raw.size,
            "age": raw.age,
            "indexer": raw.indexer,
        }
        for index, raw in enumerate(sample_results)
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


# ============================================================================
# load_results
# ============================================================================


class TestLoadResults:
    """Tests pour load_results."""

    def test_loads_list(self, results_file: Path) -> None:
        results = load_results(results_file)

        assert len(results) == 3
        assert results[0].download_url == "https://indexer/nzb/0"
        assert results[0].size == 8_000_000_000

    def test_rejects_object(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"title": "Movie"}', encoding="utf-8")

        with pytest.raises(ValueError):
            load_results(path)

    def test_rejects_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")

        with pytest.raises(ValueError):
            load_results(path)


# ============================================================================
# rank
# ============================================================================


class TestRankCommand:
    """Tests pour la commande rank."""

    def test_json_grouped(self, mock_container, results_file: Path) -> None:
        result = runner.invoke(app, ["rank", str(results_file), "--json", "-l", "German"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        titles = [item["title"] for item in payload["sortedResults"]]
        assert titles == [
            "Movie.2020.GERMAN.1080p.BluRay.DTS-HD.MA",
            "Movie.2020.1080p.WEB-DL.AC3",
            "Movie.2020.MULTi.720p.BluRay.AC3",
        ]
        assert payload["groupInfo"] == {
            "preferredLanguage": "German",
            "preferredCount": 1,
            "englishCount": 1,
            "otherCount": 1,
            "group1End": 1,
            "group2End": 2,
        }
        assert payload["sortedResults"][0]["parsed"]["languages"] == ["german"]

    def test_json_single_group(self, mock_container, results_file: Path) -> None:
        result = runner.invoke(app, ["rank", str(results_file), "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["groupInfo"] is None
        assert len(payload["sortedResults"]) == 3

    def test_quality_and_retention_options(self, mock_container, results_file: Path) -> None:
        result = runner.invoke(
            app,
            [
                "rank",
                str(results_file),
                "--json",
                "-q",
                "1080p",
                "--retention-days",
                "10",
            ],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        # filtre d'age a 9 jours : la release WEB-DL (10 jours) est exclue
        titles = [item["title"] for item in payload["sortedResults"]]
        assert titles == ["Movie.2020.GERMAN.1080p.BluRay.DTS-HD.MA"]

    def test_size_first(self, mock_container, results_file: Path) -> None:
        result = runner.invoke(
            app, ["rank", str(results_file), "--json", "--sort", "Size First"]
        )

        assert result.exit_code == 0
        sizes = [item["size"] for item in json.loads(result.stdout)["sortedResults"]]
        assert sizes == sorted(sizes, reverse=True)

    def test_table_output(self, mock_container, results_file: Path) -> None:
        result = runner.invoke(app, ["rank", str(results_file), "-l", "German"])

        assert result.exit_code == 0
        assert "3/3 releases classees" in result.stdout

    def test_invalid_file(self, mock_container, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]", encoding="utf-8")

        result = runner.invoke(app, ["rank", str(path)])

        assert result.exit_code == 1
        assert "Lecture impossible" in result.stdout

    def test_missing_file(self, mock_container, tmp_path: Path) -> None:
        result = runner.invoke(app, ["rank", str(tmp_path / "absent.json")])

        assert result.exit_code == 1


# ============================================================================
# info / version
# ============================================================================


class TestInfoAndVersion:
    """Tests pour les commandes info et version."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "StreamRank v0.1.0" in result.stdout

    def test_info_without_retention(self, settings: Settings) -> None:
        with patch("streamrank.main.get_config", return_value=settings):
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Retention : désactivée" in result.stdout
        assert "Langue préférée : aucune" in result.stdout

    def test_info_with_retention(self) -> None:
        settings = Settings(_env_file=None, retention_days=100, preferred_language="German")
        with patch("streamrank.main.get_config", return_value=settings):
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Retention : 100 jours" in result.stdout
        assert "exclusion > 97 j" in result.stdout
        assert "Langue préférée : German" in result.stdout


class TestVerbosity:
    """Tests pour les options globales de verbosite."""

    def test_console_level(self) -> None:
        assert _console_level(0, False) == "INFO"
        assert _console_level(2, False) == "DEBUG"
        assert _console_level(1, True) == "ERROR"

    def test_quiet_reconfigures_logging(self, settings: Settings) -> None:
        with (
            patch("streamrank.main.get_config", return_value=settings),
            patch("streamrank.main.configure_logging") as mock_configure,
        ):
            result = runner.invoke(app, ["--quiet", "version"])

        assert result.exit_code == 0
        assert mock_configure.call_args.kwargs["log_level"] == "ERROR"
