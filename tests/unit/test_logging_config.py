"""
Tests unitaires pour configure_logging.
"""

import json

import pytest
from loguru import logger

from streamrank.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Retire les sorties ajoutees par le test."""
    yield
    logger.remove()


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_file_sink_writes_json(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "streamrank.log"

        configure_logging(log_level="WARNING", log_file=log_file)
        logger.info("Classement termine : 3 releases")
        logger.complete()
        logger.remove()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        messages = [json.loads(line)["record"]["message"] for line in lines]
        assert "Classement termine : 3 releases" in messages

    def test_without_file(self, tmp_path, capsys) -> None:
        configure_logging(log_level="INFO", log_file=None)
        logger.info("Visible")
        logger.debug("Masque")

        err = capsys.readouterr().err
        assert "Visible" in err
        assert "Masque" not in err
        assert list(tmp_path.iterdir()) == []
