"""
Configuration du logging de l'application via loguru.

Deux sorties :
- stderr : messages colores pour l'operateur (stdout reste reserve a la
  sortie de la commande, JSON compris)
- fichier : une ligne JSON par evenement, avec rotation et compression

Les modules de la bibliotheque importent seulement `logger` et ne
configurent jamais de sortie eux-memes.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def _add_file_sink(log_file: Path, rotation_size: str, retention_count: int) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # decisions du pipeline incluses
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/streamrank.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les sorties loguru de l'application.

    Args :
        log_level : Niveau minimum sur stderr (DEBUG affiche le detail des exclusions)
        log_file : Fichier JSON avec rotation, ou None pour ne pas ecrire de fichier
        rotation_size : Taille declenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives conservees

    Peut etre appelee plusieurs fois : les sorties precedentes sont retirees.
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    if log_file is not None:
        _add_file_sink(log_file, rotation_size, retention_count)

    logger.debug(
        "Logging configure",
        level=log_level,
        log_file=str(log_file) if log_file else None,
    )
