"""
Frontiere protegee autour du parser de releases.

Le parser est un collaborateur externe et faillible : toute erreur
est convertie en descripteur vide, la release reste dans le pipeline.
"""

from loguru import logger

from streamrank.core.ports.parser import IReleaseParser
from streamrank.core.value_objects.release import ReleaseDescriptor


def extract_descriptor(title: str, parser: IReleaseParser) -> ReleaseDescriptor:
    """
    Extrait le descripteur d'un titre sans jamais lever d'exception.

    Args:
        title: Nom de la release.
        parser: Parser de releases injecte.

    Returns:
        Descripteur extrait, ou ReleaseDescriptor() si le titre est vide
        ou si le parser echoue.
    """
    if not title:
        return ReleaseDescriptor()

    try:
        descriptor = parser.parse(title)
    except Exception as e:
        logger.warning(f"Echec du parsing de la release : {title} ({e})")
        return ReleaseDescriptor()

    if not isinstance(descriptor, ReleaseDescriptor):
        logger.warning(f"Parser sans resultat exploitable pour : {title}")
        return ReleaseDescriptor()
    return descriptor
