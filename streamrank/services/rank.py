"""
Fonctions de rang pour la comparaison des releases.

Ce module fournit des rangs ordinaux (jamais affiches) utilises
uniquement comme cles de tri :
- Qualite video (0-4): 4K > 1080p > 720p > 480p > inconnue
- Qualite audio (0-6): TrueHD/Atmos = DTS-HD MA > DTS-HD > EAC3 > AC3/DTS > AAC > autre

Il fournit aussi la normalisation des resolutions et le filtre de qualite.
Toutes les fonctions sont pures et totales.
"""

from typing import Optional

from streamrank.core.value_objects.release import ReleaseDescriptor
from streamrank.utils.constants import (
    AUDIO_RANK_EXACT,
    AUDIO_RANK_RULES,
    AUDIO_RANK_UNSPECIFIED,
    QUALITY_FILTER_ALL,
    QUALITY_FILTERS,
    RESOLUTION_LABELS,
    VIDEO_QUALITY_RANKS,
)


def normalize_resolution(resolution: Optional[str]) -> Optional[str]:
    """
    Convertit une resolution brute en libelle canonique.

    2160p, 4K et UHD sont synonymes et deviennent "4K". Une valeur
    non reconnue est conservee telle quelle.

    Args:
        resolution: Resolution brute (ex: "2160P", "1080p", "576p").

    Returns:
        Libelle canonique, valeur brute, ou None si absente.
    """
    if not resolution:
        return None
    return RESOLUTION_LABELS.get(resolution.upper(), resolution)


def extract_quality(descriptor: Optional[ReleaseDescriptor]) -> Optional[str]:
    """Retourne la qualite canonique d'un descripteur, ou None."""
    if descriptor is None:
        return None
    return normalize_resolution(descriptor.resolution)


def rank_video_quality(resolution: Optional[str]) -> int:
    """
    Calcule le rang de qualite video.

    Échelle :
    - 4K / 2160p / UHD: 4
    - 1080p: 3
    - 720p: 2
    - 480p: 1
    - Inconnue ou absente: 0

    Args:
        resolution: Resolution brute ou canonique (insensible a la casse).

    Returns:
        Rang de 0 a 4.
    """
    label = normalize_resolution(resolution)
    if label is None:
        return 0
    return VIDEO_QUALITY_RANKS.get(label, 0)


def _matches_rule(codec: str, required: tuple[str, ...], excluded: tuple[str, ...]) -> bool:
    return all(token in codec for token in required) and not any(
        token in codec for token in excluded
    )


def rank_audio_quality(codec: Optional[str]) -> int:
    """
    Calcule le rang de qualite audio.

    Les regles de AUDIO_RANK_RULES sont evaluees dans l'ordre sur le
    codec en majuscules ; la premiere qui correspond donne le rang.

    Args:
        codec: Codec audio (ex: "TrueHD Atmos", "DTS-HD MA", "DDP5.1").

    Returns:
        Rang de 0 (inconnu) a 6 (lossless haut de gamme).
    """
    if not codec:
        return 0

    normalized = codec.upper()

    for required, excluded, rank in AUDIO_RANK_RULES:
        if _matches_rule(normalized, required, excluded):
            return rank

    return AUDIO_RANK_EXACT.get(normalized, AUDIO_RANK_UNSPECIFIED)


def is_known_quality_filter(quality_filter: Optional[str]) -> bool:
    """Vrai si le filtre est absent, "All", ou un filtre reconnu."""
    return (
        not quality_filter
        or quality_filter == QUALITY_FILTER_ALL
        or quality_filter in QUALITY_FILTERS
    )


def matches_quality_filter(quality: Optional[str], quality_filter: Optional[str]) -> bool:
    """
    Verifie si une qualite est admise par un filtre.

    - Filtre absent, "All" ou non reconnu: toujours admis (sans log, le
      pipeline signale une seule fois un filtre inconnu)
    - Qualite inconnue sous un filtre precis: refusee

    Args:
        quality: Qualite canonique (ex: "4K", "1080p").
        quality_filter: Nom du filtre (ex: "4K + 1080p").

    Returns:
        True si la release doit etre conservee.
    """
    if (
        not quality_filter
        or quality_filter == QUALITY_FILTER_ALL
        or quality_filter not in QUALITY_FILTERS
    ):
        return True
    if not quality:
        return False
    return quality in QUALITY_FILTERS[quality_filter]
