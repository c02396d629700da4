"""
Classification des releases en groupes de langue.

Trois groupes garantissent que le contenu dans la langue preferee
apparait toujours en premier, quel que soit son rang de qualite :
- PREFERRED: langue preferee confirmee
- FALLBACK: anglais, ou release sans aucun indice de langue
- OTHER: autre langue identifiee

Une release MULTi n'est preferee que si la langue preferee fait
partie de ses pistes declarees.
"""

from typing import Optional

from streamrank.core.value_objects.ranking import Tier
from streamrank.core.value_objects.release import ReleaseDescriptor
from streamrank.utils.constants import (
    FALLBACK_LANGUAGE,
    LANGUAGE_TITLE_TAGS,
    NO_PREFERENCE,
)


def has_preference(preferred_language: Optional[str]) -> bool:
    """Vrai si une langue preferee est configuree (hors sentinelle)."""
    if not preferred_language or not preferred_language.strip():
        return False
    return preferred_language.strip().lower() != NO_PREFERENCE.lower()


def detect_title_language(title: str) -> Optional[str]:
    """
    Cherche un tag de langue dans le titre brut.

    Le premier tag de LANGUAGE_TITLE_TAGS present (sous-chaine,
    insensible a la casse) determine la langue.

    Returns:
        Nom de langue en minuscules, ou None si aucun tag.
    """
    title_upper = (title or "").upper()
    for tag, language in LANGUAGE_TITLE_TAGS:
        if tag in title_upper:
            return language
    return None


def _tier_from_declared(languages: set[str], preferred: str) -> Optional[Tier]:
    if preferred in languages:
        return Tier.PREFERRED
    if FALLBACK_LANGUAGE in languages:
        return Tier.FALLBACK
    return None


def classify_language_tier(
    descriptor: ReleaseDescriptor,
    preferred_language: Optional[str],
    title: str = "",
) -> Tier:
    """
    Determine le groupe de langue d'une release.

    Args:
        descriptor: Descripteur de la release.
        preferred_language: Langue preferee (None ou "No Preference" = aucune).
        title: Titre brut, consulte uniquement sans langue structuree.

    Returns:
        Tier de la release.
    """
    if not has_preference(preferred_language):
        return Tier.FALLBACK

    preferred = preferred_language.strip().lower()
    languages = {language.lower() for language in descriptor.languages}

    declared = _tier_from_declared(languages, preferred)
    if declared is not None:
        return declared

    # MULTi sans langue preferee ni anglais, ou autre langue declaree
    if descriptor.multi or languages:
        return Tier.OTHER

    detected = detect_title_language(title)
    if detected is None:
        return Tier.FALLBACK
    if detected == preferred:
        return Tier.PREFERRED
    return Tier.OTHER
