"""
Utilitaires et constantes pour StreamRank.

Ce module contient les tables declaratives partagees.
"""

from streamrank.utils.constants import (
    LANGUAGE_TITLE_TAGS,
    NO_PREFERENCE,
    QUALITY_FILTERS,
    VIDEO_QUALITY_RANKS,
)

__all__ = [
    "LANGUAGE_TITLE_TAGS",
    "NO_PREFERENCE",
    "QUALITY_FILTERS",
    "VIDEO_QUALITY_RANKS",
]
