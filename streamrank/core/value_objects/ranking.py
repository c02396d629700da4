"""
Objets valeur pour le classement et le regroupement des releases.

Enumerations fermees (tiers de langue, statuts de retention, methodes
de tri) et objets valeur de configuration et de resultat du pipeline.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from streamrank.core.value_objects.release import ScoredItem


class Tier(Enum):
    """Groupe de priorite d'une release selon sa langue.

    Valeurs:
        PREFERRED: Langue preferee confirmee
        FALLBACK: Anglais, release neutre, ou tout si aucune preference
        OTHER: Autre langue identifiee
    """

    PREFERRED = "preferred"
    FALLBACK = "fallback"
    OTHER = "other"


class RetentionStatus(Enum):
    """Etat de sante d'une release selon son age et la retention du fournisseur."""

    FRESH = "fresh"
    STANDARD = "standard"
    AGING = "aging"
    WARNING = "warning"
    FILTERED = "filtered"


class SortMethod(Enum):
    """Critere de tri principal a l'interieur d'un groupe."""

    QUALITY_FIRST = "Quality First"
    SIZE_FIRST = "Size First"
    DATE_FIRST = "Date First"

    @classmethod
    def parse(cls, value: "Optional[str | SortMethod]") -> "SortMethod":
        """
        Convertit une valeur de configuration en SortMethod.

        Toute valeur absente ou non reconnue retombe sur QUALITY_FIRST.
        """
        if isinstance(value, SortMethod):
            return value
        for method in cls:
            if method.value == value:
                return method
        return cls.QUALITY_FIRST


@dataclass(frozen=True)
class RetentionThresholds:
    """
    Seuils d'age (en jours) pour la classification de retention.

    L'ordre fresh_days <= aging_days <= warning_days <= filter_days est
    attendu mais n'est pas verifie.

    Attributs :
        fresh_days : Age maximum d'une release "fraiche"
        aging_days : Debut de la zone vieillissante
        warning_days : Debut de la zone d'avertissement
        filter_days : Au-dela, la release est exclue
        retention_days : Retention du fournisseur d'origine (informatif)
    """

    fresh_days: int
    aging_days: int
    warning_days: int
    filter_days: int
    retention_days: Optional[int] = None

    @classmethod
    def from_retention(
        cls, retention_days: int, fresh_days: int = 7
    ) -> "RetentionThresholds":
        """
        Derive les seuils depuis la retention du fournisseur Usenet.

        Zones : vieillissante a 85%, avertissement a 95%, exclusion
        au-dela de 97% de la retention.
        """
        return cls(
            fresh_days=fresh_days,
            aging_days=math.floor(retention_days * 0.85),
            warning_days=math.floor(retention_days * 0.95),
            filter_days=math.floor(retention_days * 0.97),
            retention_days=retention_days,
        )


@dataclass(frozen=True)
class GroupInfo:
    """
    Resume du regroupement par langue.

    Attributs :
        preferred_language : Langue preferee demandee
        preferred_count : Nombre de releases du groupe prefere
        fallback_count : Nombre de releases du groupe de repli
        other_count : Nombre de releases des autres langues
        group1_end : Index de debut du groupe de repli
        group2_end : Index de debut du groupe des autres langues
    """

    preferred_language: str
    preferred_count: int
    fallback_count: int
    other_count: int
    group1_end: int
    group2_end: int


@dataclass(frozen=True)
class PipelineResult:
    """
    Sortie du pipeline : releases ordonnees et metadonnees de groupes.

    group_info vaut None en mode groupe unique (aucune langue preferee).
    """

    sorted_results: tuple[ScoredItem, ...]
    group_info: Optional[GroupInfo] = None
