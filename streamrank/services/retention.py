"""
Classification des releases selon leur age et la retention Usenet.

Au-dela d'un certain age, une release risque d'etre incomplete chez
le fournisseur. Ce module classe l'age en zones de sante et fournit
le predicat d'exclusion utilise par le pipeline.

Zones (premiere regle gagnante) :
- age > filter_days: filtered (a exclure)
- age >= warning_days: warning
- age >= aging_days: aging
- age <= fresh_days: fresh
- sinon: standard
"""

from dataclasses import dataclass
from typing import Optional

from streamrank.core.value_objects.ranking import RetentionStatus, RetentionThresholds


@dataclass(frozen=True)
class RetentionHealth:
    """
    Presentation d'un statut de retention.

    Attributs :
        status : Statut de retention
        icon : Emoji affiche devant l'age
        label : Libelle court
        warning : Message d'avertissement, None si aucun
    """

    status: RetentionStatus
    icon: str
    label: str
    warning: Optional[str] = None


_HEALTH_BY_STATUS: dict[RetentionStatus, RetentionHealth] = {
    RetentionStatus.FILTERED: RetentionHealth(
        RetentionStatus.FILTERED, "🚫", "Filtered", "May be incomplete"
    ),
    RetentionStatus.WARNING: RetentionHealth(
        RetentionStatus.WARNING, "⚠️", "Warning", "May be incomplete"
    ),
    RetentionStatus.AGING: RetentionHealth(RetentionStatus.AGING, "⏳", "Aging"),
    RetentionStatus.FRESH: RetentionHealth(RetentionStatus.FRESH, "📅", "Fresh"),
    RetentionStatus.STANDARD: RetentionHealth(RetentionStatus.STANDARD, "📄", "Standard"),
}


def is_past_retention(
    age: Optional[int], thresholds: Optional[RetentionThresholds]
) -> bool:
    """
    Predicat d'exclusion par l'age.

    Args:
        age: Age en jours (None si inconnu).
        thresholds: Seuils de retention (None = filtrage desactive).

    Returns:
        True si la release depasse filter_days et doit etre exclue.
    """
    if thresholds is None or age is None:
        return False
    return age > thresholds.filter_days


def classify_retention(
    age: Optional[int], thresholds: Optional[RetentionThresholds]
) -> Optional[RetentionStatus]:
    """
    Classe l'age d'une release en zone de sante.

    Les seuils ne sont pas valides : s'ils ne sont pas ordonnes, le
    resultat suit simplement l'ordre des regles.

    Args:
        age: Age en jours (None si inconnu).
        thresholds: Seuils de retention (None = pas de classification).

    Returns:
        RetentionStatus, ou None si l'age ou les seuils sont absents.
    """
    if thresholds is None or age is None:
        return None
    if is_past_retention(age, thresholds):
        return RetentionStatus.FILTERED
    if age >= thresholds.warning_days:
        return RetentionStatus.WARNING
    if age >= thresholds.aging_days:
        return RetentionStatus.AGING
    if age <= thresholds.fresh_days:
        return RetentionStatus.FRESH
    return RetentionStatus.STANDARD


def describe_retention(status: RetentionStatus) -> RetentionHealth:
    """Retourne l'icone, le libelle et l'avertissement d'un statut."""
    return _HEALTH_BY_STATUS[status]


def format_age_display(
    age: Optional[int],
    thresholds: Optional[RetentionThresholds],
    show_file_age: bool = True,
) -> Optional[str]:
    """
    Formate l'age d'une release avec son indicateur de sante.

    Args:
        age: Age en jours.
        thresholds: Seuils de retention (None = age seul).
        show_file_age: Desactive completement l'affichage si False.

    Returns:
        Texte d'age (ex: "📅 New • 3 days old"), ou None.
    """
    if not show_file_age or age is None:
        return None

    age_text = f"{age} days old"
    status = classify_retention(age, thresholds)
    if status is None:
        return age_text

    health = describe_retention(status)
    if status == RetentionStatus.FRESH:
        return f"{health.icon} New • {age_text}"
    if status == RetentionStatus.WARNING:
        return f"{health.icon} {age_text} • {health.warning}"
    if status == RetentionStatus.AGING:
        return f"{health.icon} {age_text}"
    return age_text
