"""
Tri des releases a l'interieur d'un groupe.

Cascade de cles (chacune departage la precedente) :
1. Cle principale selon la methode de tri
   - Quality First: rang video decroissant
   - Size First: taille decroissante (inconnue = 0)
   - Date First: age croissant (inconnu = 0, le plus recent)
2. Rang video decroissant (si la cle principale n'est pas deja la qualite)
3. Rang audio decroissant
4. Taille decroissante

Le tri Python est stable : deux releases a egalite sur toutes les cles
conservent leur ordre d'entree.
"""

from typing import Callable, Iterable, Optional, Union

from streamrank.core.value_objects.ranking import SortMethod
from streamrank.core.value_objects.release import ScoredItem
from streamrank.services.rank import rank_audio_quality, rank_video_quality


SortKey = tuple[int, ...]


def _size(item: ScoredItem) -> int:
    return item.raw.size or 0


def _age(item: ScoredItem) -> int:
    return item.raw.age or 0


def _video(item: ScoredItem) -> int:
    return rank_video_quality(item.descriptor.resolution)


def _audio(item: ScoredItem) -> int:
    return rank_audio_quality(item.descriptor.audio_codec)


# Cle principale par methode, exprimee pour un tri croissant
_PRIMARY_KEYS: dict[SortMethod, Callable[[ScoredItem], int]] = {
    SortMethod.QUALITY_FIRST: lambda item: -_video(item),
    SortMethod.SIZE_FIRST: lambda item: -_size(item),
    SortMethod.DATE_FIRST: _age,
}


def sort_key(item: ScoredItem, sort_method: SortMethod) -> SortKey:
    """
    Construit la cle de tri complete d'une release.

    Args:
        item: Release a classer.
        sort_method: Methode de tri principale.

    Returns:
        Tuple comparable, plus petit = mieux classe.
    """
    primary = _PRIMARY_KEYS[sort_method](item)
    if sort_method == SortMethod.QUALITY_FIRST:
        return (primary, -_audio(item), -_size(item))
    return (primary, -_video(item), -_audio(item), -_size(item))


def sort_group(
    items: Iterable[ScoredItem],
    sort_method: Optional[Union[str, SortMethod]] = None,
) -> list[ScoredItem]:
    """
    Trie un groupe de releases sans modifier la sequence d'entree.

    Args:
        items: Releases du groupe.
        sort_method: "Quality First", "Size First", "Date First" ;
            toute autre valeur equivaut a "Quality First".

    Returns:
        Nouvelle liste triee.
    """
    method = SortMethod.parse(sort_method)
    return sorted(items, key=lambda item: sort_key(item, method))
