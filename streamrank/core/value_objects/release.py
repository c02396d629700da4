"""
Objets valeur pour les releases candidates.

Objets valeur immutables representant un resultat brut d'indexeur,
les informations structurees extraites de son titre, et la paire
(resultat, descripteur) manipulee par le pipeline de classement.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class RawResult:
    """
    Resultat brut retourne par un indexeur.

    Attributs :
        title : Nom de la release tel que publie
        download_url : URL de telechargement NZB
        size : Taille en octets (None si inconnue)
        age : Age en jours depuis la publication (None si inconnu)
        indexer : Nom de l'indexeur source
    """

    title: str
    download_url: Optional[str] = None
    size: Optional[int] = None
    age: Optional[int] = None
    indexer: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RawResult":
        """
        Construit un RawResult depuis un dictionnaire JSON d'indexeur.

        Accepte les deux conventions de nommage (downloadUrl / download_url).
        """
        download_url = data.get("downloadUrl", data.get("download_url"))
        size = data.get("size")
        age = data.get("age")
        return cls(
            title=str(data.get("title") or ""),
            download_url=download_url,
            size=int(size) if size is not None else None,
            age=int(age) if age is not None else None,
            indexer=str(data.get("indexer") or ""),
        )


@dataclass(frozen=True)
class Edition:
    """
    Drapeaux d'edition detectes dans le nom de la release.

    Attributs :
        remux : Release REMUX (flux d'origine sans reencodage)
        hdr : Type HDR explicite (ex: "HDR10"), True si HDR generique, False sinon
        dolby_vision : Presence de Dolby Vision
    """

    remux: bool = False
    hdr: Union[str, bool] = False
    dolby_vision: bool = False


@dataclass(frozen=True)
class ReleaseDescriptor:
    """
    Informations structurees extraites du nom d'une release.

    Un descripteur vide (tous les champs par defaut) represente
    une release dont le titre n'a pas pu etre analyse.

    Attributs :
        resolution : Qualite canonique ("4K", "1080p", "720p", "480p") ou valeur brute
        audio_codec : Codec audio au format des tags de release (ex: "TrueHD Atmos")
        audio_channels : Configuration des canaux (ex: "5.1")
        languages : Noms de langues en minuscules (ex: "german")
        multi : Release MULTi (plusieurs pistes audio)
        sources : Sources dans l'ordre de detection (ex: "BLURAY", "WEBDL")
        edition : Drapeaux REMUX / HDR / Dolby Vision
        group : Groupe de release
    """

    resolution: Optional[str] = None
    audio_codec: Optional[str] = None
    audio_channels: Optional[str] = None
    languages: frozenset[str] = frozenset()
    multi: bool = False
    sources: tuple[str, ...] = ()
    edition: Edition = field(default_factory=Edition)
    group: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Vrai si aucune information n'a ete extraite."""
        return self == ReleaseDescriptor()


@dataclass(frozen=True)
class ScoredItem:
    """
    Paire (resultat brut, descripteur) manipulee par le pipeline.

    La paire n'est jamais separee : le descripteur accompagne le resultat
    jusqu'a la sortie pour l'affichage en aval.
    """

    raw: RawResult
    descriptor: ReleaseDescriptor
