"""
Implementation du parser de noms de releases avec guessit.

Ce module fournit GuessitReleaseParser qui implemente IReleaseParser
pour extraire les informations structurees des noms de releases Usenet.
Les valeurs guessit sont converties dans le vocabulaire des tags de
release (TrueHD, DTS-HD MA, EAC3, BLURAY, WEBDL...) attendu par les
fonctions de rang.
"""

from typing import Any, Optional, Union

from guessit import guessit

from streamrank.core.ports.parser import IReleaseParser
from streamrank.core.value_objects.release import Edition, ReleaseDescriptor
from streamrank.services.rank import normalize_resolution
from streamrank.utils.constants import (
    GUESSIT_AUDIO_CODECS,
    GUESSIT_AUDIO_PROFILES,
    GUESSIT_DUAL_AUDIO_TAGS,
    GUESSIT_GENERIC_HDR_TAGS,
    GUESSIT_HDR_TAGS,
    GUESSIT_SOURCES,
    MULTI_LANGUAGE_CODES,
    UNDETERMINED_LANGUAGE_CODES,
)


def _as_list(value: Any) -> list[Any]:
    """guessit retourne une valeur seule ou une liste selon le titre."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class GuessitReleaseParser(IReleaseParser):
    """
    Parser de noms de releases utilisant la bibliotheque guessit.

    Extrait resolution, codec et canaux audio, langues, sources,
    drapeaux d'edition et groupe depuis un nom de release.
    """

    def parse(self, title: str) -> ReleaseDescriptor:
        """
        Parse un nom de release et extrait les informations structurees.

        Args:
            title: Nom de la release publie par l'indexeur

        Returns:
            ReleaseDescriptor avec les informations extraites.
        """
        # Les releases Usenet sont des noms de dossiers, pas des fichiers
        result = guessit(title, {"name_only": True})

        return self._map_to_descriptor(result)

    def _map_to_descriptor(self, result: dict[str, Any]) -> ReleaseDescriptor:
        """
        Mappe le resultat guessit vers un ReleaseDescriptor.

        Args:
            result: Dictionnaire retourne par guessit

        Returns:
            ReleaseDescriptor avec les informations mappees
        """
        others = [str(other) for other in _as_list(result.get("other"))]
        languages, multi = self._extract_languages(result)

        return ReleaseDescriptor(
            resolution=self._extract_resolution(result),
            audio_codec=self._extract_audio_codec(result),
            audio_channels=self._extract_audio_channels(result),
            languages=languages,
            multi=multi or any(other in GUESSIT_DUAL_AUDIO_TAGS for other in others),
            sources=self._extract_sources(result, others),
            edition=self._extract_edition(others),
            group=self._extract_group(result),
        )

    def _extract_resolution(self, result: dict[str, Any]) -> Optional[str]:
        """
        Extrait la resolution canonique depuis le resultat guessit.

        Args:
            result: Dictionnaire retourne par guessit

        Returns:
            Resolution canonique (ex: "4K", "1080p"), ou None
        """
        screen_size = result.get("screen_size")
        if screen_size is None:
            return None
        return normalize_resolution(str(screen_size))

    def _extract_audio_codec(self, result: dict[str, Any]) -> Optional[str]:
        """
        Extrait le codec audio au format des tags de release.

        guessit separe codec et profil ("DTS-HD" + "Master Audio") et peut
        retourner plusieurs codecs ("Dolby TrueHD" + "Dolby Atmos").

        Args:
            result: Dictionnaire retourne par guessit

        Returns:
            Codec audio (ex: "TrueHD Atmos", "DTS-HD MA"), ou None
        """
        tokens = [
            GUESSIT_AUDIO_CODECS.get(str(codec), str(codec))
            for codec in _as_list(result.get("audio_codec"))
        ]
        if not tokens:
            return None

        for profile in _as_list(result.get("audio_profile")):
            suffix = GUESSIT_AUDIO_PROFILES.get(str(profile))
            if suffix:
                tokens.append(suffix)

        return " ".join(tokens)

    def _extract_audio_channels(self, result: dict[str, Any]) -> Optional[str]:
        """Extrait la configuration des canaux (ex: "5.1"), ou None."""
        channels = _as_list(result.get("audio_channels"))
        if not channels:
            return None
        return str(channels[0])

    def _extract_languages(self, result: dict[str, Any]) -> tuple[frozenset[str], bool]:
        """
        Extrait les langues audio depuis le resultat guessit.

        Guessit retourne des objets Language de Babelfish. La langue
        speciale "mul" (tag MULTi) positionne le drapeau multi au lieu
        d'etre listee.

        Args:
            result: Dictionnaire retourne par guessit

        Returns:
            Tuple (noms de langues en minuscules, drapeau multi)
        """
        names: set[str] = set()
        multi = False

        for language in _as_list(result.get("language")):
            code = getattr(language, "alpha3", None)
            if code in MULTI_LANGUAGE_CODES:
                multi = True
                continue
            if code in UNDETERMINED_LANGUAGE_CODES:
                continue
            names.add(self._language_name(language))

        return frozenset(names), multi

    def _language_name(self, language: Any) -> str:
        """Nom anglais en minuscules d'un objet Language (ex: "german")."""
        try:
            return str(language.name).lower()
        except AttributeError:
            return str(language).lower()

    def _extract_sources(self, result: dict[str, Any], others: list[str]) -> tuple[str, ...]:
        """
        Extrait les sources dans l'ordre de detection.

        Une source "Web" accompagnee de "Rip" devient WEBRIP, sinon WEBDL.

        Args:
            result: Dictionnaire retourne par guessit
            others: Valeurs "other" de guessit

        Returns:
            Tuple de jetons de source (ex: ("BLURAY",))
        """
        sources = []
        for source in _as_list(result.get("source")):
            token = GUESSIT_SOURCES.get(str(source), str(source).upper())
            if token == "WEBDL" and "Rip" in others:
                token = "WEBRIP"
            if token not in sources:
                sources.append(token)
        return tuple(sources)

    def _extract_edition(self, others: list[str]) -> Edition:
        """
        Extrait les drapeaux REMUX / HDR / Dolby Vision.

        Args:
            others: Valeurs "other" de guessit

        Returns:
            Edition avec les drapeaux detectes
        """
        hdr: Union[str, bool] = False
        for other in others:
            if other in GUESSIT_HDR_TAGS:
                hdr = other
                break
            if other in GUESSIT_GENERIC_HDR_TAGS:
                hdr = True

        return Edition(
            remux="Remux" in others,
            hdr=hdr,
            dolby_vision="Dolby Vision" in others,
        )

    def _extract_group(self, result: dict[str, Any]) -> Optional[str]:
        """Extrait le groupe de release, ou None."""
        group = result.get("release_group")
        if group is None:
            return None
        return str(group)
