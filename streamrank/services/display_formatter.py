"""
Formatage des releases pour l'affichage dans le lecteur.

Format sur trois lignes :
- Ligne 1: 🎬 {Qualite} • 🔊 {Codec audio} {Atmos} {Canaux}
- Ligne 2: ✨ {DV/HDR} • {Source} • 🌍 MULTi • {Groupe}
- Ligne 3: 💾 {Taille} • 📡 {Indexeur} • {Age}
"""

from dataclasses import dataclass
from typing import Optional

from streamrank.core.value_objects.ranking import RetentionThresholds
from streamrank.core.value_objects.release import ReleaseDescriptor
from streamrank.services.rank import extract_quality
from streamrank.services.retention import format_age_display
from streamrank.utils.constants import (
    AUDIO_DISPLAY_EXACT,
    AUDIO_DISPLAY_RULES,
    BYTES_PER_GIB,
    DEFAULT_SOURCE_EMOJI,
    SOURCE_DISPLAY,
)

_SEPARATOR = " • "


@dataclass(frozen=True)
class StreamTitle:
    """Libelle d'une release sur trois lignes."""

    line1: str
    line2: str
    line3: str

    def as_text(self) -> str:
        """Lignes non vides jointes par des retours a la ligne."""
        return "\n".join(line for line in (self.line1, self.line2, self.line3) if line)


def simplify_audio_codec(audio_codec: Optional[str]) -> str:
    """
    Raccourcit un codec audio brut pour l'affichage.

    Exemple : "DDP5.1" -> "EAC3", "DTS-HD MA" -> "DTS-HD MA".
    Un codec non reconnu est retourne tel quel.
    """
    if not audio_codec:
        return ""

    codec = audio_codec.upper()
    for tokens, name in AUDIO_DISPLAY_RULES:
        if any(token in codec for token in tokens):
            return name
    return AUDIO_DISPLAY_EXACT.get(codec, audio_codec)


def format_size_line(
    size: Optional[int],
    indexer: str = "",
    age: Optional[int] = None,
    thresholds: Optional[RetentionThresholds] = None,
    show_file_age: bool = True,
) -> str:
    """Construit la ligne 3 : taille, indexeur et age."""
    parts = []

    if size:
        parts.append(f"💾 {size / BYTES_PER_GIB:.2f} GB")
    else:
        parts.append("💾 Size Unknown")

    if indexer:
        parts.append(f"📡 {indexer}")

    age_display = format_age_display(age, thresholds, show_file_age)
    if age_display:
        parts.append(age_display)

    return _SEPARATOR.join(parts)


def _format_audio_line(descriptor: ReleaseDescriptor) -> str:
    parts = []

    quality = extract_quality(descriptor)
    if quality:
        parts.append(f"🎬 {quality}")

    if descriptor.audio_codec:
        audio = simplify_audio_codec(descriptor.audio_codec)
        if "ATMOS" in descriptor.audio_codec.upper():
            audio += " Atmos"
        if descriptor.audio_channels:
            audio += f" {descriptor.audio_channels}"
        parts.append(f"🔊 {audio}")

    return _SEPARATOR.join(parts)


def _format_source_line(descriptor: ReleaseDescriptor) -> str:
    parts = []
    edition = descriptor.edition

    hdr_flags = []
    if edition.dolby_vision:
        hdr_flags.append("DV")
    if edition.hdr:
        hdr_flags.append(edition.hdr if isinstance(edition.hdr, str) else "HDR")

    source_emoji = ""
    source_name = ""
    if descriptor.sources:
        source = descriptor.sources[0]
        source_emoji, source_name = SOURCE_DISPLAY.get(
            source, (DEFAULT_SOURCE_EMOJI, source)
        )
        if edition.remux:
            source_name += " REMUX"

    if hdr_flags:
        parts.append("✨ " + " ".join(hdr_flags))
        if source_name:
            parts.append(source_name)
    elif source_name:
        parts.append(f"{source_emoji} {source_name}")

    if descriptor.multi:
        parts.append("🌍 MULTi")

    if descriptor.group:
        parts.append(descriptor.group)

    return _SEPARATOR.join(parts)


def format_stream_title(
    descriptor: Optional[ReleaseDescriptor],
    size: Optional[int] = None,
    indexer: str = "",
    age: Optional[int] = None,
    thresholds: Optional[RetentionThresholds] = None,
    show_file_age: bool = True,
) -> StreamTitle:
    """
    Formate une release sur trois lignes pour le lecteur.

    Args:
        descriptor: Descripteur de la release (None = inconnue).
        size: Taille en octets.
        indexer: Nom de l'indexeur.
        age: Age en jours.
        thresholds: Seuils de retention pour l'indicateur de sante.
        show_file_age: Affiche l'age en ligne 3.

    Returns:
        StreamTitle avec les trois lignes.
    """
    line3 = format_size_line(size, indexer, age, thresholds, show_file_age)

    if descriptor is None:
        return StreamTitle(line1="🎬 Unknown", line2="", line3=line3)

    return StreamTitle(
        line1=_format_audio_line(descriptor),
        line2=_format_source_line(descriptor),
        line3=line3,
    )
