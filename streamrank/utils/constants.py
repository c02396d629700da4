"""
Constantes globales pour StreamRank.

Ce module contient les tables declaratives consultees par les services :
- Synonymes de resolution et rangs de qualite video
- Regles de rang des codecs audio (ordre significatif)
- Filtres de qualite reconnus
- Tags de langue recherches dans les titres
- Correspondances guessit -> vocabulaire des tags de release
- Conventions d'affichage (sources, codecs simplifies)

Ajouter une langue ou une variante de codec est un changement de donnees.
"""

# Valeur sentinelle "aucune langue preferee"
NO_PREFERENCE = "No Preference"

# Langue du groupe de repli
FALLBACK_LANGUAGE = "english"

# ====================
# Qualite video
# ====================

# Synonymes de resolution (cle en majuscules) -> libelle canonique
# Les variantes entrelacees rejoignent le palier progressif
RESOLUTION_LABELS: dict[str, str] = {
    "2160P": "4K",
    "4K": "4K",
    "UHD": "4K",
    "1080P": "1080p",
    "1080I": "1080p",
    "720P": "720p",
    "720I": "720p",
    "480P": "480p",
    "480I": "480p",
}

VIDEO_QUALITY_RANKS: dict[str, int] = {
    "4K": 4,
    "1080p": 3,
    "720p": 2,
    "480p": 1,
}

# ====================
# Qualite audio
# ====================

# Regles evaluees dans l'ordre sur le codec en majuscules, la premiere gagne.
# (sous-chaines toutes requises, sous-chaines exclues, rang)
AUDIO_RANK_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...], int], ...] = (
    # Lossless objet / haute resolution
    (("TRUEHD", "ATMOS"), (), 6),
    (("DTS-HD", "MA"), (), 6),
    (("TRUEHD",), (), 6),
    # DTS-HD sans MA
    (("DTS-HD",), (), 5),
    # Lossy ameliore
    (("EAC3",), (), 4),
    (("E-AC-3",), (), 4),
    (("DD+",), (), 4),
    (("DDP",), (), 4),
    # Lossy historique
    (("AC3",), (), 3),
    (("DD ",), (), 3),
    (("DTS",), ("DTS-HD",), 3),
    (("AAC",), (), 2),
)

# Codecs reconnus uniquement par egalite stricte
AUDIO_RANK_EXACT: dict[str, int] = {
    "DD": 3,
}

AUDIO_RANK_UNSPECIFIED = 1

# ====================
# Filtres de qualite
# ====================

QUALITY_FILTER_ALL = "All"

QUALITY_FILTERS: dict[str, frozenset[str]] = {
    "4K/2160p": frozenset({"4K"}),
    "1080p": frozenset({"1080p"}),
    "720p": frozenset({"720p"}),
    "480p": frozenset({"480p"}),
    "4K + 1080p": frozenset({"4K", "1080p"}),
    "1080p + 720p": frozenset({"1080p", "720p"}),
    "720p + 480p": frozenset({"720p", "480p"}),
}

# ====================
# Langues
# ====================

# Tags recherches dans le titre en l'absence de langue structuree.
# Ordre significatif : le premier tag trouve determine la langue.
LANGUAGE_TITLE_TAGS: tuple[tuple[str, str], ...] = (
    ("GERMAN", "german"),
    ("FRENCH", "french"),
    ("SPANISH", "spanish"),
    ("ITALIAN", "italian"),
    ("PORTUGUESE", "portuguese"),
    ("RUSSIAN", "russian"),
    ("JAPANESE", "japanese"),
    ("KOREAN", "korean"),
    ("CHINESE", "chinese"),
    ("ARABIC", "arabic"),
    ("HINDI", "hindi"),
    ("DUTCH", "dutch"),
    ("POLISH", "polish"),
    ("TURKISH", "turkish"),
)

# ====================
# Correspondances guessit
# ====================

# Codes babelfish signalant une release multi-langues
MULTI_LANGUAGE_CODES = frozenset({"mul"})

# Codes babelfish sans langue exploitable
UNDETERMINED_LANGUAGE_CODES = frozenset({"und", "zxx"})

# audio_codec guessit -> tag de release
GUESSIT_AUDIO_CODECS: dict[str, str] = {
    "Dolby TrueHD": "TrueHD",
    "Dolby Atmos": "Atmos",
    "Dolby Digital Plus": "EAC3",
    "Dolby Digital": "AC3",
    "DTS-HD": "DTS-HD",
    "DTS:X": "DTS:X",
    "DTS": "DTS",
    "AAC": "AAC",
    "FLAC": "FLAC",
    "Opus": "Opus",
    "MP3": "MP3",
    "MP2": "MP2",
    "PCM": "PCM",
    "LPCM": "LPCM",
    "Vorbis": "Vorbis",
}

# audio_profile guessit -> suffixe du tag de release
GUESSIT_AUDIO_PROFILES: dict[str, str] = {
    "Master Audio": "MA",
    "High Resolution Audio": "HRA",
    "Extended Surround": "ES",
}

# source guessit -> jeton de source
GUESSIT_SOURCES: dict[str, str] = {
    "Blu-ray": "BLURAY",
    "Ultra HD Blu-ray": "BLURAY",
    "HD-DVD": "HDDVD",
    "Web": "WEBDL",
    "HDTV": "HDTV",
    "Ultra HDTV": "HDTV",
    "TV": "TV",
    "Digital TV": "TV",
    "Satellite": "SAT",
    "Video on Demand": "VOD",
    "DVD": "DVD",
    "VHS": "VHS",
    "Camera": "CAM",
    "HD Camera": "CAM",
    "Telesync": "TELESYNC",
    "HD Telesync": "TELESYNC",
    "Telecine": "TELECINE",
    "HD Telecine": "TELECINE",
    "Workprint": "WORKPRINT",
}

# Valeurs "other" guessit portant un type HDR explicite
GUESSIT_HDR_TAGS = frozenset({"HDR10", "HDR10+", "HLG"})

# Valeurs "other" guessit signalant un HDR generique
GUESSIT_GENERIC_HDR_TAGS = frozenset({"HDR"})

GUESSIT_DUAL_AUDIO_TAGS = frozenset({"Dual Audio"})

# ====================
# Affichage
# ====================

# Jeton de source -> (emoji, libelle)
SOURCE_DISPLAY: dict[str, tuple[str, str]] = {
    "BLURAY": ("📀", "BluRay"),
    "WEBDL": ("🌐", "WEB-DL"),
    "WEB": ("🌐", "WEB"),
}

DEFAULT_SOURCE_EMOJI = "📺"

# (sous-chaines dont une suffit, libelle court), premiere regle gagnante
AUDIO_DISPLAY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("TRUEHD", "TRUE-HD"), "TrueHD"),
    (("DTS-HD",), "DTS-HD MA"),
    (("EAC3", "E-AC-3", "DD+", "DDP"), "EAC3"),
    (("AC3", "DD "), "AC3"),
    (("DTS",), "DTS"),
    (("AAC",), "AAC"),
    (("OPUS",), "Opus"),
    (("FLAC",), "FLAC"),
)

AUDIO_DISPLAY_EXACT: dict[str, str] = {
    "DD": "AC3",
}

BYTES_PER_GIB = 1073741824
