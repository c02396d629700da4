"""
Tests unitaires pour la classification en groupes de langue.

Couvre le mode sans preference, les releases MULTi, les langues
declarees et la detection de secours dans le titre.
"""

import pytest

from streamrank.core.value_objects import ReleaseDescriptor, Tier
from streamrank.services.language_tier import (
    classify_language_tier,
    detect_title_language,
    has_preference,
)


def _descriptor(*languages: str, multi: bool = False) -> ReleaseDescriptor:
    return ReleaseDescriptor(languages=frozenset(languages), multi=multi)


class TestHasPreference:
    """Tests pour la detection de la sentinelle."""

    @pytest.mark.parametrize("value", [None, "", "   ", "No Preference", "no preference"])
    def test_no_preference(self, value) -> None:
        assert has_preference(value) is False

    def test_preference(self) -> None:
        assert has_preference("German") is True


class TestNoPreference:
    """Sans langue preferee, tout est dans le groupe de repli."""

    @pytest.mark.parametrize("preferred", [None, "No Preference"])
    def test_everything_is_fallback(self, preferred) -> None:
        assert classify_language_tier(_descriptor("german"), preferred) == Tier.FALLBACK
        assert classify_language_tier(_descriptor(), preferred, "Film.FRENCH") == Tier.FALLBACK


class TestMultiReleases:
    """Tests pour les releases MULTi."""

    def test_multi_with_preferred(self) -> None:
        """MULTi contenant la langue preferee : groupe prefere."""
        descriptor = _descriptor("german", "english", multi=True)
        assert classify_language_tier(descriptor, "German") == Tier.PREFERRED

    def test_multi_with_english_only(self) -> None:
        """MULTi avec anglais sans langue preferee : repli."""
        descriptor = _descriptor("english", "french", multi=True)
        assert classify_language_tier(descriptor, "German") == Tier.FALLBACK

    def test_multi_without_languages(self) -> None:
        """Le tag MULTi seul ne suffit pas : autres langues."""
        descriptor = _descriptor(multi=True)
        assert classify_language_tier(descriptor, "German", "Movie.MULTi.720p") == Tier.OTHER

    def test_multi_ignores_title_fallback(self) -> None:
        """Une release MULTi ne consulte pas le titre."""
        descriptor = _descriptor(multi=True)
        assert classify_language_tier(descriptor, "German", "Movie.GERMAN.MULTi") == Tier.OTHER


class TestDeclaredLanguages:
    """Tests pour les langues structurees."""

    def test_preferred(self) -> None:
        assert classify_language_tier(_descriptor("german"), "German") == Tier.PREFERRED

    def test_preferred_case_insensitive(self) -> None:
        assert classify_language_tier(_descriptor("German"), "GERMAN") == Tier.PREFERRED

    def test_english(self) -> None:
        assert classify_language_tier(_descriptor("english"), "German") == Tier.FALLBACK

    def test_preferred_wins_over_english(self) -> None:
        assert classify_language_tier(_descriptor("english", "german"), "German") == Tier.PREFERRED

    def test_other_declared_language(self) -> None:
        """Une autre langue declaree ne consulte pas le titre."""
        descriptor = _descriptor("french")
        assert classify_language_tier(descriptor, "German", "Movie.GERMAN") == Tier.OTHER


class TestTitleFallback:
    """Tests pour la detection dans le titre sans langue structuree."""

    def test_preferred_in_title(self) -> None:
        assert classify_language_tier(_descriptor(), "German", "Movie.German.1080p") == Tier.PREFERRED

    def test_other_in_title(self) -> None:
        assert classify_language_tier(_descriptor(), "German", "Movie.FRENCH.1080p") == Tier.OTHER

    def test_no_signal_is_fallback(self) -> None:
        """Aucun indice de langue : release neutre."""
        assert classify_language_tier(_descriptor(), "German", "Movie.2020.1080p") == Tier.FALLBACK

    def test_first_tag_in_dictionary_order_wins(self) -> None:
        """L'ordre du dictionnaire (GERMAN avant FRENCH) determine la langue."""
        assert detect_title_language("Movie.FRENCH.GERMAN") == "german"
        assert classify_language_tier(_descriptor(), "French", "Movie.FRENCH.GERMAN") == Tier.OTHER

    def test_detect_title_language_none(self) -> None:
        assert detect_title_language("Movie.2020.1080p") is None
        assert detect_title_language("") is None

    @pytest.mark.parametrize(
        "tag, language",
        [
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
        ],
    )
    def test_dictionary(self, tag: str, language: str) -> None:
        assert detect_title_language(f"Movie.2020.{tag}.1080p") == language
