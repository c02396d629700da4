"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe STREAMRANK_,
et peut optionnellement être fournie via un fichier .env.

La retention et la langue preferee sont optionnelles - le filtrage par age et le
regroupement par langue sont désactivés si non fournis.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from streamrank.core.value_objects.ranking import RetentionThresholds, SortMethod
from streamrank.services.language_tier import has_preference

# Trouver le fichier .env à la racine du projet (parent de streamrank/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe STREAMRANK_.
    Exemple : STREAMRANK_PREFERRED_LANGUAGE=German

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAMRANK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Classement
    sort_method: str = Field(default=SortMethod.QUALITY_FIRST.value)
    preferred_language: Optional[str] = Field(default=None)
    quality_filter: str = Field(default="All")

    # Retention Usenet (OPTIONNELLE - filtrage par age désactivé si non définie)
    retention_days: Optional[int] = Field(default=None, ge=1)
    fresh_days: int = Field(default=7, ge=0)
    show_file_age: bool = Field(default=True)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/streamrank.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def retention_thresholds(self) -> Optional[RetentionThresholds]:
        """Seuils dérivés de la retention, ou None si non configurée."""
        if self.retention_days is None:
            return None
        return RetentionThresholds.from_retention(self.retention_days, self.fresh_days)

    @property
    def preference_enabled(self) -> bool:
        """Vérifie si le regroupement par langue est actif."""
        return has_preference(self.preferred_language)
