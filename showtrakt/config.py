"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe SHOWTRAKT_,
et peut optionnellement etre fournie via un fichier .env.

Le client id Trakt est optionnel - les consultations de details echouent proprement s'il manque.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de showtrakt/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe SHOWTRAKT_.
    Exemple : SHOWTRAKT_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOWTRAKT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de donnees
    database_url: str = Field(default="sqlite:///showtrakt.db")

    # API Trakt (OPTIONNELLE - les details ne sont pas consultables sans client id)
    trakt_client_id: Optional[str] = Field(default=None)
    trakt_base_url: str = Field(default="https://api.trakt.tv")

    # Datasets IMDb
    imdb_cache_dir: Path = Field(default=Path("~/.cache/showtrakt/imdb"))
    imdb_max_age_days: int = Field(default=7, ge=0)

    # Interface terminal
    tick_rate_ms: int = Field(default=250, ge=10)
    page_step: int = Field(default=20, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/showtrakt.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("imdb_cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def trakt_enabled(self) -> bool:
        """Verifie si l'API Trakt est configuree."""
        return bool(self.trakt_client_id)
