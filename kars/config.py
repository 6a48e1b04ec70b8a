"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe KARS_,
et peut optionnellement etre fournie via un fichier .env.

La cle API TMDB est optionnelle - la recherche films/series est desactivee si absente.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fichier .env a la racine du projet (parent de kars/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe KARS_.
    Exemple : KARS_DATABASE_URL=sqlite:///:memory:
    """

    model_config = SettingsConfigDict(
        env_prefix="KARS_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de donnees
    database_url: str = Field(default="sqlite:///data/kars.db")

    # Cle API (OPTIONNELLE - TMDB desactive si non definie)
    tmdb_api_key: Optional[str] = Field(default=None)

    # Serveur web
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3001, ge=1, le=65535)

    # Cache des catalogues externes
    cache_dir: Path = Field(default=Path(".cache/api"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/kars.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Verifie si l'API TMDB est configuree."""
        return bool(self.tmdb_api_key)
