"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe GUAVA_,
et peut optionnellement etre fournie via un fichier .env.

L'hote et le port du store sont composes en une chaine de connexion unique.
L'instance Settings est construite une seule fois par le Container DI puis injectee.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

# Trouver le fichier .env a la racine du projet (parent de guava/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe GUAVA_.
    Exemple : GUAVA_STORE_HOST=db.local GUAVA_STORE_PORT=5433

    Si database_url est defini, il remplace la chaine composee depuis
    store_host/store_port (utile pour SQLite).
    """

    model_config = SettingsConfigDict(
        env_prefix="GUAVA_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Store du catalogue
    store_host: str = Field(default="127.0.0.1")
    store_port: int = Field(default=5432, ge=1, le=65535)
    store_name: str = Field(default="guava")
    store_driver: str = Field(default="postgresql+psycopg")
    database_url: Optional[str] = Field(default=None)

    # Racine des assets adresses par hash
    assets_dir: Path = Field(default=Path("content"))

    # Politique du listing en cas d'erreur de lecture en cours de route
    listing_allow_partial: bool = Field(default=False)

    # Serveur HTTP
    http_host: str = Field(default="127.0.0.1")
    http_port: int = Field(default=8080, ge=1, le=65535)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    # None (ou GUAVA_LOG_FILE vide) : journalisation sur stderr uniquement
    log_file: Optional[Path] = Field(default=Path("logs/guava.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("assets_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Etend ~ vers le repertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @property
    def connection_string(self) -> str:
        """Chaine de connexion au store (database_url prioritaire)."""
        if self.database_url:
            return self.database_url
        return (
            f"{self.store_driver}://{self.store_host}:{self.store_port}/{self.store_name}"
        )

    @property
    def masked_connection_string(self) -> str:
        """Chaine de connexion avec le mot de passe masque, pour l'affichage."""
        return make_url(self.connection_string).render_as_string(hide_password=True)
