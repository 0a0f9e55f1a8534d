"""Définition et chargement des paramètres de configuration du client.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _resolve_env_file() -> Path | str:
    """Retourne le fichier .env à charger (ENV_FILE, puis .env.{APP_ENV}, puis .env)."""
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file
    cwd = Path.cwd()
    specific = cwd / f".env.{os.getenv('APP_ENV', 'dev')}"
    if specific.exists():
        return specific
    return cwd / ".env"


class NarrativeEngineSettings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_prefix="NARRATIVE_ENGINE_",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    API_URL: str = "http://localhost:8080"
    # Secondes; None = aucun timeout imposé par le client
    TIMEOUT: float | None = None
    LOG_LEVEL: str = "INFO"


def get_settings() -> NarrativeEngineSettings:
    """Construit et retourne la configuration du client."""
    return NarrativeEngineSettings(_env_file=_resolve_env_file())
