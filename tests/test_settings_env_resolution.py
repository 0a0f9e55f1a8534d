"""
Tests pour la résolution des variables d'environnement.

Ce module teste le chargement de la configuration du client depuis l'environnement et depuis des
fichiers .env personnalisés.
"""

from __future__ import annotations

from pathlib import Path

from narrative_engine.core.settings import get_settings
from narrative_engine.infra.http_clients import NarrativeEngineApi

TEST_TIMEOUT = 12.5


def test_settings_defaults(tmp_path: Path, monkeypatch) -> None:
    """Teste les valeurs par défaut sans fichier .env ni variable."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENV_FILE", raising=False)
    monkeypatch.delenv("NARRATIVE_ENGINE_API_URL", raising=False)
    monkeypatch.delenv("NARRATIVE_ENGINE_TIMEOUT", raising=False)
    monkeypatch.delenv("NARRATIVE_ENGINE_LOG_LEVEL", raising=False)

    s = get_settings()
    assert s.API_URL == "http://localhost:8080"
    assert s.TIMEOUT is None
    assert s.LOG_LEVEL == "INFO"


def test_settings_reads_env_file(tmp_path: Path, monkeypatch) -> None:
    """
    Teste que les settings lisent correctement les fichiers d'environnement.

    Vérifie que les variables définies dans un fichier .env personnalisé (ENV_FILE) sont chargées.
    """
    env = tmp_path / ".env.custom"
    env.write_text(
        "NARRATIVE_ENGINE_API_URL=http://from-file.test\nNARRATIVE_ENGINE_TIMEOUT=12.5\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("ENV_FILE", str(env))
    monkeypatch.delenv("NARRATIVE_ENGINE_API_URL", raising=False)
    monkeypatch.delenv("NARRATIVE_ENGINE_TIMEOUT", raising=False)

    s = get_settings()
    assert s.API_URL == "http://from-file.test"
    assert s.TIMEOUT == TEST_TIMEOUT


def test_settings_prefers_app_env_file(tmp_path: Path, monkeypatch) -> None:
    """Teste que `.env.{APP_ENV}` est préféré à `.env`."""
    (tmp_path / ".env").write_text("NARRATIVE_ENGINE_LOG_LEVEL=WARNING\n", encoding="utf-8")
    (tmp_path / ".env.staging").write_text("NARRATIVE_ENGINE_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENV_FILE", raising=False)
    monkeypatch.delenv("NARRATIVE_ENGINE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("APP_ENV", "staging")

    assert get_settings().LOG_LEVEL == "DEBUG"


def test_environment_overrides_file(tmp_path: Path, monkeypatch) -> None:
    env = tmp_path / ".env.custom"
    env.write_text("NARRATIVE_ENGINE_API_URL=http://from-file.test\n", encoding="utf-8")
    monkeypatch.setenv("ENV_FILE", str(env))
    monkeypatch.setenv("NARRATIVE_ENGINE_API_URL", "http://from-env.test/")

    api = NarrativeEngineApi.from_settings(get_settings())
    assert api.base_url == "http://from-env.test"
