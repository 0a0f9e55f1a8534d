"""Tests du script de smoke test contre le faux service."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from narrative_engine.infra.http_clients import NarrativeEngineApi
from narrative_engine.scripts import smoke_test
from tests.fakes import VALID_TOKEN, FakeNarrativeEngine


@pytest.mark.asyncio
async def test_run_reports_healthy(
    api: NarrativeEngineApi, fake_engine: FakeNarrativeEngine, capsys
) -> None:
    assert await smoke_test.run(api, VALID_TOKEN) is True
    out = capsys.readouterr().out
    assert "/ping: ok" in out
    assert "client:postgres -> up" in out
    assert "/projects: 0 project(s)" in out
    assert [r.url.path for r in fake_engine.requests] == ["/ping", "/healthcheck", "/projects"]


@pytest.mark.asyncio
async def test_run_detects_degraded_dependency(
    api: NarrativeEngineApi, fake_engine: FakeNarrativeEngine
) -> None:
    fake_engine.health["api:jsonKeys"] = {"status": "down", "err": "timeout"}
    assert await smoke_test.run(api, None) is False


def test_main_exit_codes(fake_engine: FakeNarrativeEngine, monkeypatch) -> None:
    monkeypatch.setattr(smoke_test, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(
        smoke_test,
        "NarrativeEngineApi",
        lambda url, timeout=None: NarrativeEngineApi(url, transport=fake_engine.transport()),
    )
    assert smoke_test.main(["--api-url", "http://fake.test"]) == 0
    # Jeton refusé par le serveur
    assert smoke_test.main(["--api-url", "http://fake.test", "--token", "bad"]) == 1


def test_main_logs_failure_with_configured_logger(
    fake_engine: FakeNarrativeEngine, monkeypatch
) -> None:
    """Le logger est créé après `setup_logging`, donc sous la configuration active."""
    monkeypatch.setattr(smoke_test, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(
        smoke_test,
        "NarrativeEngineApi",
        lambda url, timeout=None: NarrativeEngineApi(url, transport=fake_engine.transport()),
    )
    with capture_logs() as logs:
        assert smoke_test.main(["--api-url", "http://fake.test", "--token", "bad"]) == 1
    failures = [entry for entry in logs if entry["event"] == "smoke_test_failed"]
    assert len(failures) == 1
    assert failures[0]["component"] == "smoke_test"
    assert failures[0]["log_level"] == "error"
