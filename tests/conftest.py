"""Configuration de test pour pytest avec gestion des chemins.

Ce module configure pytest pour résoudre les imports `narrative_engine` en ajoutant la racine du
projet au sys.path, et fournit un faux service branché sur le client HTTP.
"""

import os
import sys

import pytest

# Ensure project root is on sys.path so that
# imports like `from narrative_engine...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from narrative_engine.infra.http_clients import NarrativeEngineApi  # noqa: E402
from tests.fakes import (  # noqa: E402
    TEST_MODULE_ID,
    TEST_MODULE_NAMESPACE,
    VALID_TOKEN,
    FakeNarrativeEngine,
)

TEST_BASE_URL = "http://narrative-engine.test"


@pytest.fixture
def fake_engine() -> FakeNarrativeEngine:
    """Faux service en mémoire, neuf pour chaque test."""
    return FakeNarrativeEngine()


@pytest.fixture
def api(fake_engine: FakeNarrativeEngine) -> NarrativeEngineApi:
    """Client HTTP branché sur le faux service."""
    return NarrativeEngineApi(TEST_BASE_URL, transport=fake_engine.transport())


@pytest.fixture
def token() -> str:
    return VALID_TOKEN


@pytest.fixture
def module_string() -> str:
    return f"{TEST_MODULE_NAMESPACE}:{TEST_MODULE_ID}@v1.0.0"
