# ============================================================
# Module : narrative_engine/services/modules.py
# Objet  : Opérations de lecture des modules.
# ============================================================
"""Opérations sur les modules: sélection par jeton et listing des versions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from narrative_engine.domain.module import (
    Module,
    ModuleListVersionsRequest,
    ModuleSelectRequest,
    ModuleVersionEntry,
)
from narrative_engine.infra.http_clients import NarrativeEngineApi, auth_headers
from narrative_engine.services.base import parse_form

_MODULE_VERSIONS = TypeAdapter(list[ModuleVersionEntry])


async def module_select(
    api: NarrativeEngineApi,
    access_token: str,
    form: ModuleSelectRequest | Mapping[str, Any],
) -> Module:
    """Retourne le module adressé par `form.module` (404 si le jeton n'est pas résolu)."""
    headers = auth_headers(access_token)
    request = parse_form("module_select", ModuleSelectRequest, form)
    return await api.fetch(
        "/modules", Module, method="GET", params=request.to_query(), headers=headers
    )


async def module_list_versions(
    api: NarrativeEngineApi,
    access_token: str,
    form: ModuleListVersionsRequest | Mapping[str, Any],
) -> list[ModuleVersionEntry]:
    """Liste les versions d'un module; liste vide si aucun module ne correspond."""
    headers = auth_headers(access_token)
    request = parse_form("module_list_versions", ModuleListVersionsRequest, form)
    return await api.fetch(
        "/modules/versions",
        _MODULE_VERSIONS,
        method="GET",
        params=request.to_query(),
        headers=headers,
    )
