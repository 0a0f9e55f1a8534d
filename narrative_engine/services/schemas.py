# ============================================================
# Module : narrative_engine/services/schemas.py
# Objet  : Opérations sur les schemas (données de module d'un projet).
# Notes  : schema_generate dépend de la latence du fournisseur IA côté serveur.
# ============================================================
"""Opérations sur les schemas: sélection, création, réécriture, historique et génération IA."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from narrative_engine.domain.schema import (
    Schema,
    SchemaCreateRequest,
    SchemaGenerateRequest,
    SchemaListVersionsRequest,
    SchemaRewriteRequest,
    SchemaSelectRequest,
    SchemaVersionEntry,
)
from narrative_engine.infra.http_clients import NarrativeEngineApi, auth_headers
from narrative_engine.services.base import parse_form

_SCHEMA_VERSIONS = TypeAdapter(list[SchemaVersionEntry])


async def schema_select(
    api: NarrativeEngineApi,
    access_token: str,
    form: SchemaSelectRequest | Mapping[str, Any],
) -> Schema:
    """Retourne un schema par `id`, ou le plus récent pour `module` dans le projet."""
    headers = auth_headers(access_token)
    request = parse_form("schema_select", SchemaSelectRequest, form)
    return await api.fetch(
        "/schemas", Schema, method="GET", params=request.to_query(), headers=headers
    )


async def schema_create(
    api: NarrativeEngineApi,
    access_token: str,
    form: SchemaCreateRequest | Mapping[str, Any],
) -> Schema:
    headers = auth_headers(access_token)
    request = parse_form("schema_create", SchemaCreateRequest, form)
    return await api.fetch(
        "/schemas", Schema, method="PUT", json=request.to_wire(), headers=headers
    )


async def schema_rewrite(
    api: NarrativeEngineApi,
    access_token: str,
    form: SchemaRewriteRequest | Mapping[str, Any],
) -> Schema:
    """Remplace les données d'un schema; retourne le nouvel instantané."""
    headers = auth_headers(access_token)
    request = parse_form("schema_rewrite", SchemaRewriteRequest, form)
    return await api.fetch(
        "/schemas", Schema, method="PATCH", json=request.to_wire(), headers=headers
    )


async def schema_list_versions(
    api: NarrativeEngineApi,
    access_token: str,
    form: SchemaListVersionsRequest | Mapping[str, Any],
) -> list[SchemaVersionEntry]:
    headers = auth_headers(access_token)
    request = parse_form("schema_list_versions", SchemaListVersionsRequest, form)
    return await api.fetch(
        "/schemas/versions",
        _SCHEMA_VERSIONS,
        method="GET",
        params=request.to_query(),
        headers=headers,
    )


async def schema_generate(
    api: NarrativeEngineApi,
    access_token: str,
    form: SchemaGenerateRequest | Mapping[str, Any],
) -> Schema:
    """Demande au serveur de générer les données d'un module (source=AI)."""
    headers = auth_headers(access_token)
    request = parse_form("schema_generate", SchemaGenerateRequest, form)
    return await api.fetch(
        "/schemas/generate", Schema, method="PUT", json=request.to_wire(), headers=headers
    )
