# ============================================================
# Module : narrative_engine/services/projects.py
# Objet  : Opérations CRUD sur les projets de l'utilisateur.
# ============================================================
"""Opérations sur les projets: listing, initialisation, mise à jour et suppression."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from narrative_engine.domain.project import (
    Project,
    ProjectDeleteRequest,
    ProjectInitRequest,
    ProjectListRequest,
    ProjectUpdateRequest,
)
from narrative_engine.infra.http_clients import NarrativeEngineApi, auth_headers
from narrative_engine.services.base import parse_form

_PROJECTS = TypeAdapter(list[Project])


async def project_list(
    api: NarrativeEngineApi,
    access_token: str,
    form: ProjectListRequest | Mapping[str, Any] | None = None,
) -> list[Project]:
    """Liste les projets appartenant à l'appelant."""
    headers = auth_headers(access_token)
    request = parse_form("project_list", ProjectListRequest, form or {})
    return await api.fetch(
        "/projects", _PROJECTS, method="GET", params=request.to_query(), headers=headers
    )


async def project_init(
    api: NarrativeEngineApi,
    access_token: str,
    form: ProjectInitRequest | Mapping[str, Any],
) -> Project:
    """Crée un projet; le serveur attribue id, propriétaire et dates.

    Lève `NotFoundError` si un jeton du workflow n'est pas résolu.
    """
    headers = auth_headers(access_token)
    request = parse_form("project_init", ProjectInitRequest, form)
    return await api.fetch(
        "/projects", Project, method="PUT", json=request.to_wire(), headers=headers
    )


async def project_update(
    api: NarrativeEngineApi,
    access_token: str,
    form: ProjectUpdateRequest | Mapping[str, Any],
) -> Project:
    headers = auth_headers(access_token)
    request = parse_form("project_update", ProjectUpdateRequest, form)
    return await api.fetch(
        "/projects", Project, method="PATCH", json=request.to_wire(), headers=headers
    )


async def project_delete(
    api: NarrativeEngineApi,
    access_token: str,
    form: ProjectDeleteRequest | Mapping[str, Any],
) -> Project:
    """Supprime un projet et retourne son dernier état."""
    headers = auth_headers(access_token)
    request = parse_form("project_delete", ProjectDeleteRequest, form)
    return await api.fetch(
        "/projects", Project, method="DELETE", json=request.to_wire(), headers=headers
    )
