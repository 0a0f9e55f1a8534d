"""Schémas des projets (entité et requêtes).

Objectif du module
------------------
- Décoder les projets renvoyés par le serveur.
- Valider les formulaires d'initialisation, de mise à jour, de suppression et de listing.
"""

from __future__ import annotations

from pydantic import Field

from narrative_engine.core.http_constants import DEFAULT_LIMIT, DEFAULT_OFFSET
from narrative_engine.domain.form import (
    UUID,
    Lang,
    Limit,
    ModuleString,
    Offset,
    Timestamp,
    WireModel,
)


class Project(WireModel):
    """Oeuvre d'un utilisateur: langue, titre et workflow ordonné de modules."""

    id: UUID
    owner: UUID
    lang: Lang
    title: str
    # Chaînes renvoyées telles quelles par le serveur
    workflow: list[str]
    created_at: Timestamp = Field(alias="createdAt")
    updated_at: Timestamp = Field(alias="updatedAt")


class ProjectListRequest(WireModel):
    limit: Limit | None = None
    offset: Offset | None = None

    def to_query(self) -> dict[str, str]:
        return {
            "limit": str(self.limit or DEFAULT_LIMIT),
            "offset": str(self.offset or DEFAULT_OFFSET),
        }


class ProjectInitRequest(WireModel):
    lang: Lang
    title: str
    workflow: list[ModuleString]


class ProjectUpdateRequest(WireModel):
    """Seuls le titre et le workflow sont modifiables; `id` est immuable."""

    id: UUID
    title: str
    workflow: list[ModuleString]


class ProjectDeleteRequest(WireModel):
    id: UUID
