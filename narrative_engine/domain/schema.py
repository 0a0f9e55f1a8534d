"""Schémas des "schemas" (instances de données d'un module dans un projet).

Objectif du module
------------------
- Décoder les schemas et leurs entrées d'historique.
- Valider les formulaires de sélection, création, réécriture, génération et listing.

Réécrire les données d'un schema produit un nouvel instantané (nouvel `id` de version, nouvelle
date de création); un `Schema` déjà décodé n'est jamais modifié.
"""

from __future__ import annotations

from pydantic import Field

from narrative_engine.core.http_constants import DEFAULT_LIMIT, DEFAULT_OFFSET
from narrative_engine.domain.form import (
    UUID,
    Lang,
    Limit,
    ModuleID,
    ModuleNamespace,
    ModuleString,
    Offset,
    OpenMap,
    SchemaSource,
    Timestamp,
    WireModel,
)


class Schema(WireModel):
    """Instance versionnée de données conformes à un module, rattachée à un projet.

    `owner` vaut None pour une donnée produite par le système. `module` est le jeton résolu par
    le serveur (sa version peut différer de celle demandée).
    """

    id: UUID
    project_id: UUID = Field(alias="projectID")
    owner: UUID | None
    module: str
    source: SchemaSource
    data: OpenMap
    created_at: Timestamp = Field(alias="createdAt")


class SchemaVersionEntry(WireModel):
    id: UUID
    created_at: Timestamp = Field(alias="createdAt")


class SchemaSelectRequest(WireModel):
    """Sélection par `id`, ou de la dernière version pour `module` dans le projet."""

    id: UUID | None = None
    project_id: UUID = Field(alias="projectID")
    module: ModuleString | None = None

    def to_query(self) -> dict[str, str]:
        params = {"projectID": str(self.project_id)}
        if self.id:
            params["id"] = str(self.id)
        if self.module:
            params["module"] = self.module
        return params


class SchemaCreateRequest(WireModel):
    id: UUID
    project_id: UUID = Field(alias="projectID")
    module: ModuleString
    source: SchemaSource
    data: OpenMap


class SchemaRewriteRequest(WireModel):
    id: UUID
    data: OpenMap


class SchemaListVersionsRequest(WireModel):
    project_id: UUID = Field(alias="projectID")
    module_id: ModuleID = Field(alias="moduleID")
    module_namespace: ModuleNamespace = Field(alias="moduleNamespace")
    limit: Limit | None = None
    offset: Offset | None = None

    def to_query(self) -> dict[str, str]:
        return {
            "projectID": str(self.project_id),
            "moduleID": self.module_id,
            "moduleNamespace": self.module_namespace,
            "limit": str(self.limit or DEFAULT_LIMIT),
            "offset": str(self.offset or DEFAULT_OFFSET),
        }


class SchemaGenerateRequest(WireModel):
    """Génération IA: le serveur choisit l'`id` et produit `data` (source=AI)."""

    project_id: UUID = Field(alias="projectID")
    module: ModuleString
    lang: Lang
