"""Schémas des modules (entités et requêtes).

Objectif du module
------------------
- Décoder les modules renvoyés par le serveur (lecture seule côté client).
- Valider les requêtes de sélection et de listing des versions, et en dériver la query string.
"""

from __future__ import annotations

from pydantic import Field, StrictBool

from narrative_engine.core.http_constants import DEFAULT_LIMIT, DEFAULT_OFFSET
from narrative_engine.domain.form import (
    Limit,
    ModuleID,
    ModuleNamespace,
    ModulePreversion,
    ModuleString,
    ModuleVersion,
    Offset,
    OpenMap,
    Timestamp,
    WireModel,
)
from narrative_engine.domain.module_string import encode_module


class ModuleUi(WireModel):
    """Descripteur de rendu d'un module."""

    component: str
    params: OpenMap | None
    target: str


class Module(WireModel):
    """Définition versionnée d'une étape de workflow."""

    id: ModuleID
    namespace: ModuleNamespace
    version: ModuleVersion
    preversion: ModulePreversion | None = None
    description: str
    schema_: OpenMap = Field(alias="schema")
    ui: ModuleUi
    created_at: Timestamp = Field(alias="createdAt")

    @property
    def module_string(self) -> str:
        """Jeton canonique `namespace:id@vX.Y.Z[-pre]` de ce module."""
        return encode_module(self.namespace, self.id, self.version, self.preversion)


class ModuleVersionEntry(WireModel):
    """Projection légère utilisée par le listing des versions."""

    version: ModuleVersion
    preversion: ModulePreversion | None = None
    created_at: Timestamp = Field(alias="createdAt")


class ModuleSelectRequest(WireModel):
    module: ModuleString

    def to_query(self) -> dict[str, str]:
        return {"module": self.module}


class ModuleListVersionsRequest(WireModel):
    """Filtres du listing des versions; `preversion` inclut (ou non) les pré-versions."""

    id: ModuleID | None = None
    namespace: ModuleNamespace | None = None
    version: ModuleVersion | None = None
    preversion: StrictBool | None = None
    limit: Limit | None = None
    offset: Offset | None = None

    def to_query(self) -> dict[str, str]:
        """Construit la query string; les filtres absents ne sont pas envoyés."""
        params = {
            "limit": str(self.limit or DEFAULT_LIMIT),
            "offset": str(self.offset or DEFAULT_OFFSET),
        }
        if self.id:
            params["id"] = self.id
        if self.namespace:
            params["namespace"] = self.namespace
        if self.version:
            params["version"] = self.version
        if self.preversion is not None:
            params["preversion"] = "true" if self.preversion else "false"
        return params
