"""Validateurs primitifs partagés par les schémas d'entités et de requêtes.

Objectif du module
------------------
- Définir une seule fois chaque format atomique (identifiant, version, jeton de module, UUID,
  pagination) sous forme de types `Annotated` pydantic réutilisables.
- La grammaire du jeton de module doit rester identique à celle du serveur.
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import AwareDatetime, BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints

from narrative_engine.core.http_constants import MAX_LIMIT

MODULE_NAMESPACE_SEPARATOR = ":"
MODULE_VERSION_SEPARATOR = "@"

MODULE_NAME_REGEX = r"[a-z0-9]+(-[a-z0-9]+)*"
MODULE_VERSION_REGEX = r"[0-9]+\.[0-9]+\.[0-9]+"
MODULE_PREVERSION_REGEX = r"(-[a-z0-9]+)*"

MODULE_STRING_REGEX = (
    f"^{MODULE_NAME_REGEX}{MODULE_NAMESPACE_SEPARATOR}{MODULE_NAME_REGEX}"
    f"{MODULE_VERSION_SEPARATOR}v{MODULE_VERSION_REGEX}{MODULE_PREVERSION_REGEX}$"
)

Lang = Literal["en", "fr"]
SchemaSource = Literal["USER", "AI", "FORK", "EXTERNAL"]

ModuleID = Annotated[str, StringConstraints(pattern=f"^{MODULE_NAME_REGEX}$")]
ModuleNamespace = Annotated[str, StringConstraints(pattern=f"^{MODULE_NAME_REGEX}$")]
ModuleVersion = Annotated[str, StringConstraints(pattern=f"^{MODULE_VERSION_REGEX}$")]
ModulePreversion = Annotated[str, StringConstraints(pattern=f"^{MODULE_PREVERSION_REGEX}$")]
ModuleString = Annotated[str, StringConstraints(pattern=MODULE_STRING_REGEX)]

Limit = Annotated[int, Field(strict=True, ge=1, le=MAX_LIMIT)]
Offset = Annotated[int, Field(strict=True, ge=0)]

ISO_DATETIME_REGEX = (
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}"
    r"(\.[0-9]+)?(Z|[+-][0-9]{2}:[0-9]{2})?$"
)
UUID_REGEX = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

# Carte ouverte: la forme est définie par le module, jamais par ce client
OpenMap = dict[str, Any]


def _require_iso_string(value: Any) -> Any:
    # Le serveur encode toujours ses dates en chaînes ISO-8601
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not re.fullmatch(ISO_DATETIME_REGEX, value):
        raise ValueError("expected an ISO-8601 datetime string")
    return value


def _require_canonical_uuid(value: Any) -> Any:
    # Forme 8-4-4-4-12 uniquement (ni urn:uuid:, ni accolades, ni hex compact)
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str) or not re.fullmatch(UUID_REGEX, value):
        raise ValueError("expected a UUID in 8-4-4-4-12 textual form")
    return value


Timestamp = Annotated[AwareDatetime, BeforeValidator(_require_iso_string)]
UUID = Annotated[uuid.UUID, BeforeValidator(_require_canonical_uuid)]


class WireModel(BaseModel):
    """Base commune: valeurs immuables, noms Python en snake_case, alias côté réseau."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """Sérialise le modèle tel qu'attendu par le serveur (alias, UUID/dates en texte)."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "UUID",
    "Lang",
    "Limit",
    "ModuleID",
    "ModuleNamespace",
    "ModulePreversion",
    "ModuleString",
    "ModuleVersion",
    "Offset",
    "OpenMap",
    "SchemaSource",
    "Timestamp",
    "WireModel",
]
