"""Outils communs aux fonctions d'opération (validation des formulaires)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from narrative_engine.core.errors import RequestValidationError

F = TypeVar("F", bound=BaseModel)


def parse_form(operation: str, model: type[F], form: F | Mapping[str, Any]) -> F:
    """Valide l'entrée d'une opération avant toute émission réseau.

    Accepte une instance du modèle ou un simple mapping (noms Python ou noms réseau).

    Raises:
        RequestValidationError: si un champ viole sa règle.
    """
    if isinstance(form, model):
        return form
    try:
        return model.model_validate(form)
    except ValidationError as exc:
        raise RequestValidationError.from_pydantic(operation, exc) from exc
