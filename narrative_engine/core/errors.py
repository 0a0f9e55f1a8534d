"""Taxonomie des erreurs du client Narrative Engine.

Objectif du module
------------------
- Distinguer les échecs de validation locale, les réponses HTTP non-2xx, les échecs de décodage
  et les erreurs réseau.
- Exposer le code de statut HTTP et la charge d'erreur renvoyée par le serveur sans interprétation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from narrative_engine.core.http_constants import (
    HTTP_FORBIDDEN,
    HTTP_NOT_FOUND,
    HTTP_UNAUTHORIZED,
    HTTP_UNPROCESSABLE_ENTITY,
)


@dataclass(frozen=True)
class FieldError:
    """Violation d'une règle sur un champ précis (chemin pointé, ex: `ui.params`)."""

    path: str
    rule: str
    message: str


def field_errors_from(exc: ValidationError) -> list[FieldError]:
    """Convertit une `ValidationError` pydantic en liste de `FieldError`."""
    errors: list[FieldError] = []
    for err in exc.errors(include_url=False):
        path = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        errors.append(FieldError(path=path, rule=err.get("type", "invalid"), message=err["msg"]))
    return errors


def _describe(errors: list[FieldError]) -> str:
    return "; ".join(f"{e.path}: {e.message}" for e in errors)


class NarrativeEngineError(Exception):
    """Exception de base pour toutes les erreurs du client."""


class RequestValidationError(NarrativeEngineError):
    """Entrée refusée localement, avant tout appel réseau."""

    status_code = HTTP_UNPROCESSABLE_ENTITY

    def __init__(self, operation: str, errors: list[FieldError]) -> None:
        """Initialize a request validation error for the given operation."""
        self.operation = operation
        self.errors = errors
        super().__init__(f"{operation}: invalid request ({_describe(errors)})")

    @classmethod
    def from_pydantic(cls, operation: str, exc: ValidationError) -> RequestValidationError:
        return cls(operation, field_errors_from(exc))


class ResponseDecodeError(NarrativeEngineError):
    """Réponse 2xx dont le corps n'est pas du JSON ou ne respecte pas le schéma attendu."""

    def __init__(self, path: str, message: str, errors: list[FieldError] | None = None) -> None:
        """Initialize a decoding error for the response of `path`."""
        self.path = path
        self.errors = errors or []
        detail = f" ({_describe(self.errors)})" if self.errors else ""
        super().__init__(f"{path}: {message}{detail}")


class TransportError(NarrativeEngineError):
    """La requête n'a produit aucune réponse HTTP (connexion, DNS, timeout natif...)."""

    def __init__(self, method: str, path: str, message: str) -> None:
        """Initialize a transport error."""
        self.method = method
        self.path = path
        super().__init__(f"{method} {path}: {message}")


class APIError(NarrativeEngineError):
    """Réponse HTTP non-2xx renvoyée par le service."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Any = None,
    ) -> None:
        """Initialize an API error from a non-success response."""
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"{status_code} {code}: {message}")


class UnauthorizedError(APIError):
    """Jeton absent ou refusé (401)."""


class ForbiddenError(APIError):
    """Ressource appartenant à un autre utilisateur (403)."""


class NotFoundError(APIError):
    """Référence inconnue du serveur (404)."""


# Correspondance statut HTTP -> code symbolique
ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
    429: "RATE_LIMITED",
    500: "INTERNAL_ERROR",
    502: "BAD_GATEWAY",
    503: "SERVICE_UNAVAILABLE",
    504: "GATEWAY_TIMEOUT",
}

_ERROR_CLASSES: dict[int, type[APIError]] = {
    HTTP_UNAUTHORIZED: UnauthorizedError,
    HTTP_FORBIDDEN: ForbiddenError,
    HTTP_NOT_FOUND: NotFoundError,
}


def api_error(status_code: int, message: str, details: Any = None) -> APIError:
    """Construit l'`APIError` la plus spécifique pour un code de statut donné."""
    code = ERROR_CODES.get(status_code, "HTTP_ERROR")
    cls = _ERROR_CLASSES.get(status_code, APIError)
    return cls(status_code, code, message, details)


def unauthorized(message: str) -> UnauthorizedError:
    """Create a 401 Unauthorized error."""
    return UnauthorizedError(HTTP_UNAUTHORIZED, ERROR_CODES[HTTP_UNAUTHORIZED], message)
