# ============================================================
# Module : narrative_engine/infra/http_clients.py
# Objet  : Client HTTP du service Narrative Engine.
# Invariants :
#  - Seul point de contact avec le réseau.
#  - Aucun état partagé entre appels: un client httpx est ouvert puis fermé par requête.
#  - Pas de retry ni de cache.
# ============================================================
"""Client HTTP (transport) du service Narrative Engine.

Ce module construit les URLs, attache les en-têtes, délègue l'appel à httpx et convertit les
réponses non-2xx en `APIError`. Les corps JSON peuvent être validés par un schéma pydantic.
"""

from __future__ import annotations

import time
from typing import Any, Literal, TypeVar, overload

import httpx
from pydantic import TypeAdapter, ValidationError

from narrative_engine.core.errors import (
    APIError,
    ResponseDecodeError,
    TransportError,
    api_error,
    field_errors_from,
    unauthorized,
)
from narrative_engine.core.http_constants import (
    HTTP_STATUS_SUCCESS_MAX,
    HTTP_STATUS_SUCCESS_MIN,
    JSON_HEADERS,
)
from narrative_engine.core.logging import get_logger
from narrative_engine.core.metrics import record_request
from narrative_engine.core.settings import NarrativeEngineSettings, get_settings
from narrative_engine.domain.form import WireModel

T = TypeVar("T")

HEALTH_STATUS_UP = "up"
HEALTH_STATUS_DOWN = "down"


class HealthDependency(WireModel):
    """État d'une dépendance du service (base de données, API interne...)."""

    status: Literal["up", "down"]
    err: str | None = None


_HEALTH_ADAPTER = TypeAdapter(dict[str, HealthDependency])


def auth_headers(access_token: str) -> dict[str, str]:
    """En-têtes JSON + `Authorization: Bearer <token>`.

    Raises:
        UnauthorizedError: si le jeton est vide (aucun appel n'est émis).
    """
    if not access_token:
        raise unauthorized("missing access token")
    return {**JSON_HEADERS, "Authorization": f"Bearer {access_token}"}


class NarrativeEngineApi:
    """Façade HTTP minimale: URL de base immuable + `fetch`/`fetch_void` génériques.

    `transport` permet d'injecter un transport httpx (ex: `httpx.MockTransport` en tests).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client for `base_url`."""
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._log = get_logger(__name__, "narrative_engine_api")

    @classmethod
    def from_settings(
        cls,
        settings: NarrativeEngineSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> NarrativeEngineApi:
        """Construit un client depuis la configuration (env/.env)."""
        settings = settings or get_settings()
        return cls(settings.API_URL, timeout=settings.TIMEOUT, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Émet la requête et lève si le statut n'est pas 2xx."""
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.request(
                    method,
                    f"{self._base_url}{path}",
                    params=params,
                    json=json,
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            record_request(method, path, "error", time.perf_counter() - start)
            self._log.warning(
                "narrative_engine_transport_error", method=method, route=path, error=str(exc)
            )
            raise TransportError(method, path, str(exc)) from exc

        duration = time.perf_counter() - start
        record_request(method, path, str(response.status_code), duration)
        self._log.debug(
            "narrative_engine_request",
            method=method,
            route=path,
            status=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )

        if not HTTP_STATUS_SUCCESS_MIN <= response.status_code < HTTP_STATUS_SUCCESS_MAX:
            error = self._error_from(response)
            self._log.warning(
                "narrative_engine_api_error",
                method=method,
                route=path,
                status=error.status_code,
                code=error.code,
            )
            raise error
        return response

    @staticmethod
    def _error_from(response: httpx.Response) -> APIError:
        """Construit l'erreur à partir du statut et de la charge éventuelle du serveur."""
        message = response.text.strip()
        try:
            details: Any = response.json()
        except ValueError:
            details = None
        if isinstance(details, dict):
            message = str(details.get("message") or details.get("error") or message)
        return api_error(response.status_code, message or response.reason_phrase, details)

    async def fetch_void(self, path: str, *, method: str = "GET", **kwargs: Any) -> None:
        """Émet l'appel, lève sur statut non-2xx et ignore le corps."""
        await self._request(method, path, **kwargs)

    @overload
    async def fetch(
        self, path: str, validator: None = None, *, method: str = "GET", **kwargs: Any
    ) -> Any: ...

    @overload
    async def fetch(
        self, path: str, validator: TypeAdapter[T] | type[T], *, method: str = "GET", **kwargs: Any
    ) -> T: ...

    async def fetch(
        self,
        path: str,
        validator: TypeAdapter[Any] | type[Any] | None = None,
        *,
        method: str = "GET",
        **kwargs: Any,
    ) -> Any:
        """Émet l'appel puis décode le corps JSON.

        Sans `validator`, le JSON est retourné tel quel. Sinon il est validé et converti en valeur
        typée; un corps non conforme lève `ResponseDecodeError`.
        """
        response = await self._request(method, path, **kwargs)
        try:
            payload = response.json()
        except ValueError as exc:
            raise ResponseDecodeError(path, "response body is not valid JSON") from exc

        if validator is None:
            return payload
        adapter = validator if isinstance(validator, TypeAdapter) else TypeAdapter(validator)
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise ResponseDecodeError(
                path, "unexpected response shape", field_errors_from(exc)
            ) from exc

    async def ping(self) -> None:
        """Vérification de vivacité (non authentifiée)."""
        await self.fetch_void("/ping", method="GET")

    async def health(self) -> dict[str, HealthDependency]:
        """État de chaque dépendance du service (non authentifié)."""
        return await self.fetch("/healthcheck", _HEALTH_ADAPTER, method="GET")
