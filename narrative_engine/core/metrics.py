"""
Métriques Prometheus côté client.

Ce module définit les compteurs et histogrammes alimentés par le client HTTP pour chaque appel au
service Narrative Engine.
"""

from prometheus_client import Counter, Histogram

CLIENT_REQUESTS_TOTAL = Counter(
    "narrative_engine_client_requests_total",
    "Total HTTP calls issued to the narrative engine",
    ["method", "route", "status"],
)
CLIENT_REQUEST_SECONDS = Histogram(
    "narrative_engine_client_request_duration_seconds",
    "Latency of HTTP calls issued to the narrative engine",
    ["method", "route"],
)


def normalize_route(path: str) -> str:
    """Retire la query string pour limiter la cardinalité des labels."""
    return path.split("?", 1)[0] or "/"


def record_request(method: str, path: str, status: str, duration: float) -> None:
    """Enregistre un appel (compteur + latence)."""
    route = normalize_route(path)
    CLIENT_REQUESTS_TOTAL.labels(method=method, route=route, status=status).inc()
    CLIENT_REQUEST_SECONDS.labels(method=method, route=route).observe(duration)
