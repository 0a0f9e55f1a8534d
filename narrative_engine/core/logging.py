"""Configuration des logs structurés (structlog) du client.

Objectif du module
------------------
- Logs lisibles en console pendant le développement, JSON sur demande.
- Ne jamais écrire un jeton d'accès dans les logs.
"""

import logging
import sys
from typing import Any

import structlog

# Clés dont la valeur est masquée avant rendu
SENSITIVE_KEYS = frozenset({"authorization", "access_token", "token"})
REDACTED = "***"


def redact_secrets(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor structlog: masque les valeurs des clés sensibles."""
    for key in event_dict:
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog sur stderr au niveau `level` (DEBUG trace chaque requête)."""
    renderer = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            redact_secrets,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, component: str) -> Any:
    return structlog.get_logger(name).bind(component=component)
