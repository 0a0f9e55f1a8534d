"""Encodage et décodage des jetons de module (`namespace:id@vX.Y.Z[-pre]`).

Le jeton est l'unique moyen d'adresser un module depuis les autres entités (workflow d'un projet,
module d'un schéma). Décoder puis recomposer un jeton valide redonne exactement le même jeton.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from narrative_engine.domain.form import (
    MODULE_NAME_REGEX,
    MODULE_NAMESPACE_SEPARATOR,
    MODULE_PREVERSION_REGEX,
    MODULE_VERSION_REGEX,
    MODULE_VERSION_SEPARATOR,
)

MODULE_STRING_PATTERN = re.compile(
    f"(?P<namespace>{MODULE_NAME_REGEX}){MODULE_NAMESPACE_SEPARATOR}"
    f"(?P<module>{MODULE_NAME_REGEX}){MODULE_VERSION_SEPARATOR}"
    f"v(?P<version>{MODULE_VERSION_REGEX})(?P<preversion>{MODULE_PREVERSION_REGEX})"
)


@dataclass(frozen=True)
class DecodedModule:
    """Composantes d'un jeton de module."""

    namespace: str
    module: str
    version: str = ""
    preversion: str = ""

    def __str__(self) -> str:
        token = f"{self.namespace}{MODULE_NAMESPACE_SEPARATOR}{self.module}"
        if self.version:
            token += f"{MODULE_VERSION_SEPARATOR}v{self.version}{self.preversion}"
        return token


def is_module_string(value: str) -> bool:
    """Indique si `value` respecte la grammaire complète d'un jeton versionné."""
    return MODULE_STRING_PATTERN.fullmatch(value) is not None


def decode_module(token: str) -> DecodedModule:
    """Découpe un jeton en (namespace, module, version, preversion).

    Raises:
        ValueError: si le jeton ne respecte pas la grammaire.
    """
    match = MODULE_STRING_PATTERN.fullmatch(token)
    if match is None:
        raise ValueError(f"invalid module string: {token!r}")
    return DecodedModule(
        namespace=match.group("namespace"),
        module=match.group("module"),
        version=match.group("version"),
        preversion=match.group("preversion") or "",
    )


def encode_module(namespace: str, module: str, version: str, preversion: str | None = None) -> str:
    """Compose un jeton à partir de ses composantes."""
    return str(DecodedModule(namespace, module, version, preversion or ""))


def versionless_module(token: str) -> str:
    """Retourne la partie `namespace:id` d'un jeton."""
    return token.split(MODULE_VERSION_SEPARATOR, 1)[0]


def compare_modules(expect: str, value: str) -> bool:
    """Compare deux jetons.

    Si `expect` ne porte pas de version (`namespace:id`), toute version du même module correspond.
    """
    if MODULE_VERSION_SEPARATOR not in expect:
        return versionless_module(value) == expect
    return value == expect
