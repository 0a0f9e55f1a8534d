"""
Tests du codec de jetons de module.

Décomposer puis recomposer un jeton valide doit redonner exactement le même jeton.
"""

from __future__ import annotations

import pytest

from narrative_engine.domain.module_string import (
    DecodedModule,
    compare_modules,
    decode_module,
    encode_module,
    is_module_string,
    versionless_module,
)

VALID_TOKENS = [
    "agora:idea@v1.0.0",
    "agora:idea@v1.1.0-beta-1",
    "my-ns:my-module@v12.0.3",
    "a:b@v0.0.0-x-y-z",
]


@pytest.mark.parametrize("token", VALID_TOKENS)
def test_round_trip(token: str) -> None:
    decoded = decode_module(token)
    assert str(decoded) == token
    assert encode_module(decoded.namespace, decoded.module, decoded.version, decoded.preversion) == token


def test_decode_components() -> None:
    decoded = decode_module("agora:idea@v1.1.0-beta-1")
    assert decoded == DecodedModule(
        namespace="agora", module="idea", version="1.1.0", preversion="-beta-1"
    )


def test_decode_without_preversion() -> None:
    assert decode_module("agora:idea@v2.3.4").preversion == ""


@pytest.mark.parametrize("token", ["invalid-format", "ns:id@v1.0", "NS:id@v1.0.0"])
def test_decode_rejects_invalid(token: str) -> None:
    assert is_module_string(token) is False
    with pytest.raises(ValueError):
        decode_module(token)


def test_encode_treats_none_preversion_as_absent() -> None:
    assert encode_module("agora", "idea", "1.0.0", None) == "agora:idea@v1.0.0"


def test_versionless_string_form() -> None:
    assert str(DecodedModule(namespace="agora", module="idea")) == "agora:idea"
    assert versionless_module("agora:idea@v1.0.0-beta") == "agora:idea"


def test_compare_modules() -> None:
    assert compare_modules("agora:idea", "agora:idea@v1.0.0")
    assert compare_modules("agora:idea", "agora:idea@v2.0.0-rc")
    assert not compare_modules("agora:idea", "agora:plot@v1.0.0")
    assert compare_modules("agora:idea@v1.0.0", "agora:idea@v1.0.0")
    assert not compare_modules("agora:idea@v1.0.0", "agora:idea@v1.0.1")
